"""
Notes API — Note SQLAlchemy Model
==================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; created by Database.create_all.
Who:   Used by NoteService and UserService for CRUD operations.

Table Design:
    - UUID primary key: also the identifier clients use in URLs
    - content: required, validated as non-empty before insert
    - date: UTC creation timestamp, set on insert
    - important: boolean flag, toggled through PUT /api/notes/{id}
    - user_id: owning user; nullable for notes that predate ownership
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from noteapp.database import Base

if TYPE_CHECKING:
    from noteapp.models.user import User


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Created by an authenticated user (owner recorded in user_id)
        2. Read by anyone
        3. Optionally updated (content / important)
        4. Deleted by anyone holding its ID
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Always stored in UTC
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    important: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=True,
    )

    user: Mapped[Optional["User"]] = relationship(back_populates="notes")

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, important={self.important}, date='{self.date}')>"
