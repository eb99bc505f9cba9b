"""
Notes API — User SQLAlchemy Model
==================================

What:  ORM model representing the `users` table.
How:   `notes` is the reverse side of Note.user, ordered by note date, so a
       user's note list can only ever reference notes that still exist.
Who:   Used by UserService (registration, listing), AuthService (login) and
       NoteService (appending new notes to their owner).
"""

import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from noteapp.database import Base

if TYPE_CHECKING:
    from noteapp.models.note import Note


class User(Base):
    """A registered account. Never deleted through the API."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Unique constraint backs the service-level uniqueness check
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # bcrypt hash; never serialized in any response schema
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    notes: Mapped[List["Note"]] = relationship(
        back_populates="user",
        order_by="Note.date",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
