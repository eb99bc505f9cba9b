"""
Notes API — Note Service (Business Logic)
==========================================

What:  CRUD operations over notes.
How:   Validates input explicitly (noteapp.validation), then reads/writes through
       the request's AsyncSession. Commits happen in the session dependency.
Who:   Called by the /api/notes route handlers.

Access rules:
    - list / get: anyone
    - create:     authenticated user; the note is appended to that user's notes
    - update:     anyone holding the ID
    - delete:     anyone holding the ID; succeeds whether or not the note exists

NoteService is stateless; it receives the session for each call.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from noteapp.exceptions import DatabaseError, NotFoundError
from noteapp.models import Note, User
from noteapp.schemas.responses import NoteOwner, NoteResponse, NoteWithOwnerResponse
from noteapp.validation import (
    NoteCreate,
    NoteUpdate,
    parse_id,
    unwrap,
    validate_note_create,
    validate_note_update,
)

logger = logging.getLogger(__name__)


def to_note_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        content=note.content,
        date=note.date,
        important=note.important,
        user=note.user_id,
    )


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        Identifier and payload problems raise InvalidIdError / ValidationError
        before any query runs. SQLAlchemy failures are wrapped in DatabaseError
        so driver details never reach the client.
    """

    async def list_notes(self, db: AsyncSession) -> List[NoteWithOwnerResponse]:
        """
        Return every note, oldest first, with the owner populated.

        There is no pagination; the result set is unbounded.
        """
        try:
            result = await db.execute(
                select(Note).options(selectinload(Note.user)).order_by(Note.date)
            )
            notes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [
            NoteWithOwnerResponse(
                id=note.id,
                content=note.content,
                date=note.date,
                important=note.important,
                user=NoteOwner.model_validate(note.user) if note.user else None,
            )
            for note in notes
        ]

    async def get_note(self, db: AsyncSession, note_id: str) -> NoteResponse:
        """
        Retrieve a single note by ID.

        Raises:
            InvalidIdError: `note_id` is not a well-formed UUID (→ 400)
            NotFoundError:  no note has this ID (→ 404)
        """
        note = await self._load(db, note_id)
        return to_note_response(note)

    async def create_note(self, db: AsyncSession, payload: Any, owner: User) -> NoteResponse:
        """
        Create a note owned by `owner` and append it to the owner's notes.

        `owner` must have its `notes` collection loaded (see AuthService.authenticate).

        Raises:
            ValidationError: `content` missing or empty (→ 400)
        """
        data: NoteCreate = unwrap(validate_note_create(payload))

        note = Note(
            id=uuid.uuid4(),
            content=data.content,
            important=data.important,
            date=datetime.now(timezone.utc),
        )
        try:
            owner.notes.append(note)
            db.add(note)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Note %s created by %s", note.id, owner.username)
        return to_note_response(note)

    async def update_note(self, db: AsyncSession, note_id: str, payload: Any) -> NoteResponse:
        """
        Partially update a note (content and/or important).

        Raises:
            InvalidIdError:  malformed ID (→ 400)
            ValidationError: `content` present but empty (→ 400)
            NotFoundError:   no note has this ID (→ 404)
        """
        note = await self._load(db, note_id)
        data: NoteUpdate = unwrap(validate_note_update(payload))

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(note, field, value)

        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id},
            )
        return to_note_response(note)

    async def delete_note(self, db: AsyncSession, note_id: str) -> None:
        """
        Delete a note if it exists. Deleting a missing note is not an error.

        There is no ownership check: any caller holding the ID can delete.

        Raises:
            InvalidIdError: malformed ID (→ 400)
        """
        uid = parse_id(note_id)
        try:
            result = await db.execute(delete(Note).where(Note.id == uid))
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id},
            )

        if result.rowcount:
            logger.info("Note %s deleted", note_id)
        else:
            logger.debug("Delete of absent note %s ignored", note_id)

    async def _load(self, db: AsyncSession, note_id: str) -> Note:
        uid = parse_id(note_id)
        try:
            result = await db.execute(select(Note).where(Note.id == uid))
            note = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            )

        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note


note_service = NoteService()
