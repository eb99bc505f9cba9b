"""
Notes API — Notes Route Handlers
=================================

What:  GET/POST /api/notes and GET/PUT/DELETE /api/notes/{id}.
How:   Thin handlers; all logic lives in NoteService.

The `note_id` path parameter is taken as a plain string so that malformed
identifiers reach NoteService and come back as 400 "malformatted id"
rather than FastAPI's default 422.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteapp.database import get_db_session
from noteapp.dependencies import get_current_user
from noteapp.models import User
from noteapp.schemas.responses import ErrorResponse, NoteResponse, NoteWithOwnerResponse
from noteapp.services.note_service import note_service

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteWithOwnerResponse],
    summary="List all notes",
    description="Returns every note with its owner's username. Not paginated.",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteWithOwnerResponse]:
    return await note_service.list_notes(db)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Malformed note ID", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.post(
    "/notes",
    response_model=NoteResponse,
    responses={
        400: {"description": "Invalid note data", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="Create a note owned by the authenticated user",
)
async def create_note(
    payload: Any = Body(default=None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.create_note(db, payload, user)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Malformed ID or invalid data", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note's content or importance",
)
async def update_note(
    note_id: str,
    payload: Any = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(db, note_id, payload)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={400: {"description": "Malformed note ID", "model": ErrorResponse}},
    summary="Delete a note",
    description="Returns 204 whether or not the note existed.",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    # TODO: no ownership check, unlike create; decide whether delete should require the owner's token
    await note_service.delete_note(db, note_id)
    return Response(status_code=204)
