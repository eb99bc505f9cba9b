"""
Notes API — User Route Handlers
================================

What:  POST /api/users (register) and GET /api/users (list with notes).
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from noteapp.database import get_db_session
from noteapp.dependencies import get_password_hasher
from noteapp.schemas.responses import ErrorResponse, UserResponse
from noteapp.services.security import PasswordHasher
from noteapp.services.user_service import user_service

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/users",
    response_model=UserResponse,
    responses={400: {"description": "Invalid or duplicate user", "model": ErrorResponse}},
    summary="Register a user",
)
async def create_user(
    payload: Any = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserResponse:
    return await user_service.create_user(db, payload, hasher)


@router.get(
    "/users",
    response_model=List[UserResponse],
    summary="List users with their notes",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_users(db)
