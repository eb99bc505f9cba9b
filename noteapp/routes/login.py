"""
Notes API — Login Route Handler
================================

What:  POST /api/login exchanges `{username, password}` for a bearer token.
How:   Delegates to AuthService. Failures return 401
       `{"error": "invalid username or password"}` with no token field.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from noteapp.database import get_db_session
from noteapp.dependencies import get_password_hasher, get_token_service
from noteapp.schemas.responses import ErrorResponse, LoginResponse
from noteapp.services.auth_service import auth_service
from noteapp.services.security import PasswordHasher, TokenService


router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Log in and obtain a bearer token",
)
async def login(
    payload: Any = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> LoginResponse:
    return await auth_service.login(db, payload, hasher, tokens)
