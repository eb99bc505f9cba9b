"""
Notes API — FastAPI Dependencies
=================================

What:  Accessors for the per-application collaborators and the current user.
How:   `create_app` stores the password hasher and token service on
       `app.state`; these functions hand them to route handlers.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from noteapp.database import get_db_session
from noteapp.models import User
from noteapp.services.auth_service import auth_service
from noteapp.services.security import PasswordHasher, TokenService


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
    tokens: TokenService = Depends(get_token_service),
) -> User:
    """
    The authenticated user for this request.

    Reads the token placed on `request.state` by TokenExtractorMiddleware.
    Raises InvalidTokenError (→ 401 "invalid token") when it is missing or bad.
    """
    token = getattr(request.state, "token", None)
    return await auth_service.authenticate(db, token, tokens)
