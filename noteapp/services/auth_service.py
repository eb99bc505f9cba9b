"""
Notes API — Authentication Service
===================================

What:  Login (credentials → token) and token authentication (token → User).
How:   Login looks the user up by username and checks the password with
       bcrypt. Unknown username and wrong password raise the same
       InvalidCredentialsError. `authenticate` verifies a bearer token and
       loads the user it names.
Who:   POST /api/login and the `get_current_user` dependency.
"""

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from noteapp.exceptions import InvalidCredentialsError, InvalidTokenError
from noteapp.models import User
from noteapp.schemas.responses import LoginResponse
from noteapp.services.security import PasswordHasher, TokenService
from noteapp.validation import LoginRequest, Invalid, validate_login

logger = logging.getLogger(__name__)


class AuthService:

    async def login(
        self,
        db: AsyncSession,
        payload: Any,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> LoginResponse:
        """
        Exchange credentials for a bearer token.

        Raises:
            InvalidCredentialsError: unknown username, wrong password, or a
                payload without both fields (→ 401)
        """
        result = validate_login(payload)
        if isinstance(result, Invalid):
            raise InvalidCredentialsError(context={"reason": result.message})
        credentials: LoginRequest = result.value

        query = await db.execute(select(User).where(User.username == credentials.username))
        user: Optional[User] = query.scalar_one_or_none()

        password_ok = user is not None and await hasher.verify(
            credentials.password, user.password_hash
        )
        if not password_ok:
            logger.info("Failed login for %r", credentials.username)
            raise InvalidCredentialsError(context={"username": credentials.username})

        token = tokens.issue(user.username, user.id)
        logger.info("User %r logged in", user.username)
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def authenticate(
        self,
        db: AsyncSession,
        token: Optional[str],
        tokens: TokenService,
    ) -> User:
        """
        Resolve a bearer token to its User (with notes loaded).

        Raises:
            InvalidTokenError: no token, bad token, or the user is gone (→ 401)
        """
        if not token:
            raise InvalidTokenError(context={"reason": "missing"})

        claims = tokens.verify(token)
        result = await db.execute(
            select(User).options(selectinload(User.notes)).where(User.id == claims.user_id)
        )
        user = result.scalar_one_or_none()
        if user is None:
            raise InvalidTokenError(context={"reason": "unknown user"})
        return user


auth_service = AuthService()
