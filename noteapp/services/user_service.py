"""
Notes API — User Service
=========================

What:  Registration and listing of users.
How:   Validates the payload, checks username uniqueness, hashes the password
       in the thread pool, then inserts. The unique constraint on
       users.username catches any concurrent duplicate that slips past the
       pre-check.
Who:   Called by the /api/users route handlers.
"""

import logging
from typing import Any, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from noteapp.exceptions import DatabaseError
from noteapp.models import User
from noteapp.schemas.responses import NoteSummary, UserResponse
from noteapp.services.security import PasswordHasher
from noteapp.validation import UserCreate, uniqueness_error, unwrap, validate_user_create

logger = logging.getLogger(__name__)


class UserService:

    async def create_user(
        self,
        db: AsyncSession,
        payload: Any,
        hasher: PasswordHasher,
    ) -> UserResponse:
        """
        Register a new user.

        Raises:
            ValidationError: missing/short username or password, or the
                username is already taken (message names the field)
        """
        data: UserCreate = unwrap(validate_user_create(payload))

        existing = await db.execute(select(User.id).where(User.username == data.username))
        if existing.scalar_one_or_none() is not None:
            logger.info("Registration rejected: username %r taken", data.username)
            raise uniqueness_error("username", data.username)

        password_hash = await hasher.hash(data.password)
        user = User(
            username=data.username,
            name=data.name,
            password_hash=password_hash,
            notes=[],
        )
        db.add(user)
        try:
            await db.flush()
        except IntegrityError:
            logger.info("Registration lost uniqueness race for %r", data.username)
            raise uniqueness_error("username", data.username)
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the user. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("User %s registered as %r", user.id, user.username)
        return UserResponse(id=user.id, username=user.username, name=user.name, notes=[])

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        """All users with note summaries. Unbounded, like the notes listing."""
        try:
            result = await db.execute(
                select(User).options(selectinload(User.notes)).order_by(User.username)
            )
            users = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [
            UserResponse(
                id=user.id,
                username=user.username,
                name=user.name,
                notes=[NoteSummary.model_validate(note) for note in user.notes],
            )
            for user in users
        ]


user_service = UserService()
