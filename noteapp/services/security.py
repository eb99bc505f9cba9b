"""
Notes API — Credential & Token Services
========================================

What:  Password hashing/verification (bcrypt) and bearer-token issue/verify (JWT).
How:   PasswordHasher pushes bcrypt work onto Starlette's thread pool so a
       hash never stalls the event loop. TokenService signs HS256 JWTs that
       carry `username` and `id`.
Who:   UserService (hash on registration), AuthService (verify + issue on
       login), noteapp.dependencies (verify on authenticated routes).

Tokens carry no `exp` claim: once issued, a token stays valid until the
signing secret changes.
"""

import logging
import uuid
from dataclasses import dataclass

import bcrypt
import jwt
from starlette.concurrency import run_in_threadpool

from noteapp.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"
# bcrypt refuses longer input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """bcrypt wrapper. `rounds` is the work factor (2**rounds iterations)."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_sync(self, password: str, password_hash: str) -> bool:
        candidate = password.encode("utf-8")
        # Registration never stores a hash for anything longer
        if len(candidate) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self.hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await run_in_threadpool(self.verify_sync, password, password_hash)


@dataclass(frozen=True)
class TokenClaims:
    """Identity recovered from a verified token."""
    username: str
    user_id: uuid.UUID


class TokenService:
    """Issues and verifies signed bearer tokens."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def issue(self, username: str, user_id: uuid.UUID) -> str:
        payload = {"username": username, "id": str(user_id)}
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and shape of a token.

        Raises:
            InvalidTokenError: bad signature, malformed token, or missing claims.
                All failures look the same to the caller.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.PyJWTError as e:
            logger.debug("Token rejected: %s", type(e).__name__)
            raise InvalidTokenError(context={"reason": type(e).__name__})

        username = payload.get("username")
        raw_id = payload.get("id")
        if not isinstance(username, str) or not isinstance(raw_id, str):
            raise InvalidTokenError(context={"reason": "missing claims"})
        try:
            user_id = uuid.UUID(raw_id)
        except ValueError:
            raise InvalidTokenError(context={"reason": "malformed id claim"})

        return TokenClaims(username=username, user_id=user_id)
