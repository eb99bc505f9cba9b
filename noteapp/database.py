"""
Notes API — Database Handle & Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `Database` owns one engine and one session factory. The application
       factory constructs it from `Settings` and stores it on `app.state`;
       route handlers receive sessions through `get_db_session`, which
       commits on success and rolls back on error.
Who:   Built by noteapp.main.create_app and the CLI; used by every route
       through FastAPI's dependency injection.
When:  One handle per application instance; one session per request.

Connection Pooling:
    PostgreSQL URLs get a sized pool with pre-ping and hourly recycling.
    SQLite URLs (tests, local development) use the driver defaults, since
    SQLite pools do not accept sizing arguments.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from noteapp.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which `Database.create_all`
    uses to create the schema.
    """
    pass


class Database:
    """
    Explicitly constructed persistence handle.

    Attributes:
        engine:           AsyncEngine managing the connection pool
        session_factory:  async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, settings: Settings) -> None:
        engine_kwargs = {"echo": settings.log_level == "DEBUG"}
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        self.engine: AsyncEngine = create_async_engine(settings.database_url, **engine_kwargs)

        # expire_on_commit=False keeps loaded attributes usable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create any missing tables for the registered models."""
        # Models must be imported so their tables are registered on Base.metadata
        from noteapp import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def ping(self) -> bool:
        """Run `SELECT 1`; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Transactional session scope.

        1. Creates a new session from the factory
        2. Yields it to the caller
        3. On success: commits
        4. On error: rolls back and re-raises
        5. Always: closes the session
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def dispose(self) -> None:
        """Close all pooled connections. Called on application shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session comes from the `Database` stored on the application that is
    serving the request, so separate app instances (e.g. one per test) never
    share connections.

    Example usage in a route:
        @router.get("/api/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database = get_database(request)
    async with database.session() as session:
        yield session
