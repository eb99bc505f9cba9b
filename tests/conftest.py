"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every API test gets its own application built by create_app() over a
       fresh SQLite file in tmp_path, so tests never share state.

Fixture Hierarchy (all function-scoped):
    ├── test_settings:    Settings pointing at a temp SQLite database
    ├── app:              FastAPI app with tables created
    ├── test_client:      HTTPX AsyncClient bound to `app`
    ├── seeded:           `root` user owning INITIAL_NOTES
    ├── auth_header:      Authorization header for `root`
    └── mock_db_session:  AsyncMock session for service unit tests
"""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before any noteapp import so the module-level app never targets PostgreSQL
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"

from noteapp.config import Settings  # noqa: E402
from noteapp.main import create_app  # noqa: E402
from noteapp.models import Note, User  # noqa: E402
from noteapp.services.security import PasswordHasher  # noqa: E402
from helpers import INITIAL_NOTES, INITIAL_USER  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        secret="test-secret-not-real",
        bcrypt_rounds=4,
        db_create_all=False,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(test_settings):
    """
    A fresh application with an empty schema.

    ASGITransport does not run the lifespan, so tables are created here.
    """
    application = create_app(test_settings)
    await application.state.database.create_all()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly into the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded(app):
    """Save INITIAL_USER and make it the owner of INITIAL_NOTES."""
    hasher = PasswordHasher(rounds=4)
    async with app.state.database.session() as session:
        user = User(
            username=INITIAL_USER["username"],
            name=INITIAL_USER["name"],
            password_hash=hasher.hash_sync(INITIAL_USER["password"]),
            notes=[],
        )
        session.add(user)
        start = datetime.now(timezone.utc) - timedelta(minutes=1)
        for offset, data in enumerate(INITIAL_NOTES):
            user.notes.append(Note(date=start + timedelta(seconds=offset), **data))
    return user


@pytest_asyncio.fixture
async def auth_header(test_client, seeded):
    response = await test_client.post(
        "/api/login",
        json={"username": INITIAL_USER["username"], "password": INITIAL_USER["password"]},
    )
    return {"authorization": f"bearer {response.json()['token']}"}


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_note(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
            result = await note_service.get_note(mock_db_session, note_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session
