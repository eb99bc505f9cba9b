"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(settings) builds the database handle,
       credential and token services, middleware, exception handlers and
       routes, and returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn noteapp.main:app`), `python -m noteapp`,
       and the test suite (one app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌─────────────────────┐  │
    │  │  Req ID  │→│ Logging  │→│ Bearer token extract│  │
    │  └──────────┘ └──────────┘ └─────────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /api/notes  /api/users  /api/login  /health        │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation/InvalidId→400 │ Token/Creds→401         │
    │  NotFound→404 │ unknown route→404 │ other→500       │
    └─────────────────────────────────────────────────────┘

State on `app.state`:
    settings, database, password_hasher, token_service
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noteapp import __version__
from noteapp.config import Settings, settings as default_settings
from noteapp.database import Database
from noteapp.exceptions import NoteAppError
from noteapp.middleware.logging import RequestLoggingMiddleware
from noteapp.middleware.request_id import RequestIDMiddleware, request_id_var
from noteapp.middleware.token import TokenExtractorMiddleware
from noteapp.routes import health, login, notes, users
from noteapp.services.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate security-critical configuration (logged, not fatal)
        3. Create missing tables when DB_CREATE_ALL is set

    Shutdown:
        1. Dispose the database engine (close all pooled connections)
    """
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(app_settings.log_level)
    logger.info("Notes API starting up...")

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    if app_settings.db_create_all:
        await database.create_all()

    logger.info(
        "Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )

    yield

    logger.info("Notes API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "request_id": request_id_var.get("")},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": ...}` responses.

        ValidationError / InvalidIdError     → 400
        InvalidTokenError / InvalidCredentials → 401
        NotFoundError                        → 404
        DatabaseError                        → 500 (generic message)
        RequestValidationError (bad JSON)    → 400
        Starlette 404 (no such route)        → 404 "unknown endpoint"
        Exception (fallback)                 → 500 (details logged only)
    """

    @app.exception_handler(NoteAppError)
    async def handle_app_error(request: Request, exc: NoteAppError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s",
                         rid, type(exc).__name__, exc.message, exc.context)
            return _error(exc.status_code, "internal server error")

        logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "invalid request"
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return _error(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, "unknown endpoint")
        return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error(500, "internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: configuration to build from; defaults to the
                      environment-derived `noteapp.config.settings`.

    The database handle is created here (not at import time) and passed to
    handlers through `app.state`, so each app instance owns its connections.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Notes API",
        description="Register, log in, and manage personal notes.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = Database(app_settings)
    app.state.password_hasher = PasswordHasher(rounds=app_settings.bcrypt_rounds)
    app.state.token_service = TokenService(secret=app_settings.secret)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → TokenExtractor → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(TokenExtractorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(users.router)
    app.include_router(login.router)
    app.include_router(health.router)

    return app


app = create_app()
