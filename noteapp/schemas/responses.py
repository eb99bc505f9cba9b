"""
Notes API — Response Schemas
=============================

What:  Pydantic models defining what the API returns to clients.
How:   Built from ORM objects with `from_attributes`; FastAPI serializes them
       and generates OpenAPI docs from them.

Schemas are separate from SQLAlchemy models so internal fields (the password
hash above all) can never leak into a response.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Notes
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    A note with its owner as a bare ID.
    Returned by GET/PUT /api/notes/{id} and POST /api/notes.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    content: str = Field(description="Note text")
    date: datetime = Field(description="Creation timestamp (UTC ISO 8601)")
    important: bool = Field(description="Importance flag")
    user: Optional[uuid.UUID] = Field(default=None, description="Owner's user ID")


class NoteOwner(BaseModel):
    id: uuid.UUID
    username: str

    model_config = {"from_attributes": True}


class NoteWithOwnerResponse(BaseModel):
    """A note with the owner populated (username only). Returned by GET /api/notes."""
    id: uuid.UUID
    content: str
    date: datetime
    important: bool
    user: Optional[NoteOwner] = None


# ══════════════════════════════════════════════════════════════════════════
# Users
# ══════════════════════════════════════════════════════════════════════════


class NoteSummary(BaseModel):
    id: uuid.UUID
    content: str
    important: bool

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """
    Public view of a user. Returned by POST /api/users and GET /api/users.
    There is deliberately no password field here.
    """
    id: uuid.UUID = Field(description="Unique user identifier (UUID)")
    username: str
    name: Optional[str] = None
    notes: List[NoteSummary] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    token: str = Field(description="Bearer token for the Authorization header")
    username: str
    name: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Errors & health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "malformatted id", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
