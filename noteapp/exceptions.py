"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for each failure the API reports.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and `{"error": ...}` bodies.
Who:   Raised by services, validators and dependencies; caught by handlers.

Exception Hierarchy:
    NoteAppError (base)
    ├── ValidationError          → 400 Bad Request
    ├── InvalidIdError           → 400 Bad Request ("malformatted id")
    ├── InvalidTokenError        → 401 Unauthorized ("invalid token")
    ├── InvalidCredentialsError  → 401 Unauthorized
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NoteAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing error description (returned as `error`)
        context:  Additional debug info (logged, never returned)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteAppError):
    """
    Raised when client input fails validation.

    When:    Missing/empty required fields, values too short, duplicate username.
    HTTP:    400 Bad Request

    Example response:
        {"error": "User validation failed: username: expected `username` to be unique. Value: `root`"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidIdError(NoteAppError):
    """
    Raised when a path identifier is not a well-formed UUID.

    Checked before any lookup, so a malformed ID is always 400 and never 404.
    """

    status_code = 400

    def __init__(self, value: str = "", context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["value"] = value
        super().__init__(message="malformatted id", context=ctx)


class InvalidTokenError(NoteAppError):
    """
    Raised when a bearer token is missing, malformed, badly signed, or names
    a user that no longer exists. Callers cannot tell these cases apart.
    """

    status_code = 401

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="invalid token", context=context)


class InvalidCredentialsError(NoteAppError):
    """
    Raised by login for an unknown username OR a wrong password.

    The same message is used for both so responses do not reveal which
    field was wrong.
    """

    status_code = 401

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="invalid username or password", context=context)


class NotFoundError(NoteAppError):
    """
    Raised when a well-formed identifier matches no record.

    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NoteAppError):
    """
    Raised when a database operation fails unexpectedly.

    The message returned to the client is always generic; the original
    exception type is kept in `context` for the server log.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
