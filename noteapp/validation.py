"""
Notes API — Input Validation
=============================

What:  Explicit validation of request payloads before anything touches storage.
How:   Each `validate_*` function takes the raw JSON payload and returns either
       `Valid(value)` holding a typed pydantic model, or `Invalid(message, field)`.
       Services call these and convert `Invalid` into a ValidationError, so no
       ORM-level coercion decides what is acceptable.
Who:   NoteService and UserService.

Messages follow the "<Model> validation failed: <field>: <reason>" form so
clients can tell which field was rejected.
"""

import uuid
from dataclasses import dataclass
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

from noteapp.exceptions import InvalidIdError, ValidationError
from noteapp.services.security import MAX_PASSWORD_BYTES

T = TypeVar("T")

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 3
# Matches the String(255) columns on User
NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    message: str
    field: Optional[str] = None

    def to_error(self) -> ValidationError:
        return ValidationError(message=self.message, field=self.field)


ValidationResult = Union[Valid[T], Invalid]


# ══════════════════════════════════════════════════════════════════════════
# Typed inputs
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    content: str = Field(min_length=1)
    important: bool = False


class NoteUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    content: Optional[str] = Field(default=None, min_length=1)
    important: Optional[bool] = None


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    username: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True,
            min_length=USERNAME_MIN_LENGTH,
            max_length=NAME_MAX_LENGTH,
        ),
    ]
    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Path `password` is longer than the maximum allowed length ({max_bytes} bytes).",
                {"max_bytes": MAX_PASSWORD_BYTES},
            )
        return value


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    username: str
    password: str


# ══════════════════════════════════════════════════════════════════════════
# Validators
# ══════════════════════════════════════════════════════════════════════════


def _describe(model_name: str, exc: pydantic.ValidationError) -> Invalid:
    """Turn the first pydantic error into an Invalid naming its field."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or None
    if error["type"] == "missing":
        reason = f"Path `{field}` is required."
    elif error["type"] == "string_too_short":
        min_length = error.get("ctx", {}).get("min_length", 1)
        if min_length <= 1:
            reason = f"Path `{field}` is required."
        else:
            reason = (
                f"Path `{field}` is shorter than the minimum allowed length ({min_length})."
            )
    elif error["type"] == "string_too_long":
        max_length = error.get("ctx", {}).get("max_length")
        reason = f"Path `{field}` is longer than the maximum allowed length ({max_length})."
    else:
        reason = error["msg"]
    return Invalid(message=f"{model_name} validation failed: {field}: {reason}", field=field)


def _validate(model: type, model_name: str, payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return Invalid(message=f"{model_name} validation failed: request body must be a JSON object")
    try:
        return Valid(model.model_validate(payload))
    except pydantic.ValidationError as exc:
        return _describe(model_name, exc)


def validate_note_create(payload: Any) -> ValidationResult:
    return _validate(NoteCreate, "Note", payload)


def validate_note_update(payload: Any) -> ValidationResult:
    return _validate(NoteUpdate, "Note", payload)


def validate_user_create(payload: Any) -> ValidationResult:
    return _validate(UserCreate, "User", payload)


def validate_login(payload: Any) -> ValidationResult:
    return _validate(LoginRequest, "Login", payload)


def unwrap(result: ValidationResult) -> Any:
    """Return the validated value or raise the matching ValidationError."""
    if isinstance(result, Invalid):
        raise result.to_error()
    return result.value


def parse_id(value: str) -> uuid.UUID:
    """
    Parse a path identifier.

    Raises:
        InvalidIdError: `value` is not a well-formed UUID (→ 400 "malformatted id")
    """
    try:
        return uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        raise InvalidIdError(value=str(value))


def uniqueness_error(field: str, value: str) -> ValidationError:
    return ValidationError(
        message=(
            f"User validation failed: {field}: "
            f"expected `{field}` to be unique. Value: `{value}`"
        ),
        field=field,
    )
