"""Request/response schemas for the users resource."""

from datetime import datetime
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

USERNAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MAX_LEN = 255


def _check_email(value: str | None) -> str | None:
    """
    Check email syntax and the users.email column width. The address is
    returned exactly as supplied; the normalized form is discarded.
    """
    if value is None:
        return None
    if len(value) > EMAIL_MAX_LEN:
        raise ValueError(f"email must be at most {EMAIL_MAX_LEN} characters")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


class UserCreate(BaseModel):
    """Body for POST /users. All three fields are required."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN, description="Unique username")
    email: str = Field(..., description="Email address")
    password: str = Field(
        ...,
        min_length=1,
        max_length=PASSWORD_MAX_LEN,
        description="Password (stored as supplied)",
    )

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _check_email(v)


class UserUpdate(BaseModel):
    """Body for PATCH /users/{id}: any subset of the create fields."""

    model_config = ConfigDict(extra="forbid")

    username: str | None = Field(default=None, min_length=1, max_length=USERNAME_MAX_LEN)
    email: str | None = None
    password: str | None = Field(default=None, min_length=1, max_length=PASSWORD_MAX_LEN)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return _check_email(v)

    def changes(self) -> dict[str, str]:
        """Fields the caller actually supplied with a value; explicit nulls are ignored."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserRead(BaseModel):
    """A persisted user as returned by every users endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    password: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ErrorResponse(BaseModel):
    """Error body for 400/404/500 responses; body validation errors carry a list of field errors."""

    detail: str | list[dict[str, Any]]
