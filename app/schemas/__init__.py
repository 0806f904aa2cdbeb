"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.user import ErrorResponse, UserCreate, UserRead, UserUpdate

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
