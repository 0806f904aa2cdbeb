"""Response schema for GET /health: service version, database reachability and schema state."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus readiness of the users store."""

    status: Literal["ok", "degraded"] = Field(
        default="ok",
        description="'degraded' when the database is unreachable or the users table is missing",
    )
    version: str = Field(description="Application version")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(description="Database connectivity")
    users_table: Literal["present", "missing"] | None = Field(
        default=None,
        description="Whether migrations have created the users table; omitted when the database is unreachable",
    )
