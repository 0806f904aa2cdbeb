"""Health endpoint: reports whether the users store is reachable and migrated."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import APP_VERSION, settings
from app.core.database import check_db_connected, check_users_table, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Always 200 so load balancers can tell a live process from a dead one;
    the body says whether the users table can actually be served.
    """
    if not check_db_connected(db):
        return HealthResponse(
            status="degraded",
            version=APP_VERSION,
            environment=settings.APP_ENV,
            database="disconnected",
        )

    has_users = check_users_table(db)
    return HealthResponse(
        status="ok" if has_users else "degraded",
        version=APP_VERSION,
        environment=settings.APP_ENV,
        database="connected",
        users_table="present" if has_users else "missing",
    )
