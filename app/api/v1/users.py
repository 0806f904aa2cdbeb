"""Users CRUD endpoints: thin pass-through to UserService with error-to-status mapping."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.user import ErrorResponse, UserCreate, UserRead, UserUpdate
from app.services.errors import UserServiceError
from app.services.users import UserService

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Internal failure"},
}
ERROR_RESPONSES_BY_ID = {
    **ERROR_RESPONSES,
    404: {"model": ErrorResponse, "description": "User not found"},
}


def get_user_service(db: Annotated[Session, Depends(get_db)]) -> UserService:
    """Dependency: a UserService bound to the request's session."""
    return UserService(db)


def _http_error(e: UserServiceError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_user(
    body: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserRead:
    """Create a user. 400 if the username is already taken."""
    try:
        return service.create(body)
    except UserServiceError as e:
        raise _http_error(e) from e


@router.get("", response_model=list[UserRead], responses={500: ERROR_RESPONSES[500]})
def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserRead]:
    """List all users in storage order."""
    try:
        return service.list_all()
    except UserServiceError as e:
        raise _http_error(e) from e


@router.get("/{user_id}", response_model=UserRead, responses=ERROR_RESPONSES_BY_ID)
def get_user(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserRead:
    """Get one user. The id is validated by the service so non-numeric ids are a 400."""
    try:
        return service.find_one(user_id)
    except UserServiceError as e:
        raise _http_error(e) from e


@router.patch("/{user_id}", response_model=UserRead, responses=ERROR_RESPONSES_BY_ID)
def update_user(
    user_id: str,
    body: UserUpdate,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserRead:
    """Apply a partial update. 400 if the new username collides with another user."""
    try:
        return service.update(user_id, body)
    except UserServiceError as e:
        raise _http_error(e) from e


@router.delete("/{user_id}", response_model=UserRead, responses=ERROR_RESPONSES_BY_ID)
def delete_user(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserRead:
    """Delete a user and return the removed record."""
    try:
        return service.remove(user_id)
    except UserServiceError as e:
        raise _http_error(e) from e
