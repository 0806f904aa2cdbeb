"""
Resource access layer for users: single-row CRUD against the users table.

Each operation is one request-scoped statement on the session handed to the
constructor. Store failures are classified into the errors of
app.services.errors: integrity violations (unique username, NOT NULL) become
InvalidRequestError on create/update, anything else becomes
InternalFailureError. Update and delete are single atomic statements with
RETURNING, so a missing row is reported as NotFoundError without a separate
existence check.
"""

import logging

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.errors import InternalFailureError, InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)

# users.id is a 32-bit INTEGER column.
MAX_USER_ID = 2_147_483_647


def parse_user_id(value: int | str) -> int:
    """
    Validate a user id from a path or caller. Accepts a positive int or a
    string of ASCII digits. Raises InvalidRequestError otherwise; never
    touches the store.
    """
    if isinstance(value, bool):
        raise InvalidRequestError("Invalid user ID")
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate or not (candidate.isascii() and candidate.isdigit()):
            raise InvalidRequestError("Invalid user ID")
        value = int(candidate)
    if not isinstance(value, int) or value <= 0 or value > MAX_USER_ID:
        raise InvalidRequestError("Invalid user ID")
    return value


def _not_found(user_id: int) -> NotFoundError:
    return NotFoundError(f"User with ID {user_id} not found")


class UserService:
    """CRUD for the users table over an explicitly supplied session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _rollback(self) -> None:
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed after store error", exc_info=True)

    def create(self, data: UserCreate) -> UserRead:
        """Insert one user and return the stored row, including id and timestamps."""
        stmt = insert(User).values(**data.model_dump()).returning(User)
        try:
            user = self.session.scalars(stmt).first()
            if user is None:
                self._rollback()
                raise InvalidRequestError("Failed to create user")
            result = UserRead.model_validate(user)
            self.session.commit()
        except InvalidRequestError:
            raise
        except IntegrityError as e:
            self._rollback()
            logger.warning("User create rejected by constraint", extra={"username": data.username})
            raise InvalidRequestError("User with this information already exists") from e
        except Exception as e:
            self._rollback()
            logger.exception("User create failed")
            raise InternalFailureError("Failed to create user") from e

        logger.info("User created", extra={"user_id": result.id})
        return result

    def list_all(self) -> list[UserRead]:
        """Return every user in the store's natural order. No paging or filtering."""
        try:
            users = self.session.scalars(select(User)).all()
            return [UserRead.model_validate(u) for u in users]
        except Exception as e:
            logger.exception("User list failed")
            raise InternalFailureError("Failed to retrieve users") from e

    def find_one(self, user_id: int | str) -> UserRead:
        """Return one user by id; NotFoundError when no row matches."""
        user_id = parse_user_id(user_id)
        try:
            user = self.session.scalars(select(User).where(User.id == user_id)).first()
            result = UserRead.model_validate(user) if user is not None else None
        except Exception as e:
            logger.exception("User lookup failed", extra={"user_id": user_id})
            raise InternalFailureError("Failed to retrieve user") from e
        if result is None:
            raise _not_found(user_id)
        return result

    def update(self, user_id: int | str, data: UserUpdate) -> UserRead:
        """
        Apply the supplied fields to one user and return the updated row.

        updated_at is always refreshed, so an empty change set still touches
        the row. Zero matched rows means the user does not exist.
        """
        user_id = parse_user_id(user_id)
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(**data.changes(), updated_at=func.now())
            .returning(User)
            .execution_options(populate_existing=True)
        )
        try:
            user = self.session.scalars(stmt).first()
            if user is None:
                self._rollback()
                raise _not_found(user_id)
            result = UserRead.model_validate(user)
            self.session.commit()
        except NotFoundError:
            raise
        except IntegrityError as e:
            self._rollback()
            logger.warning("User update rejected by constraint", extra={"user_id": user_id})
            raise InvalidRequestError("Update would create duplicate entry") from e
        except Exception as e:
            self._rollback()
            logger.exception("User update failed", extra={"user_id": user_id})
            raise InternalFailureError("Failed to update user") from e

        logger.info("User updated", extra={"user_id": user_id})
        return result

    def remove(self, user_id: int | str) -> UserRead:
        """Delete one user and return the row as it was before deletion."""
        user_id = parse_user_id(user_id)
        stmt = (
            delete(User)
            .where(User.id == user_id)
            .returning(User)
            .execution_options(populate_existing=True)
        )
        try:
            user = self.session.scalars(stmt).first()
            if user is None:
                self._rollback()
                raise _not_found(user_id)
            result = UserRead.model_validate(user)
            self.session.commit()
        except NotFoundError:
            raise
        except Exception as e:
            self._rollback()
            logger.exception("User delete failed", extra={"user_id": user_id})
            raise InternalFailureError("Failed to delete user") from e

        logger.info("User deleted", extra={"user_id": user_id})
        return result
