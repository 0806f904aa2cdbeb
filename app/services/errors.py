"""Classified errors raised by the resource access layer and mapped to HTTP statuses by the routes."""


class UserServiceError(Exception):
    """Base class for classified access-layer failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(UserServiceError):
    """Malformed input or a constraint violation; the caller can fix it and retry."""

    status_code = 400


class NotFoundError(UserServiceError):
    """The referenced record does not exist."""

    status_code = 404


class InternalFailureError(UserServiceError):
    """Unexpected store failure. The message is generic; details are only logged."""

    status_code = 500
