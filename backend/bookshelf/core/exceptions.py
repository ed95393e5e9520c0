"""
Domain errors raised by the service layer.

Each error carries the HTTP status it is rendered with; the application's
exception handlers turn them into ``{"message": ...}`` responses.
"""
from fastapi import status


class BookshelfError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(BookshelfError):
    """Requested document does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidCredentials(BookshelfError):
    """No account matches the submitted email."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Wrong credentials"


class InvalidPassword(BookshelfError):
    """Account exists but the password does not match."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Wrong password"


class PasswordMismatch(BookshelfError):
    """Password and confirmation differ on registration."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Password does not match"


class DuplicateUser(BookshelfError):
    """An account with this email already exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"
