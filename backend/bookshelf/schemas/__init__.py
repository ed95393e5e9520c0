"""
Request and response schemas for API endpoints.
"""
from bookshelf.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)
from bookshelf.schemas.book import BookResponse
from bookshelf.schemas.common import MessageResponse
from bookshelf.schemas.user import UserProfileResponse

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    # Book
    "BookResponse",
    # User
    "UserProfileResponse",
    # Common
    "MessageResponse",
]
