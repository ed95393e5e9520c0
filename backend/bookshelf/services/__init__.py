"""
Service layer for business logic.
"""
from bookshelf.services.auth_service import AuthService
from bookshelf.services.book_service import BookService
from bookshelf.services.user_repository import UserRepository
from bookshelf.services.user_service import UserService

__all__ = [
    "AuthService",
    "BookService",
    "UserRepository",
    "UserService",
]
