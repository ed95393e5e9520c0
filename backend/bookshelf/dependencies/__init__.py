"""
Dependencies for dependency injection in routes.
"""
from bookshelf.dependencies.services import (
    get_store,
    get_database,
    get_auth_service,
    get_user_service,
    get_book_service,
)

__all__ = [
    "get_store",
    "get_database",
    "get_auth_service",
    "get_user_service",
    "get_book_service",
]
