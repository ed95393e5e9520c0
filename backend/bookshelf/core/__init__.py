"""
Core module - Security, errors, and logging utilities.
"""
from bookshelf.core.exceptions import (
    BookshelfError,
    NotFound,
    InvalidCredentials,
    InvalidPassword,
    PasswordMismatch,
    DuplicateUser,
)
from bookshelf.core.security import hash_password, verify_password

__all__ = [
    "BookshelfError",
    "NotFound",
    "InvalidCredentials",
    "InvalidPassword",
    "PasswordMismatch",
    "DuplicateUser",
    "hash_password",
    "verify_password",
]
