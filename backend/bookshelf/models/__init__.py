"""
Pydantic models for database documents and data structures.
"""
from bookshelf.models.user import User
from bookshelf.models.book import Book, public_document

__all__ = [
    "User",
    "Book",
    "public_document",
]
