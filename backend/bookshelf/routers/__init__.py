"""
API Routers module.
"""
from bookshelf.routers import books, health, users

__all__ = ["books", "health", "users"]
