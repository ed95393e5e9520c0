"""
Database module - MongoDB connection lifecycle and collection definitions.
"""
from bookshelf.database.connections import MongoStore
from bookshelf.database.library_db import Collections, create_indexes

__all__ = [
    "MongoStore",
    "Collections",
    "create_indexes",
]
