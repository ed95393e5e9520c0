"""
Store and service dependencies.

The store lives on ``app.state`` for the lifetime of the application; every
request builds its services on top of it.
"""
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookshelf.database.connections import MongoStore
from bookshelf.services.auth_service import AuthService
from bookshelf.services.book_service import BookService
from bookshelf.services.user_service import UserService


def get_store(request: Request) -> MongoStore:
    """The application's MongoStore."""
    return request.app.state.store


def get_database(store: MongoStore = Depends(get_store)) -> AsyncIOMotorDatabase:
    """The library database."""
    return store.database


def get_auth_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


def get_user_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)


def get_book_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> BookService:
    """Dependency to get BookService instance."""
    return BookService(db)
