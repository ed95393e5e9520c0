"""
User lookup service.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from bookshelf.core.exceptions import NotFound
from bookshelf.schemas.user import UserProfileResponse
from bookshelf.services.book_service import BookService
from bookshelf.services.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for reading user profiles."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.users = UserRepository(db)
        self.books = BookService(db)

    async def get_profile(self, user_id: str) -> UserProfileResponse:
        """
        Get a user's name and books by user ID.
        
        Raises:
            NotFound: If no user has this id
        """
        user = await self.users.find_by_id(user_id)
        if user is None:
            logger.info(f"User {user_id} not found")
            raise NotFound(f"Unable to find user with id: {user_id}")

        books = await self.books.resolve_books(user.books)
        return UserProfileResponse(name=user.name, books=books)
