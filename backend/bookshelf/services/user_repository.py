"""
Data access for the users collection.
"""
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookshelf.database.library_db import Collections
from bookshelf.models.user import User


class UserRepository:
    """Find and insert user documents."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the library database."""
        self.users_collection = db[Collections.USERS]

    @staticmethod
    def _to_model(user_doc: Optional[dict[str, Any]]) -> Optional[User]:
        if not user_doc:
            return None
        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.
        
        Args:
            user_id: User ObjectId as string
            
        Returns:
            User model or None if not found or the id is malformed
        """
        if not ObjectId.is_valid(user_id):
            return None
        user_doc = await self.users_collection.find_one({"_id": ObjectId(user_id)})
        return self._to_model(user_doc)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.
        
        Args:
            email: User email address
            
        Returns:
            User model or None if not found
        """
        user_doc = await self.users_collection.find_one({"email": email})
        return self._to_model(user_doc)

    async def insert(self, name: str, email: str, hashed_password: str) -> str:
        """
        Insert a new user with an empty book collection.
        
        Raises:
            pymongo.errors.DuplicateKeyError: If the email index rejects it
            
        Returns:
            Created user ID
        """
        user_doc = {
            "name": name,
            "email": email,
            "password": hashed_password,
            "books": [],
        }
        result = await self.users_collection.insert_one(user_doc)
        return str(result.inserted_id)
