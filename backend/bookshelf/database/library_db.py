"""
Library database configuration.
Stores user accounts and the book catalogue.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in the library database."""
    USERS = "users"
    BOOKS = "books"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
        ],
        "books": [
            {"keys": [("title", 1)]},
        ],
    }


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for library database collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
    logger.info(f"Indexes ensured on {', '.join(Collections.INDEXES)}")
