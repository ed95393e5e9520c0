"""
Seed the library database with sample books and users for development.

Usage:
    python -m bookshelf.database.seed
"""
import asyncio
import logging
from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookshelf.config import get_settings
from bookshelf.core.logging import configure_logging
from bookshelf.core.security import hash_password
from bookshelf.database.connections import MongoStore
from bookshelf.database.library_db import Collections, create_indexes
from bookshelf.models.book import Book

logger = logging.getLogger("bookshelf.seed")


SAMPLE_BOOKS = [
    Book(
        id="5d2e7e1aec0f970d68a71461",
        title="1984",
        author="George Orwell",
        year=1949,
    ),
    Book(
        id="5d2e7e1aec0f970d68a71462",
        title="Brave New World",
        author="Aldous Huxley",
        year=1932,
    ),
    Book(
        id="5d2e7e1aec0f970d68a71463",
        title="Fahrenheit 451",
        author="Ray Bradbury",
        year=1953,
    ),
]

# Plain-text passwords; hashed on insert
SAMPLE_USERS = [
    {
        "_id": "7d2e85951b62fc093cc3319b",
        "name": "Bob",
        "email": "bob@gmail.com",
        "password": "123",
        "books": [book.title for book in SAMPLE_BOOKS],
    },
    {
        "_id": "7d2e85951b62fc093cc3319c",
        "name": "John",
        "email": "john@gmail.com",
        "password": "123",
        "books": [],
    },
]


def build_user_documents() -> list[dict[str, Any]]:
    """User documents with hashed passwords and embedded books."""
    books_by_title = {book.title: book.to_document() for book in SAMPLE_BOOKS}
    return [
        {
            "_id": ObjectId(user["_id"]),
            "name": user["name"],
            "email": user["email"],
            "password": hash_password(user["password"]),
            "books": [books_by_title[title] for title in user["books"]],
        }
        for user in SAMPLE_USERS
    ]


async def seed_database(db: AsyncIOMotorDatabase) -> dict[str, int]:
    """
    Insert sample data into empty collections.

    Collections that already hold documents are left untouched.

    Returns:
        Number of documents inserted per collection
    """
    inserted = {Collections.BOOKS: 0, Collections.USERS: 0}

    books = db[Collections.BOOKS]
    if await books.count_documents({}) == 0:
        result = await books.insert_many([book.to_document() for book in SAMPLE_BOOKS])
        inserted[Collections.BOOKS] = len(result.inserted_ids)
    else:
        logger.info("Books collection not empty, skipping")

    users = db[Collections.USERS]
    if await users.count_documents({}) == 0:
        result = await users.insert_many(build_user_documents())
        inserted[Collections.USERS] = len(result.inserted_ids)
    else:
        logger.info("Users collection not empty, skipping")

    return inserted


async def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    store = MongoStore(uri=settings.mongo_uri, db_name=settings.mongo_db_name)
    await store.connect()
    try:
        await create_indexes(store.database)
        inserted = await seed_database(store.database)
        logger.info(
            f"Seeded {inserted[Collections.BOOKS]} books and "
            f"{inserted[Collections.USERS]} users"
        )
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
