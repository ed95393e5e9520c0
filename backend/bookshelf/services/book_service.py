"""
Book lookups: the books collection and the books attached to a user.
"""
import logging
from typing import Any, Iterable

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from bookshelf.core.exceptions import NotFound
from bookshelf.database.library_db import Collections
from bookshelf.schemas.book import BookResponse

logger = logging.getLogger(__name__)


class BookService:
    """Service for book operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the library database."""
        self.books_collection = db[Collections.BOOKS]

    async def resolve_books(self, references: Iterable[Any]) -> list[BookResponse]:
        """
        Turn a user's stored book references into full books.
        
        Embedded documents are returned as they are. Linked ids are fetched
        in a single query and put back at their original position; ids with
        no matching book are dropped, as are stored books too malformed to
        render. Stored order is preserved.
        """
        references = list(references)
        linked_ids = [
            ObjectId(ref) for ref in references
            if not isinstance(ref, dict) and ObjectId.is_valid(ref)
        ]

        found: dict[ObjectId, dict] = {}
        if linked_ids:
            cursor = self.books_collection.find({"_id": {"$in": linked_ids}})
            for doc in await cursor.to_list(length=None):
                found[doc["_id"]] = doc

        books = []
        for ref in references:
            if isinstance(ref, dict):
                doc = ref
            else:
                doc = found.get(ObjectId(ref)) if ObjectId.is_valid(ref) else None
                if doc is None:
                    logger.warning(f"Dropping dangling book reference: {ref}")
                    continue
            try:
                books.append(BookResponse.from_document(doc))
            except ValidationError as e:
                logger.warning(
                    f"Dropping malformed book {doc.get('_id')}: "
                    f"{e.error_count()} errors"
                )
        return books

    async def find_all(self) -> list[BookResponse]:
        """List every book in the catalogue."""
        cursor = self.books_collection.find()
        docs = await cursor.to_list(length=None)
        return [BookResponse.from_document(doc) for doc in docs]

    async def get_by_id(self, book_id: str) -> BookResponse:
        """
        Get a book by ID.
        
        Raises:
            NotFound: If no book has this id
        """
        doc = None
        if ObjectId.is_valid(book_id):
            doc = await self.books_collection.find_one({"_id": ObjectId(book_id)})
        if not doc:
            raise NotFound(f"Unable to find book with id: {book_id}")
        return BookResponse.from_document(doc)

    async def delete_by_id(self, book_id: str) -> BookResponse:
        """
        Delete a book and return it.
        
        Raises:
            NotFound: If no book has this id
        """
        doc = None
        if ObjectId.is_valid(book_id):
            doc = await self.books_collection.find_one_and_delete(
                {"_id": ObjectId(book_id)}
            )
        if not doc:
            raise NotFound(f"Unable to delete book with id: {book_id}")
        logger.info(f"Deleted book {book_id}")
        return BookResponse.from_document(doc)
