"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class MongoStore:
    """
    Owns the MongoDB client for the lifetime of the application.
    
    Created by the application factory, opened on startup and closed on
    shutdown. A pre-built client (e.g. an in-memory mock) can be passed in;
    it is used as-is and left open on ``close``, since its caller owns it.
    """

    def __init__(
        self,
        uri: str = "",
        db_name: str = "bookshelf",
        client: Optional[AsyncIOMotorClient] = None,
    ):
        self.uri = uri
        self.db_name = db_name
        self._client = client
        self._owns_client = client is None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            raise RuntimeError("MongoStore is not connected")
        return self._client

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """The application database."""
        return self.client[self.db_name]

    async def connect(self) -> AsyncIOMotorClient:
        """Create the client if it does not exist yet."""
        if self._client is None:
            self._client = AsyncIOMotorClient(self.uri)
            self._owns_client = True
            logger.info(f"Connected to MongoDB database '{self.db_name}'")
        return self._client

    async def ping(self) -> bool:
        """Round-trip to the server."""
        await self.client.admin.command("ping")
        return True

    async def close(self) -> None:
        """Close the client if this store created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
