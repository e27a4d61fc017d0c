"""
MongoDB Client
==============

Shared async MongoDB client for database connections.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from webinars.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Builds the client lazily from settings and hands out collections.
    """

    def __init__(self, uri: Optional[str] = None, database_name: Optional[str] = None):
        settings = get_settings()
        self._uri = uri or settings.mongo_uri
        self._database_name = database_name or settings.mongo_database_name
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        # tz_aware keeps webinar dates timezone-aware on the way back
        self._client = AsyncMongoClient(self._uri, tz_aware=True)
        self._database = self._client[self._database_name]
        logger.info(f"MongoDB client created for database {self._database_name}")

    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB AsyncCollection object
        """
        database = self.get_database()
        return database[collection_name]

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")


# Global client manager (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = MongoClientManager()
    return _mongo_client


def reset_mongo_client() -> None:
    """Forget the singleton client manager (the caller closes it first)."""
    global _mongo_client
    _mongo_client = None
