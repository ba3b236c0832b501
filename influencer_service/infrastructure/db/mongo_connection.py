"""
MongoDB Connection
==================

Singleton MongoDB client manager with an explicit lifecycle:
``connect()`` at application startup, ``close()`` at shutdown.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from influencer_service.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    Every operation issued through this client is bounded by the configured
    request timeout and attempted exactly once.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def connect(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        settings = self._settings
        self._client = MongoClient(
            settings.mongo_uri,
            timeoutMS=settings.request_timeout_ms,
            serverSelectionTimeoutMS=settings.request_timeout_ms,
            retryReads=False,
            retryWrites=False,
        )
        self._database = self._client[settings.mongo_database_name]
        logger.info(f"Connected to MongoDB: {settings.mongo_database_name}")

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self.connect()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def ping(self) -> bool:
        """Return True if the server answers a ping."""
        self.get_database().command("ping")
        return True

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")


# Global client manager instance (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = MongoClientManager()
    return _mongo_client
