"""
Document store connection management.

A single MongoProvider is created for the process. The application lifespan
connects it on startup and closes it on shutdown; every request reuses the
same client handle through the `get_db` dependency.
"""

import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.server_api import ServerApi

from parcelly.app.core.config import settings

logger = logging.getLogger(__name__)


class MongoProvider:
    """Owns the shared client handle."""

    def __init__(self, uri: str, db_name: str):
        self.uri = uri
        self.db_name = db_name
        self._client: Optional[AsyncMongoClient] = None

    async def connect(self) -> None:
        """Create the client and confirm the deployment answers a ping."""
        if self._client is not None:
            return
        self._client = AsyncMongoClient(
            self.uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        await self._client.admin.command("ping")
        logger.info("Pinged MongoDB deployment, using database '%s'", self.db_name)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("MongoDB client closed")

    @property
    def database(self) -> AsyncDatabase:
        if self._client is None:
            raise RuntimeError("MongoProvider.connect() has not been called")
        return self._client[self.db_name]


mongo = MongoProvider(settings.database_uri, settings.db_name)


async def get_db() -> AsyncDatabase:
    """
    FastAPI dependency for the document database.

    Overridden in tests with an in-memory database.
    """
    return mongo.database
