import asyncio
from typing import Callable, Optional
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError
from framework.exceptions.errors import StoreConnectionError
from framework.logging.logger import get_logger
from .base import BaseDatabaseDriver

logger = get_logger("mongo_driver")


class MongoDriver(BaseDatabaseDriver):
    def __init__(
        self,
        url: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
        retries: int = 5,
        retry_delay: float = 5.0,
        client_factory: Callable[..., AsyncMongoClient] = AsyncMongoClient,
    ):
        self.url = url
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.retries = max(1, retries)
        self.retry_delay = retry_delay
        self.client_factory = client_factory
        self.client: Optional[AsyncMongoClient] = None

    async def connect(self):
        """Create the client and ping until the server answers or retries run out."""
        try:
            self.client = self.client_factory(
                self.url,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                uuidRepresentation="standard",
            )
        except (PyMongoError, ValueError) as e:
            raise StoreConnectionError("failed to create MongoDB client", e) from e

        last_error: Optional[Exception] = None
        for attempt in range(1, self.retries + 1):
            try:
                await self.ping()
                logger.info(f"Connected to MongoDB database '{self.db_name}'")
                return
            except PyMongoError as e:
                last_error = e
                logger.warning(f"MongoDB not ready (attempt {attempt}/{self.retries}): {str(e)}")
                if attempt < self.retries:
                    await asyncio.sleep(self.retry_delay)

        await self.disconnect()
        raise StoreConnectionError("failed to ping MongoDB server", last_error) from last_error

    async def disconnect(self):
        """Close the client."""
        if self.client:
            await self.client.close()
            self.client = None

    async def ping(self) -> bool:
        if self.client is None:
            raise StoreConnectionError("MongoDB client is not connected")
        await self.client.admin.command("ping")
        return True

    def get_collection(self, name: str) -> AsyncCollection:
        if self.client is None:
            raise StoreConnectionError("MongoDB client is not connected")
        return self.client[self.db_name][name]
