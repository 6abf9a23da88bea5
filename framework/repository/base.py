"""
Repository abstract base class and generic document-store implementation.
"""

import asyncio
import uuid
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, List, Mapping, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from framework.config import settings
from framework.exceptions.errors import Canceled, NotFound, PersistenceError
from framework.logging.logger import get_logger
from .store import Document, DocumentStore

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")

logger = get_logger("repository")


def new_id() -> str:
    """Random 128-bit identifier rendered as text."""
    return str(uuid.uuid4())


class IRepository(ABC, Generic[T]):
    """Repository interface; defines standard data access API."""

    @abstractmethod
    async def get_by_id(self, id: str, timeout: Optional[float] = None) -> T:
        """Get entity by ID; raises NotFound when absent."""
        pass

    @abstractmethod
    def iter_all(self, timeout: Optional[float] = None) -> AsyncIterator[T]:
        """Stream every entity in store order."""
        pass

    @abstractmethod
    async def get_all(self, timeout: Optional[float] = None) -> List[T]:
        """Get every entity; all or nothing."""
        pass

    @abstractmethod
    async def create(self, entity: T, timeout: Optional[float] = None) -> T:
        """Create entity with a fresh ID."""
        pass

    @abstractmethod
    async def update(self, entity: T, timeout: Optional[float] = None) -> T:
        """Replace entity."""
        pass

    @abstractmethod
    async def delete(self, id: str, timeout: Optional[float] = None) -> bool:
        """Delete entity."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository over a DocumentStore; subclasses name the entity and may add validation.

    The entity model must expose a string ``id`` field, stored as the document ``_id``.
    Every store call is bounded by ``timeout`` (falls back to STORE_TIMEOUT_SECONDS).
    """

    entity_name: str = "entity"

    def __init__(
        self,
        store: DocumentStore,
        model: Type[T],
        id_factory: Callable[[], str] = new_id,
        default_timeout: Optional[float] = None,
    ):
        """Initialize repository with store and model."""
        self.store = store
        self.model = model
        self.id_factory = id_factory
        self.default_timeout = settings.STORE_TIMEOUT_SECONDS if default_timeout is None else default_timeout

    # --- mapping ---

    def to_document(self, entity: T) -> Document:
        """Serialize entity into a store document keyed by ``_id``."""
        document = entity.model_dump()
        document["_id"] = document.pop("id")
        return document

    def from_document(self, document: Mapping[str, Any]) -> T:
        """Build entity from a store document; raises ValidationError on malformed input."""
        data = dict(document)
        data["id"] = data.pop("_id", "")
        return self.model.model_validate(data)

    def validate(self, entity: T) -> None:
        """Hook run before every write; raise to reject the entity."""
        pass

    # --- store round trips ---

    async def _call(
        self,
        awaitable: Awaitable[R],
        operation: str,
        entity_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> R:
        """Await a store call under the deadline, wrapping any store failure."""
        timeout = self.default_timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(awaitable, timeout)
        except asyncio.TimeoutError as e:
            raise Canceled(operation, entity_id, e) from e
        except Exception as e:
            raise PersistenceError(operation, entity_id, e) from e

    def _decode(self, document: Mapping[str, Any], entity_id: Optional[str] = None) -> T:
        try:
            return self.from_document(document)
        except (ValidationError, TypeError) as e:
            raise PersistenceError(f"decoding {self.entity_name}", entity_id, e) from e

    # --- CRUD ---

    async def create(self, entity: T, timeout: Optional[float] = None) -> T:
        """Create entity; any caller-supplied id is overwritten."""
        self.validate(entity)
        stored = entity.model_copy(update={"id": self.id_factory()})
        await self._call(
            self.store.insert_one(self.to_document(stored)),
            f"inserting {self.entity_name}",
            timeout=timeout,
        )
        entity.id = stored.id
        logger.info(f"Created {self.entity_name} {entity.id}")
        return entity

    async def get_by_id(self, id: str, timeout: Optional[float] = None) -> T:
        """Get entity by ID."""
        document = await self._call(
            self.store.find_one({"_id": id}),
            f"getting {self.entity_name}",
            id,
            timeout,
        )
        if document is None:
            raise NotFound(self.entity_name, id)
        entity = self._decode(document, id)
        logger.debug(f"Fetched {self.entity_name} {id}")
        return entity

    async def update(self, entity: T, timeout: Optional[float] = None) -> T:
        """Replace the whole document; fields the caller omitted become zero values."""
        self.validate(entity)
        matched = await self._call(
            self.store.replace_one({"_id": entity.id}, self.to_document(entity)),
            f"updating {self.entity_name}",
            entity.id,
            timeout,
        )
        if matched == 0:
            logger.warning(f"Update matched no {self.entity_name} with id {entity.id}")
        else:
            logger.info(f"Updated {self.entity_name} {entity.id}")
        return entity

    async def delete(self, id: str, timeout: Optional[float] = None) -> bool:
        """Delete entity; deleting a missing id still succeeds."""
        deleted = await self._call(
            self.store.delete_one({"_id": id}),
            f"deleting {self.entity_name}",
            id,
            timeout,
        )
        logger.info(f"Deleted {self.entity_name} {id} (matched {deleted})")
        return True

    async def iter_all(self, timeout: Optional[float] = None) -> AsyncIterator[T]:
        """Stream entities straight off the store cursor; the cursor is closed on every exit path.

        ``timeout`` bounds the whole listing, not each cursor round trip.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + (self.default_timeout if timeout is None else timeout)
        cursor = await self._call(
            self.store.find({}),
            f"finding {self.entity_name}s",
            timeout=max(deadline - loop.time(), 0),
        )
        async with cursor:
            while True:
                document = await self._call(
                    cursor.next_document(),
                    "cursor error",
                    timeout=max(deadline - loop.time(), 0),
                )
                if document is None:
                    return
                yield self._decode(document)

    async def get_all(self, timeout: Optional[float] = None) -> List[T]:
        """Get all entities; a failure anywhere discards what was already read."""
        entities = [entity async for entity in self.iter_all(timeout)]
        logger.debug(f"Listed {len(entities)} {self.entity_name}(s)")
        return entities
