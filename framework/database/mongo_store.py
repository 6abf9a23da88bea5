"""MongoDB implementation of the DocumentStore contract."""

from typing import Optional
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.cursor import AsyncCursor
from framework.repository.store import Document, DocumentCursor, DocumentStore, Filter


class MongoCursor(DocumentCursor):
    """Wraps a pymongo AsyncCursor."""

    def __init__(self, cursor: AsyncCursor):
        self._cursor = cursor
        self._closed = False

    async def next_document(self) -> Optional[Document]:
        try:
            return await self._cursor.next()
        except StopAsyncIteration:
            return None

    async def close(self) -> None:
        if not self._closed:
            self._closed = True
            await self._cursor.close()


class MongoDocumentStore(DocumentStore):
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def insert_one(self, document: Document) -> None:
        await self.collection.insert_one(document)

    async def find_one(self, filter: Filter) -> Optional[Document]:
        return await self.collection.find_one(filter)

    async def find(self, filter: Filter) -> DocumentCursor:
        return MongoCursor(self.collection.find(filter))

    async def replace_one(self, filter: Filter, document: Document) -> int:
        result = await self.collection.replace_one(filter, document)
        return result.matched_count

    async def delete_one(self, filter: Filter) -> int:
        result = await self.collection.delete_one(filter)
        return result.deleted_count
