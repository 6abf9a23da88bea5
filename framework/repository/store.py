"""
Store-operations contract: the minimal set of single-document operations a
repository needs, injected at construction so tests can swap in a double.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

Document = Dict[str, Any]
Filter = Mapping[str, Any]


class DocumentCursor(ABC):
    """Single-pass, non-restartable stream of documents.

    Acquire with ``async with`` so the server-side cursor is released on
    exhaustion, early exit and error alike.
    """

    @abstractmethod
    async def next_document(self) -> Optional[Document]:
        """Return the next raw document, or None once the stream is exhausted."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying cursor; must be safe to call twice."""
        pass

    async def __aenter__(self) -> "DocumentCursor":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class DocumentStore(ABC):
    """One logical collection. Implementations raise their native errors on failure."""

    @abstractmethod
    async def insert_one(self, document: Document) -> None:
        """Insert a single document atomically."""
        pass

    @abstractmethod
    async def find_one(self, filter: Filter) -> Optional[Document]:
        """Return the single document matching ``filter`` or None."""
        pass

    @abstractmethod
    async def find(self, filter: Filter) -> DocumentCursor:
        """Open a cursor over every document matching ``filter``."""
        pass

    @abstractmethod
    async def replace_one(self, filter: Filter, document: Document) -> int:
        """Replace the matching document wholesale; return the matched count."""
        pass

    @abstractmethod
    async def delete_one(self, filter: Filter) -> int:
        """Delete the matching document; return the deleted count."""
        pass
