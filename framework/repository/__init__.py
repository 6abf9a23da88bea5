"""
Repository pattern: data access abstraction over an injected document store.
"""

from .base import BaseRepository, IRepository, new_id
from .store import Document, DocumentCursor, DocumentStore

__all__ = ["BaseRepository", "IRepository", "new_id", "Document", "DocumentCursor", "DocumentStore"]
