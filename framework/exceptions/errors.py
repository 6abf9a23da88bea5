"""
Data-layer error taxonomy shared by codecs, repositories and the exception handler.

NotFound and PersistenceError are disjoint so that "does not exist" and
"the store is unavailable" never collapse into the same response.
"""

from typing import Optional


class DataError(Exception):
    """Base class for codec and repository errors."""


class UnsupportedValueKind(DataError):
    """A dynamic value has no wire representation.

    ``path`` locates the value inside the attribute bag, e.g. ``size`` or
    ``dims[2].unit``; ``kind`` is the offending Python type name.
    """

    def __init__(self, path: str, kind: str, reason: Optional[str] = None):
        self.path = path
        self.kind = kind
        self.reason = reason
        message = f'parsing attribute "{path}": unsupported value kind {kind}'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NotFound(DataError):
    """Lookup by identifier matched no document."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f'{entity} with id "{entity_id}" does not exist')


class PersistenceError(DataError):
    """Store-level failure; always chained to the underlying cause."""

    def __init__(self, operation: str, entity_id: Optional[str] = None, cause: Optional[BaseException] = None):
        self.operation = operation
        self.entity_id = entity_id
        self.cause = cause
        message = operation if entity_id is None else f'{operation} with id "{entity_id}"'
        if cause is not None:
            message = f"{message}: {str(cause) or type(cause).__name__}"
        super().__init__(message)


class Canceled(PersistenceError):
    """The store did not answer before the caller's deadline."""


class StoreConnectionError(DataError):
    """The store could not be reached at startup."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message if cause is None else f"{message}: {cause}")
