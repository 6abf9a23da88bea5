"""Catalog module repository implementation."""

from typing import Callable, Optional
from framework.repository.base import BaseRepository, new_id
from framework.repository.store import DocumentStore
from .codec import ensure_representable
from .models import ProductRecord


class ProductRepository(BaseRepository[ProductRecord]):
    """Product repository.

    Writes are rejected with UnsupportedValueKind when an attribute could not
    be read back as a wire value, so nothing unreadable reaches the store.
    """

    entity_name = "product"

    def __init__(
        self,
        store: DocumentStore,
        id_factory: Callable[[], str] = new_id,
        default_timeout: Optional[float] = None,
    ):
        super().__init__(store, ProductRecord, id_factory=id_factory, default_timeout=default_timeout)

    def validate(self, entity: ProductRecord) -> None:
        ensure_representable(entity.attributes)
