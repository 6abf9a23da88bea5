from typing import Optional
from framework.logging.logger import get_logger
from framework.exceptions.handler import BusinessException
from framework.exceptions.errors import UnsupportedValueKind
from .codec import product_to_record, record_to_product, records_to_list_response
from .repository import ProductRepository
from .schemas import DeleteProductResponse, ListProductsResponse, ProductSchema

logger = get_logger("catalog_service")


class CatalogService:
    """Product catalog service: wire products in, codec, repository, wire products out.

    Repository and codec errors propagate unchanged; the global exception
    handler turns them into responses.
    """

    def __init__(self, repository: ProductRepository, timeout: Optional[float] = None):
        """Initialize CatalogService with a repository and optional per-call timeout."""
        self.repository = repository
        self.timeout = timeout

    async def create_product(self, product: ProductSchema) -> ProductSchema:
        """Create product; the id is always generated."""
        record = product_to_record(product)
        created = await self.repository.create(record, timeout=self.timeout)
        return self._to_wire(created)

    async def get_product(self, product_id: str) -> ProductSchema:
        """Get product by id; raises NotFound."""
        record = await self.repository.get_by_id(product_id, timeout=self.timeout)
        return self._to_wire(record)

    async def update_product(self, product_id: str, product: ProductSchema) -> ProductSchema:
        """Replace every field of the product; omitted fields are reset, not merged."""
        if not product_id:
            raise BusinessException("Product id is required", code=400)
        record = product_to_record(product)
        record.id = product_id
        updated = await self.repository.update(record, timeout=self.timeout)
        return self._to_wire(updated)

    async def delete_product(self, product_id: str) -> DeleteProductResponse:
        """Delete product; deleting a missing id still succeeds."""
        await self.repository.delete(product_id, timeout=self.timeout)
        return DeleteProductResponse(result="success")

    async def list_products(self) -> ListProductsResponse:
        """List every product; any failure fails the whole listing."""
        records = await self.repository.get_all(timeout=self.timeout)
        try:
            return records_to_list_response(records)
        except UnsupportedValueKind as e:
            logger.error(f"Stored product cannot be returned: {str(e)}")
            raise

    def _to_wire(self, record) -> ProductSchema:
        try:
            return record_to_product(record)
        except UnsupportedValueKind as e:
            logger.error(f"Product {record.id} cannot be returned: {str(e)}")
            raise
