from fastapi import APIRouter, Depends
from framework.database.manager import DatabaseManager
from framework.database.mongo_store import MongoDocumentStore
from framework.repository.store import DocumentStore
from framework.response import ResponseModel
from framework.config import settings
from ..repository import ProductRepository
from ..schemas import DeleteProductResponse, ListProductsResponse, ProductSchema
from ..service import CatalogService

router = APIRouter()

def get_product_store() -> DocumentStore:
    """Dependency: products collection on the shared Mongo client."""
    manager = DatabaseManager.get_instance()
    return MongoDocumentStore(manager.mongo.get_collection(settings.MONGO_COLLECTION))

def get_product_repository(
    store: DocumentStore = Depends(get_product_store)
) -> ProductRepository:
    """Dependency: create ProductRepository."""
    return ProductRepository(store)

def get_catalog_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> CatalogService:
    """Dependency: create CatalogService."""
    return CatalogService(repository)

@router.post("/", response_model=ResponseModel[ProductSchema])
async def create_product(
    payload: ProductSchema,
    service: CatalogService = Depends(get_catalog_service)
):
    """Create a product; any id in the body is replaced by a generated one."""
    product = await service.create_product(payload)
    return ResponseModel.success(data=product)

@router.get("/", response_model=ResponseModel[ListProductsResponse])
async def list_products(
    service: CatalogService = Depends(get_catalog_service)
):
    """List all products."""
    products = await service.list_products()
    return ResponseModel.success(data=products)

@router.get("/{product_id}", response_model=ResponseModel[ProductSchema])
async def get_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Get product by id."""
    product = await service.get_product(product_id)
    return ResponseModel.success(data=product)

@router.put("/{product_id}", response_model=ResponseModel[ProductSchema])
async def update_product(
    product_id: str,
    payload: ProductSchema,
    service: CatalogService = Depends(get_catalog_service)
):
    """Replace a product; the path id wins over any id in the body."""
    product = await service.update_product(product_id, payload)
    return ResponseModel.success(data=product)

@router.delete("/{product_id}", response_model=ResponseModel[DeleteProductResponse])
async def delete_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Delete product; succeeds even if it did not exist."""
    result = await service.delete_product(product_id)
    return ResponseModel.success(data=result)
