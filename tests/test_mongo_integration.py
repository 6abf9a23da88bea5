"""
Repository against a live MongoDB. Skipped unless TEST_MONGO_URI is set, e.g.

    TEST_MONGO_URI=mongodb://localhost:27018 pytest tests/test_mongo_integration.py
"""
import os
import uuid
from typing import AsyncGenerator

import pytest

from apps.catalog.models import ProductRecord
from apps.catalog.repository import ProductRepository
from framework.database.mongo_driver import MongoDriver
from framework.database.mongo_store import MongoDocumentStore
from framework.exceptions.errors import NotFound

TEST_MONGO_URI = os.environ.get("TEST_MONGO_URI")

pytestmark = pytest.mark.skipif(not TEST_MONGO_URI, reason="TEST_MONGO_URI not set")


@pytest.fixture
async def mongo_repository() -> AsyncGenerator[ProductRepository, None]:
    """Repository on a throwaway database, dropped afterwards."""
    db_name = f"catalog_test_{uuid.uuid4().hex[:8]}"
    driver = MongoDriver(TEST_MONGO_URI, db_name, retries=1)
    await driver.connect()
    try:
        yield ProductRepository(MongoDocumentStore(driver.get_collection("products")))
    finally:
        await driver.client.drop_database(db_name)
        await driver.disconnect()


def new_record() -> ProductRecord:
    return ProductRecord(
        name="Test Product Name",
        description="Test Product Description",
        price=9.99,
        attributes={"color": "blue", "size": 12.0, "dims": {"w": [1.0, None], "metric": True}},
    )


@pytest.mark.asyncio
async def test_product_lifecycle(mongo_repository: ProductRepository):
    created = await mongo_repository.create(new_record())
    second = await mongo_repository.create(new_record())

    assert created.id and second.id and created.id != second.id
    assert await mongo_repository.get_by_id(created.id) == created

    replacement = ProductRecord(id=created.id, name="Renamed", attributes={"weight": 2.0})
    await mongo_repository.update(replacement)
    assert await mongo_repository.get_by_id(created.id) == replacement

    assert await mongo_repository.delete(created.id) is True
    assert await mongo_repository.delete(created.id) is True

    with pytest.raises(NotFound):
        await mongo_repository.get_by_id(created.id)

    assert await mongo_repository.get_all() == [second]
