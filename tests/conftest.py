"""Test config and shared fixtures."""
import os

# Keep test runs off the filesystem log sinks and the real store
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("APP_ENV", "testing")

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from main import app
from apps.catalog.models import ProductRecord
from apps.catalog.repository import ProductRepository
from fakes import InMemoryDocumentStore


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Create empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def repository(store: InMemoryDocumentStore) -> ProductRepository:
    """Create repository over the in-memory store with a short deadline."""
    return ProductRepository(store, default_timeout=1.0)


@pytest.fixture
def sample_record() -> ProductRecord:
    """Create unsaved sample product."""
    return ProductRecord(
        name="Test Product Name",
        description="Test Product Description",
        price=9.99,
        attributes={"color": "blue", "size": 12.0},
    )


@pytest.fixture
async def client(store: InMemoryDocumentStore) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the in-memory store."""
    from apps.catalog.api.router import get_product_store

    app.dependency_overrides[get_product_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
