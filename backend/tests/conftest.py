"""
Storefront Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── products:        Seeded, reproducible list of Product records
    ├── product_service: ProductService over `products`
    ├── app:             Fresh FastAPI app from create_app(product_service)
    └── test_client:     HTTPX AsyncClient talking to `app` in-process
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PRODUCT_SEED"] = "1234"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.main import create_app
from storefront.services.fake_data import generate_fake_products
from storefront.services.product_service import ProductService


@pytest.fixture
def products():
    """Twelve products from a fixed seed, identical in every test."""
    return generate_fake_products(12, seed=42)


@pytest.fixture
def product_service(products):
    return ProductService(products)


@pytest.fixture
def app(product_service):
    """
    A fresh application serving `product_service`.

    Tests may add dependency overrides or routes to it freely; nothing is
    shared with other tests.
    """
    return create_app(product_service=product_service)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
