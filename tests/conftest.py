"""Shared fixtures for storefront tests"""

import asyncio

import httpx
import pytest

from storefront.core.config import Settings
from storefront.models import Product
from storefront.services import StorefrontAPIClient

API_BASE = "http://api.test/api"


def product_payload(product_id: str = "p1", price: float = 10.0, **overrides) -> dict:
    """Product as the catalog API serializes it"""
    payload = {
        "_id": product_id,
        "name": f"Product {product_id}",
        "description": "A product",
        "price": price,
        "images": [f"/img/{product_id}-1.jpg", f"/img/{product_id}-2.jpg"],
        "category": "electronics",
        "stock": 5,
        "rating": 4.5,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_product():
    def _make(product_id: str = "p1", price: float = 10.0, **overrides) -> Product:
        return Product.model_validate(product_payload(product_id, price, **overrides))
    return _make


@pytest.fixture
def settings():
    return Settings(_env_file=None, api_base_url=API_BASE)


@pytest.fixture
async def make_client():
    """Build API clients backed by an in-process handler"""
    clients = []

    def _make(handler, auth_token=None) -> StorefrontAPIClient:
        client = StorefrontAPIClient(
            API_BASE,
            auth_token=auth_token,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()


class ControlledClient:
    """
    Stand-in API client whose calls stay pending until the test resolves them.

    Each call appends a future to `pending`; set_result / set_exception on
    it completes that call.
    """

    def __init__(self):
        self.calls: list[dict] = []
        self.pending: list[asyncio.Future] = []

    async def _wait(self, call: dict):
        self.calls.append(call)
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future

    async def search_products(self, **params):
        return await self._wait(params)

    async def get_product(self, product_id: str):
        return await self._wait({"product_id": product_id})

    async def close(self) -> None:
        pass


@pytest.fixture
def controlled_client():
    return ControlledClient()
