"""Pytest configuration and fixtures for the Catalog Filter API test suite.

Provides:
- Sample catalog documents
- A programmable catalog transport (httpx.MockTransport) standing in for the
  remote sources
- An ASGI test client with the shared HTTP client and settings overridden
"""

from collections.abc import AsyncGenerator, Callable
from decimal import Decimal
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog_api.core.config import Settings, get_settings
from catalog_api.core.deps import get_http_client
from catalog_api.main import app
from catalog_api.schemas.catalog import Product

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
PRIMARY_URL = "https://primary.test/catalog"
BACKUP_URL = "https://backup.test/catalog"

# Route value: a response, an exception to raise, or a callable building either
CatalogRoute = httpx.Response | Exception | Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_products() -> list[dict[str, Any]]:
    """Catalog products as a source sends them (lowercase keys)."""
    return [
        {
            "id": 1,
            "name": "Linen Shirt",
            "description": "A light linen shirt for warm days. Breathable linen!",
            "price": 25.5,
            "size": "M",
        },
        {
            "id": 2,
            "name": "Wool Coat",
            "description": "The warm wool coat, perfect for cold days.",
            "price": 120,
            "size": "L",
        },
        {
            "id": 3,
            "name": "Cotton Tee",
            "description": "Soft cotton tee with a relaxed fit.",
            "price": 12.99,
            "size": "m",
        },
        {
            "id": 4,
            "name": "Silk Scarf",
            "description": "This silk scarf adds a warm touch.",
            "price": 40,
            "size": None,
        },
    ]


@pytest.fixture
def sample_catalog(sample_products: list[dict[str, Any]]) -> dict[str, Any]:
    """Full source document wrapping the sample products."""
    return {"products": sample_products}


def make_product(
    price: int | float | str,
    size: str | None = None,
    description: str = "",
    product_id: int = 0,
) -> Product:
    """Build a Product for service-level tests."""
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        description=description,
        price=Decimal(str(price)),
        size=size,
    )


# ---------------------------------------------------------------------------
# Catalog sources
# ---------------------------------------------------------------------------


class CatalogSources:
    """Programmable stand-in for the remote catalog sources.

    Unknown URLs answer 404. Every request is recorded in ``requested``.
    """

    def __init__(self) -> None:
        self.routes: dict[str, CatalogRoute] = {}
        self.requested: list[str] = []

    def __setitem__(self, url: str, route: CatalogRoute) -> None:
        self.routes[url] = route

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return route(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def catalog_sources() -> CatalogSources:
    """Catalog sources with no routes; tests set what each URL returns."""
    return CatalogSources()


@pytest_asyncio.fixture
async def source_client(catalog_sources: CatalogSources) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Outbound HTTP client wired to the catalog sources."""
    async with catalog_sources.client() as http_client:
        yield http_client


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the mock primary and backup sources."""
    return Settings(
        catalog_sources=[PRIMARY_URL, BACKUP_URL],
        catalog_fetch_timeout=2.0,
        log_json=False,
    )


# ---------------------------------------------------------------------------
# Test clients
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client(
    source_client: httpx.AsyncClient,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with catalog sources and settings overridden."""
    app.dependency_overrides[get_http_client] = lambda: source_client
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def plain_client() -> AsyncGenerator[AsyncClient, None]:
    """Minimal async test client with NO dependency overrides."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
