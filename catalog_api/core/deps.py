"""Dependency injection for FastAPI routes."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from catalog_api.core.config import Settings, get_settings
from catalog_api.services.catalog_fetcher import CatalogFetcher
from catalog_api.services.catalog_service import CatalogService

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound HTTP client created in the application lifespan."""
    client: httpx.AsyncClient = request.app.state.http_client
    return client


def get_catalog_fetcher(
    settings: SettingsDep,
    client: httpx.AsyncClient = Depends(get_http_client),
) -> CatalogFetcher:
    """Fetcher over the configured catalog sources."""
    return CatalogFetcher(
        client,
        settings.catalog_source_urls,
        timeout=settings.catalog_fetch_timeout,
    )


def get_catalog_service(
    settings: SettingsDep,
    fetcher: CatalogFetcher = Depends(get_catalog_fetcher),
) -> CatalogService:
    """Catalog service configured from settings."""
    return CatalogService(
        fetcher,
        common_words_limit=settings.common_words_limit,
        stop_words=settings.stop_words,
        highlight_tag=settings.highlight_tag,
    )


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
