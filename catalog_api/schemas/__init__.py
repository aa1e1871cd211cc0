"""Pydantic schemas for request validation and response serialization."""

from catalog_api.schemas.catalog import (
    CatalogEnvelope,
    FilterCriteria,
    FilterMetadata,
    FilterResponse,
    Product,
)
from catalog_api.schemas.common import BaseSchema, ErrorResponse, HealthResponse

__all__ = [
    "BaseSchema",
    "CatalogEnvelope",
    "ErrorResponse",
    "FilterCriteria",
    "FilterMetadata",
    "FilterResponse",
    "HealthResponse",
    "Product",
]
