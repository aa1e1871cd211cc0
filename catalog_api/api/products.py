"""Catalog filter endpoint for products."""

import logging
from decimal import Decimal

from fastapi import APIRouter, HTTPException, Query, status

from catalog_api.core.deps import CatalogServiceDep
from catalog_api.core.exceptions import FetchError
from catalog_api.schemas.catalog import FilterCriteria, FilterResponse
from catalog_api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/filter",
    response_model=FilterResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse}},
)
async def get_filtered_products(
    service: CatalogServiceDep,
    min_price: Decimal | None = Query(None, alias="minPrice", description="Inclusive minimum"),
    max_price: Decimal | None = Query(None, alias="maxPrice", description="Inclusive maximum"),
    size: str | None = Query(None, description="Exact size, case-insensitive"),
    highlight: str | None = Query(None, description="Comma-separated words to highlight"),
) -> FilterResponse:
    """Filter the product catalog by price and size.

    The ``Filter`` block summarizes the whole catalog (price range, sizes,
    common description words), not just the products that matched.
    """
    criteria = FilterCriteria.from_query(
        min_price=min_price,
        max_price=max_price,
        size=size,
        highlight=highlight,
    )
    try:
        return await service.filter_catalog(criteria)
    except FetchError as e:
        logger.error("Catalog unavailable: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unavailable. Could not fetch product data.",
        ) from e
