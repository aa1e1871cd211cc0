"""Catalog filtering: fetch, filter, highlight and summarize in one pass."""

import logging
from collections.abc import Collection

from catalog_api.core.exceptions import EmptyCatalogError
from catalog_api.schemas.catalog import FilterCriteria, FilterMetadata, FilterResponse
from catalog_api.services.aggregator import aggregate
from catalog_api.services.catalog_fetcher import CatalogFetcher
from catalog_api.services.filter_engine import filter_products
from catalog_api.services.highlighter import DEFAULT_TAG, highlight

logger = logging.getLogger(__name__)


class CatalogService:
    """Service answering filter queries against a freshly fetched catalog."""

    def __init__(
        self,
        fetcher: CatalogFetcher,
        *,
        common_words_limit: int,
        stop_words: Collection[str],
        highlight_tag: str = DEFAULT_TAG,
    ) -> None:
        self.fetcher = fetcher
        self.common_words_limit = common_words_limit
        self.stop_words = stop_words
        self.highlight_tag = highlight_tag

    async def filter_catalog(self, criteria: FilterCriteria) -> FilterResponse:
        """Fetch the catalog and apply the criteria to it.

        The metadata always describes the whole catalog, so it can mention
        prices and sizes that the filtered products do not.

        Raises:
            FetchError: If no catalog source could be read.
        """
        snapshot = await self.fetcher.fetch()

        products = filter_products(snapshot, criteria)
        if criteria.highlight:
            for product in products:
                product.description = highlight(
                    product.description, criteria.highlight, self.highlight_tag
                )

        try:
            metadata = aggregate(snapshot, self.common_words_limit, self.stop_words)
        except EmptyCatalogError:
            logger.warning("Catalog source returned no products")
            metadata = FilterMetadata.empty()

        logger.debug(
            "Filtered catalog: %d of %d products match", len(products), len(snapshot)
        )
        return FilterResponse(filter=metadata, products=products)
