"""Fetch the product catalog from an ordered list of sources."""

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from catalog_api.core.exceptions import FetchError
from catalog_api.schemas.catalog import CatalogEnvelope, Product

logger = logging.getLogger(__name__)


class CatalogFetcher:
    """Fetch the catalog from the first source that answers with valid data.

    Sources are tried strictly one after another, each once, with its own
    timeout. Transport errors, non-2xx statuses and undecodable bodies all
    count as a failed source.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        sources: Sequence[str],
        timeout: float = 10.0,
    ) -> None:
        if not sources:
            raise ValueError("At least one catalog source is required.")
        self.client = client
        self.sources = list(sources)
        self.timeout = timeout

    async def fetch(self) -> list[Product]:
        """Return the product list from the first working source.

        Raises:
            FetchError: If every source failed.
        """
        failures: list[tuple[str, str]] = []

        for position, url in enumerate(self.sources, start=1):
            try:
                products = await self._fetch_source(url)
            except httpx.HTTPError as e:
                reason = f"{type(e).__name__}: {e}"
            except ValidationError as e:
                reason = f"invalid catalog document ({e.error_count()} error(s))"
            else:
                logger.info(
                    "Received %d products from catalog source %d (%s)",
                    len(products),
                    position,
                    url,
                )
                return products

            failures.append((url, reason))
            if position < len(self.sources):
                logger.warning(
                    "Catalog source %d (%s) failed: %s. Trying next source.",
                    position,
                    url,
                    reason,
                )

        logger.error(
            "Failed to fetch product data from all %d sources: %s",
            len(failures),
            failures[-1][1],
        )
        raise FetchError(failures)

    async def _fetch_source(self, url: str) -> list[Product]:
        response = await self.client.get(url, timeout=self.timeout)
        response.raise_for_status()
        # Malformed JSON surfaces as a ValidationError of type json_invalid
        envelope = CatalogEnvelope.model_validate_json(response.content)
        return envelope.products
