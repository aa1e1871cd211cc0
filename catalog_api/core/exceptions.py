"""Domain errors raised by the catalog services."""


class CatalogError(Exception):
    """Base class for catalog failures."""


class FetchError(CatalogError):
    """No catalog source produced a usable product list.

    Attributes:
        failures: (source url, reason) for every source tried, in order.
    """

    def __init__(self, failures: list[tuple[str, str]]) -> None:
        self.failures = failures
        tried = "; ".join(f"{url}: {reason}" for url, reason in failures)
        super().__init__(f"All {len(failures)} catalog source(s) failed ({tried})")


class EmptyCatalogError(CatalogError):
    """The fetched catalog has no products to aggregate."""
