"""Price and size filtering over a fetched catalog."""

from collections.abc import Iterable

from catalog_api.schemas.catalog import FilterCriteria, Product


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """Check a product against every criterion that is set."""
    if criteria.min_price is not None and product.price < criteria.min_price:
        return False
    if criteria.max_price is not None and product.price > criteria.max_price:
        return False
    if criteria.size is not None:
        if product.size is None or product.size.casefold() != criteria.size.casefold():
            return False
    return True


def filter_products(snapshot: Iterable[Product], criteria: FilterCriteria) -> list[Product]:
    """Return copies of the matching products, in catalog order.

    Copies let callers rewrite descriptions without touching the snapshot
    the metadata is computed from.
    """
    return [product.model_copy() for product in snapshot if matches(product, criteria)]
