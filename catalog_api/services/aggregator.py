"""Summary statistics over a full catalog snapshot."""

import re
from collections import Counter
from collections.abc import Collection, Iterable, Sequence

from catalog_api.core.config import DEFAULT_COMMON_WORDS_LIMIT, DEFAULT_STOP_WORDS
from catalog_api.core.exceptions import EmptyCatalogError
from catalog_api.schemas.catalog import FilterMetadata, Product

_WORD_SPLIT_RE = re.compile(r"[\s,.!]+")


def distinct_sizes(products: Iterable[Product]) -> list[str | None]:
    """Distinct sizes in first-seen order, ``None`` included."""
    return list(dict.fromkeys(product.size for product in products))


def most_common_words(
    descriptions: Iterable[str],
    limit: int = DEFAULT_COMMON_WORDS_LIMIT,
    stop_words: Collection[str] = DEFAULT_STOP_WORDS,
) -> list[str]:
    """Most frequent lowercase description words, excluding stop words.

    Words are split on whitespace and ``, . !``. Words with equal counts
    keep the order in which they first appear in the descriptions.
    """
    excluded = {word.lower() for word in stop_words}
    counts: Counter[str] = Counter()
    for description in descriptions:
        for token in _WORD_SPLIT_RE.split(description):
            word = token.lower()
            if word and word not in excluded:
                counts[word] += 1
    # most_common() sorts stably, so ties stay in insertion order
    return [word for word, _ in counts.most_common(limit)]


def aggregate(
    snapshot: Sequence[Product],
    limit: int = DEFAULT_COMMON_WORDS_LIMIT,
    stop_words: Collection[str] = DEFAULT_STOP_WORDS,
) -> FilterMetadata:
    """Build filter metadata from the unfiltered catalog.

    Raises:
        EmptyCatalogError: If the snapshot has no products.
    """
    if not snapshot:
        raise EmptyCatalogError("Cannot aggregate an empty catalog")

    prices = [product.price for product in snapshot]
    return FilterMetadata(
        min_price=min(prices),
        max_price=max(prices),
        sizes=distinct_sizes(snapshot),
        common_words=most_common_words(
            (product.description for product in snapshot), limit, stop_words
        ),
    )
