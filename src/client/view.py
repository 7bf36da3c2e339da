"""Derives the displayed product list from a ``ViewState``.

Nothing here is cached: each call recomputes from the raw products, so the
same inputs always give the same output.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from src.api.schemas import Product
from src.client.store import SortMode, ViewState

# Leading decimal number, the way a lenient float parse reads "29.99 each".
_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))")


def _leading_float(text: str) -> float:
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        return 0.0
    return float(match.group(1))


def parse_price(price: str | None) -> float:
    """``"$1,299.99"`` -> ``1299.99``; absent or unparsable prices are 0."""
    if not price:
        return 0.0
    return _leading_float(price.replace("$", "").replace(",", ""))


def parse_rating(rating: str | None) -> float:
    """``"4.5"`` -> ``4.5``; absent or unparsable ratings are 0."""
    if not rating:
        return 0.0
    return _leading_float(rating)


_SORT_KEYS: dict[SortMode, Callable[[Product], float]] = {
    SortMode.PRICE_ASC: lambda p: parse_price(p.price),
    SortMode.PRICE_DESC: lambda p: -parse_price(p.price),
    SortMode.RATING_DESC: lambda p: -parse_rating(p.rating),
}


def filter_and_sort(
    products: Sequence[Product],
    *,
    hide_sponsored: bool = False,
    sort_mode: SortMode = SortMode.NONE,
) -> list[Product]:
    """Filter out sponsored results if asked, then stable-sort by *sort_mode*."""
    view = [p for p in products if not (hide_sponsored and p.is_sponsored)]

    key = _SORT_KEYS.get(SortMode.parse(sort_mode))
    if key is None:
        return view
    # sorted() is stable, so equal keys keep their filtered order.
    return sorted(view, key=key)


def derive_view(state: ViewState) -> list[Product]:
    return filter_and_sort(
        state.products,
        hide_sponsored=state.hide_sponsored,
        sort_mode=state.sort_mode,
    )
