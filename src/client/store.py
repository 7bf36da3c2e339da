"""Client-side view state: the fetched products plus the filter/sort controls."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from src.api.schemas import Product


class SortMode(str, Enum):
    NONE = "none"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"

    @classmethod
    def parse(cls, value: str | SortMode) -> SortMode:
        """Read a sort control value.

        ``"rating"`` is accepted for ``rating-desc``; unrecognised values leave
        the list unsorted.
        """
        if isinstance(value, SortMode):
            return value
        if value == "rating":
            return cls.RATING_DESC
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class ViewState:
    """Immutable snapshot of what the results view is derived from.

    Every change produces a new ``ViewState``; ``products`` is only ever
    swapped for a freshly fetched sequence, never edited.
    """

    products: tuple[Product, ...] = ()
    sort_mode: SortMode = SortMode.NONE
    hide_sponsored: bool = False

    def with_products(self, products: Iterable[Product]) -> ViewState:
        return dataclasses.replace(self, products=tuple(products))

    def with_sort_mode(self, sort_mode: str | SortMode) -> ViewState:
        return dataclasses.replace(self, sort_mode=SortMode.parse(sort_mode))

    def with_hide_sponsored(self, hide_sponsored: bool) -> ViewState:
        return dataclasses.replace(self, hide_sponsored=hide_sponsored)
