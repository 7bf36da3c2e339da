"""Data models for the scrape pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_PAGES = 3


@dataclass(frozen=True)
class Product:
    """A single search result read off a rendered page.

    ``title`` and ``product_url`` are always set; every other field is
    ``None`` when the page did not carry it.
    """

    title: str
    product_url: str
    image_url: str | None = None
    rating: str | None = None
    reviews: str | None = None
    price: str | None = None
    is_sponsored: bool = False


@dataclass
class ScrapeSession:
    """Per-request pagination state, owned by ``PaginationDriver``."""

    keyword: str
    max_pages: int = MAX_PAGES
    page_index: int = 1
    products: list[Product] = field(default_factory=list)
    pages_visited: int = 0
    stopped: bool = False

    def __post_init__(self) -> None:
        if not self.keyword:
            raise ValueError("keyword must be a non-empty string")
        if not 1 <= self.max_pages <= MAX_PAGES:
            raise ValueError(f"max_pages must be between 1 and {MAX_PAGES}")
