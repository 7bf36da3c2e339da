"""Service layer: runs scrapes for the API routes."""

from __future__ import annotations

import logging

from src.api.schemas import Product
from src.scrape import MarketplaceScraper

logger = logging.getLogger(__name__)

KEYWORD_REQUIRED = "Keyword query parameter is required."


class KeywordValidationError(ValueError):
    """The ``keyword`` query parameter is missing, empty or repeated."""


def validate_keyword(values: list[str]) -> str:
    """Return the single keyword value, or raise ``KeywordValidationError``."""
    if len(values) != 1 or not values[0]:
        raise KeywordValidationError(KEYWORD_REQUIRED)
    return values[0]


def scrape_failed_message(marketplace_name: str) -> str:
    return (
        f"Failed to scrape {marketplace_name}. "
        "The site may be blocking requests or its structure has changed."
    )


async def run_scrape(scraper: MarketplaceScraper, keyword: str) -> list[Product]:
    """Scrape *keyword* and convert the records to wire models.

    Errors propagate unchanged; the route decides what the caller sees.
    """
    scraped = await scraper.scrape(keyword)
    return [Product.from_scraped(product) for product in scraped]
