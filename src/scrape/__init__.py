"""Marketplace search scraping with a headless browser."""

from __future__ import annotations

import logging
from src.config import DEFAULT_NAVIGATION_TIMEOUT_MS, DEFAULT_READINESS_TIMEOUT_MS, Settings

from .browser import BrowserController
from .driver import PaginationDriver
from .errors import (
    BrowserLaunchError,
    ExtractionError,
    NavigationError,
    NavigationTimeoutError,
    ScrapeError,
)
from .models import MAX_PAGES, Product, ScrapeSession
from .navigator import PageNavigator, build_search_url
from .selectors import DEFAULT_SELECTORS, MarketplaceSelectors

__all__ = [
    "BrowserController",
    "BrowserLaunchError",
    "ExtractionError",
    "MAX_PAGES",
    "MarketplaceScraper",
    "MarketplaceSelectors",
    "NavigationError",
    "NavigationTimeoutError",
    "PageNavigator",
    "PaginationDriver",
    "Product",
    "ScrapeError",
    "ScrapeSession",
    "build_scraper",
    "build_search_url",
]

logger = logging.getLogger(__name__)


class MarketplaceScraper:
    """Runs one search scrape per call; nothing is shared between calls."""

    def __init__(
        self,
        controller: BrowserController,
        *,
        domain: str,
        max_pages: int = MAX_PAGES,
        navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
        readiness_timeout_ms: int = DEFAULT_READINESS_TIMEOUT_MS,
        selectors: MarketplaceSelectors = DEFAULT_SELECTORS,
    ) -> None:
        self._controller = controller
        self._domain = domain
        self._max_pages = max_pages
        self._navigation_timeout_ms = navigation_timeout_ms
        self._readiness_timeout_ms = readiness_timeout_ms
        self._selectors = selectors

    async def scrape(self, keyword: str) -> list[Product]:
        """Return every product on up to ``max_pages`` result pages for *keyword*.

        Raises a ``ScrapeError`` subclass on any failure; the browser is
        released before the error leaves this method.
        """
        logger.info("scrape started", extra={"keyword": keyword})
        async with self._controller.open_page() as page:
            navigator = PageNavigator(
                page,
                domain=self._domain,
                navigation_timeout_ms=self._navigation_timeout_ms,
                readiness_timeout_ms=self._readiness_timeout_ms,
                selectors=self._selectors,
            )
            driver = PaginationDriver(
                navigator,
                max_pages=self._max_pages,
                selectors=self._selectors,
            )
            products = await driver.run(keyword)

        logger.info(
            "scrape complete",
            extra={"keyword": keyword, "product_count": len(products)},
        )
        return products


def build_scraper(settings: Settings) -> MarketplaceScraper:
    """Build the scraper from configured settings."""
    controller = BrowserController(
        headless=settings.headless,
        user_agent=settings.user_agent,
    )
    return MarketplaceScraper(
        controller,
        domain=settings.marketplace_domain,
        max_pages=settings.max_pages,
        navigation_timeout_ms=settings.navigation_timeout_ms,
        readiness_timeout_ms=settings.readiness_timeout_ms,
    )
