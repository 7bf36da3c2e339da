"""Loads one paginated search URL and waits until it is ready."""

from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import quote

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from src.config import DEFAULT_NAVIGATION_TIMEOUT_MS, DEFAULT_READINESS_TIMEOUT_MS

from .errors import ExtractionError, NavigationError, NavigationTimeoutError
from .extractor import READ_RESULT_NODES_JS, NodeSnapshot, ResultNode
from .selectors import DEFAULT_SELECTORS, MarketplaceSelectors

logger = logging.getLogger(__name__)


class PageSource(Protocol):
    """What ``PaginationDriver`` needs from a navigated page."""

    async def load(self, keyword: str, page_index: int) -> None: ...

    async def result_nodes(self) -> list[ResultNode]: ...


def build_search_url(domain: str, keyword: str, page_index: int) -> str:
    """``https://<domain>/s?k=<encoded keyword>&page=<n>``."""
    # Same escaping as JavaScript's encodeURIComponent.
    encoded = quote(keyword, safe="-_.!~*'()")
    return f"https://{domain}/s?k={encoded}&page={page_index}"


class PageNavigator:
    """Drives one owned Playwright page through the result pages."""

    def __init__(
        self,
        page: Page,
        *,
        domain: str,
        navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
        readiness_timeout_ms: int = DEFAULT_READINESS_TIMEOUT_MS,
        selectors: MarketplaceSelectors = DEFAULT_SELECTORS,
    ) -> None:
        self._page = page
        self._domain = domain
        self._navigation_timeout_ms = navigation_timeout_ms
        self._readiness_timeout_ms = readiness_timeout_ms
        self._selectors = selectors
        self._page_index: int | None = None

    async def load(self, keyword: str, page_index: int) -> None:
        """Navigate to result page *page_index* and block until the results render.

        Raises ``NavigationTimeoutError`` when either bound is exceeded and
        ``NavigationError`` for any other navigation failure.
        """
        url = build_search_url(self._domain, keyword, page_index)
        self._page_index = page_index
        logger.info("navigating", extra={"page_index": page_index, "url": url})

        try:
            await self._page.goto(
                url,
                wait_until="networkidle",
                timeout=self._navigation_timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeoutError(
                f"page {page_index} did not settle within {self._navigation_timeout_ms}ms",
                url=url,
                page_index=page_index,
            ) from exc
        except PlaywrightError as exc:
            raise NavigationError(
                f"navigation to page {page_index} failed: {exc}",
                url=url,
                page_index=page_index,
            ) from exc

        try:
            await self._page.wait_for_selector(
                self._selectors.results_container,
                timeout=self._readiness_timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeoutError(
                f"results container missing on page {page_index} after {self._readiness_timeout_ms}ms",
                url=url,
                page_index=page_index,
            ) from exc
        except PlaywrightError as exc:
            raise NavigationError(
                f"waiting for results on page {page_index} failed: {exc}",
                url=url,
                page_index=page_index,
            ) from exc

    async def result_nodes(self) -> list[ResultNode]:
        """Read every result node of the loaded page into snapshots."""
        try:
            payloads = await self._page.eval_on_selector_all(
                self._selectors.result_node,
                READ_RESULT_NODES_JS,
                self._selectors.read_plan(),
            )
        except PlaywrightError as exc:
            raise ExtractionError(
                f"reading result nodes failed: {exc}", page_index=self._page_index
            ) from exc

        logger.debug(
            "result nodes read",
            extra={"page_index": self._page_index, "node_count": len(payloads)},
        )
        return [NodeSnapshot.from_payload(payload) for payload in payloads]
