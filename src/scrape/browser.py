"""One headless browser and page per scrape request."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, AsyncIterator, Callable

from playwright.async_api import Page, async_playwright

from src.config import DEFAULT_USER_AGENT

from .errors import BrowserLaunchError

logger = logging.getLogger(__name__)


class BrowserController:
    """Launches Chromium through Playwright and hands out a single page.

    ``open_page`` is the only entry point. The browser it launches is closed
    exactly once when the block exits, whether it finished, stopped early or
    raised.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        playwright_factory: Callable[[], Any] = async_playwright,
    ) -> None:
        self._headless = headless
        self._user_agent = user_agent
        self._playwright_factory = playwright_factory

    @asynccontextmanager
    async def open_page(self) -> AsyncIterator[Page]:
        async with AsyncExitStack() as stack:
            try:
                playwright = await stack.enter_async_context(self._playwright_factory())
                browser = await playwright.chromium.launch(headless=self._headless)
                stack.push_async_callback(self._close, browser)
                context = await browser.new_context(user_agent=self._user_agent)
                page = await context.new_page()
            except Exception as exc:
                raise BrowserLaunchError(f"could not start browser: {exc}") from exc

            logger.debug("browser launched", extra={"headless": self._headless})
            yield page

    @staticmethod
    async def _close(browser: Any) -> None:
        await browser.close()
        logger.debug("browser closed")
