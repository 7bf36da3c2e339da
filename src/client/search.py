"""Ties the fetch, the view state and the status line together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from src.api.schemas import Product
from src.client.api import ScrapeClient, ScrapeRequestError
from src.client.store import SortMode, ViewState
from src.client.view import derive_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusMessage:
    text: str
    kind: Literal["info", "error"] = "info"


class SearchSession:
    """State for one search screen.

    ``state`` is reassigned on every change and only takes new products when a
    fetch succeeds. ``loading`` is true while a request is in flight, which is
    when the search controls should be disabled.
    """

    def __init__(self, client: ScrapeClient, state: ViewState | None = None) -> None:
        self._client = client
        self.state = state or ViewState()
        self.status: StatusMessage | None = None
        self.loading = False

    async def submit(self, keyword: str) -> list[Product]:
        """Fetch results for *keyword* and return the derived view."""
        keyword = keyword.strip()
        if not keyword:
            self.status = StatusMessage("Please enter a search keyword.", "error")
            return self.view()

        self.loading = True
        self.status = StatusMessage("Launching headless browser...")
        try:
            products = await self._client.fetch_products(keyword)
        except ScrapeRequestError as exc:
            self.status = StatusMessage(f"An error occurred: {exc}. Please try again.", "error")
            return self.view()
        finally:
            self.loading = False

        self.state = self.state.with_products(products)
        if products:
            self.status = StatusMessage(f"Found {len(products)} products.")
        else:
            self.status = StatusMessage(
                f'No products found for "{keyword}". Try a different term.'
            )
        logger.debug("search results stored", extra={"keyword": keyword, "count": len(products)})
        return self.view()

    def set_sort_mode(self, sort_mode: str | SortMode) -> list[Product]:
        self.state = self.state.with_sort_mode(sort_mode)
        return self.view()

    def set_hide_sponsored(self, hide_sponsored: bool) -> list[Product]:
        self.state = self.state.with_hide_sponsored(hide_sponsored)
        return self.view()

    def view(self) -> list[Product]:
        return derive_view(self.state)
