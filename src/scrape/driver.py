"""Walks result pages 1..max_pages and aggregates records.

Per page the driver goes ``load -> extract -> continue | stop``. An empty page
stops the walk (end of results, not an error) and page ``max_pages`` is a hard
cap. Any failure aborts the walk and nothing gathered so far is returned.
"""

from __future__ import annotations

import logging

from .errors import ExtractionError, ScrapeError
from .extractor import extract_products
from .models import MAX_PAGES, Product, ScrapeSession
from .navigator import PageSource
from .selectors import DEFAULT_SELECTORS, MarketplaceSelectors

logger = logging.getLogger(__name__)


class PaginationDriver:
    def __init__(
        self,
        source: PageSource,
        *,
        max_pages: int = MAX_PAGES,
        selectors: MarketplaceSelectors = DEFAULT_SELECTORS,
    ) -> None:
        self._source = source
        if max_pages > MAX_PAGES:
            logger.warning(
                "max_pages above hard cap, clamping",
                extra={"requested": max_pages, "max_pages": MAX_PAGES},
            )
        self._max_pages = min(max_pages, MAX_PAGES)
        self._selectors = selectors

    async def run(self, keyword: str) -> list[Product]:
        session = ScrapeSession(keyword=keyword, max_pages=self._max_pages)
        try:
            while not session.stopped:
                await self._step(session)
        except ScrapeError:
            if session.products:
                logger.warning(
                    "scrape aborted, discarding earlier pages",
                    extra={
                        "keyword": keyword,
                        "page_index": session.page_index,
                        "discarded": len(session.products),
                    },
                )
            raise

        logger.debug(
            "pagination finished",
            extra={
                "keyword": keyword,
                "pages_visited": session.pages_visited,
                "product_count": len(session.products),
            },
        )
        return list(session.products)

    async def _step(self, session: ScrapeSession) -> None:
        index = session.page_index
        await self._source.load(session.keyword, index)
        session.pages_visited += 1

        try:
            nodes = await self._source.result_nodes()
            page_products = extract_products(nodes, self._selectors)
        except ScrapeError:
            raise
        except Exception as exc:
            raise ExtractionError(f"extracting page {index} failed: {exc}", page_index=index) from exc

        if not page_products:
            logger.info("no products on page, ending scrape", extra={"page_index": index})
            session.stopped = True
            return

        session.products.extend(page_products)

        if index >= session.max_pages:
            logger.info("page limit reached", extra={"page_index": index, "max_pages": session.max_pages})
            session.stopped = True
            return

        session.page_index = index + 1
