"""Error kinds raised by the scrape pipeline."""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for every failure that aborts a scrape request."""


class BrowserLaunchError(ScrapeError):
    """The browser or its page could not be acquired."""


class NavigationError(ScrapeError):
    """Loading a result page failed."""

    def __init__(self, message: str, *, url: str = "", page_index: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.page_index = page_index


class NavigationTimeoutError(NavigationError):
    """Network settle or the readiness marker exceeded its bound."""


class ExtractionError(ScrapeError):
    """Reading records out of a loaded page failed unexpectedly."""

    def __init__(self, message: str, *, page_index: int | None = None) -> None:
        super().__init__(message)
        self.page_index = page_index
