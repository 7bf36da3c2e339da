"""Fixtures: fake Playwright objects and result-node payloads."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlparse

import pytest

from src.scrape.selectors import DEFAULT_SELECTORS

S = DEFAULT_SELECTORS


def _node_payload(
    title: str | None = "Widget",
    href: str | None = "https://www.amazon.com/dp/B000001",
    *,
    src: str | None = "https://m.media-amazon.com/images/I/widget.jpg",
    rating_label: str | None = "4.5 out of 5 stars",
    reviews: str | None = "1,024",
    whole: str | None = "29",
    fraction: str | None = "99",
    sponsored: bool = False,
) -> dict[str, Any]:
    """Build what the in-page read script returns for one result node."""
    return {
        "text": {
            S.title: title,
            S.rating: rating_label,
            S.reviews: reviews,
            S.price_whole: whole,
            S.price_fraction: fraction,
        },
        "attributes": {
            f"{S.title_link}|href": href,
            f"{S.image}|src": src,
        },
        "present": {S.sponsored_label: sponsored},
    }


def _page_of(count: int, page_index: int = 1) -> list[dict[str, Any]]:
    return [
        _node_payload(
            title=f"Item {page_index}-{n}",
            href=f"https://www.amazon.com/dp/P{page_index}N{n}",
        )
        for n in range(count)
    ]


class FakePage:
    """Serves scripted result pages keyed by the ``page`` query parameter.

    A value may be a list of node payloads or an exception raised by ``goto``.
    """

    def __init__(self, results: dict[int, Any] | None = None) -> None:
        self.results = results or {}
        self.visited: list[str] = []
        self.goto_calls: list[dict[str, Any]] = []
        self.wait_calls: list[dict[str, Any]] = []
        self._current: list[dict[str, Any]] = []

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.visited.append(url)
        self.goto_calls.append(kwargs)
        index = int(parse_qs(urlparse(url).query)["page"][0])
        outcome = self.results.get(index, [])
        if isinstance(outcome, BaseException):
            raise outcome
        self._current = outcome

    async def wait_for_selector(self, selector: str, **kwargs: Any) -> None:
        self.wait_calls.append({"selector": selector, **kwargs})

    async def eval_on_selector_all(self, selector: str, script: str, arg: Any = None) -> list[dict[str, Any]]:
        return list(self._current)


class FakeContext:
    def __init__(self, page: FakePage) -> None:
        self._page = page

    async def new_page(self) -> FakePage:
        return self._page


class FakeBrowser:
    def __init__(self, page: FakePage) -> None:
        self.page = page
        self.context_kwargs: dict[str, Any] = {}
        self.close_count = 0

    async def new_context(self, **kwargs: Any) -> FakeContext:
        self.context_kwargs = kwargs
        return FakeContext(self.page)

    async def close(self) -> None:
        self.close_count += 1


class FakeChromium:
    def __init__(self, make_page) -> None:
        self._make_page = make_page
        self.browsers: list[FakeBrowser] = []
        self.launch_kwargs: list[dict[str, Any]] = []
        self.launch_error: BaseException | None = None

    async def launch(self, **kwargs: Any) -> FakeBrowser:
        self.launch_kwargs.append(kwargs)
        if self.launch_error is not None:
            raise self.launch_error
        browser = FakeBrowser(self._make_page())
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    """Stands in for ``async_playwright()``; every call shares one ``chromium``."""

    def __init__(self, make_page) -> None:
        self.chromium = FakeChromium(make_page)
        self.entered = 0
        self.exited = 0

    def __call__(self) -> FakePlaywright:
        return self

    async def __aenter__(self) -> FakePlaywright:
        self.entered += 1
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.exited += 1


@pytest.fixture
def fake_playwright():
    """Factory: ``fake_playwright(results)`` gives a playwright whose pages serve *results*."""

    def _make(results: dict[int, Any] | None = None) -> FakePlaywright:
        return FakePlaywright(lambda: FakePage(results))

    return _make


@pytest.fixture
def node_payload():
    return _node_payload


@pytest.fixture
def page_of():
    return _page_of
