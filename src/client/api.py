"""HTTP client for the scrape endpoint."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from src.api.schemas import Product

logger = logging.getLogger(__name__)

# Scrapes walk several pages with 60s navigation bounds each.
DEFAULT_TIMEOUT = 240.0


class ScrapeRequestError(Exception):
    """The scrape request failed; ``str(exc)`` is the message to show the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP error! Status: {resp.status_code}"


class ScrapeClient:
    """Calls ``GET /api/scrape`` relative to *base_url*."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_products(self, keyword: str) -> list[Product]:
        """Return the products for *keyword* or raise ``ScrapeRequestError``."""
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = await client.get("/api/scrape", params={"keyword": keyword})
        except httpx.HTTPError as exc:
            logger.warning("scrape request failed", extra={"keyword": keyword[:100]}, exc_info=True)
            raise ScrapeRequestError(str(exc) or type(exc).__name__) from exc

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning(
                "scrape request rejected",
                extra={"keyword": keyword[:100], "status_code": resp.status_code},
            )
            raise ScrapeRequestError(message, status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ScrapeRequestError("Malformed response from server", resp.status_code) from exc
        if not isinstance(payload, list):
            raise ScrapeRequestError(_error_message(resp), status_code=resp.status_code)
        try:
            return [Product.model_validate(item) for item in payload]
        except ValidationError as exc:
            logger.warning("malformed scrape response", extra={"keyword": keyword[:100]})
            raise ScrapeRequestError("Malformed response from server", resp.status_code) from exc
