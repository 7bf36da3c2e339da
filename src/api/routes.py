"""GET /api/scrape endpoint handler."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.schemas import ErrorResponse, Product
from src.api.service import (
    KeywordValidationError,
    run_scrape,
    scrape_failed_message,
    validate_keyword,
)
from src.config import Settings
from src.scrape import MarketplaceScraper

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _get_scraper(request: Request) -> MarketplaceScraper:
    return request.app.state.scraper


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get(
    "/scrape",
    response_model=list[Product],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def scrape_products(
    request: Request,
    scraper: MarketplaceScraper = Depends(_get_scraper),
    settings: Settings = Depends(_get_settings),
):
    try:
        keyword = validate_keyword(request.query_params.getlist("keyword"))
    except KeywordValidationError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    try:
        return await run_scrape(scraper, keyword)
    except Exception:
        logger.exception("scrape failed", extra={"keyword": keyword[:100]})
        return JSONResponse(
            status_code=500,
            content={"error": scrape_failed_message(settings.marketplace_name)},
        )
