"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.scrape import build_scraper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    setup_logging(settings.log_level)
    logger.info("starting scrape service")

    # Browsers are launched per request; only the configuration is shared.
    app.state.settings = settings
    app.state.scraper = build_scraper(settings)

    logger.info(
        "scrape service ready",
        extra={
            "marketplace": settings.marketplace_domain,
            "max_pages": settings.max_pages,
            "headless": settings.headless,
        },
    )

    yield

    logger.info("shutting down scrape service")


app = FastAPI(title="Marketplace Scrape Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
