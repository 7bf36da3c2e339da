"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/108.0.0.0 Safari/537.36"
)
DEFAULT_NAVIGATION_TIMEOUT_MS = 60000
DEFAULT_READINESS_TIMEOUT_MS = 10000


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    marketplace_name: str = "Amazon"
    marketplace_domain: str = "www.amazon.com"

    # Values above the scraper's hard cap of 3 are clamped by PaginationDriver.
    max_pages: int = Field(default=3, ge=1)
    navigation_timeout_ms: int = Field(default=DEFAULT_NAVIGATION_TIMEOUT_MS, gt=0)
    readiness_timeout_ms: int = Field(default=DEFAULT_READINESS_TIMEOUT_MS, gt=0)

    user_agent: str = DEFAULT_USER_AGENT
    headless: bool = True

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
