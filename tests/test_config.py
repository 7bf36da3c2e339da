"""Settings tests."""

import pytest
from pydantic import ValidationError

from src.config import DEFAULT_USER_AGENT, Settings


def test_defaults(monkeypatch):
    for name in ("MAX_PAGES", "NAVIGATION_TIMEOUT_MS", "READINESS_TIMEOUT_MS", "HEADLESS", "USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.max_pages == 3
    assert settings.navigation_timeout_ms == 60000
    assert settings.readiness_timeout_ms == 10000
    assert settings.headless is True
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MARKETPLACE_DOMAIN", "www.amazon.de")
    monkeypatch.setenv("MAX_PAGES", "5")
    monkeypatch.setenv("HEADLESS", "false")
    settings = Settings(_env_file=None)
    assert settings.marketplace_domain == "www.amazon.de"
    assert settings.max_pages == 5
    assert settings.headless is False


def test_setup_logging_installs_json_handler():
    import logging

    from pythonjsonlogger.json import JsonFormatter

    from src.logging_config import setup_logging

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_max_pages_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_pages=0)
