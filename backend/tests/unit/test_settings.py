"""Unit tests for settings and logging setup."""

import logging

from hub_api.config import Settings
from hub_core import get_logger, init_logging
from hub_core.config import FeedSettings


def test_feed_settings_defaults(monkeypatch) -> None:
    for name in ("FEED_USER_AGENT", "FEED_REQUEST_TIMEOUT", "FEED_CACHE_TTL_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = FeedSettings()

    assert settings.user_agent == "Student-Hub/1.0"
    assert settings.request_timeout == 10.0
    assert settings.cache_ttl_seconds == 300


def test_feed_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("FEED_USER_AGENT", "Campus-Bot/2.0")
    monkeypatch.setenv("FEED_CACHE_TTL_SECONDS", "60")

    settings = FeedSettings()

    assert settings.user_agent == "Campus-Bot/2.0"
    assert settings.cache_ttl_seconds == 60


def test_api_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("HUB_DEBUG", "true")
    monkeypatch.setenv("HUB_CORS_ORIGINS", '["https://hub.example.edu"]')

    settings = Settings()

    assert settings.debug is True
    assert settings.cors_origins == ["https://hub.example.edu"]


def test_loggers_share_the_application_hierarchy() -> None:
    init_logging("debug")
    init_logging("warning")

    logger = get_logger("hub_core.services.feed_service")

    assert logger.name == "hub.hub_core.services.feed_service"
    assert logging.getLogger("hub").level == logging.WARNING
    assert len(logging.getLogger("hub").handlers) == 1
