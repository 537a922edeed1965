"""
FastAPI dependencies.

Provides dependency injection for feed settings and services.
"""

from typing import Annotated

from fastapi import Depends

from hub_core.config import FeedSettings, feed_settings
from hub_core.services import FeedCache, FeedService, PreviewService

# One cache per process, shared by every request
_feed_cache = FeedCache(feed_settings.cache_ttl_seconds, feed_settings.cache_max_entries)


def get_feed_settings() -> FeedSettings:
    """
    Get feed pipeline settings.

    Returns:
        Feed settings instance.
    """
    return feed_settings


def get_feed_cache() -> FeedCache:
    """
    Get the process-wide feed cache.

    Returns:
        Feed cache instance.
    """
    return _feed_cache


def get_feed_service(
    settings: Annotated[FeedSettings, Depends(get_feed_settings)],
    cache: Annotated[FeedCache, Depends(get_feed_cache)],
) -> FeedService:
    """
    Get feed service instance.

    Args:
        settings: Feed settings.
        cache: Feed cache.

    Returns:
        Feed service instance.
    """
    return FeedService(settings, cache)


def get_preview_service(
    settings: Annotated[FeedSettings, Depends(get_feed_settings)],
) -> PreviewService:
    """
    Get preview service instance.

    Args:
        settings: Feed settings.

    Returns:
        Preview service instance.
    """
    return PreviewService(settings)
