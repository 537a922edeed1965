"""
Feed service.

Fetches and parses feeds on demand, reusing recent results for the same URL.
"""

import time
from collections import OrderedDict
from collections.abc import Callable

import httpx

from hub_core import get_logger
from hub_core.config import FeedSettings
from hub_rss import ParsedFeed, fetch_feed, parse_feed

logger = get_logger(__name__)


class FeedCache:
    """
    In-process cache of parsed feeds keyed by exact feed URL.

    Entries expire after ``ttl_seconds``; when full, the oldest entry is
    evicted first.
    """

    def __init__(
        self,
        ttl_seconds: int,
        max_entries: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, ParsedFeed]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, url: str) -> ParsedFeed | None:
        entry = self._entries.get(url)
        if entry is None:
            return None
        expires_at, feed = entry
        if self._clock() >= expires_at:
            del self._entries[url]
            return None
        return feed

    def set(self, url: str, feed: ParsedFeed) -> None:
        if self.ttl_seconds <= 0:
            return
        self._entries.pop(url, None)
        self._entries[url] = (self._clock() + self.ttl_seconds, feed)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()


class FeedService:
    """On-demand feed fetching and parsing service."""

    def __init__(
        self,
        settings: FeedSettings,
        cache: FeedCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize feed service.

        Args:
            settings: Feed pipeline settings.
            cache: Shared response cache; a private one is created if omitted.
            transport: Optional HTTP transport override (used by tests).
        """
        self.settings = settings
        self.cache = cache or FeedCache(settings.cache_ttl_seconds, settings.cache_max_entries)
        self._transport = transport

    async def get_feed(self, url: str) -> ParsedFeed:
        """
        Get a parsed feed, from cache when fresh.

        Args:
            url: Feed URL.

        Returns:
            Parsed feed data.

        Raises:
            FeedError: If the feed cannot be fetched or parsed.
        """
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Feed served from cache", extra={"feed_url": url})
            return cached

        content = await fetch_feed(
            url,
            user_agent=self.settings.user_agent,
            timeout=self.settings.request_timeout,
            cache_max_age=self.settings.cache_ttl_seconds,
            transport=self._transport,
        )
        feed = parse_feed(content)
        self.cache.set(url, feed)

        logger.info(
            "Feed fetched",
            extra={"feed_url": url, "item_count": len(feed.items), "bytes": len(content)},
        )
        return feed
