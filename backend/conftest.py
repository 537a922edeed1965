"""Global pytest fixtures for testing."""

import contextlib
from collections.abc import AsyncGenerator

import dotenv
import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hub_api.dependencies import get_feed_service
from hub_api.main import create_app
from hub_core.config import FeedSettings
from hub_core.services import FeedCache, FeedService

with contextlib.suppress(OSError):
    dotenv.load_dotenv()


RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:media="http://search.yahoo.com/mrss/"
     xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>FCIT KAU</title>
    <description>Posts from the faculty timeline</description>
    <link>https://x.com/FCITKAU</link>
    <item>
      <title>Registration opens Sunday</title>
      <link>https://x.com/FCITKAU/status/1</link>
      <description><![CDATA[Registration opens Sunday<br>See details pic.twitter.com/AbC123]]></description>
      <pubDate>Mon, 06 Oct 2025 12:00:00 GMT</pubDate>
      <media:content url="https://pbs.twimg.com/media/one.jpg" type="image/jpeg" width="1200" height="675"/>
    </item>
    <item>
      <title>RT @kau_edu: Campus closed tomorrow</title>
      <link>https://x.com/FCITKAU/status/2</link>
      <description>Campus closed tomorrow</description>
      <pubDate>Sun, 05 Oct 2025 08:30:00 GMT</pubDate>
      <enclosure url="https://example.com/notice.png" type="image/png" length="2048"/>
    </item>
  </channel>
</rss>
"""


class FakeUpstream:
    """Programmable upstream feed server backed by httpx.MockTransport."""

    def __init__(self):
        self.routes: dict[str, httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route

    def serve(self, url: str, body: str | bytes, status_code: int = 200) -> None:
        """Serve a body at a URL."""
        self.routes[url] = httpx.Response(
            status_code, content=body, headers={"Content-Type": "application/rss+xml"}
        )

    def fail(self, url: str, error: Exception) -> None:
        """Raise a transport error for a URL."""
        self.routes[url] = error


@pytest.fixture
def feed_settings() -> FeedSettings:
    """Feed settings independent of the environment."""
    return FeedSettings(
        user_agent="Student-Hub/1.0",
        request_timeout=5.0,
        cache_ttl_seconds=300,
        cache_max_entries=16,
        preview_default_count=3,
        preview_max_count=50,
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    """Fake upstream feed server."""
    return FakeUpstream()


@pytest.fixture
def feed_service(feed_settings: FeedSettings, upstream: FakeUpstream) -> FeedService:
    """Feed service wired to the fake upstream with a fresh cache."""
    cache = FeedCache(feed_settings.cache_ttl_seconds, feed_settings.cache_max_entries)
    return FeedService(feed_settings, cache, transport=upstream.transport)


@pytest_asyncio.fixture
async def client(feed_service: FeedService) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with the feed service wired to the fake upstream."""
    app = create_app()
    app.dependency_overrides[get_feed_service] = lambda: feed_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_feed_xml() -> str:
    """Two-item RSS feed with structured media and an enclosure."""
    return RSS_FEED
