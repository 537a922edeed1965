"""
Feeds router.

Provides endpoints that fetch an external feed and return it normalized,
either in full or as a render-ready preview.
"""

from typing import Annotated
from urllib.parse import urlparse

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from hub_core import get_logger
from hub_core.schemas import FeedResponse, PreviewResponse
from hub_core.services import FeedService, PreviewService
from hub_rss import FeedError, FeedHTTPStatusError, ParsedFeed

from ..dependencies import get_feed_service, get_preview_service

logger = get_logger(__name__)

router = APIRouter()

MISSING_URL_ERROR = "Missing URL parameter"
INVALID_URL_ERROR = "Invalid URL parameter"
FEED_FAILED_ERROR = "Failed to fetch or parse the RSS feed"


def _require_feed_url(url: str | None) -> str:
    if url is None or not url.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_URL_ERROR)

    url = url.strip()
    try:
        parsed = urlparse(url)
        httpx.URL(url)
    except (ValueError, httpx.InvalidURL):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_URL_ERROR)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_URL_ERROR)
    return url


async def _load_feed(url: str, feed_service: FeedService) -> ParsedFeed:
    try:
        return await feed_service.get_feed(url)
    except FeedError as e:
        # The reason stays in the server log; clients get the generic message
        logger.warning(
            "Failed to fetch or parse feed",
            extra={
                "feed_url": url,
                "reason": str(e),
                "status_code": e.status_code if isinstance(e, FeedHTTPStatusError) else None,
            },
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=FEED_FAILED_ERROR
        )


@router.get("", response_model_exclude_none=True)
async def get_feed(
    response: Response,
    feed_service: Annotated[FeedService, Depends(get_feed_service)],
    url: Annotated[str | None, Query()] = None,
) -> FeedResponse:
    """
    Fetch and normalize a feed.

    Args:
        response: Outgoing response, used to set the caching header.
        feed_service: Feed service.
        url: Feed URL.

    Returns:
        Normalized feed.

    Raises:
        HTTPException: 400 if the URL is missing or invalid, 500 if the feed
            cannot be fetched or parsed.
    """
    feed_url = _require_feed_url(url)
    feed = await _load_feed(feed_url, feed_service)

    ttl = feed_service.settings.cache_ttl_seconds
    if ttl > 0:
        response.headers["Cache-Control"] = f"public, max-age={ttl}"
    return FeedResponse.from_parsed(feed)


@router.get("/preview")
async def get_feed_preview(
    feed_service: Annotated[FeedService, Depends(get_feed_service)],
    preview_service: Annotated[PreviewService, Depends(get_preview_service)],
    url: Annotated[str | None, Query()] = None,
    count: Annotated[int | None, Query(ge=1)] = None,
) -> PreviewResponse:
    """
    Fetch a feed and build a render-ready preview of its first items.

    Args:
        feed_service: Feed service.
        preview_service: Preview service.
        url: Feed URL.
        count: Number of items to include.

    Returns:
        Feed preview.

    Raises:
        HTTPException: 400 if the URL is missing or invalid, 500 if the feed
            cannot be fetched or parsed.
    """
    feed_url = _require_feed_url(url)
    feed = await _load_feed(feed_url, feed_service)
    return preview_service.build_preview(feed, count)
