"""
Preview service.

Builds render-ready previews of a parsed feed: cleaned descriptions,
repost flags, relative dates and image galleries.
"""

from datetime import datetime, timezone

from hub_core.config import FeedSettings
from hub_core.presentation import (
    clean_description,
    collect_images,
    format_relative_date,
    is_repost,
)
from hub_core.schemas import PreviewItemResponse, PreviewResponse
from hub_rss import ParsedFeed, ParsedItem


class PreviewService:
    """Display-time projection of parsed feeds."""

    def __init__(self, settings: FeedSettings):
        self.settings = settings

    def build_item(self, item: ParsedItem, now: datetime) -> PreviewItemResponse:
        return PreviewItemResponse(
            title=item.title,
            link=item.link,
            description=clean_description(item.description),
            published_at=item.published_at,
            relative_date=format_relative_date(item.published_at, now),
            is_repost=is_repost(item.title, item.description),
            images=collect_images(
                item, short_link_template=self.settings.short_link_template
            ),
        )

    def build_preview(
        self, feed: ParsedFeed, count: int | None = None, now: datetime | None = None
    ) -> PreviewResponse:
        """
        Build a preview of the first items of a feed.

        Args:
            feed: Parsed feed.
            count: Number of items; defaults to the configured preview size and
                is capped at the configured maximum.
            now: Reference time for relative dates.

        Returns:
            Preview response.
        """
        if count is None:
            count = self.settings.preview_default_count
        count = max(0, min(count, self.settings.preview_max_count))
        if now is None:
            now = datetime.now(timezone.utc)

        return PreviewResponse(
            title=feed.title,
            link=feed.link,
            items=[self.build_item(item, now) for item in feed.items[:count]],
        )
