"""
Feed schemas.

Response models for the feed and preview endpoints. Field aliases carry the
wire names (``type``, ``length``, ``pubDate``).
"""

from pydantic import BaseModel, ConfigDict, Field

from hub_rss import ParsedFeed, ParsedItem, ParsedMedia


class MediaResponse(BaseModel):
    """Media attachment of a feed item."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    mime_type: str = Field(alias="type")
    width: int | None = None
    height: int | None = None
    byte_length: int | None = Field(default=None, alias="length")

    @classmethod
    def from_parsed(cls, media: ParsedMedia) -> "MediaResponse":
        return cls(
            url=media.url,
            mime_type=media.mime_type,
            width=media.width,
            height=media.height,
            byte_length=media.byte_length,
        )


class FeedItemResponse(BaseModel):
    """Normalized feed item."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    link: str
    description: str
    published_at: str = Field(alias="pubDate")
    content: str
    media: list[MediaResponse]

    @classmethod
    def from_parsed(cls, item: ParsedItem) -> "FeedItemResponse":
        return cls(
            title=item.title,
            link=item.link,
            description=item.description,
            published_at=item.published_at,
            content=item.content,
            media=[MediaResponse.from_parsed(media) for media in item.media],
        )


class FeedResponse(BaseModel):
    """Normalized feed document."""

    title: str
    description: str
    link: str
    items: list[FeedItemResponse]

    @classmethod
    def from_parsed(cls, feed: ParsedFeed) -> "FeedResponse":
        return cls(
            title=feed.title,
            description=feed.description,
            link=feed.link,
            items=[FeedItemResponse.from_parsed(item) for item in feed.items],
        )


class PreviewItemResponse(BaseModel):
    """Render-ready feed item."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    link: str
    description: str
    published_at: str = Field(alias="pubDate")
    relative_date: str = Field(alias="relativeDate")
    is_repost: bool = Field(alias="isRepost")
    images: list[str]


class PreviewResponse(BaseModel):
    """Render-ready slice of a feed."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    link: str
    items: list[PreviewItemResponse]
