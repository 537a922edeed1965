"""
Normalized feed records.

Immutable results of parsing a feed. Every field is always set; absence in
the source is represented by the documented fallback value.
"""

from dataclasses import dataclass, field

DEFAULT_MEDIA_TYPE = "image/jpeg"
DEFAULT_FEED_TITLE = "RSS Feed"
DEFAULT_ITEM_TITLE = "No Title"


@dataclass(frozen=True)
class ParsedMedia:
    """One media attachment candidate."""

    url: str
    mime_type: str = DEFAULT_MEDIA_TYPE
    width: int | None = None
    height: int | None = None
    byte_length: int | None = None


@dataclass(frozen=True)
class ParsedItem:
    """One normalized feed entry."""

    title: str = DEFAULT_ITEM_TITLE
    link: str = ""
    description: str = ""
    published_at: str = ""
    content: str = ""
    media: tuple[ParsedMedia, ...] = ()


@dataclass(frozen=True)
class ParsedFeed:
    """Feed-level metadata and its items."""

    title: str = DEFAULT_FEED_TITLE
    description: str = ""
    link: str = ""
    items: tuple[ParsedItem, ...] = field(default_factory=tuple)
