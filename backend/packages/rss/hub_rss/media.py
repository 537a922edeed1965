"""
Media extraction for feed items.

Derives the media list of a raw item node. Sources are tried in tiers:
structured ``media:content`` tags, then ``enclosure`` tags, and only when
both are empty, the first ``<img>`` embedded in the item's HTML.
"""

import re
from typing import Any

from .models import DEFAULT_MEDIA_TYPE, ParsedMedia
from .xml_model import as_list, node_attr, node_text

IMG_SRC_RE = re.compile(r"""<img\b[^>]*?\bsrc\s*=\s*["']([^"'>]+)["']""", re.IGNORECASE)

# Fields scanned for an embedded image, in priority order
_HTML_FIELDS = ("content:encoded", "content", "description")


def _to_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _media_content_entries(node: dict[str, Any]) -> list[Any]:
    entries = list(as_list(node.get("media:content")))
    for group in as_list(node.get("media:group")):
        if isinstance(group, dict):
            entries.extend(as_list(group.get("media:content")))
    return entries


def _from_media_content(entry: Any) -> ParsedMedia | None:
    url = node_attr(entry, "url")
    if not url:
        return None
    width = node_attr(entry, "width")
    height = node_attr(entry, "height")
    return ParsedMedia(
        url=url,
        mime_type=node_attr(entry, "type") or DEFAULT_MEDIA_TYPE,
        width=_to_int(width) if width else None,
        height=_to_int(height) if height else None,
    )


def _from_enclosure(entry: Any) -> ParsedMedia | None:
    url = node_attr(entry, "url")
    if not url:
        return None
    length = node_attr(entry, "length")
    return ParsedMedia(
        url=url,
        mime_type=node_attr(entry, "type") or DEFAULT_MEDIA_TYPE,
        byte_length=_to_int(length) if length else None,
    )


def find_first_image(html: str) -> str | None:
    """Return the src of the first ``<img>`` tag in an HTML fragment."""
    match = IMG_SRC_RE.search(html)
    if match:
        return match.group(1).strip() or None
    return None


def extract_media(node: Any) -> tuple[ParsedMedia, ...]:
    """
    Extract media attachments from a raw item node.

    Never raises; an item without any media yields an empty tuple.

    Args:
        node: Item node produced by ``xml_to_model``.

    Returns:
        Media attachments, unique by URL, in order of first occurrence.
    """
    if not isinstance(node, dict):
        return ()

    found: list[ParsedMedia] = []
    for entry in _media_content_entries(node):
        media = _from_media_content(entry)
        if media:
            found.append(media)
    for entry in as_list(node.get("enclosure")):
        media = _from_enclosure(entry)
        if media:
            found.append(media)

    if not found:
        for field_name in _HTML_FIELDS:
            url = find_first_image(node_text(node.get(field_name)))
            if url:
                found.append(ParsedMedia(url=url, mime_type=DEFAULT_MEDIA_TYPE))
                break

    seen: set[str] = set()
    unique: list[ParsedMedia] = []
    for media in found:
        if media.url in seen:
            continue
        seen.add(media.url)
        unique.append(media)
    return tuple(unique)
