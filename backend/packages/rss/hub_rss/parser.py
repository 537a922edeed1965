"""
RSS/RDF/Atom feed parser.

Normalizes the generic XML model into ParsedFeed and ParsedItem records,
substituting documented defaults for anything the source omits.
"""

from typing import Any

from .media import extract_media
from .models import DEFAULT_FEED_TITLE, DEFAULT_ITEM_TITLE, ParsedFeed, ParsedItem
from .xml_model import as_list, node_attr, node_text, xml_to_model


def _first_text(node: dict[str, Any], *keys: str) -> str:
    for key in keys:
        text = node_text(node.get(key)).strip()
        if text:
            return text
    return ""


def _atom_link(value: Any) -> str:
    """Pick the alternate link of an Atom ``<link>`` set."""
    links = as_list(value)
    for link in links:
        if isinstance(link, dict) and node_attr(link, "rel") in ("", "alternate"):
            href = node_attr(link, "href")
            if href:
                return href
    for link in links:
        href = node_attr(link, "href")
        if href:
            return href
    return ""


def _link_of(node: dict[str, Any]) -> str:
    link = node.get("link")
    text = node_text(link).strip()
    if text:
        return text
    return _atom_link(link)


def _coerce_items(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    return [value] if value else []


def normalize_channel(model: dict[str, Any]) -> tuple[str, str, str, list[Any]]:
    """
    Extract channel metadata and raw item nodes from a parsed model.

    Args:
        model: Output of ``xml_to_model``.

    Returns:
        Tuple of (title, description, link, raw_items).
    """
    channel: dict[str, Any] = {}
    raw_items: Any = None

    if isinstance(model.get("rss"), dict):
        found = model["rss"].get("channel")
        if isinstance(found, dict):
            channel = found
            raw_items = channel.get("item")
    elif isinstance(model.get("rdf:RDF"), dict):
        rdf = model["rdf:RDF"]
        if isinstance(rdf.get("channel"), dict):
            channel = rdf["channel"]
        # RSS 1.0 keeps items next to the channel, not inside it
        raw_items = rdf.get("item")
    elif isinstance(model.get("feed"), dict):
        channel = model["feed"]
        raw_items = channel.get("entry")

    title = _first_text(channel, "title") or DEFAULT_FEED_TITLE
    description = _first_text(channel, "description", "subtitle")
    link = _link_of(channel)
    return title, description, link, _coerce_items(raw_items)


def normalize_item(node: Any) -> ParsedItem:
    """
    Normalize one raw item node.

    Args:
        node: Item node from the parsed model.

    Returns:
        Parsed item with every field set.
    """
    if not isinstance(node, dict):
        # An item with nothing but text
        node = {"title": node_text(node)}

    return ParsedItem(
        title=_first_text(node, "title") or DEFAULT_ITEM_TITLE,
        link=_link_of(node),
        description=_first_text(node, "description", "summary"),
        published_at=_first_text(node, "pubDate", "dc:date", "published", "updated"),
        content=_first_text(node, "content:encoded", "content"),
        media=extract_media(node),
    )


def parse_feed(content: str | bytes) -> ParsedFeed:
    """
    Parse an RSS, RDF or Atom document.

    Args:
        content: Feed XML as text or raw bytes.

    Returns:
        Parsed feed data.

    Raises:
        FeedParseError: If the document is not well-formed XML.
    """
    model = xml_to_model(content)
    title, description, link, raw_items = normalize_channel(model)
    return ParsedFeed(
        title=title,
        description=description,
        link=link,
        items=tuple(normalize_item(item) for item in raw_items),
    )
