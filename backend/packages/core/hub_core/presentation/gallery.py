"""
Display-time image collection.

Gathers every image URL an item exposes, more permissively than the media
extraction done at parse time: image-typed media, all ``<img>`` tags and
direct image links in the HTML, and image short links reconstructed into
direct media URLs.
"""

import re
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup

from hub_rss import ParsedItem

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp")
DEFAULT_SHORT_LINK_TEMPLATE = "https://pbs.twimg.com/media/{id}.jpg"

_IMAGE_SUFFIX_RE = re.compile(r"\.(?:jpe?g|png|gif|webp)$", re.IGNORECASE)
SHORT_LINK_RE = re.compile(r"\bpic\.(?:twitter|x)\.com/([A-Za-z0-9]+)", re.IGNORECASE)

# Inline glyphs rendered at this size are icons, not gallery images
_GLYPH_SIZE = "16"


def is_image_url(url: str) -> bool:
    """Check whether a URL points directly at an image file."""
    if not url:
        return False
    if _IMAGE_SUFFIX_RE.search(url):
        return True
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if _IMAGE_SUFFIX_RE.search(parsed.path):
        return True
    formats = parse_qs(parsed.query).get("format", [])
    return any(fmt.lower() in IMAGE_EXTENSIONS for fmt in formats)


def _is_glyph(img) -> bool:
    for attr in ("width", "height"):
        value = str(img.get(attr) or "").strip().lower().removesuffix("px")
        if value == _GLYPH_SIZE:
            return True
    classes = img.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return any("emoji" in cls.lower() for cls in classes)


def images_in_html(html: str) -> list[str]:
    """
    Find image URLs in an HTML fragment.

    Returns the src of every ``<img>`` that is not an icon or emoji glyph and
    the href of every ``<a>`` that links straight to an image file, in
    document order.
    """
    if not html or "<" not in html:
        return []

    soup = BeautifulSoup(html, "lxml")
    urls: list[str] = []
    for tag in soup.find_all(["img", "a"]):
        if tag.name == "img":
            src = str(tag.get("src") or "").strip()
            if src and not _is_glyph(tag):
                urls.append(src)
        else:
            href = str(tag.get("href") or "").strip()
            if is_image_url(href):
                urls.append(href)
    return urls


def short_link_images(text: str, template: str = DEFAULT_SHORT_LINK_TEMPLATE) -> list[str]:
    """Build probable direct media URLs from image short links in text."""
    if not text:
        return []
    return [template.format(id=media_id) for media_id in SHORT_LINK_RE.findall(text)]


def collect_images(
    item: ParsedItem, *, short_link_template: str = DEFAULT_SHORT_LINK_TEMPLATE
) -> list[str]:
    """
    Collect every image URL of a feed item.

    Args:
        item: Normalized feed item.
        short_link_template: Format string with an ``{id}`` placeholder used to
            rebuild short links. The resulting URLs are not verified.

    Returns:
        Unique image URLs in first-seen order.
    """
    candidates: list[str] = []
    candidates.extend(
        media.url
        for media in item.media
        if media.mime_type.startswith("image/") or is_image_url(media.url)
    )
    candidates.extend(images_in_html(item.content))
    candidates.extend(images_in_html(item.description))
    candidates.extend(short_link_images(item.title, short_link_template))
    candidates.extend(short_link_images(item.description, short_link_template))

    seen: set[str] = set()
    urls: list[str] = []
    for url in candidates:
        if url in seen:
            continue
        seen.add(url)
        urls.append(url)
    return urls
