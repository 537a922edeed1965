"""
Description cleanup for inline display.
"""

import re

_IMG_TAG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_BR_TAG_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_IMAGE_ANCHOR_RE = re.compile(
    r"""<a\b[^>]*\bhref\s*=\s*["'][^"']*\.(?:jpe?g|png|gif|webp)(?:\?[^"'#]*)?(?:#[^"']*)?["'][^>]*>.*?</a\s*>""",
    re.IGNORECASE | re.DOTALL,
)
_BARE_IMAGE_URL_RE = re.compile(
    r"""https?://[^\s"'<>]+\.(?:jpe?g|png|gif|webp)(?:\?[^\s"'<>#]*)?(?:#[^\s"'<>]*)?""",
    re.IGNORECASE,
)


def clean_description(description: str | None) -> str:
    """
    Strip image markup from a description.

    Removes ``<img>`` tags, turns ``<br>`` into spaces, drops anchors that
    wrap an image file link along with their text, drops bare image URLs and
    collapses whitespace. Other markup is kept.

    Args:
        description: Raw, possibly HTML, description.

    Returns:
        Cleaned text, or "" for empty input.
    """
    if not description:
        return ""

    text = _IMG_TAG_RE.sub("", description)
    text = _BR_TAG_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text)
    text = _IMAGE_ANCHOR_RE.sub("", text)
    text = _BARE_IMAGE_URL_RE.sub("", text)
    # Removals above can leave doubled spaces behind
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
