"""
Repost detection.

Heuristic: an item is a repost when its title or description contains one
of a fixed set of indicator phrases.
"""

import re
from collections.abc import Iterable

REPOST_INDICATORS: tuple[str, ...] = (
    "rt @",
    "retweeted",
    "reposted",
    "retweet",
    "repost",
)


def _contains_indicator(text: str, indicators: Iterable[str]) -> bool:
    lowered = text.lower()
    for phrase in indicators:
        # Phrases must start a word so that e.g. "art @x" is not "rt @x"
        if re.search(r"(?<!\w)" + re.escape(phrase.lower()), lowered):
            return True
    return False


def is_repost(
    title: str | None,
    description: str | None,
    indicators: Iterable[str] = REPOST_INDICATORS,
) -> bool:
    """
    Classify an item as a repost.

    The title is checked before the description; the first match wins.

    Args:
        title: Item title.
        description: Item description.
        indicators: Phrases matched case-insensitively.

    Returns:
        True if any indicator phrase is found.
    """
    indicators = tuple(indicators)
    for text in (title, description):
        if text and _contains_indicator(text, indicators):
            return True
    return False
