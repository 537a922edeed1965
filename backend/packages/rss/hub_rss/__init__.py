"""
RSS processing package.

Provides feed fetching, XML-to-model conversion, RSS/RDF/Atom normalization
and media extraction.
"""

from .errors import FeedError, FeedHTTPStatusError, FeedParseError, FeedTransportError
from .fetcher import fetch_feed
from .media import extract_media
from .models import ParsedFeed, ParsedItem, ParsedMedia
from .parser import normalize_channel, normalize_item, parse_feed
from .xml_model import FORCE_LIST, xml_to_model

__all__ = [
    "fetch_feed",
    "parse_feed",
    "normalize_channel",
    "normalize_item",
    "extract_media",
    "xml_to_model",
    "FORCE_LIST",
    "ParsedFeed",
    "ParsedItem",
    "ParsedMedia",
    "FeedError",
    "FeedHTTPStatusError",
    "FeedParseError",
    "FeedTransportError",
]
