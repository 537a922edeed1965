"""
Feed errors.

Exceptions raised while fetching and parsing feeds. They subclass
ValueError so callers that only care about "the feed could not be read"
can keep catching ValueError.
"""


class FeedError(ValueError):
    """Base class for feed fetch and parse failures."""


class FeedHTTPStatusError(FeedError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch feed {url}: HTTP {status_code}")


class FeedTransportError(FeedError):
    """Upstream could not be reached (DNS, timeout, connection reset)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch feed {url}: {reason}")


class FeedParseError(FeedError):
    """Feed body is not well-formed XML."""
