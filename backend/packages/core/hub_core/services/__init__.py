"""
Service layer.

Business logic services for the application.
"""

from .feed_service import FeedCache, FeedService
from .preview_service import PreviewService

__all__ = [
    "FeedCache",
    "FeedService",
    "PreviewService",
]
