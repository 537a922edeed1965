"""
Pydantic schemas for API responses.
"""

from .feed import (
    FeedItemResponse,
    FeedResponse,
    MediaResponse,
    PreviewItemResponse,
    PreviewResponse,
)

__all__ = [
    "FeedResponse",
    "FeedItemResponse",
    "MediaResponse",
    "PreviewResponse",
    "PreviewItemResponse",
]
