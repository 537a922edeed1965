"""
Display-time presentation helpers.

Pure functions that derive render-ready values from normalized feed items
without modifying them.
"""

from .dates import UNKNOWN_DATE, format_relative_date, format_short_date, parse_date
from .gallery import collect_images, images_in_html, is_image_url, short_link_images
from .repost import REPOST_INDICATORS, is_repost
from .sanitizer import clean_description

__all__ = [
    "collect_images",
    "images_in_html",
    "is_image_url",
    "short_link_images",
    "clean_description",
    "is_repost",
    "REPOST_INDICATORS",
    "format_relative_date",
    "format_short_date",
    "parse_date",
    "UNKNOWN_DATE",
]
