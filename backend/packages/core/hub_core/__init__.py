"""
Student Hub Core Package.

This package contains settings, logging, response schemas, the feed service
and display-time presentation helpers.
"""

__version__ = "0.1.0"

from .logging_config import get_logger, init_logging

__all__ = ["init_logging", "get_logger"]
