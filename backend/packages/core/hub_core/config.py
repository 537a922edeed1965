"""
Feed pipeline configuration.

This module provides configuration settings for feed fetching, caching and
display loaded from environment variables.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class FeedSettings(BaseSettings):
    """
    Feed pipeline configuration from environment variables.

    All settings are prefixed with FEED_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEED_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream requests
    user_agent: str = "Student-Hub/1.0"
    request_timeout: float = Field(10.0, gt=0)

    # Response cache, keyed by feed URL
    cache_ttl_seconds: int = Field(300, ge=0)  # 0 disables caching
    cache_max_entries: int = Field(256, gt=0)

    # Display-time preview
    preview_default_count: int = Field(3, ge=1)
    preview_max_count: int = Field(50, ge=1)
    short_link_template: str = "https://pbs.twimg.com/media/{id}.jpg"


# Global instance
feed_settings = FeedSettings()
