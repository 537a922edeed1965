"""
API configuration.

Application-level settings loaded from environment variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class Settings(BaseSettings):
    """
    API settings from environment variables.

    All settings are prefixed with HUB_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="HUB_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Student Hub Feed API"
    version: str = "0.1.0"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]


# Global instance
settings = Settings()
