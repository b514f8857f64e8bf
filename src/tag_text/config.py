"""Configuration management for Tag Text."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Output format used when --format is not given
    default_format: str = Field(
        default="ansi",
        alias="TAG_TEXT_FORMAT",
    )

    # Treat any diagnostic as a failure
    strict: bool = Field(
        default=False,
        alias="TAG_TEXT_STRICT",
    )

    log_level: str = Field(
        default="WARNING",
        alias="TAG_TEXT_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
