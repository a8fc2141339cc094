"""12-factor configuration adapter using environment variables."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    log_level: str = Field(default="INFO", description="Root log level")

    # OneBusAway API configuration
    oba_api_base_url: str = Field(
        default="https://api.pugetsound.onebusaway.org",
        description="Base URL of the OneBusAway REST API",
    )
    oba_api_key: str | None = Field(
        default=None,
        description="Default OneBusAway API key, used when a request does not supply one",
    )
    oba_api_timeout: int = Field(
        default=10,
        ge=0,
        description="Timeout for a single OneBusAway request in seconds (0 disables)",
    )

    # Query defaults
    timezone: str = Field(
        default="America/Los_Angeles",
        description="Default timezone for display times (IANA timezone name)",
    )
    minutes_before: int = Field(
        default=5, ge=0, description="Default minutes before now to include arrivals for"
    )
    minutes_after: int = Field(
        default=30, ge=0, description="Default minutes after now to include arrivals for"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a standard logging level, got '{v}'")
        return level

    @field_validator("oba_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended directly."""
        return v.rstrip("/")
