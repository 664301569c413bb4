"""
Configuration settings for wk-status.

Uses Pydantic Settings for environment variable management with .env file support.
xbar exposes plugin variables as ``VAR_*`` environment variables, so every
setting is read with that prefix (``VAR_API_TOKEN``, ``VAR_SHOW_STAGES``, ...).
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Value xbar writes into VAR_API_TOKEN before the user edits it
PLACEHOLDER_TOKEN = "api_token"

DEFAULT_API_BASE_URL = "https://api.wanikani.com/v2/"


class LogLevel(str, Enum):
    """Accepted log levels for VAR_LOG_LEVEL and --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # WaniKani API
    # ========================================
    api_token: str | None = Field(
        default=None,
        description="WaniKani API v2 personal access token",
    )
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the WaniKani v2 API",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Connect/read timeout per request in seconds",
    )
    max_pages: int = Field(
        default=1000,
        ge=1,
        description="Upper bound on pages followed for one collection",
    )

    # ========================================
    # Display Sections
    # ========================================
    show_stages: bool = Field(default=False, description="Show SRS stage breakdown")
    show_level: bool = Field(default=False, description="Show level and total items")
    show_user_info: bool = Field(default=False, description="Show username and subscription")

    # ========================================
    # Logging
    # ========================================
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging verbosity level (logs go to stderr)",
    )

    @field_validator("show_stages", "show_level", "show_user_info", mode="before")
    @classmethod
    def _parse_toggle(cls, value: object) -> bool:
        # xbar booleans arrive as "true"/"false"; anything else disables the section
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() == "true"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def is_configured(self) -> bool:
        """True when a real API token has been set."""
        return self.api_token not in (None, "", PLACEHOLDER_TOKEN)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
