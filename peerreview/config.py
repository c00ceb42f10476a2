"""Centralized configuration management using Pydantic Settings.

This module provides typed configuration for the scheduling service,
loaded from environment variables with sensible defaults.

Usage:
    from peerreview.config import get_settings
    settings = get_settings()
    min_days = settings.scheduling.default_min_days
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_NAME = "peerreview-scheduling"
VERSION = "1.0.0"


class SchedulingSettings(BaseSettings):
    """Limits and defaults for availability queries."""

    model_config = SettingsConfigDict(env_prefix="SCHEDULING_", extra="ignore")

    default_min_days: int = Field(default=5, ge=1, description="Default minimum common window length")
    max_team_size: int = Field(default=20, ge=1, description="Maximum reviewers per team query")
    max_period_days: int = Field(default=366, ge=1, description="Maximum query period length in days")
    summary_workers: int = Field(
        default=4, ge=0, description="Thread pool size for per-reviewer summaries (0 or 1 disables)"
    )
    max_recurrence_occurrences: int = Field(default=100, ge=1, description="Cap on expanded occurrences")


class CorsSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    origins_raw: str = Field(
        default="http://localhost:3000",
        validation_alias="CORS_ORIGINS",
    )
    origins_regex: str = Field(
        default="",
        validation_alias="CORS_ORIGINS_REGEX",
        description="Regex pattern for origins",
    )

    @property
    def origins(self) -> list[str]:
        """Parse comma-separated origins into list."""
        return [o.strip() for o in self.origins_raw.split(",") if o.strip()]

    @property
    def allow_credentials(self) -> bool:
        """Credentials not allowed with wildcard origins."""
        return self.origins != ["*"] and not self.origins_regex


class DebugSettings(BaseSettings):
    """Debug flags configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    request: bool = Field(default=False, alias="request_debug")

    @field_validator("*", mode="before")
    @classmethod
    def parse_bool(cls, v):
        if isinstance(v, str):
            return v.lower() in ("1", "true", "yes")
        return bool(v)


class LoggingSettings(BaseSettings):
    """Root logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    level: str = Field(default="INFO", alias="log_level")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return str(v).upper()


class Settings:
    """Main application settings combining all configuration sections.

    This is not a BaseSettings subclass to avoid env var conflicts.
    Each subsetting is loaded independently with its own prefix.
    """

    def __init__(self) -> None:
        self.scheduling = SchedulingSettings()
        self.cors = CorsSettings()
        self.debug = DebugSettings()
        self.logging = LoggingSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance (singleton pattern)."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear cached settings (useful for testing)."""
    get_settings.cache_clear()
