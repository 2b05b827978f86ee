"""
Typed settings for the timeline engine.

Values are read from ``TIMELINE_*`` environment variables (or a local
``.env`` file) and validated by Pydantic Settings.
"""

from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIMELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # IANA zone used to compute start-of-day boundaries
    timezone: str = Field(default="UTC")
    # Page sizes used by the static fetcher, matching the action events API
    events_limit: int = Field(default=20, ge=1)
    events_limit_per_course: int = Field(default=10, ge=1)
    # Merge buckets of the same day across pages instead of appending them
    merge_days: bool = False
    reject_concurrent_loads: bool = False
    environment: str = Field(default="development")
    log_level: str | None = None

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone '{value}'") from exc
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached process-wide settings."""

    return Settings()
