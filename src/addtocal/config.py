"""Configuration management using pydantic-settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_title: str = "Add To Calendar Link Generator"

    # Zone for picker values, which carry no offset
    local_timezone: str = "UTC"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    @field_validator("local_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        """The configured local zone."""
        return ZoneInfo(self.local_timezone)

    def zone_for(self, name: Optional[str]) -> ZoneInfo:
        """
        Resolve a client-supplied IANA zone name.

        Falls back to the configured local zone when the name is missing or
        unknown.
        """
        if name:
            try:
                return ZoneInfo(name)
            except (ZoneInfoNotFoundError, ValueError, OSError):
                logger.debug(f"Unknown client timezone {name!r}, using {self.local_timezone}")
        return self.tzinfo


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
