"""Application configuration using Pydantic settings."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Kiosk settings loaded from environment variables.

    Only ambient concerns live here. Cash levels, denominations and the
    horse roster are fixed so the command interface never changes.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HORSETRACK_",
        extra="ignore",
    )

    debug: bool = False
    log_level: str = "WARNING"

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level (debug forces DEBUG)."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level.upper(), logging.WARNING)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
