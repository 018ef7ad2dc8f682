"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for bindql.

    Values are read from ``BINDQL_``-prefixed environment variables and from
    a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="BINDQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Dialect used by Query.render()/statement() when none is passed
    default_dialect: str = "simple"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (cached; ``cache_clear()`` in tests)."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
