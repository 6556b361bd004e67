"""Library configuration using Pydantic Settings.

This module provides centralized configuration with:
- Environment variable loading (``MEALDB_`` prefix, ``__`` for nesting)
- ``.env`` file support
- Type validation and coercion
- Computed properties for derived values
- Caching for performance
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Nested Configuration Models
# =============================================================================


class MealDBSettings(BaseModel):
    """TheMealDB API connection settings.

    The request base URL is assembled as
    ``{api_base_url}/{output}/{version}/{api_key}/``.
    """

    api_key: str = "1"
    output: str = "json"
    version: str = "v1"
    api_base_url: str = "https://www.themealdb.com/api"
    timeout: float = 10.0  # Read/write/pool timeout per attempt, seconds
    connect_timeout: float = 5.0
    max_retries: int = 2  # Attempts per request = max_retries + 1
    retry_backoff: float = 0.15  # Sleep = retry_backoff * attempt number
    user_agent: str = "mealdb-client/0.1.0"

    @field_validator("max_retries")
    @classmethod
    def _clamp_max_retries(cls, value: int) -> int:
        return max(0, value)

    @property
    def base_url(self) -> str:
        """Full endpoint base URL, always ending with a slash."""
        return (
            f"{self.api_base_url.rstrip('/')}/{self.output.strip('/')}/"
            f"{self.version.strip('/')}/{self.api_key.strip('/')}/"
        )


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "text"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Library settings with environment variable support.

    Configuration is loaded from the following sources (highest to lowest):
    1. Values passed to ``Settings()``
    2. Environment variables
    3. .env file
    4. Default values in code

    Nested values use the ``__`` delimiter. For example
    ``MEALDB_API__MAX_RETRIES=5`` overrides ``api.max_retries``.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEALDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "production"

    api: MealDBSettings = MealDBSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Using lru_cache ensures settings are only loaded once,
    improving performance and consistency.
    """
    return Settings()
