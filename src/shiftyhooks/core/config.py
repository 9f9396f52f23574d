"""Configuration management for ShiftyHooks.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings are read once and cached;
call ``get_settings.cache_clear()`` to pick up changed environment values.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hook registry configuration settings.

    Settings are loaded from environment variables prefixed with
    ``SHIFTYHOOKS_`` and from an optional ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SHIFTYHOOKS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "ShiftyHooks"
    environment: Literal["development", "production", "testing"] = "development"

    # Registry Settings
    default_priority: int = Field(
        default=10,
        description="Priority used by add/remove when none is given (higher runs first)",
    )
    dispatch_order: Literal["priority", "reverse_insertion"] = Field(
        default="priority",
        description=(
            "How do_action orders priority buckets: numerically descending, "
            "or the reverse of their insertion order"
        ),
    )

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
