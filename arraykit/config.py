# =============================================================================
# arraykit/config.py - Library Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from arraykit.config import settings
#   print(settings.MAX_MIN_FAST_PATH_LIMIT)
#
# Environment variables (prefixed with ARRAYKIT_) are loaded from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
# =============================================================================

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    MAX_MIN_FAST_PATH_LIMIT: int = Field(
        default=65535,
        ge=0,
        description="max/min hand sequences shorter than this to the builtin (0 disables)"
    )

    # -------------------------------------------------------------------------
    # Randomness
    # -------------------------------------------------------------------------

    RANDOM_SEED: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the ambient random generator used by shuffle"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    model_config = SettingsConfigDict(
        env_prefix="ARRAYKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        # .env may hold settings for other tools
        extra="ignore",
        case_sensitive=True,
    )

    @property
    def fast_path_enabled(self) -> bool:
        """Check if max/min may delegate to the builtins."""
        return self.MAX_MIN_FAST_PATH_LIMIT > 0

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Returns:
        Settings: The library settings instance
    """
    return Settings()


def configure_logging() -> None:
    """Configure root logging for entry-point scripts."""
    logging.basicConfig(
        level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


# Global settings instance for easy importing
settings = get_settings()
