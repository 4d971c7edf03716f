# =============================================================================
# transmute/config.py - Library Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from transmute.config import settings
#   print(settings.CACHE_COMPILED)
#
# Variables are read from the process environment and from a .env file in
# the working directory (if it exists), all prefixed with TRANSMUTE_.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Every value has a default so the library works without any setup.
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level applied to the 'transmute' logger by configure_logging()"
    )

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    WARN_ON_OVERRIDE: bool = Field(
        default=False,
        description="Log a warning when a registration replaces a different function"
    )

    # -------------------------------------------------------------------------
    # Compiler
    # -------------------------------------------------------------------------

    CACHE_COMPILED: bool = Field(
        default=True,
        description="Cache compiled chains per pipe class (keyed on registry version)"
    )

    model_config = SettingsConfigDict(
        env_prefix="TRANSMUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The environment is parsed and validated once per process.
    """
    return Settings()


# Global settings instance
settings = get_settings()
