# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.TEAMTAILOR_BASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The API key is required: importing this module without it raises a
# ValidationError, so the server refuses to start.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Everything here is read-only after startup and shared by all
    export requests.
    """

    # -------------------------------------------------------------------------
    # Teamtailor API
    # -------------------------------------------------------------------------

    TEAMTAILOR_API_KEY: str = Field(
        ...,
        min_length=1,
        description="Teamtailor API token (sent as 'Token token=<key>')"
    )

    TEAMTAILOR_BASE_URL: str = Field(
        default="https://api.teamtailor.com/v1",
        description="Base URL of the Teamtailor REST API"
    )

    TEAMTAILOR_API_VERSION: str = Field(
        default="v1",
        description="Value of the X-Api-Version header"
    )

    TEAMTAILOR_PAGE_SIZE: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Candidates requested per page (page[size])"
    )

    TEAMTAILOR_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to every Teamtailor request"
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

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    @property
    def teamtailor_base_url(self) -> str:
        """Base URL without a trailing slash, ready for path joining."""
        return self.TEAMTAILOR_BASE_URL.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
