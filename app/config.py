# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SUPABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Credentials are optional at load time so the API can start without them.
# A missing value is reported when the client that needs it is first built
# (see Settings.require and lib/clients.py).
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------

    SUPABASE_URL: str | None = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str | None = Field(
        default=None,
        description="Supabase service_role key (bypasses RLS)"
    )

    # -------------------------------------------------------------------------
    # HeyGen (avatar vendor) Configuration
    # -------------------------------------------------------------------------

    HEYGEN_API_KEY: str | None = Field(
        default=None,
        description="HeyGen API key sent as X-Api-Key"
    )

    HEYGEN_API_URL: str = Field(
        default="https://api.heygen.com",
        description="Base URL of the HeyGen API"
    )

    VOICE_WEBHOOK_URL: str = Field(
        default="https://rueleven.ru/webhook/932aee6f-b554-45e9-b232-f7829b0a1d06",
        description="Webhook notified when a cloned voice is deleted"
    )

    # -------------------------------------------------------------------------
    # S3-compatible Storage Configuration
    # -------------------------------------------------------------------------

    S3_ACCESS_KEY_ID: str | None = Field(
        default=None,
        description="Access key id for the media bucket"
    )

    S3_SECRET_ACCESS_KEY: str | None = Field(
        default=None,
        description="Secret access key for the media bucket"
    )

    S3_ENDPOINT: str | None = Field(
        default=None,
        description="S3-compatible endpoint URL (also the base of public URLs)"
    )

    S3_BUCKET: str | None = Field(
        default=None,
        description="Bucket that holds uploaded media"
    )

    # Most S3-compatible providers ignore the region but botocore requires one
    S3_REGION: str = Field(
        default="us-east-1",
        description="Region passed to the S3 client"
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
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty strings count as "not set"
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def require(self, name: str) -> str:
        """
        Return a configuration value that must be present.

        Raises:
            ConfigurationError: If the value is missing or blank
        """
        value = getattr(self, name, None)
        if value is None or not str(value).strip():
            raise ConfigurationError(name)
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
