# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DATA_DIR)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing is strictly required: without an AI key the assist endpoint
    serves template contracts, and the data directory defaults to ./data.
    """

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    DATA_DIR: str = Field(
        default="data",
        description="Directory holding users.json and contracts.json"
    )

    # -------------------------------------------------------------------------
    # AI Assist (OpenRouter, OpenAI-compatible)
    # -------------------------------------------------------------------------

    OPENROUTER_API_KEY: str | None = Field(
        default=None,
        description="API key for the hosted model; template fallback when unset"
    )

    AI_BASE_URL: str = Field(
        default="https://openrouter.ai/api/v1",
        description="Base URL of the chat-completions API"
    )

    AI_MODEL: str = Field(
        default="anthropic/claude-3-haiku",
        description="Model used for contract generation"
    )

    AI_TEMPERATURE: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Generation temperature (lower = more consistent)"
    )

    AI_MAX_TOKENS: int = Field(
        default=3000,
        ge=100,
        le=16000,
        description="Max tokens for a generated contract"
    )

    AI_TIMEOUT_SECONDS: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for a single generation request"
    )

    APP_URL: str = Field(
        default="http://localhost:3000",
        description="Public URL sent as HTTP-Referer to OpenRouter"
    )

    APP_TITLE: str = Field(
        default="Wedding Vendor Contract Builder",
        description="Application title sent as X-Title to OpenRouter"
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

    # -------------------------------------------------------------------------
    # Security / Session
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing session cookies"
    )

    SESSION_COOKIE_NAME: str = Field(
        default="session",
        description="Name of the session cookie"
    )

    SESSION_MAX_AGE_SECONDS: int = Field(
        default=60 * 60 * 24 * 7,
        ge=60,
        description="Session lifetime (7 days)"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Signatures
    # -------------------------------------------------------------------------

    SIGNATURE_MAX_WIDTH: int = Field(
        default=400,
        ge=50,
        le=2000,
        description="Drawn signatures are downscaled to fit this box (px)"
    )

    MAX_SIGNATURE_SIZE_KB: int = Field(
        default=512,
        ge=1,
        description="Maximum decoded size of a drawn signature image"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def data_path(self) -> Path:
        """DATA_DIR as a Path."""
        return Path(self.DATA_DIR)

    @property
    def max_signature_size_bytes(self) -> int:
        return self.MAX_SIGNATURE_SIZE_KB * 1024

    @property
    def has_ai_key(self) -> bool:
        return bool(self.OPENROUTER_API_KEY)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

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
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
