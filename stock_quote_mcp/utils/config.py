"""Configuration management using Pydantic Settings."""

import os
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # AlphaVantage API - required, the service refuses to start without them
    alphavantage_api_key: str = Field(
        ...,
        description="AlphaVantage API key from ALPHAVANTAGE_API_KEY env var",
    )
    alphavantage_base_url: str = Field(
        ...,
        description="AlphaVantage base URL from ALPHAVANTAGE_BASE_URL env var (e.g. https://www.alphavantage.co)",
    )
    alphavantage_timeout: int = Field(
        default=30,
        description="Total timeout in seconds for one AlphaVantage call",
    )

    # Application Settings - loaded from .env via os.environ
    debug: bool = Field(
        default_factory=lambda: os.environ.get("DEBUG", "True").lower() == "true",
        description="Debug mode from DEBUG env var (default: True)"
    )
    log_level: str = Field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"),
        description="Logging level from LOG_LEVEL env var (default: INFO)"
    )
    host: str = "0.0.0.0"
    port: int = Field(
        default_factory=lambda: int(os.environ.get("PORT", 8080)),
        description="HTTP port from PORT env var (default: 8080)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("alphavantage_api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("AlphaVantage API key is required")
        return value.strip()

    @field_validator("alphavantage_base_url")
    @classmethod
    def _require_base_url(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("AlphaVantage API base URL is required")
        return value.strip().rstrip("/")


# Global settings instance
settings = Settings()
