"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Built once per process by ``get_settings()`` and handed to every service;
    treat instances as read-only.
    """

    # API Keys
    gemini_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY")
    )
    youtube_api_key: Optional[str] = None

    # Gemini Settings
    model_id: str = "gemini-2.5-flash-lite"
    mock_mode: bool = False
    gemini_temperature: float = 0.7
    gemini_timeout: float = 60.0  # seconds, per generation call

    # Prompt policy
    max_pantry_extras: int = 2
    max_video_extras: int = 3

    # Email relay
    zapier_webhook_url: Optional[str] = None
    brand_name: str = "DeyCook"

    # Server
    port: int = 3001
    host: str = "0.0.0.0"

    # Logging
    log_level: str = "INFO"

    # HTTP Settings
    http_timeout: float = 15.0  # seconds

    # Rate Limiting
    rate_limit_per_hour: int = 100

    # CORS
    cors_origins: str = "*"  # Comma-separated origins or "*" for all

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),
    )

    @property
    def use_mock(self) -> bool:
        """Mock mode is forced on when no generation key is configured."""
        return self.mock_mode or not self.gemini_api_key

    @property
    def cors_origins_list(self) -> List[str]:
        """Get list of CORS origins."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
