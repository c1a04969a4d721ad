"""Application configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables. The Stripe API
    key is not validated here; the gateway factory refuses to build without it
    so the host fails before serving any request.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="hosted-checkout", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # Stripe
    stripe_api_key: str = Field(default="", description="Stripe secret API key")
    stripe_webhook_secret: str | None = Field(
        default=None,
        description="Stripe webhook signing secret. Without it every webhook is reported as unhandled.",
    )
    stripe_webhook_tolerance: int = Field(
        default=300,
        ge=0,
        description="Maximum age in seconds of a webhook signature timestamp",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
