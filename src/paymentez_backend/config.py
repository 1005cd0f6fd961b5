"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paymentez credentials
    paymentez_app_code: str
    paymentez_app_key: str

    # Gateway (staging by default)
    paymentez_base_url: str = "https://ccapi-stg.paymentez.com"
    request_timeout_seconds: float = 30.0

    # Stand-in for the authenticated customer's email
    customer_email: str = "dev@paymentez.com"

    # Server Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
