from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env."""

    app_name: str = Field(default="payment-dashboard-api")

    # Stripe
    stripe_secret_key: str = Field(default="", description="Stripe secret API key (sk_test_...)")
    stripe_api_version: Optional[str] = Field(default=None, description="Pinned Stripe API version")

    # Analytics window
    primary_currency: str = Field(default="eur")
    analytics_window_days: int = Field(default=30)
    analytics_fetch_limit: int = Field(default=100)
    default_page_size: int = Field(default=6)

    # Currency catalog
    country_spec_limit: int = Field(default=100)

    log_level: str = Field(default="INFO")
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="CORS allowed origins (comma-separated)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def parsed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
