"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    log_level: str = "INFO"

    # Catalog API
    api_base_url: str = "http://localhost:5000/api"
    request_timeout: float = 30.0
    auth_token: Optional[str] = None

    # Catalog query defaults
    page_size: int = 10
    default_max_price: float = 10000.0

    # Drop fetch results that resolve after a newer request was issued
    discard_stale_responses: bool = True

    # Checkout
    free_shipping_threshold: float = 100.0
    shipping_fee: float = 10.0
    currency: str = "USD"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
