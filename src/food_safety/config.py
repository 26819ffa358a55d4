"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_store: bool = False
    off_base_url: str = "https://world.openfoodfacts.org"
    off_user_agent: str = "FoodSafety/1.0 (contact@example.com)"
    high_threshold_ratio: float = 1.5
    product_cache_ttl_seconds: int = 86400
    search_cache_ttl_seconds: int = 3600
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
