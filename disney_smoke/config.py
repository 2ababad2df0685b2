"""Harness configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Harness settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DISNEY_SMOKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "disney-smoke"
    app_version: str = "0.1.0"
    debug: bool = False

    # Endpoint under test
    api_url: str = "https://api.disneyapi.dev/characters"
    request_timeout: float = 30.0

    # Expectations
    expected_status_code: int = 200
    default_page_size: int = 50
    target_character_name: str = "Mickey Mouse"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
