"""Application settings loaded from environment variables.

Provider configuration (databases, brokers, event store) lives in
``domain.toml`` next to ``domain.py``; this module only holds the settings
the HTTP and auth layers need.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HTTP and auth settings. List values are read from JSON, e.g. ``CORS_ORIGINS='["https://shop.example"]'``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # JWT Authentication
    jwt_secret: str = "CHANGE-ME-JWT-SECRET"
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60

    # CORS
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
