"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - Defaults provided for all non-secret settings: runs out-of-the-box with
      in-memory storage, docker-compose supplies DATABASE_URL for the SQL backend
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["memory", "database"] = "memory"

    # Database
    database_url: str = (
        "postgresql+asyncpg://placeshare:placeshare@db:5432/placeshare"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Geocoding (Google Geocoding API)
    geocoding_api_key: str = "geocoding-key-placeholder"
    geocoding_base_url: str = (
        "https://maps.googleapis.com/maps/api/geocode/json"
    )
    geocoding_timeout_seconds: float = 10.0

    # Security
    password_hash_iterations: int = 310_000

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
