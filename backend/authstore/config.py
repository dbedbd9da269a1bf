"""
Store configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseSettings):
    """Auth store settings from environment variables (AUTH_DB_*)."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_DB_",
        env_file=".env",
        extra="ignore",
    )

    # MongoDB connection
    hosts: list[str] = Field(default=["mongodb:27017"])
    username: str = ""
    password: str = ""
    timeout_milliseconds: int = Field(default=5000, ge=0, le=2**32 - 1)

    # Target collection
    database: str = "auth_db"
    collection: str = "users"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> StoreConfig:
    """Get cached settings instance."""
    return StoreConfig()
