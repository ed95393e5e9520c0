"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "bookshelf"

    # Logging
    log_level: str = "INFO"

    # Password hashing
    bcrypt_rounds: int = 12

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",  # Development
        "http://localhost:8080",
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
