"""
Application configuration using Pydantic Settings.
Loads from environment variables with fallbacks.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    # HTTP
    HISCORES_TIMEOUT: float = 20.0

    # Logging
    LOG_DIR: str = "logs"
    LOG_FILE: str = "hiscores.log"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


settings = get_settings()
