"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from typing import List
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Banking Demo"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["http://localhost:5173"]

    # JWT verification (tokens are issued by the identity provider)
    jwt_secret_key: str = "CHANGE-ME-IN-PRODUCTION-USE-LONG-RANDOM-STRING"
    jwt_algorithm: str = "HS256"

    # Remote banking backend
    backend_url: str = "http://localhost:4943"
    backend_timeout_seconds: float = 5.0

    # Display
    display_timezone: str = "UTC"
    currency_symbol: str = "$"
    recent_transfers_limit: int = 5

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def display_tz(self) -> ZoneInfo:
        return ZoneInfo(self.display_timezone)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
