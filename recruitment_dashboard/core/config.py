"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "recruitment"
    recruitment_collection: str = "recruitment2025"
    verification_collection: str = "temprecruitment2025"
    mongodb_timeout_ms: int = 5000

    # Listing
    default_page_size: int = 10
    max_page_size: int = 100

    # Analytics
    recent_applications_limit: int = 5
    top_branches_limit: int = 10
    daily_window_days: int = 30

    # CORS - comma-separated, e.g. "http://localhost:3000,http://127.0.0.1:3000"
    allowed_origins: str = "*"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # App
    debug: bool = False

    @property
    def cors_origins(self) -> List[str]:
        """Split ALLOWED_ORIGINS into a list for the CORS middleware"""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
