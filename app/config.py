"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central settings – values come from .env or environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-preview-05-20"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Upstream timeouts (seconds). None disables the timeout.
    recommendation_timeout: float = 15.0
    chat_timeout: Optional[float] = None

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    log_level: str = "INFO"
    static_dir: str = "public"


@lru_cache
def get_settings() -> Settings:
    """Return cached singleton settings instance."""
    return Settings()


def setup_logging() -> None:
    """Configure root logger based on settings."""
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
