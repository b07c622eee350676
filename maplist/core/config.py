from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load .env early for local development
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True)

    app_name: str = os.getenv("APP_NAME", "MapList Parser")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_dir: str = os.getenv("LOG_DIR", "./logs")

    # Parser input limits
    max_input_chars: int = int(os.getenv("MAX_INPUT_CHARS", "500000"))

    # Throttling for /parse endpoints
    parse_rate_limit: int = int(os.getenv("PARSE_RATE_LIMIT", "60"))
    parse_rate_window_seconds: int = int(os.getenv("PARSE_RATE_WINDOW_SECONDS", "60"))
    # Only behind a proxy that overwrites X-Forwarded-For
    trust_forwarded_for: bool = os.getenv("TRUST_FORWARDED_FOR", "false").lower() in {"1", "true", "yes"}


settings = Settings()
