"""
Application configuration using Pydantic Settings.
"""

import logging
import os
from functools import lru_cache
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
    app_name: str = "Loan Calculator Engine"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # DSCR qualification bands (ratio, not percent)
    dscr_excellent_threshold: float = 1.25
    dscr_good_threshold: float = 1.0
    dscr_fair_threshold: float = 0.8

    # Conventional private mortgage insurance
    conventional_pmi_annual_percent: float = 0.5
    pmi_down_payment_threshold_percent: float = 20.0

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = None) -> None:
    """Apply the configured log level to the root logger."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
