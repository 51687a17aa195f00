"""Configuration management using Pydantic Settings"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="VENDING_MACHINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Currency catalog
    currencies_file: Optional[Path] = None  # None uses the bundled definitions
    default_currency: str = "USD"

    # Service
    service_name: str = "vending-machine"
    log_level: str = "WARNING"

    # Metrics (node-exporter textfile collector)
    metrics_textfile: Optional[Path] = None


settings = Settings()
