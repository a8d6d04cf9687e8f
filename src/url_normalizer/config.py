"""Library configuration via pydantic-settings."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, loaded from ``URL_NORMALIZER_*`` env vars / .env file."""

    log_level: str = "INFO"
    environment: str = "development"
    presets_path: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="URL_NORMALIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Module-level singleton; imported everywhere.
settings = Settings()
