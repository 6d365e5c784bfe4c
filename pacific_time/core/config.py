"""Package configuration using pydantic-settings."""
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# Get the package directory path
PACKAGE_DIR = Path(__file__).parent.parent
ENV_FILE = PACKAGE_DIR / ".env"


class Settings(BaseSettings):
    """Settings loaded from PACIFIC_TIME_* environment variables."""

    # Logging
    log_level: str = "info"

    # Clock
    fixed_now: Optional[datetime] = None  # naive values are taken as UTC

    model_config = SettingsConfigDict(
        env_prefix="PACIFIC_TIME_",
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance. Override in tests via get_settings.cache_clear()."""
    return Settings()
