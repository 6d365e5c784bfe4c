"""Logging setup for applications embedding pacific_time."""
import logging
from typing import Optional

from pacific_time.core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the package format.

    Falls back to the configured log level (PACIFIC_TIME_LOG_LEVEL) when no
    level is given.
    """
    level = level or get_settings().log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at {level.upper()}")
