"""Test fixtures for pacific_time tests."""
import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from pacific_time.core.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop PACIFIC_TIME_* env vars and the cached Settings around each test."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("PACIFIC_TIME_")}
    with patch.dict(os.environ, env, clear=True):
        get_settings.cache_clear()
        yield
    get_settings.cache_clear()


@pytest.fixture
def pinned_clock():
    """Pin the default clock to a PDT afternoon (2024-07-04 19:00 UTC)."""
    with patch.dict(os.environ, {"PACIFIC_TIME_FIXED_NOW": "2024-07-04T19:00:00Z"}):
        get_settings.cache_clear()
        yield datetime(2024, 7, 4, 19, tzinfo=timezone.utc)
