"""Root conftest — shared test configuration."""

import os

import pytest

from fireworks.config import get_settings

# Keep a developer's own environment from leaking into settings tests
os.environ.setdefault("FIREWORKS_LOG_LEVEL", "INFO")
os.environ.setdefault("FIREWORKS_LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
