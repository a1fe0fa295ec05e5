"""Pytest configuration: project root on sys.path, cached state reset per test."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numwords.config import get_settings  # noqa: E402
from numwords.registry import clear_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings and converters built from its own environment."""
    get_settings.cache_clear()
    clear_cache()
    yield
    get_settings.cache_clear()
    clear_cache()
