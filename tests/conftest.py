"""Pytest configuration and fixtures."""

import pytest

from chesslegality.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so environment overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
