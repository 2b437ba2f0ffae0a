"""Shared fixtures for the test suite."""

import pytest

from addtocal.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Start every test from default settings, ignoring the caller's environment."""
    for name in ("APP_TITLE", "LOCAL_TIMEZONE", "API_HOST", "API_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
