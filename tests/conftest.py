"""Pytest configuration and shared fixtures."""

import pytest

from hoshi.config import reset_settings
from hoshi.logging_config import configure_logging


def pytest_configure(config):
    """Configure pytest markers and quiet logging."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    configure_logging(level="WARNING", colors=False, propagate=True)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Make every test read settings from a clean environment."""
    for name in ("HOSHI_MAX_LISTENERS", "HOSHI_LOG_LEVEL", "HOSHI_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def bus():
    from hoshi.events import EventBus

    return EventBus()
