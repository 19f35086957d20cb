"""Shared fixtures for unit tests."""

import pytest

from expectly.config import clear_config_cache
from expectly.spy import restore_spies


@pytest.fixture(autouse=True)
def cleanup_spies():
    """Put back anything replaced by spy_on during a test."""
    yield
    restore_spies()


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached project configuration around each test."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def boom():
    """A callable that always raises ``ValueError("boom")``."""

    def boom(*args):
        raise ValueError("boom")

    return boom
