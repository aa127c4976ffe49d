"""Shared fixtures."""

from unittest.mock import MagicMock

import pytest

from scvmongo.config import get_settings


@pytest.fixture
def collection() -> MagicMock:
    """Collection double; tests attach AsyncMocks for the calls they expect."""
    mock = MagicMock()
    mock.name = "widgets"
    return mock


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
