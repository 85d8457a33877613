"""Fixtures for localekit.logging tests."""

from unittest.mock import Mock

import pytest
import structlog

from localekit.configuration import Settings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog's default configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings
