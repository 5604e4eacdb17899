"""Pytest configuration and fixtures."""

import os

import pytest

from core import Settings, create_container, get_settings
from statemachines import InputTypeCodeMap

from fakes import scenario_session


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["RIVE_PARSER_LOG_LEVEL"] = "DEBUG"
    get_settings.cache_clear()


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings(load_timeout=1.0)


@pytest.fixture
def di_container(settings):
    """Dependency injection container for testing."""
    return create_container(settings)


# ============================================================================
# Runtime Fixtures
# ============================================================================

@pytest.fixture
def session():
    """Loaded session for the Main/Settings scenario."""
    return scenario_session()


@pytest.fixture
def code_map():
    """Fresh per-parse input code map."""
    return InputTypeCodeMap()
