"""
Shared pytest fixtures.
"""

import pytest
import structlog

from src.config import get_settings


@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep settings cache and structlog configuration test-local."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
