"""
Shared fixtures.

Settings and loaded profiles are cached per process; the fixtures below reset
those caches so environment overrides in one test never leak into another.
"""

import pytest

from indexdef.builder import IndexDefinitionBuilder
from indexdef.config.settings import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def builder() -> IndexDefinitionBuilder:
    """A fresh root builder with the default root type."""
    return IndexDefinitionBuilder()
