"""
tests/conftest.py

Shared fixtures: filters and cache are process-global, so every test starts clean.
"""

import pytest
from django.core.cache import cache

from stories import hooks


@pytest.fixture(autouse=True)
def _clean_globals():
    hooks.reset_filters()
    cache.clear()
    yield
    hooks.reset_filters()
    cache.clear()
