"""Shared fixtures for the bs_calendar test suite."""

import pytest
from django.core.cache import cache

from bs_calendar.language import set_language
from bs_calendar.nepali_datetime import NepaliDateTime


@pytest.fixture(autouse=True)
def reset_state():
    """Every test starts with the configured language and an empty cache."""
    set_language(None)
    cache.clear()
    yield
    set_language(None)
    cache.clear()


@pytest.fixture
def gorkha_earthquake():
    # 2015-04-25 11:56:25 AD, a Saturday
    return NepaliDateTime.parse('2072-01-12T11:56:25')
