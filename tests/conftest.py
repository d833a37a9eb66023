"""Shared fixtures for datekit tests."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from datekit import reset_converter
from datekit.cache import FormatterCache
from datekit.converter import DateConverter
from datekit.locales import LocaleFormat
from datekit.settings import Settings

UTC = ZoneInfo("UTC")

# Fixed "now" for elapsed-time tests.
NOW = datetime(2026, 5, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def reset_default_converter():
    """Reset the process-default converter around each test."""
    reset_converter()
    yield
    reset_converter()


@pytest.fixture
def settings() -> Settings:
    """Deterministic settings: English, UTC."""
    return Settings(default_locale=LocaleFormat.ENG, default_timezone="UTC")


@pytest.fixture
def cache(settings: Settings) -> FormatterCache:
    return FormatterCache(settings)


@pytest.fixture
def converter(cache: FormatterCache) -> DateConverter:
    """Converter with a fixed clock."""
    return DateConverter(cache=cache, clock=lambda: NOW)
