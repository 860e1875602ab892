"""Shared fixtures for all tests."""

from __future__ import annotations

import pytest
from loguru import logger

from car_service.config import get_settings as get_car_service_settings
from reading.config import get_settings as get_reading_settings


@pytest.fixture()
def log_messages():
    """Collect loguru messages emitted during a test, as plain strings."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so monkeypatched environment variables take effect."""
    get_car_service_settings.cache_clear()
    get_reading_settings.cache_clear()
    yield
    get_car_service_settings.cache_clear()
    get_reading_settings.cache_clear()
