"""Tests for car-service settings."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from car_service.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.base_cost == 25
    assert settings.base_description == "Basic inspection"
    assert settings.oil_change_cost == 29
    assert settings.tire_rotation_cost == 15


def test_tire_rotation_cost_from_env(monkeypatch):
    monkeypatch.setenv("TIRE_ROTATION_COST", "35")
    assert get_settings().tire_rotation_cost == Decimal("35")


def test_negative_cost_rejected(monkeypatch):
    monkeypatch.setenv("OIL_CHANGE_COST", "-1")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
