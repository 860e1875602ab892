"""Fixtures for car-service tests."""

from __future__ import annotations

from decimal import Decimal
from functools import partial

import pytest

from car_service.services import TireRotation


@pytest.fixture()
def tire_rotation_cost() -> Decimal:
    """Tire rotation price used by the worked examples."""
    return Decimal("15")


@pytest.fixture()
def tire_rotation(tire_rotation_cost):
    """TireRotation factory priced at ``tire_rotation_cost``."""
    return partial(TireRotation, increment=tire_rotation_cost)
