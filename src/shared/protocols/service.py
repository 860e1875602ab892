"""Service protocol."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class IService(Protocol):
    """Interface for a priced car service.

    Implementations: BasicInspection (terminal), ServiceModifier and its
    variants OilChange and TireRotation (wrapping).
    """

    def cost(self) -> Decimal:
        """Return the total price of the service."""
        ...

    def description(self) -> str:
        """Return a human-readable description of the service."""
        ...
