"""Terminal service that anchors every composition chain."""

from __future__ import annotations

from decimal import Decimal


class BasicInspection:
    """Base service with a fixed price and description. Wraps nothing."""

    def __init__(self, cost: Decimal | int = 25, description: str = "Basic inspection"):
        self._cost = Decimal(str(cost))
        if self._cost < 0:
            raise ValueError(f"Base cost must be non-negative, got {cost}")
        self._description = description

    def cost(self) -> Decimal:
        return self._cost

    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"BasicInspection(cost={self._cost}, description={self._description!r})"
