"""Priced add-ons that wrap another service.

Each modifier holds the service it was built around and adds its own
increment and suffix on top of it. Any service, including an already
wrapped one, can be wrapped again, so callers combine exactly the add-ons
they need:

    >>> service = OilChange(TireRotation(BasicInspection(), increment=15))
    >>> service.cost()
    Decimal('69')
    >>> service.description()
    'Basic inspection, and a tire rotation, and an oil change'

New add-ons are new subclasses (or plain ``ServiceModifier`` instances);
existing classes never change.
"""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from car_service.exceptions import CompositionError
from shared.protocols.service import IService


class ServiceModifier:
    """A service that adds a fixed increment and suffix to a wrapped service.

    Parameters
    ----------
    service:
        The service to wrap. Must satisfy ``IService``; checked here so a bad
        chain fails when it is built rather than when it is priced.
    increment:
        Amount added to the wrapped cost. Defaults to ``default_increment``.
    suffix:
        Text appended to the wrapped description. Defaults to ``default_suffix``.
    """

    default_increment: Decimal = Decimal("0")
    default_suffix: str = ""

    def __init__(
        self,
        service: IService,
        increment: Decimal | int | None = None,
        suffix: str | None = None,
    ):
        if service is None or not isinstance(service, IService):
            raise CompositionError(
                f"{type(self).__name__} needs a service to wrap, got {service!r}"
            )

        amount = self.default_increment if increment is None else increment
        self._increment = Decimal(str(amount))
        if self._increment < 0:
            raise ValueError(f"Increment must be non-negative, got {amount}")

        self._service = service
        self._suffix = self.default_suffix if suffix is None else suffix
        logger.debug("Wrapped {} with {}", type(service).__name__, type(self).__name__)

    @property
    def wrapped(self) -> IService:
        """The service this modifier was built around."""
        return self._service

    @property
    def increment(self) -> Decimal:
        return self._increment

    @property
    def suffix(self) -> str:
        return self._suffix

    def cost(self) -> Decimal:
        return self._increment + self._service.cost()

    def description(self) -> str:
        return self._service.description() + self._suffix

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._service!r}, increment={self._increment})"


class OilChange(ServiceModifier):
    default_increment = Decimal("29")
    default_suffix = ", and an oil change"


class TireRotation(ServiceModifier):
    """Tire rotation add-on.

    Its price has been quoted both as 15 and 35, so it has no built-in
    default: callers pass ``increment``, normally the configured
    ``tire_rotation_cost``.
    """

    default_suffix = ", and a tire rotation"

    def __init__(self, service: IService, increment: Decimal | int, suffix: str | None = None):
        if increment is None:
            raise ValueError("TireRotation needs an explicit increment")
        super().__init__(service, increment, suffix)
