"""Adapter exposing an ``IDevice`` as an ``IReadable``.

The reader only knows how to open a book and turn its pages. This adapter is
the single place that translates those calls to a device's buttons; a new
kind of device gets a new adapter, and the reader never changes.
"""

from __future__ import annotations

from loguru import logger

from reading.exceptions import AdapterError
from shared.protocols.reading import IDevice


class DeviceAdapter:
    """``IReadable`` that forwards to the ``IDevice`` it was built with."""

    def __init__(self, device: IDevice):
        if device is None or not isinstance(device, IDevice):
            raise AdapterError(f"DeviceAdapter needs a device, got {device!r}")
        self._device = device

    @property
    def device(self) -> IDevice:
        return self._device

    def open(self) -> None:
        logger.debug("open -> {}.power_on", type(self._device).__name__)
        self._device.power_on()

    def advance(self) -> None:
        logger.debug("advance -> {}.press_next", type(self._device).__name__)
        self._device.press_next()

    def __repr__(self) -> str:
        return f"DeviceAdapter({self._device!r})"
