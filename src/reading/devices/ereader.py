"""An electronic reader. Same job as a book, different buttons."""

from __future__ import annotations

from loguru import logger


class EReader:
    """``IDevice`` implementation. Not an ``IReadable``; wrap it in a DeviceAdapter."""

    def __init__(self, model: str):
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def power_on(self) -> None:
        logger.info("Powering on {}", self._model)

    def press_next(self) -> None:
        logger.info("Pressing next on {}", self._model)

    def __repr__(self) -> str:
        return f"EReader({self._model!r})"
