"""A printed book: readable as-is."""

from __future__ import annotations

from loguru import logger


class PaperBook:
    """Direct ``IReadable`` implementation."""

    def __init__(self, title: str):
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def open(self) -> None:
        logger.info("Opening '{}'", self._title)

    def advance(self) -> None:
        logger.info("Turning a page of '{}'", self._title)

    def __repr__(self) -> str:
        return f"PaperBook({self._title!r})"
