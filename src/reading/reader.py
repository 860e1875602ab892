"""The reader: a consumer that depends only on ``IReadable``."""

from __future__ import annotations

from loguru import logger

from reading.exceptions import AdapterError
from shared.protocols.reading import IReadable


class Reader:
    """Someone who opens a readable and turns its pages."""

    def __init__(self, name: str):
        self.name = name

    def read(self, readable: IReadable, pages: int = 1) -> None:
        """Open ``readable`` once, then advance it ``pages`` times."""
        if not isinstance(readable, IReadable):
            raise AdapterError(f"{self.name} cannot read {readable!r}")
        if not isinstance(pages, int) or isinstance(pages, bool) or pages < 0:
            raise ValueError(f"pages must be a non-negative int, got {pages!r}")

        logger.debug("{} starts reading {!r}", self.name, readable)
        readable.open()
        for _ in range(pages):
            readable.advance()
