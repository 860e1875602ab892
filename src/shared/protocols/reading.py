"""Reading protocols: what a reader expects, and what an e-reader offers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IReadable(Protocol):
    """Interface a reader depends on.

    Implementations: PaperBook (direct), DeviceAdapter (over an IDevice).
    """

    def open(self) -> None:
        """Open the readable."""
        ...

    def advance(self) -> None:
        """Turn to the next page."""
        ...


@runtime_checkable
class IDevice(Protocol):
    """Interface of an electronic reading device.

    Same semantics as IReadable under different names.
    Implementations: EReader.
    """

    def power_on(self) -> None: ...

    def press_next(self) -> None: ...
