"""Capability protocols (interfaces) shared by both demonstrations.

Consumers should type-hint against these protocols, not the concrete
implementations.
"""

from shared.protocols.reading import IDevice, IReadable
from shared.protocols.service import IService

__all__ = ["IDevice", "IReadable", "IService"]
