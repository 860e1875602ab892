"""Helpers for building and inspecting modifier chains."""

from __future__ import annotations

from collections.abc import Callable

from shared.protocols.service import IService

ModifierFactory = Callable[[IService], IService]


def compose(base: IService, *modifiers: ModifierFactory) -> IService:
    """Wrap ``base`` with each factory in turn, innermost first.

    ``compose(base, partial(TireRotation, increment=15), OilChange)`` builds
    ``OilChange(TireRotation(base, increment=15))``. Factories are usually modifier
    classes, or ``functools.partial`` over one to fix its increment.
    """
    service = base
    for factory in modifiers:
        service = factory(service)
    return service


def describe_chain(service: IService) -> list[str]:
    """Return the class name of each link, from the outermost to the base."""
    names = []
    link: IService | None = service
    while link is not None:
        names.append(type(link).__name__)
        link = getattr(link, "wrapped", None)
    return names
