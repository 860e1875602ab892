"""CLI for quoting a car service built from a base inspection and add-ons."""

import sys
from functools import partial

import click
from loguru import logger

from car_service.config import Settings, get_settings
from car_service.exceptions import CompositionError
from car_service.services import BasicInspection, OilChange, TireRotation, compose, describe_chain
from car_service.services.composition import ModifierFactory
from shared.logging_config import setup_logging

ADD_ONS = ("oil-change", "tire-rotation")


def build_factories(settings: Settings) -> dict[str, ModifierFactory]:
    """Map each add-on name to a modifier factory priced from settings."""
    return {
        "oil-change": partial(OilChange, increment=settings.oil_change_cost),
        "tire-rotation": partial(TireRotation, increment=settings.tire_rotation_cost),
    }


@click.group()
def cli():
    """Car-service pricing built by wrapping a base inspection with add-ons."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json=settings.log_json)


@cli.command()
@click.option(
    "--add",
    "add_ons",
    multiple=True,
    type=click.Choice(ADD_ONS),
    help="Add-on to wrap around the service. Repeat to stack; applied in order.",
)
def quote(add_ons: tuple[str, ...]):
    """Print the description and total cost of a service."""
    settings = get_settings()
    factories = build_factories(settings)

    try:
        base = BasicInspection(settings.base_cost, settings.base_description)
        service = compose(base, *(factories[name] for name in add_ons))
    except (CompositionError, ValueError) as e:
        click.echo(f"✗ Could not build service: {e}", err=True)
        sys.exit(1)

    logger.debug("Chain: {}", " -> ".join(describe_chain(service)))
    click.echo(service.description())
    click.echo(f"Total: {service.cost()}")


@cli.command()
def menu():
    """List the base service and available add-ons with their prices."""
    settings = get_settings()
    click.echo(f"{settings.base_description}: {settings.base_cost}")
    click.echo(f"  oil-change: +{settings.oil_change_cost}")
    click.echo(f"  tire-rotation: +{settings.tire_rotation_cost}")


if __name__ == "__main__":
    cli()
