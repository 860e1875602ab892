"""CLI for the reading demonstration."""

import sys

import click

from reading.adapters import DeviceAdapter
from reading.config import get_settings
from reading.devices import EReader, PaperBook
from reading.exceptions import AdapterError
from reading.reader import Reader
from shared.logging_config import setup_logging


@click.group()
def cli():
    """A reader who only reads books, handed a book or an e-reader."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json=settings.log_json)


@cli.command()
@click.option(
    "--device",
    type=click.Choice(["paper", "ereader"]),
    default="paper",
    show_default=True,
    help="What to hand the reader. An e-reader goes through the adapter.",
)
@click.option("--pages", type=int, default=None, help="Pages to turn (default from settings).")
def read(device: str, pages: int | None):
    """Have the reader open the readable and turn some pages."""
    settings = get_settings()
    pages = settings.pages if pages is None else pages

    if device == "ereader":
        readable = DeviceAdapter(EReader(settings.device_model))
    else:
        readable = PaperBook(settings.book_title)

    try:
        Reader(settings.reader_name).read(readable, pages=pages)
    except (AdapterError, ValueError) as e:
        click.echo(f"✗ Reading failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"{settings.reader_name} read {pages} page(s) of {readable!r}")


if __name__ == "__main__":
    cli()
