"""Typer application and shared console."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__

app = typer.Typer(
    name="salarysim",
    help="Simulate log-normal salary populations and measure pay inequality.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"salarysim {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    setup_logging(verbose)


from .commands import config_cmd, simulate, validate  # noqa: E402,F401
