"""CLI entry point for storagekit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler


if TYPE_CHECKING:
    from storagekit.core.exceptions import StoragekitError


app = typer.Typer(
    name="storagekit",
    help="Inspect cloud object-storage resource files.",
    no_args_is_help=True,
)


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through Rich.

    Args:
        verbose: Log at DEBUG level when True, WARNING otherwise.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log decoding details to stderr.",
    ),
) -> None:
    """Inspect cloud object-storage resource files."""
    configure_logging(verbose)


def exit_with_error(error: StoragekitError) -> NoReturn:
    """Print an error and its recovery hint to stderr, then exit with code 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()
