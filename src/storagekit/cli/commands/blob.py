"""Blob command for CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from storagekit.cli.formatting import _blob_table
from storagekit.cli.main import app, exit_with_error
from storagekit.config import StorageOptions
from storagekit.core.blob_info import BlobInfo
from storagekit.core.exceptions import StoragekitError
from storagekit.loading import load_resource


@app.command()
def blob(
    path: Path = typer.Argument(..., help="JSON file holding an objects resource."),
    url: bool = typer.Option(
        False,
        "--url",
        "-u",
        help="Also print the object's JSON API URL.",
    ),
) -> None:
    """Show the metadata held in an object resource file."""
    try:
        info = BlobInfo.from_wire(load_resource(path))  # type: ignore[arg-type]
    except StoragekitError as e:
        exit_with_error(e)

    console = Console(force_terminal=True)
    console.print(_blob_table(info))

    if url:
        options = StorageOptions.from_env()
        typer.echo(options.object_url(info.bucket, info.name))
