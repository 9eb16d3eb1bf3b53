"""CORS command for CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from storagekit.cli.formatting import _cors_table
from storagekit.cli.main import app, exit_with_error
from storagekit.core.bucket_info import BucketInfo
from storagekit.core.exceptions import StoragekitError
from storagekit.loading import load_resource


@app.command()
def cors(
    path: Path = typer.Argument(..., help="JSON file holding a buckets resource."),
) -> None:
    """Show the CORS rules of a bucket resource file."""
    try:
        bucket = BucketInfo.from_wire(load_resource(path))  # type: ignore[arg-type]
    except StoragekitError as e:
        exit_with_error(e)

    if not bucket.cors:
        typer.echo(f"No CORS rules configured for bucket '{bucket.name}'.")
        return

    console = Console(force_terminal=True)
    console.print(_cors_table(bucket.cors))
