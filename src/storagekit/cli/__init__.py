"""CLI for storagekit."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from storagekit.cli.commands import blob as _blob_module  # noqa: F401
from storagekit.cli.commands import cors as _cors_module  # noqa: F401
from storagekit.cli.main import app, main


__all__ = ["app", "main"]
