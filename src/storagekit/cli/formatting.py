"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from storagekit.core.formatting import format_size, format_timestamp


if TYPE_CHECKING:
    from collections.abc import Iterable

    from storagekit.core.blob_info import BlobInfo
    from storagekit.core.cors import Cors


def _format_optional(value: object) -> Text:
    """Render None as a dimmed dash."""
    if value is None:
        return Text("-", style="dim")
    return Text(str(value))


def _join(values: Iterable[object] | None) -> Text:
    """Render a sequence as a comma separated list; None as a dash."""
    if values is None:
        return Text("-", style="dim")
    return Text(", ".join(str(v) for v in values))


def _blob_table(blob: BlobInfo) -> Table:
    """Build a Field/Value table for an object's metadata."""
    table = Table()
    table.add_column("Field")
    table.add_column("Value")

    table.add_row("Bucket", blob.bucket)
    table.add_row("Name", blob.name)
    table.add_row("Size", format_size(blob.size))
    table.add_row("Content type", _format_optional(blob.content_type))
    table.add_row("Content encoding", _format_optional(blob.content_encoding))
    table.add_row("Cache control", _format_optional(blob.cache_control))
    table.add_row("Generation", _format_optional(blob.generation))
    table.add_row("Metageneration", _format_optional(blob.metageneration))
    table.add_row("MD5", _format_optional(blob.md5))
    table.add_row("CRC32C", _format_optional(blob.crc32c))
    table.add_row("Updated", format_timestamp(blob.update_time))
    table.add_row("Owner", _format_optional(blob.owner))
    if blob.acl is not None:
        grants = (f"{acl.entity}:{acl.role.value}" for acl in blob.acl)
        table.add_row("ACL", _join(grants))
    if blob.metadata:
        for key, value in sorted(blob.metadata.items()):
            table.add_row(f"metadata.{key}", _format_optional(value))
    return table


def _cors_table(rules: Iterable[Cors]) -> Table:
    """Build a table with one row per CORS rule."""
    table = Table()
    table.add_column("#")
    table.add_column("Max age")
    table.add_column("Methods")
    table.add_column("Origins")
    table.add_column("Response headers")

    for index, rule in enumerate(rules, 1):
        table.add_row(
            str(index),
            _format_optional(rule.max_age_seconds),
            _join(rule.methods),
            _join(rule.origins),
            _join(rule.response_headers),
        )
    return table
