"""Formatting utilities for displaying resource metadata."""

from __future__ import annotations

from storagekit.core.wire import millis_to_rfc3339


_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def format_size(size: int | None) -> str:
    """Format a byte count for display.

    Args:
        size: Number of bytes, or None if unknown.

    Returns:
        Human readable size:
        - None -> "-"
        - 512 -> "512 B"
        - 1536 -> "1.5 KiB"
    """
    if size is None:
        return "-"
    value = float(size)
    for unit in _UNITS:
        if abs(value) < 1024 or unit == _UNITS[-1]:
            if unit == "B":
                return f"{size} B"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


def format_timestamp(millis: int | None) -> str:
    """Format epoch milliseconds as an RFC 3339 timestamp, or "-" if None."""
    if millis is None:
        return "-"
    return millis_to_rfc3339(millis)
