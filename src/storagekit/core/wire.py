"""Helpers shared by the wire (JSON API resource) conversions.

The JSON API distinguishes three states for a clearable field: the key is
absent (not provided), the key holds ``null`` (clear the field), or the key
holds a value. Models keep the middle state as the ``CLEARED`` sentinel and
collapse it back to ``None`` in their public accessors.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Final, Literal, TypeVar

from storagekit.core.exceptions import WireFormatError


_T = TypeVar("_T")

_EPOCH: Final = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI: Final = timedelta(milliseconds=1)


class _Cleared(Enum):
    CLEARED = "CLEARED"

    def __repr__(self) -> str:
        return "CLEARED"


CLEARED: Final = _Cleared.CLEARED
"""Marker for a field that was explicitly set to None."""

Cleared = Literal[_Cleared.CLEARED]


def clearable(value: _T | None) -> _T | Cleared:
    """Return value, or CLEARED in place of None."""
    return CLEARED if value is None else value


def is_cleared(value: object) -> bool:
    """Check whether value is the CLEARED marker."""
    return value is CLEARED


def collapse(value: _T | Cleared | None) -> _T | None:
    """Return None for CLEARED, the value otherwise."""
    return None if value is CLEARED else value


def put_clearable(
    resource: dict[str, object], key: str, value: object | Cleared | None
) -> None:
    """Write a tri-state field into a wire resource.

    Unset (None) leaves the key out, CLEARED writes an explicit null.
    """
    if value is CLEARED:
        resource[key] = None
    elif value is not None:
        resource[key] = value


def millis_to_rfc3339(millis: int, field: str = "timestamp") -> str:
    """Format epoch milliseconds as an RFC 3339 UTC timestamp.

    Args:
        millis: Milliseconds since the epoch, between years 0001 and 9999.
        field: Wire field name, used in the error.

    Raises:
        WireFormatError: If millis falls outside the representable years.

    Example:
        >>> millis_to_rfc3339(1_420_070_400_123)
        '2015-01-01T00:00:00.123Z'
    """
    try:
        moment = _EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise WireFormatError(
            f"Timestamp out of range in '{field}': {millis!r}",
            field=field,
            value=millis,
            cause=e,
        ) from e
    return (
        f"{moment.year:04d}-{moment:%m-%dT%H:%M:%S}"
        f".{moment.microsecond // 1000:03d}Z"
    )


def rfc3339_to_millis(value: str, field: str) -> int:
    """Parse an RFC 3339 timestamp into epoch milliseconds.

    Timestamps without an offset are read as UTC.

    Args:
        value: Timestamp string from the resource.
        field: Wire field name, used in the error.

    Raises:
        WireFormatError: If value is not a valid timestamp.
    """
    try:
        moment = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise WireFormatError(
            f"Invalid timestamp in '{field}': {value!r}",
            field=field,
            value=value,
            cause=e,
        ) from e
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - _EPOCH) // _ONE_MILLI


def int64_to_wire(value: int) -> str:
    """Encode an integer the way the JSON API encodes int64/uint64 fields."""
    return str(value)


def int64_from_wire(value: str | int | float, field: str) -> int:
    """Decode a JSON API int64 field, which may arrive as a string or a number.

    Raises:
        WireFormatError: If value is not an integer. Booleans and fractional
            numbers are rejected rather than truncated.
    """
    if isinstance(value, bool) or (
        isinstance(value, float) and not value.is_integer()
    ):
        raise WireFormatError(
            f"Invalid integer in '{field}': {value!r}", field=field, value=value
        )
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise WireFormatError(
            f"Invalid integer in '{field}': {value!r}",
            field=field,
            value=value,
            cause=e,
        ) from e
