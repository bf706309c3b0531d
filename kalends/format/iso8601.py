"""ISO 8601 output.

This module renders epoch millisecond values as ISO 8601 strings with
millisecond precision and a ``Z`` suffix, the same shape JavaScript's
``Date.prototype.toISOString`` produces.

Years 0-9999 use four digits. Years outside that range use the expanded
six-digit form with an explicit sign (``+010000``, ``-000001``).

Examples:
    >>> format_iso8601(0)
    '1970-01-01T00:00:00.000Z'

    >>> format_iso8601(1704164645123)
    '2024-01-02T03:04:05.123Z'
"""

from __future__ import annotations

from kalends._internal.calendar import ms_to_fields


def format_year(year: int) -> str:
    """Return the ISO 8601 year, expanded outside 0-9999."""
    if 0 <= year <= 9999:
        return f"{year:04d}"
    return f"{year:+07d}"


def format_iso8601(ms: int) -> str:
    """Format epoch milliseconds as an ISO 8601 UTC string.

    Args:
        ms: Epoch milliseconds.

    Returns:
        A string like ``2024-01-15T14:30:45.000Z``.
    """
    year, month, day, hour, minute, second, millisecond = ms_to_fields(ms)
    return (
        f"{format_year(year)}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}Z"
    )


__all__ = [
    "format_iso8601",
    "format_year",
]
