"""Token-template formatting.

This module formats calendar fields through a small template language.
Tokens are replaced in a single left-to-right pass, so each token is
substituted exactly once and the digits it produces are never re-read as
another token. Any text that is not a token passes through unchanged.

Supported Tokens:
    YYYY - Year, zero-padded to 4 digits (e.g., 2024, 0099)
    MM   - Month, 2 digits (01-12)
    DD   - Day of month, 2 digits (01-31)
    HH   - Hour, 24-hour, 2 digits (00-23)
    mm   - Minute, 2 digits (00-59)
    ss   - Second, 2 digits (00-59)
    SSS  - Millisecond, 3 digits (000-999)

Examples:
    >>> format_fields((2024, 1, 2, 3, 4, 5, 123), "YYYY-MM-DD HH:mm:ss.SSS")
    '2024-01-02 03:04:05.123'

    >>> format_fields((2024, 1, 2, 3, 4, 5, 123), "FOO-BAR")
    'FOO-BAR'
"""

from __future__ import annotations

import re

# Longest tokens first so "SSS" is not read as something shorter.
_TOKEN_PATTERN = re.compile(r"YYYY|SSS|MM|DD|HH|mm|ss")

Fields = tuple[int, int, int, int, int, int, int]


def _format_year(year: int) -> str:
    if year >= 0:
        return f"{year:04d}"
    return f"{year:05d}"  # Include minus sign


def format_fields(fields: Fields, fmt: str) -> str:
    """Format calendar fields using a token template.

    Args:
        fields: (year, month, day, hour, minute, second, millisecond).
        fmt: The template.

    Returns:
        The formatted string.
    """
    year, month, day, hour, minute, second, millisecond = fields
    values = {
        "YYYY": _format_year(year),
        "MM": f"{month:02d}",
        "DD": f"{day:02d}",
        "HH": f"{hour:02d}",
        "mm": f"{minute:02d}",
        "ss": f"{second:02d}",
        "SSS": f"{millisecond:03d}",
    }
    return _TOKEN_PATTERN.sub(lambda m: values[m.group(0)], fmt)


__all__ = [
    "format_fields",
]
