"""Formatting and parsing of calendar strings.

This module provides functions for converting epoch millisecond values to
and from strings:
    - Token-template formatting (YYYY-MM-DD HH:mm:ss.SSS)
    - ISO 8601 output with millisecond precision
    - Calendar-string parsing (ISO 8601, slash dates, named months)

Functions:
    format_fields: Format calendar fields using a token template.
    format_iso8601: Format epoch milliseconds as an ISO 8601 UTC string.
    parse_datetime_string: Parse a calendar string into epoch milliseconds.

Examples:
    >>> from kalends.format import format_iso8601, parse_datetime_string
    >>> format_iso8601(parse_datetime_string("2024-01-15 14:30"))
    '2024-01-15T14:30:00.000Z'
"""

from __future__ import annotations

from kalends.format.iso8601 import format_iso8601
from kalends.format.parse import parse_datetime_string
from kalends.format.tokens import format_fields

__all__: list[str] = [
    "format_fields",
    "format_iso8601",
    "parse_datetime_string",
]
