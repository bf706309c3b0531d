"""Validation utilities for Kalends.

This module checks parsed calendar components before they are turned
into an epoch value. Parsed text must name a real calendar moment;
normalization with carry is reserved for arithmetic.

This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.calendar import days_in_month
from kalends.errors import ParseError


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that a component is within an inclusive range.

    Raises:
        ParseError: If value is outside min_val..max_val.

    Examples:
        >>> validate_range("month", 13, 1, 12)
        Traceback (most recent call last):
        ...
        kalends.errors.ParseError: month must be between 1 and 12, got 13
    """
    if value < min_val or value > max_val:
        raise ParseError(f"{name} must be between {min_val} and {max_val}, got {value}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ParseError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ParseError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> None:
    """Validate a full set of parsed calendar components.

    Hour 24 is accepted only as the end-of-day instant 24:00:00.000.

    Raises:
        ParseError: If any component is out of range.
    """
    validate_range("month", month, 1, 12)
    validate_day(year, month, day)
    validate_range("hour", hour, 0, 24)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)
    validate_range("millisecond", millisecond, 0, 999)
    if hour == 24 and (minute or second or millisecond):
        raise ParseError("hour 24 is only valid as 24:00:00.000")


__all__ = [
    "validate_range",
    "validate_day",
    "validate_fields",
]
