"""Calendar utilities for Kalends.

This module provides internal functions for proleptic Gregorian calendar
calculations: day numbers relative to the Unix epoch, field normalization
with carry, leap years and week numbering.

Day number 0 = 1970-01-01. Negative day numbers are earlier dates.

This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_400_YEARS,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    UNIX_EPOCH_ORDINAL,
    UNIX_EPOCH_WEEKDAY,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is ordinal 1).

    Python's floor division makes the formula valid for year 0 and
    negative years as well.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (0001-01-01 is ordinal 1) to year, month, day.

    Args:
        ordinal: The ordinal day number.

    Returns:
        Tuple of (year, month, day).
    """
    if ordinal <= 0:
        # Shift into positive ordinals by whole 400-year cycles, which
        # repeat exactly in the Gregorian calendar.
        cycles = (-ordinal) // DAYS_PER_400_YEARS + 1
        year, month, day = ordinal_to_ymd(ordinal + cycles * DAYS_PER_400_YEARS)
        return (year - cycles * 400, month, day)

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = doy_to_md(year, n + 1)
    return (year, month, day)


def doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to month and day."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01."""
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day."""
    return ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)


def day_of_week(days: int) -> int:
    """Return the weekday of a day number (0=Sunday, 6=Saturday)."""
    return (days + UNIX_EPOCH_WEEKDAY) % 7


def fields_to_ms(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Combine calendar fields into epoch milliseconds, carrying overflow.

    Every field may be out of its natural range; the excess carries into
    the next larger unit exactly like ordinary calendar normalization:
    month 13 is January of the following year, day 32 of January is
    February 1, hour -1 is 23:00 of the previous day.

    Args:
        year: The year.
        month: The month, 1-based, any integer.
        day: The day of month, any integer.
        hour: Hours, any integer.
        minute: Minutes, any integer.
        second: Seconds, any integer.
        millisecond: Milliseconds, any integer.

    Returns:
        Milliseconds since 1970-01-01T00:00:00.000Z.

    Examples:
        >>> fields_to_ms(1970, 1, 1)
        0
        >>> fields_to_ms(2024, 1, 32) == fields_to_ms(2024, 2, 1)
        True
        >>> fields_to_ms(2023, 13, 1) == fields_to_ms(2024, 1, 1)
        True
    """
    carry, month_index = divmod(month - 1, 12)
    days = ymd_to_days(year + carry, month_index + 1, 1) + (day - 1)
    return (
        days * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )


def ms_to_fields(ms: int) -> tuple[int, int, int, int, int, int, int]:
    """Split epoch milliseconds into calendar fields.

    Returns:
        Tuple of (year, month, day, hour, minute, second, millisecond).
    """
    days, rem = divmod(ms, MS_PER_DAY)
    year, month, day = days_to_ymd(days)
    hour, rem = divmod(rem, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millisecond = divmod(rem, MS_PER_SECOND)
    return (year, month, day, hour, minute, second, millisecond)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year."""
    return days_before_month(year, month) + day


def week_of_year(year: int, month: int, day: int, first_day: int = 0) -> int:
    """Return the week number using the nearest-Thursday rule.

    The ISO rule (week 1 is the week holding the year's first Thursday)
    is generalized to a configurable first day of week: the weekday index
    is remapped so that first_day becomes day 0 before shifting.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of month.
        first_day: First day of the week (0=Sunday, 1=Monday, ...).

    Returns:
        The week number (1-53).

    Examples:
        >>> week_of_year(2024, 1, 1)
        1
        >>> week_of_year(2023, 12, 31)
        52
        >>> week_of_year(2024, 1, 1, first_day=1)
        52
    """
    days = ymd_to_days(year, month, day)
    day_num = day_of_week(days)
    if first_day != 0:
        day_num = (day_num - first_day + 7) % 7

    shifted = days + 4 - (day_num or 7)
    shifted_year, _, _ = days_to_ymd(shifted)
    year_start = ymd_to_days(shifted_year, 1, 1)

    # ceil((elapsed + 1) / 7) with integer math
    return -(-(shifted - year_start + 1) // 7)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "doy_to_md",
    "ymd_to_days",
    "days_to_ymd",
    "day_of_week",
    "fields_to_ms",
    "ms_to_fields",
    "day_of_year",
    "week_of_year",
]
