"""Calendar-unit arithmetic on epoch millisecond values.

This module implements month and year shifting with day clamping, and
unclamped field replacement.

Clamping behavior:
    When shifting by months or years lands on a day that does not exist
    in the target month (e.g., Jan 31 + 1 month), the day is clamped to
    the last valid day of that month instead of rolling into the next.

Examples:
    2024-01-31 + 1 month  -> 2024-02-29  # leap year
    2023-01-31 + 1 month  -> 2023-02-28
    2024-01-31 - 1 month  -> 2023-12-31
    2020-02-29 + 1 year   -> 2021-02-28
"""

from __future__ import annotations

from kalends._internal.calendar import (
    days_in_month,
    fields_to_ms,
    ms_to_fields,
)


def shift_months(ms: int, months: int) -> int:
    """Shift an epoch millisecond value by whole months, clamping the day.

    The original day of month is remembered, the day is set to 1, the
    month is advanced, and the day is restored as
    min(original_day, last_day_of_result_month). The time of day is kept.

    Args:
        ms: Epoch milliseconds.
        months: Months to add (negative to subtract).

    Returns:
        The shifted epoch milliseconds.

    Examples:
        >>> shift_months(fields_to_ms(2024, 1, 31), 1) == fields_to_ms(2024, 2, 29)
        True
        >>> shift_months(fields_to_ms(2024, 3, 31), -1) == fields_to_ms(2024, 2, 29)
        True
    """
    year, month, day, hour, minute, second, millisecond = ms_to_fields(ms)

    total_months = year * 12 + (month - 1) + months
    year, month_index = divmod(total_months, 12)
    month = month_index + 1

    day = min(day, days_in_month(year, month))
    return fields_to_ms(year, month, day, hour, minute, second, millisecond)


def shift_years(ms: int, years: int) -> int:
    """Shift an epoch millisecond value by whole years, clamping the day.

    Examples:
        >>> shift_years(fields_to_ms(2020, 2, 29), 1) == fields_to_ms(2021, 2, 28)
        True
    """
    return shift_months(ms, years * 12)


def replace_field(ms: int, **fields: int) -> int:
    """Replace calendar fields without clamping.

    Out-of-range values normalize by carrying into larger units, so
    replacing day=32 in January yields February 1.

    Args:
        ms: Epoch milliseconds.
        **fields: Any of year, month, day, hour, minute, second, millisecond.

    Returns:
        The resulting epoch milliseconds.

    Examples:
        >>> replace_field(fields_to_ms(2024, 1, 31), month=2) == fields_to_ms(2024, 3, 2)
        True
    """
    names = ("year", "month", "day", "hour", "minute", "second", "millisecond")
    unknown = set(fields) - set(names)
    if unknown:
        raise ValueError(f"unknown calendar field(s): {', '.join(sorted(unknown))}")
    current = dict(zip(names, ms_to_fields(ms)))
    current.update(fields)
    return fields_to_ms(*(current[name] for name in names))


__all__ = [
    "shift_months",
    "shift_years",
    "replace_field",
]
