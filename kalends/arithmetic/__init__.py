"""Arithmetic operations for Kalends.

This module provides the calendar-unit arithmetic that Datetime uses:
    - shift_months / shift_years: month and year shifts with day clamping
    - replace_field: unclamped field replacement with carry

Examples:
    >>> from kalends.arithmetic import shift_months
    >>> from kalends._internal.calendar import fields_to_ms
    >>> shift_months(fields_to_ms(2024, 1, 31), 1) == fields_to_ms(2024, 2, 29)
    True
"""

from __future__ import annotations

from kalends.arithmetic.calendar_ops import (
    replace_field,
    shift_months,
    shift_years,
)

__all__: list[str] = [
    "shift_months",
    "shift_years",
    "replace_field",
]
