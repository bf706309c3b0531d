"""Core value types.

This module provides the three value types of Kalends:
    - Datetime: An immutable instant with calendar-aware arithmetic
    - DatetimeInterval: A signed, non-normalized calendar duration
    - DatetimePeriod: A lazy range of instants stepping by an interval
"""

from __future__ import annotations

from kalends.core.datetime import Datetime
from kalends.core.interval import DatetimeInterval
from kalends.core.period import DatetimePeriod

__all__: list[str] = [
    "Datetime",
    "DatetimeInterval",
    "DatetimePeriod",
]
