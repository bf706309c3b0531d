"""TimeUnit enumeration for calendar units.

This module provides the TimeUnit enum naming the units that Datetime
snaps to, diffs in, and that the relative-string grammar understands.
"""

from __future__ import annotations

from enum import Enum

from kalends._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH_APPROX,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR_APPROX,
)


class TimeUnit(Enum):
    """Calendar units from milliseconds up to years.

    The value of each member is the canonical unit key used by string
    APIs (``dt.start_of("month")``) and by locale unit tables.

    Note:
        YEAR and MONTH have no fixed length. to_milliseconds() returns
        the fixed approximations (365.25 and 30.44 days), suitable for
        display and estimation only.

    Examples:
        >>> TimeUnit.HOUR.to_milliseconds()
        3600000

        >>> TimeUnit.from_name("mins")
        <TimeUnit.MINUTE: 'minute'>
    """

    MILLISECOND = "ms"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def from_name(cls, name: str | TimeUnit) -> TimeUnit:
        """Resolve a unit name, accepting aliases and plural forms.

        Args:
            name: A TimeUnit, or a name such as "day", "days", "min", "sec".

        Returns:
            The matching TimeUnit.

        Raises:
            ValueError: If the name is not a known unit.
        """
        if isinstance(name, TimeUnit):
            return name
        key = name.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        if key.endswith("s") and key[:-1] in _ALIASES:
            return _ALIASES[key[:-1]]
        raise ValueError(f"unknown time unit: {name!r}")

    def to_milliseconds(self) -> int:
        """Return the (possibly approximate) length of one unit in ms."""
        return _UNIT_MS[self]


_ALIASES: dict[str, TimeUnit] = {
    "ms": TimeUnit.MILLISECOND,
    "millisecond": TimeUnit.MILLISECOND,
    "sec": TimeUnit.SECOND,
    "second": TimeUnit.SECOND,
    "min": TimeUnit.MINUTE,
    "minute": TimeUnit.MINUTE,
    "hour": TimeUnit.HOUR,
    "day": TimeUnit.DAY,
    "week": TimeUnit.WEEK,
    "month": TimeUnit.MONTH,
    "year": TimeUnit.YEAR,
}

_UNIT_MS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: MS_PER_SECOND,
    TimeUnit.MINUTE: MS_PER_MINUTE,
    TimeUnit.HOUR: MS_PER_HOUR,
    TimeUnit.DAY: MS_PER_DAY,
    TimeUnit.WEEK: MS_PER_WEEK,
    TimeUnit.MONTH: MS_PER_MONTH_APPROX,
    TimeUnit.YEAR: MS_PER_YEAR_APPROX,
}


__all__ = ["TimeUnit"]
