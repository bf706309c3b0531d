"""DatetimeInterval class representing a signed calendar duration.

This module provides the DatetimeInterval class: seven signed fields from
years down to milliseconds, stored exactly as given.

Each field name does double duty. Read from an instance it is the field
value; called on the class it is a named constructor setting exactly that
field:

    >>> DatetimeInterval.days(3)
    DatetimeInterval(days=3)
    >>> DatetimeInterval.days(3).days
    3
"""

from __future__ import annotations

from typing import Any, Callable

from kalends._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH_APPROX,
    MS_PER_SECOND,
    MS_PER_YEAR_APPROX,
)
from kalends.locales import get_locale

Number = int | float

# Field name -> locale unit key, in rendering order
_FIELDS: tuple[tuple[str, str], ...] = (
    ("years", "year"),
    ("months", "month"),
    ("days", "day"),
    ("hours", "hour"),
    ("minutes", "minute"),
    ("seconds", "second"),
    ("milliseconds", "ms"),
)


class _Field:
    """Descriptor: field value on instances, named constructor on the class."""

    __slots__ = ("name", "slot")

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.slot = f"_{name}"

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self._constructor(owner)
        return getattr(instance, self.slot)

    def _constructor(self, owner: type) -> Callable[[Number], DatetimeInterval]:
        name = self.name

        def construct(value: Number) -> DatetimeInterval:
            return owner(**{name: value})

        construct.__name__ = name
        construct.__doc__ = f"Create an interval of {name} with every other field zero."
        return construct


class DatetimeInterval:
    """A signed calendar duration with year through millisecond fields.

    Unlike an exact span of milliseconds, an interval keeps calendar units
    such as "1 month" as they are: applied to a Datetime, the month is
    shifted with day clamping rather than by a fixed number of days.

    The fields are stored as-is without normalization. For example,
    DatetimeInterval(minutes=90) remains 90 minutes rather than being
    converted to 1 hour and 30 minutes. Arithmetic is field-wise.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).
        hours: Number of hours (can be negative).
        minutes: Number of minutes (can be negative).
        seconds: Number of seconds (can be negative).
        milliseconds: Number of milliseconds (can be negative).

    Examples:
        >>> i = DatetimeInterval(years=1, months=2)
        >>> i.months
        2

        >>> DatetimeInterval.minutes(90).for_humans()
        '90 minutes'

        >>> (DatetimeInterval.days(1) + DatetimeInterval.hours(36)).hours
        36
    """

    __slots__ = (
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_milliseconds",
    )

    years = _Field()
    months = _Field()
    days = _Field()
    hours = _Field()
    minutes = _Field()
    seconds = _Field()
    milliseconds = _Field()

    def __init__(
        self,
        years: Number = 0,
        months: Number = 0,
        days: Number = 0,
        hours: Number = 0,
        minutes: Number = 0,
        seconds: Number = 0,
        milliseconds: Number = 0,
    ) -> None:
        """Create an interval from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> DatetimeInterval(days=-3)
            DatetimeInterval(days=-3)
        """
        self._years = years
        self._months = months
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._milliseconds = milliseconds

    @property
    def is_zero(self) -> bool:
        """Return True if every field is zero.

        Examples:
            >>> DatetimeInterval().is_zero
            True
            >>> DatetimeInterval(milliseconds=1).is_zero
            False
        """
        return not any(self._values())

    def _values(self) -> tuple[Number, ...]:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    def add(self, other: DatetimeInterval) -> DatetimeInterval:
        """Return the field-wise sum of two intervals, without carrying.

        Examples:
            >>> DatetimeInterval(minutes=50).add(DatetimeInterval(minutes=20))
            DatetimeInterval(minutes=70)
        """
        return DatetimeInterval(*(a + b for a, b in zip(self._values(), other._values())))

    def subtract(self, other: DatetimeInterval) -> DatetimeInterval:
        """Return the field-wise difference of two intervals, without carrying.

        Examples:
            >>> DatetimeInterval(years=2).subtract(DatetimeInterval(months=6))
            DatetimeInterval(years=2, months=-6)
        """
        return DatetimeInterval(*(a - b for a, b in zip(self._values(), other._values())))

    def to_milliseconds(self) -> Number:
        """Return an approximate length in milliseconds.

        Uses fixed approximations: a year is 365.25 days, a month is
        30.44 days and a day is 24 hours. Suitable for display and
        estimation, not for exact calendar math.

        Examples:
            >>> DatetimeInterval(days=1, seconds=1).to_milliseconds()
            86401000
            >>> DatetimeInterval(years=1).to_milliseconds()
            31557600000
        """
        return (
            self._years * MS_PER_YEAR_APPROX
            + self._months * MS_PER_MONTH_APPROX
            + self._days * MS_PER_DAY
            + self._hours * MS_PER_HOUR
            + self._minutes * MS_PER_MINUTE
            + self._seconds * MS_PER_SECOND
            + self._milliseconds
        )

    def for_humans(self, locale: str | None = None) -> str:
        """Render the non-zero fields as a human-readable phrase.

        Fields appear in fixed order from years to milliseconds, each
        pluralized by the locale (plural unless the absolute value is 1).
        An all-zero interval renders the locale's zero phrase.

        Args:
            locale: Locale key; None means the process-wide current locale.
                Unknown keys fall back to English.

        Returns:
            The rendered phrase.

        Examples:
            >>> DatetimeInterval(years=1, days=2).for_humans()
            '1 year 2 days'
            >>> DatetimeInterval().for_humans()
            '0 seconds'
            >>> DatetimeInterval(days=-3).for_humans()
            '-3 days'
        """
        phrases = get_locale(locale)
        parts = [
            phrases.quantity(value, unit)
            for (_, unit), value in zip(_FIELDS, self._values())
            if value
        ]
        return phrases.interval(parts)

    def __add__(self, other: object) -> DatetimeInterval:
        if not isinstance(other, DatetimeInterval):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> DatetimeInterval:
        if not isinstance(other, DatetimeInterval):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> DatetimeInterval:
        """Return the interval with every field negated."""
        return DatetimeInterval(*(-value for value in self._values()))

    def __eq__(self, other: object) -> bool:
        """Check field-wise equality.

        DatetimeInterval(minutes=60) != DatetimeInterval(hours=1) because
        fields are compared directly.
        """
        if not isinstance(other, DatetimeInterval):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash(self._values())

    def __repr__(self) -> str:
        """Return a representation listing the non-zero fields."""
        parts = [
            f"{name}={value}"
            for (name, _), value in zip(_FIELDS, self._values())
            if value
        ]
        return f"DatetimeInterval({', '.join(parts)})"

    def __str__(self) -> str:
        return self.for_humans()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero interval."""
        return not self.is_zero


__all__ = ["DatetimeInterval"]
