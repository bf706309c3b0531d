"""Datetime class: an immutable instant with calendar-aware arithmetic.

This module provides the Datetime class, a single point in time with
millisecond resolution. Calendar fields are always projected in UTC; a
configured timezone is stored and reported but never applied.

A Datetime may be *invalid*: a failed non-strict parse produces a value
whose numeric getters return NaN and whose string forms read
"Invalid Date", so that errors in loosely typed input do not raise far from
their source.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
import time as _time
from typing import TYPE_CHECKING, Any, Union

from kalends._internal import calendar as _calendar
from kalends._internal.constants import (
    INVALID_DATE,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH_APPROX,
    MS_PER_SECOND,
    MS_PER_YEAR_APPROX,
)
from kalends.arithmetic import replace_field, shift_months, shift_years
from kalends.config import ConfigInput, ConfigOverride, coerce_override, resolve
from kalends.errors import (
    InvalidDateStringError,
    InvalidInputError,
    LocaleNotFoundError,
    ParseError,
)
from kalends.format import format_fields, format_iso8601, parse_datetime_string
from kalends.locales import current_locale, get_locale, has_locale
from kalends.locales import set_locale as _set_process_locale
from kalends.units import TimeUnit

if TYPE_CHECKING:
    from kalends.core.interval import DatetimeInterval
    from kalends.core.period import DatetimePeriod

logger = logging.getLogger(__name__)

DatetimeInput = Union["Datetime", _datetime.datetime, _datetime.date, int, float, str, None]

_UTC = _datetime.timezone.utc
_NATIVE_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_UTC)

# Units accepted by start_of/end_of, as an index into the field tuple
_SNAP_UNITS: dict[TimeUnit, int] = {
    TimeUnit.YEAR: 0,
    TimeUnit.MONTH: 1,
    TimeUnit.DAY: 2,
    TimeUnit.HOUR: 3,
    TimeUnit.MINUTE: 4,
    TimeUnit.SECOND: 5,
}

# Units walked by diff_for_humans, largest first
_HUMAN_UNITS: tuple[tuple[str, int], ...] = (
    ("year", MS_PER_YEAR_APPROX),
    ("month", MS_PER_MONTH_APPROX),
    ("day", MS_PER_DAY),
    ("hour", MS_PER_HOUR),
    ("minute", MS_PER_MINUTE),
    ("second", MS_PER_SECOND),
)


def _now_ms() -> int:
    return _time.time_ns() // 1_000_000


def _native_to_ms(value: _datetime.date) -> int:
    """Convert a stdlib datetime or date to epoch milliseconds.

    Naive datetimes are read as UTC; aware ones are converted to UTC.
    """
    if isinstance(value, _datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(_UTC)
        return _calendar.fields_to_ms(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond // 1000,
        )
    return _calendar.fields_to_ms(value.year, value.month, value.day)


class Datetime:
    """An immutable instant in time with millisecond resolution.

    Datetime wraps a count of milliseconds since 1970-01-01T00:00:00.000Z.
    Arithmetic works in calendar units: adding a month to January 31
    clamps to the last day of February instead of spilling into March.

    Each value may carry a configuration override (a ConfigOverride) and
    a locale key. The override is carried forward by add_* and sub_*
    methods (except millisecond arithmetic); setters, start_of/end_of and
    clone() return values without it.

    Attributes:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        timestamp: Milliseconds since the Unix epoch.

    Examples:
        >>> dt = Datetime("2024-01-31T10:00:00Z")
        >>> dt.add_months(1).iso
        '2024-02-29T10:00:00.000Z'

        >>> Datetime(0).year
        1970

        >>> Datetime("not a date").is_valid
        False
    """

    __slots__ = ("_ms", "_config", "_locale")

    def __init__(self, value: DatetimeInput = None, config: ConfigInput = None) -> None:
        """Create a Datetime.

        Args:
            value: What to build the instant from:

                - None or "": the current time.
                - Datetime: a copy of its instant.
                - datetime.datetime: naive values are read as UTC, aware
                  values are converted to UTC. datetime.date: midnight UTC.
                - int or float: epoch milliseconds, truncated toward zero.
                - str: a calendar string such as "2024-01-15T14:30:00Z".

            config: Per-value configuration override, as a ConfigOverride
                or a mapping of option names (snake_case or camelCase).

        Raises:
            InvalidDateStringError: If a string does not parse and strict
                mode is in effect (config override, then process-wide).
            InvalidInputError: If value has an unsupported type.
            ConfigurationError: If config holds unknown or invalid options.

        Examples:
            >>> Datetime(86_400_000).iso
            '1970-01-02T00:00:00.000Z'
            >>> Datetime("2024-05-01", {"firstDayOfWeek": 1}).first_day_of_week
            1
        """
        override = coerce_override(config)
        self._config: ConfigOverride | None = override
        self._locale: str | None = override.locale if override is not None else None
        self._ms: int | None = self._convert(value, override)

    @staticmethod
    def _convert(value: DatetimeInput, override: ConfigOverride | None) -> int | None:
        """Turn constructor input into epoch milliseconds (None if invalid)."""
        if value is None or (isinstance(value, str) and value == ""):
            return _now_ms()
        if isinstance(value, Datetime):
            return value._ms
        if isinstance(value, _datetime.date):
            return _native_to_ms(value)
        if isinstance(value, bool):
            raise InvalidInputError("Invalid input for Datetime: bool")
        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                return None
            return int(value)
        if isinstance(value, str):
            try:
                return parse_datetime_string(value)
            except ParseError as e:
                if resolve("strict", call=override):
                    raise InvalidDateStringError(f"Invalid date string: {value}") from e
                if resolve("verbose", call=override):
                    logger.debug("Unparseable date string %r: %s", value, e)
                return None
        raise InvalidInputError(f"Invalid input for Datetime: {type(value).__name__}")

    @classmethod
    def _from_internal(
        cls,
        ms: int | None,
        config: ConfigOverride | None = None,
        locale: str | None = None,
    ) -> Datetime:
        """Create a Datetime from epoch milliseconds, bypassing conversion.

        Args:
            ms: Epoch milliseconds, or None for an invalid instant.
            config: Override record to carry.
            locale: Per-value locale key to carry.

        Returns:
            A new Datetime instance.
        """
        instance = object.__new__(cls)
        instance._ms = ms
        instance._config = config
        instance._locale = locale
        return instance

    def _derive(self, ms: int | None) -> Datetime:
        """Return a new instant carrying this value's override and locale."""
        return Datetime._from_internal(ms, self._config, self._locale)

    # Factories

    @classmethod
    def now(cls, config: ConfigInput = None) -> Datetime:
        """Return the current instant.

        Examples:
            >>> Datetime.now().is_valid
            True
        """
        return cls(None, config)

    @classmethod
    def today(cls, config: ConfigInput = None) -> Datetime:
        """Return the start of the current UTC day.

        Examples:
            >>> Datetime.today().hour
            0
        """
        now = _now_ms()
        return cls(now - now % MS_PER_DAY, config)

    @classmethod
    def tomorrow(cls, config: ConfigInput = None) -> Datetime:
        """Return the start of the next UTC day."""
        return cls.today(config).add_days(1)

    @classmethod
    def yesterday(cls, config: ConfigInput = None) -> Datetime:
        """Return the start of the previous UTC day."""
        return cls.today(config).sub_days(1)

    @classmethod
    def from_timestamp(cls, ms: int | float, config: ConfigInput = None) -> Datetime:
        """Create a Datetime from epoch milliseconds.

        Examples:
            >>> Datetime.from_timestamp(1_000).second
            1
        """
        return cls(ms, config)

    @classmethod
    def parse_relative(
        cls,
        text: str,
        base: DatetimeInput = None,
        config: ConfigInput = None,
    ) -> Datetime:
        """Resolve a relative string such as "+3 days" or "next month".

        See kalends.infer.parse_relative.
        """
        from kalends.infer import parse_relative

        return parse_relative(text, base, config)

    @classmethod
    def from_string(cls, text: str, config: ConfigInput = None) -> Datetime:
        """Parse a relative or calendar string.

        See kalends.infer.from_string.
        """
        from kalends.infer import from_string

        return from_string(text, config)

    def clone(self) -> Datetime:
        """Return a copy of the instant, without override or locale."""
        return Datetime._from_internal(self._ms)

    # Process-wide locale

    @staticmethod
    def set_locale(key: str) -> None:
        """Set the process-wide locale key.

        Raises:
            LocaleNotFoundError: If the key is not registered.
        """
        _set_process_locale(key)

    @staticmethod
    def get_locale() -> str:
        """Return the process-wide locale key."""
        return current_locale()

    # Properties - calendar fields

    def _field(self, index: int) -> int | float:
        if self._ms is None:
            return math.nan
        return _calendar.ms_to_fields(self._ms)[index]

    @property
    def year(self) -> int | float:
        """Return the year (NaN if invalid)."""
        return self._field(0)

    @property
    def month(self) -> int | float:
        """Return the month, 1-based (NaN if invalid)."""
        return self._field(1)

    @property
    def day(self) -> int | float:
        """Return the day of the month (NaN if invalid)."""
        return self._field(2)

    @property
    def hour(self) -> int | float:
        return self._field(3)

    @property
    def minute(self) -> int | float:
        return self._field(4)

    @property
    def second(self) -> int | float:
        return self._field(5)

    @property
    def millisecond(self) -> int | float:
        return self._field(6)

    @property
    def timestamp(self) -> int | float:
        """Return milliseconds since the Unix epoch (NaN if invalid)."""
        return math.nan if self._ms is None else self._ms

    @property
    def iso(self) -> str:
        """Return the ISO 8601 string; same as to_iso_string()."""
        return self.to_iso_string()

    @property
    def day_of_week(self) -> int | float:
        """Return the weekday, 0 for Sunday through 6 for Saturday.

        Examples:
            >>> Datetime(0).day_of_week  # 1970-01-01 was a Thursday
            4
        """
        if self._ms is None:
            return math.nan
        return _calendar.day_of_week(self._ms // MS_PER_DAY)

    @property
    def day_of_year(self) -> int | float:
        """Return the 1-based day of the year.

        Examples:
            >>> Datetime("2024-12-31").day_of_year
            366
        """
        if self._ms is None:
            return math.nan
        year, month, day = _calendar.ms_to_fields(self._ms)[:3]
        return _calendar.day_of_year(year, month, day)

    @property
    def week_of_year(self) -> int | float:
        """Return the week number for the effective first day of week.

        The date is shifted to the Thursday of its week (counting weeks
        from first_day_of_week); the week number is the count of weeks
        from January 1 of the shifted date's year.

        Examples:
            >>> Datetime("2024-01-01").week_of_year
            1
            >>> Datetime("2024-01-01", {"first_day_of_week": 1}).week_of_year
            52
        """
        if self._ms is None:
            return math.nan
        year, month, day = _calendar.ms_to_fields(self._ms)[:3]
        return _calendar.week_of_year(year, month, day, self.first_day_of_week)

    @property
    def is_leap_year(self) -> bool:
        """Return True if the year is a leap year (False if invalid)."""
        if self._ms is None:
            return False
        return _calendar.is_leap_year(self.year)

    @property
    def days_in_month(self) -> int | float:
        """Return the number of days in this month.

        Examples:
            >>> Datetime("2023-02-10").days_in_month
            28
        """
        if self._ms is None:
            return math.nan
        year, month = _calendar.ms_to_fields(self._ms)[:2]
        return _calendar.days_in_month(year, month)

    @property
    def is_valid(self) -> bool:
        """Return False for an instant produced by a failed parse."""
        return self._ms is not None

    # Properties - effective configuration

    @property
    def locale(self) -> str:
        """Return the effective locale key.

        Resolution: config override > per-value locale > process locale.
        """
        if self._config is not None and self._config.locale:
            return self._config.locale
        return self._locale or current_locale()

    @property
    def parse_locale(self) -> str:
        """Return the locale key used for parsing relative strings."""
        return resolve("parse_locale", instance=self._config) or self.locale

    @property
    def timezone(self) -> str:
        """Return the configured timezone name (stored only, never applied)."""
        return resolve("timezone", instance=self._config) or "UTC"

    @property
    def first_day_of_week(self) -> int:
        return resolve("first_day_of_week", instance=self._config)

    @property
    def strict(self) -> bool:
        return resolve("strict", instance=self._config)

    @property
    def default_format(self) -> str:
        return resolve("default_format", instance=self._config)

    @property
    def config(self) -> ConfigOverride | None:
        """Return the override record carried by this value, if any."""
        return self._config

    def with_locale(self, key: str) -> Datetime:
        """Return a copy rendering humanized output in the given locale.

        Raises:
            LocaleNotFoundError: If the key is not registered.

        Examples:
            >>> Datetime(0).with_locale("en").locale
            'en'
        """
        if not has_locale(key):
            raise LocaleNotFoundError(f"Locale not found: {key}")
        return Datetime._from_internal(self._ms, self._config, key)

    # Arithmetic

    def _shift(self, ms: int) -> Datetime:
        if self._ms is None:
            return self._derive(None)
        return self._derive(self._ms + ms)

    def add_years(self, years: int | float) -> Datetime:
        """Add years, clamping the day to the end of the target month.

        Examples:
            >>> Datetime("2020-02-29").add_years(1).iso
            '2021-02-28T00:00:00.000Z'
        """
        if self._ms is None:
            return self._derive(None)
        return self._derive(shift_years(self._ms, int(years)))

    def sub_years(self, years: int | float) -> Datetime:
        return self.add_years(-years)

    def add_months(self, months: int | float) -> Datetime:
        """Add months, clamping the day to the end of the target month.

        Examples:
            >>> Datetime("2023-01-31").add_months(1).iso
            '2023-02-28T00:00:00.000Z'
            >>> Datetime("2024-03-31").sub_months(1).iso
            '2024-02-29T00:00:00.000Z'
        """
        if self._ms is None:
            return self._derive(None)
        return self._derive(shift_months(self._ms, int(months)))

    def sub_months(self, months: int | float) -> Datetime:
        return self.add_months(-months)

    def add_days(self, days: int | float) -> Datetime:
        """Add days; overflow carries into months and years.

        Examples:
            >>> Datetime("2024-02-28").add_days(2).iso
            '2024-03-01T00:00:00.000Z'
        """
        return self._shift(int(days) * MS_PER_DAY)

    def sub_days(self, days: int | float) -> Datetime:
        return self.add_days(-days)

    def add_hours(self, hours: int | float) -> Datetime:
        return self._shift(int(hours) * MS_PER_HOUR)

    def sub_hours(self, hours: int | float) -> Datetime:
        return self.add_hours(-hours)

    def add_minutes(self, minutes: int | float) -> Datetime:
        return self._shift(int(minutes) * MS_PER_MINUTE)

    def sub_minutes(self, minutes: int | float) -> Datetime:
        return self.add_minutes(-minutes)

    def add_seconds(self, seconds: int | float) -> Datetime:
        return self._shift(int(seconds) * MS_PER_SECOND)

    def sub_seconds(self, seconds: int | float) -> Datetime:
        return self.add_seconds(-seconds)

    def add_milliseconds(self, ms: int | float) -> Datetime:
        """Add milliseconds. The result carries no override record."""
        if self._ms is None:
            return Datetime._from_internal(None)
        return Datetime._from_internal(self._ms + int(ms))

    def sub_milliseconds(self, ms: int | float) -> Datetime:
        return self.add_milliseconds(-ms)

    def add_interval(self, interval: DatetimeInterval) -> Datetime:
        """Apply every field of an interval, largest unit first.

        Years, months, days, hours, minutes, seconds and milliseconds are
        added in that order, so month clamping happens before the smaller
        units move the result.

        Examples:
            >>> from kalends.core.interval import DatetimeInterval
            >>> Datetime("2024-01-31").add_interval(DatetimeInterval(months=1, days=1)).iso
            '2024-03-01T00:00:00.000Z'
        """
        return (
            self.add_years(interval.years)
            .add_months(interval.months)
            .add_days(interval.days)
            .add_hours(interval.hours)
            .add_minutes(interval.minutes)
            .add_seconds(interval.seconds)
            ._shift(int(interval.milliseconds))
        )

    def sub_interval(self, interval: DatetimeInterval) -> Datetime:
        """Apply the negation of an interval."""
        return self.add_interval(-interval)

    # Setters

    def _replace(self, **fields: int) -> Datetime:
        if self._ms is None:
            return Datetime._from_internal(None)
        truncated = {name: int(value) for name, value in fields.items()}
        return Datetime._from_internal(replace_field(self._ms, **truncated))

    def set_year(self, year: int) -> Datetime:
        """Replace the year without clamping (Feb 29 may roll to Mar 1)."""
        return self._replace(year=year)

    def set_month(self, month: int) -> Datetime:
        """Replace the month (1-based) without clamping.

        Examples:
            >>> Datetime("2024-01-31").set_month(2).iso
            '2024-03-02T00:00:00.000Z'
        """
        return self._replace(month=month)

    def set_day(self, day: int) -> Datetime:
        """Replace the day of the month; overflow rolls into later months.

        Examples:
            >>> Datetime("2024-01-15").set_day(32).iso
            '2024-02-01T00:00:00.000Z'
        """
        return self._replace(day=day)

    def set_hour(self, hour: int) -> Datetime:
        return self._replace(hour=hour)

    def set_minute(self, minute: int) -> Datetime:
        return self._replace(minute=minute)

    def set_second(self, second: int) -> Datetime:
        return self._replace(second=second)

    def set_millisecond(self, millisecond: int) -> Datetime:
        return self._replace(millisecond=millisecond)

    # Start / end of unit

    @staticmethod
    def _snap_index(unit: str | TimeUnit) -> int:
        resolved = TimeUnit.from_name(unit)
        if resolved not in _SNAP_UNITS:
            raise ValueError(f"unsupported unit for start_of/end_of: {resolved.value!r}")
        return _SNAP_UNITS[resolved]

    def start_of(self, unit: str | TimeUnit) -> Datetime:
        """Return the first millisecond of the unit containing this instant.

        Args:
            unit: One of year, month, day, hour, minute, second.

        Raises:
            ValueError: If the unit is not supported.

        Examples:
            >>> Datetime("2024-05-17T13:45:12.345Z").start_of("month").iso
            '2024-05-01T00:00:00.000Z'
        """
        index = self._snap_index(unit)
        if self._ms is None:
            return Datetime._from_internal(None)
        fields = list(_calendar.ms_to_fields(self._ms))
        # Month and day are 1-based, time fields are 0-based
        floors = (None, 1, 1, 0, 0, 0, 0)
        for i in range(index + 1, 7):
            fields[i] = floors[i]
        return Datetime._from_internal(_calendar.fields_to_ms(*fields))

    def end_of(self, unit: str | TimeUnit) -> Datetime:
        """Return the last millisecond of the unit containing this instant.

        Raises:
            ValueError: If the unit is not supported.

        Examples:
            >>> Datetime("2024-02-10").end_of("month").iso
            '2024-02-29T23:59:59.999Z'
        """
        index = self._snap_index(unit)
        start = self.start_of(unit)
        if start._ms is None:
            return start
        fields = list(_calendar.ms_to_fields(start._ms))
        fields[index] += 1
        return Datetime._from_internal(_calendar.fields_to_ms(*fields) - 1)

    # Formatting

    def format(self, fmt: str | None = None) -> str:
        """Format using YYYY, MM, DD, HH, mm, ss and SSS tokens.

        Args:
            fmt: The template. Defaults to the effective default_format,
                then to the ISO string.

        Returns:
            The formatted string, or "Invalid Date".

        Examples:
            >>> Datetime("2024-01-02T03:04:05.006Z").format("DD/MM/YYYY HH:mm:ss.SSS")
            '02/01/2024 03:04:05.006'
        """
        if self._ms is None:
            return INVALID_DATE
        template = fmt or self.default_format
        if not template:
            return self.to_iso_string()
        return format_fields(_calendar.ms_to_fields(self._ms), template)

    def to_string(self) -> str:
        """Return format() with the effective default format."""
        return self.format()

    def to_iso_string(self) -> str:
        """Return the ISO 8601 UTC string, or "Invalid Date".

        Examples:
            >>> Datetime(0).to_iso_string()
            '1970-01-01T00:00:00.000Z'
        """
        if self._ms is None:
            return INVALID_DATE
        return format_iso8601(self._ms)

    def to_native(self) -> _datetime.datetime:
        """Return an aware UTC datetime.datetime for this instant.

        Raises:
            ValueError: If this instant is invalid.
            OverflowError: If the year is outside datetime's range.
        """
        if self._ms is None:
            raise ValueError("cannot convert an invalid Datetime")
        return _NATIVE_EPOCH + _datetime.timedelta(milliseconds=self._ms)

    # Comparison

    @staticmethod
    def _coerce(other: DatetimeInput) -> Datetime:
        return other if isinstance(other, Datetime) else Datetime(other)

    def is_before(self, other: DatetimeInput) -> bool:
        """Return True if this instant is strictly earlier than other."""
        o = self._coerce(other)
        if self._ms is None or o._ms is None:
            return False
        return self._ms < o._ms

    def is_after(self, other: DatetimeInput) -> bool:
        """Return True if this instant is strictly later than other."""
        o = self._coerce(other)
        if self._ms is None or o._ms is None:
            return False
        return self._ms > o._ms

    def is_same(self, other: DatetimeInput) -> bool:
        """Return True if both denote the same millisecond."""
        o = self._coerce(other)
        if self._ms is None or o._ms is None:
            return False
        return self._ms == o._ms

    def is_between(self, a: DatetimeInput, b: DatetimeInput, inclusive: bool = True) -> bool:
        """Return True if this instant lies between a and b.

        The bounds may be given in either order.

        Examples:
            >>> Datetime("2024-05-01").is_between("2024-06-01", "2024-04-01")
            True
            >>> Datetime("2024-05-01").is_between("2024-05-01", "2024-06-01", inclusive=False)
            False
        """
        t1 = self._coerce(a)._ms
        t2 = self._coerce(b)._ms
        if self._ms is None or t1 is None or t2 is None:
            return False
        low, high = min(t1, t2), max(t1, t2)
        if inclusive:
            return low <= self._ms <= high
        return low < self._ms < high

    def _same_fields(self, other: DatetimeInput, count: int) -> bool:
        o = self._coerce(other)
        if self._ms is None or o._ms is None:
            return False
        mine = _calendar.ms_to_fields(self._ms)[:count]
        theirs = _calendar.ms_to_fields(o._ms)[:count]
        return mine == theirs

    def is_same_day(self, other: DatetimeInput) -> bool:
        return self._same_fields(other, 3)

    def is_same_month(self, other: DatetimeInput) -> bool:
        return self._same_fields(other, 2)

    def is_same_year(self, other: DatetimeInput) -> bool:
        return self._same_fields(other, 1)

    # Differences

    def diff_for_humans(self, other: DatetimeInput = None, locale: str | None = None) -> str:
        """Describe the distance to other in words ("3 days ago").

        The largest unit with a non-zero whole count is used, from years
        (365.25 days) down to seconds. Differences under a second read
        as the locale's "just now".

        Args:
            other: Reference instant; None means now.
            locale: Locale key; defaults to this value's effective locale.

        Returns:
            The phrase, or "Invalid Date" if either instant is invalid.

        Examples:
            >>> Datetime("2024-01-04").diff_for_humans("2024-01-01")
            'in 3 days'
            >>> Datetime("2024-01-01").diff_for_humans("2024-01-01T01:00:00Z")
            '1 hour ago'
        """
        reference = self._coerce(other)
        if self._ms is None or reference._ms is None:
            return INVALID_DATE

        phrases = get_locale(locale or self.locale)
        delta = self._ms - reference._ms
        distance = abs(delta)
        for unit, unit_ms in _HUMAN_UNITS:
            count = distance // unit_ms
            if count > 0:
                return phrases.in_(count, unit) if delta > 0 else phrases.ago(count, unit)
        return phrases.just_now

    def diff(self, other: DatetimeInput, unit: str | TimeUnit = TimeUnit.MILLISECOND) -> int | float:
        """Return self - other measured in a unit.

        Years and months compare calendar fields; fixed-length units
        floor the millisecond difference.

        Args:
            other: The instant to subtract.
            unit: year, month, week, day, hour, minute, second or ms.

        Returns:
            The signed difference, or NaN if either instant is invalid.

        Examples:
            >>> Datetime("2024-03-01").diff("2023-12-31", "month")
            3
            >>> Datetime("2024-01-01").diff("2024-01-02T12:00:00Z", "day")
            -2
        """
        resolved = TimeUnit.from_name(unit)
        o = self._coerce(other)
        if self._ms is None or o._ms is None:
            return math.nan

        if resolved is TimeUnit.YEAR:
            return self.year - o.year
        if resolved is TimeUnit.MONTH:
            return (self.year - o.year) * 12 + (self.month - o.month)
        return (self._ms - o._ms) // resolved.to_milliseconds()

    def interval_until(self, other: DatetimeInput) -> DatetimeInterval:
        """Decompose the absolute distance to other into an interval.

        The distance is split greedily using the fixed approximations
        (365.25-day years, 30.44-day months).

        Raises:
            ValueError: If either instant is invalid.

        Examples:
            >>> Datetime("2024-01-01").interval_until("2024-01-02T03:00:00Z")
            DatetimeInterval(days=1, hours=3)
        """
        from kalends.core.interval import DatetimeInterval

        o = self._coerce(other)
        if self._ms is None or o._ms is None:
            raise ValueError("cannot measure an interval involving an invalid Datetime")

        remaining = abs(self._ms - o._ms)
        parts: list[int] = []
        for unit_ms in (
            MS_PER_YEAR_APPROX,
            MS_PER_MONTH_APPROX,
            MS_PER_DAY,
            MS_PER_HOUR,
            MS_PER_MINUTE,
            MS_PER_SECOND,
        ):
            count, remaining = divmod(remaining, unit_ms)
            parts.append(count)
        return DatetimeInterval(*parts, milliseconds=remaining)

    def period_until(
        self,
        other: DatetimeInput,
        interval: DatetimeInterval | None = None,
    ) -> DatetimePeriod:
        """Return the period from this instant to other, one day apart by default."""
        from kalends.core.period import DatetimePeriod

        return DatetimePeriod(self, other, interval)

    # Operators

    def __add__(self, other: object) -> Datetime:
        """Add a DatetimeInterval."""
        from kalends.core.interval import DatetimeInterval

        if isinstance(other, DatetimeInterval):
            return self.add_interval(other)
        return NotImplemented

    def __sub__(self, other: object) -> Datetime:
        """Subtract a DatetimeInterval."""
        from kalends.core.interval import DatetimeInterval

        if isinstance(other, DatetimeInterval):
            return self.sub_interval(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """Two valid Datetimes are equal if they denote the same millisecond.

        An invalid Datetime is equal to nothing, itself included.
        """
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._ms is not None and self._ms == other._ms

    def _ordered(self, other: Any) -> bool:
        return self._ms is not None and other._ms is not None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._ordered(other) and self._ms < other._ms

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._ordered(other) and self._ms <= other._ms

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._ordered(other) and self._ms > other._ms

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._ordered(other) and self._ms >= other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        return f"Datetime({self.to_iso_string()!r})"

    def __str__(self) -> str:
        """Return format() with the effective default format."""
        return self.format()

    def __bool__(self) -> bool:
        """Datetimes are always truthy."""
        return True


__all__ = ["Datetime", "DatetimeInput"]
