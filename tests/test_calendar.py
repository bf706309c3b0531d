"""Tests for calendar math, field arithmetic and time units."""

from __future__ import annotations

import pytest

from kalends import ParseError, TimeUnit
from kalends._internal.calendar import (
    day_of_week,
    day_of_year,
    days_in_month,
    days_to_ymd,
    fields_to_ms,
    is_leap_year,
    ms_to_fields,
    week_of_year,
    ymd_to_days,
)
from kalends._internal.validation import validate_day, validate_fields, validate_range
from kalends.arithmetic import replace_field, shift_months, shift_years


# =============================================================================
# Calendar Math
# =============================================================================


class TestLeapYears:
    """Tests for leap-year rules."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2024, True), (2023, False), (2000, True), (1900, False), (0, True), (-4, True)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Test the Gregorian leap-year rule."""
        assert is_leap_year(year) is expected

    def test_days_in_month(self) -> None:
        """Test month lengths, February included."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 4) == 30
        assert days_in_month(2024, 12) == 31

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Test months outside 1-12."""
        with pytest.raises(ValueError):
            days_in_month(2024, 13)


class TestDayNumbers:
    """Tests for day numbers relative to 1970-01-01."""

    def test_epoch(self) -> None:
        """Test the epoch is day 0 and a Thursday."""
        assert ymd_to_days(1970, 1, 1) == 0
        assert day_of_week(0) == 4

    def test_known_days(self) -> None:
        """Test dates on both sides of the epoch."""
        assert ymd_to_days(1969, 12, 31) == -1
        assert ymd_to_days(2000, 1, 1) == 10957
        assert days_to_ymd(-1) == (1969, 12, 31)
        assert days_to_ymd(10957) == (2000, 1, 1)

    @pytest.mark.parametrize(
        "ymd", [(2024, 2, 29), (1600, 12, 31), (1, 1, 1), (0, 2, 29), (-1, 3, 1), (-400, 1, 1)]
    )
    def test_far_dates(self, ymd: tuple[int, int, int]) -> None:
        """Test day numbers for distant and negative years."""
        assert days_to_ymd(ymd_to_days(*ymd)) == ymd

    def test_day_of_week(self) -> None:
        """Test 2024-01-15 was a Monday and 2024-01-14 a Sunday."""
        assert day_of_week(ymd_to_days(2024, 1, 15)) == 1
        assert day_of_week(ymd_to_days(2024, 1, 14)) == 0

    def test_day_of_year(self) -> None:
        """Test day-of-year across the leap day."""
        assert day_of_year(2024, 1, 1) == 1
        assert day_of_year(2024, 3, 1) == 61
        assert day_of_year(2023, 3, 1) == 60
        assert day_of_year(2024, 12, 31) == 366


class TestFields:
    """Tests for fields_to_ms and ms_to_fields."""

    def test_split(self) -> None:
        """Test splitting a known instant."""
        assert ms_to_fields(1705329045123) == (2024, 1, 15, 14, 30, 45, 123)

    def test_before_epoch(self) -> None:
        """Test negative values split with floor semantics."""
        assert ms_to_fields(-1) == (1969, 12, 31, 23, 59, 59, 999)

    def test_combine(self) -> None:
        """Test combining fields."""
        assert fields_to_ms(2024, 1, 15, 14, 30, 45, 123) == 1705329045123

    def test_carry(self) -> None:
        """Test out-of-range fields carry into larger units."""
        assert fields_to_ms(2024, 1, 1, -1) == fields_to_ms(2023, 12, 31, 23)
        assert fields_to_ms(2024, 0, 1) == fields_to_ms(2023, 12, 1)
        assert fields_to_ms(2024, 2, 30) == fields_to_ms(2024, 3, 1)
        assert fields_to_ms(2024, 1, 1, 0, 0, 0, 1000) == fields_to_ms(2024, 1, 1, 0, 0, 1)


class TestWeekOfYear:
    """Tests for week numbering."""

    @pytest.mark.parametrize(
        ("ymd", "expected"),
        [
            ((2024, 1, 1), 1),
            ((2023, 12, 31), 52),
            ((2024, 1, 15), 3),
            ((2024, 12, 30), 1),
            ((2020, 12, 31), 53),
            ((2021, 1, 3), 53),
        ],
    )
    def test_sunday_first(self, ymd: tuple[int, int, int], expected: int) -> None:
        """Test the default first day of week."""
        assert week_of_year(*ymd) == expected

    def test_monday_first(self) -> None:
        """Test remapping the first day of week."""
        assert week_of_year(2024, 1, 1, first_day=1) == 52
        assert week_of_year(2024, 1, 15, first_day=1) == 2


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    """Tests for parsed-component validation."""

    def test_validate_range(self) -> None:
        """Test range bounds are inclusive."""
        validate_range("month", 12, 1, 12)
        with pytest.raises(ParseError, match="month must be between 1 and 12, got 13"):
            validate_range("month", 13, 1, 12)

    def test_validate_day(self) -> None:
        """Test the day must exist in its month."""
        validate_day(2024, 2, 29)
        with pytest.raises(ParseError):
            validate_day(2023, 2, 29)

    def test_hour_24(self) -> None:
        """Test 24:00 is only valid on the hour."""
        validate_fields(2024, 5, 1, 24)
        with pytest.raises(ParseError):
            validate_fields(2024, 5, 1, 24, 0, 1)


# =============================================================================
# Field Arithmetic
# =============================================================================


class TestShiftMonths:
    """Tests for month and year shifts."""

    @pytest.mark.parametrize(
        ("start", "months", "expected"),
        [
            ((2024, 1, 31), 1, (2024, 2, 29)),
            ((2023, 1, 31), 1, (2023, 2, 28)),
            ((2024, 1, 31), -1, (2023, 12, 31)),
            ((2024, 3, 31), -1, (2024, 2, 29)),
            ((2024, 5, 31), 1, (2024, 6, 30)),
            ((2024, 1, 15), 13, (2025, 2, 15)),
            ((2024, 1, 15), -25, (2021, 12, 15)),
        ],
    )
    def test_clamping(self, start: tuple, months: int, expected: tuple) -> None:
        """Test the day of month is clamped to the target month."""
        assert shift_months(fields_to_ms(*start), months) == fields_to_ms(*expected)

    def test_time_of_day_is_kept(self) -> None:
        """Test shifting keeps hours through milliseconds."""
        ms = fields_to_ms(2024, 1, 31, 14, 30, 45, 123)
        assert ms_to_fields(shift_months(ms, 1)) == (2024, 2, 29, 14, 30, 45, 123)

    def test_shift_years(self) -> None:
        """Test year shifts clamp Feb 29."""
        assert shift_years(fields_to_ms(2020, 2, 29), 1) == fields_to_ms(2021, 2, 28)
        assert shift_years(fields_to_ms(2020, 2, 29), 4) == fields_to_ms(2024, 2, 29)
        assert shift_years(fields_to_ms(2024, 2, 29), -1) == fields_to_ms(2023, 2, 28)


class TestReplaceField:
    """Tests for replace_field."""

    def test_replace(self) -> None:
        """Test replacing single fields."""
        ms = fields_to_ms(2024, 1, 15, 14, 30)
        assert replace_field(ms, year=2020) == fields_to_ms(2020, 1, 15, 14, 30)
        assert replace_field(ms, minute=0, second=5) == fields_to_ms(2024, 1, 15, 14, 0, 5)

    def test_no_clamping(self) -> None:
        """Test out-of-range results carry instead of clamping."""
        assert replace_field(fields_to_ms(2024, 1, 31), month=2) == fields_to_ms(2024, 3, 2)
        assert replace_field(fields_to_ms(2024, 1, 31), hour=25) == fields_to_ms(2024, 2, 1, 1)

    def test_unknown_field(self) -> None:
        """Test unknown field names are rejected."""
        with pytest.raises(ValueError, match="weekday"):
            replace_field(0, weekday=3)


# =============================================================================
# TimeUnit
# =============================================================================


class TestTimeUnit:
    """Tests for the TimeUnit enum."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("day", TimeUnit.DAY),
            ("days", TimeUnit.DAY),
            ("Mins", TimeUnit.MINUTE),
            ("secs", TimeUnit.SECOND),
            ("ms", TimeUnit.MILLISECOND),
            ("milliseconds", TimeUnit.MILLISECOND),
            (" WEEK ", TimeUnit.WEEK),
            (TimeUnit.YEAR, TimeUnit.YEAR),
        ],
    )
    def test_from_name(self, name: str | TimeUnit, expected: TimeUnit) -> None:
        """Test names, aliases and plural forms."""
        assert TimeUnit.from_name(name) is expected

    def test_from_name_unknown(self) -> None:
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="fortnight"):
            TimeUnit.from_name("fortnight")

    def test_to_milliseconds(self) -> None:
        """Test exact and approximate unit lengths."""
        assert TimeUnit.DAY.to_milliseconds() == 86_400_000
        assert TimeUnit.WEEK.to_milliseconds() == 604_800_000
        assert TimeUnit.MONTH.to_milliseconds() == 2_630_016_000
        assert TimeUnit.YEAR.to_milliseconds() == 31_557_600_000

    def test_values_are_unit_keys(self) -> None:
        """Test member values match the locale unit keys."""
        assert [unit.value for unit in TimeUnit] == [
            "ms", "second", "minute", "hour", "day", "week", "month", "year"
        ]
