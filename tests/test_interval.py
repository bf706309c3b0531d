"""Tests for the DatetimeInterval class.

This module tests construction, named constructors, field-wise
arithmetic, approximate length and humanized rendering.
"""

from __future__ import annotations

import pytest

from kalends import DatetimeInterval, set_locale
from kalends.core.interval import DatetimeInterval as DatetimeIntervalDirect


# =============================================================================
# Construction Tests
# =============================================================================


class TestIntervalConstruction:
    """Tests for DatetimeInterval construction."""

    def test_default_construction(self) -> None:
        """Test default construction creates a zero interval."""
        i = DatetimeInterval()
        assert i.years == 0
        assert i.months == 0
        assert i.days == 0
        assert i.hours == 0
        assert i.minutes == 0
        assert i.seconds == 0
        assert i.milliseconds == 0
        assert i.is_zero

    def test_construction_with_all_components(self) -> None:
        """Test construction with all components."""
        i = DatetimeInterval(1, 2, 3, 4, 5, 6, 7)
        assert (i.years, i.months, i.days, i.hours) == (1, 2, 3, 4)
        assert (i.minutes, i.seconds, i.milliseconds) == (5, 6, 7)

    def test_no_normalization(self) -> None:
        """Test fields are stored exactly as given."""
        i = DatetimeInterval(minutes=90, milliseconds=2500)
        assert i.minutes == 90
        assert i.hours == 0
        assert i.milliseconds == 2500

    def test_negative_values(self) -> None:
        """Test construction with negative values."""
        i = DatetimeInterval(years=-1, days=-2)
        assert i.years == -1
        assert i.days == -2

    def test_direct_import(self) -> None:
        """Test the class is the same from both import paths."""
        assert DatetimeInterval is DatetimeIntervalDirect


# =============================================================================
# Named Constructor Tests
# =============================================================================


class TestIntervalNamedConstructors:
    """Tests for the per-unit named constructors."""

    @pytest.mark.parametrize(
        "name", ["years", "months", "days", "hours", "minutes", "seconds", "milliseconds"]
    )
    def test_sets_exactly_one_field(self, name: str) -> None:
        """Test each named constructor sets only its own field."""
        i = getattr(DatetimeInterval, name)(5)
        assert i == DatetimeInterval(**{name: 5})
        assert getattr(i, name) == 5
        assert sum(
            getattr(i, other)
            for other in ("years", "months", "days", "hours", "minutes", "seconds", "milliseconds")
        ) == 5

    def test_constructor_name(self) -> None:
        """Test named constructors report their unit name."""
        assert DatetimeInterval.days.__name__ == "days"


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestIntervalArithmetic:
    """Tests for field-wise add and subtract."""

    def test_add(self) -> None:
        """Test field-wise addition without carry."""
        result = DatetimeInterval(minutes=50).add(DatetimeInterval(minutes=20, hours=1))
        assert result == DatetimeInterval(hours=1, minutes=70)

    def test_subtract(self) -> None:
        """Test field-wise subtraction without borrowing."""
        result = DatetimeInterval(years=2).subtract(DatetimeInterval(months=6))
        assert result == DatetimeInterval(years=2, months=-6)

    def test_operators(self) -> None:
        """Test +, - and unary - operators."""
        a = DatetimeInterval(days=1, hours=2)
        b = DatetimeInterval(hours=3)
        assert a + b == DatetimeInterval(days=1, hours=5)
        assert a - b == DatetimeInterval(days=1, hours=-1)
        assert -a == DatetimeInterval(days=-1, hours=-2)

    def test_operator_with_other_type(self) -> None:
        """Test adding a non-interval is a TypeError."""
        with pytest.raises(TypeError):
            DatetimeInterval(days=1) + 1  # type: ignore[operator]


# =============================================================================
# Length Tests
# =============================================================================


class TestIntervalToMilliseconds:
    """Tests for to_milliseconds."""

    def test_fixed_units(self) -> None:
        """Test exact units."""
        assert DatetimeInterval(days=1, seconds=1).to_milliseconds() == 86_401_000
        assert DatetimeInterval(hours=1, minutes=1, milliseconds=1).to_milliseconds() == 3_660_001

    def test_approximate_units(self) -> None:
        """Test years are 365.25 days and months 30.44 days."""
        assert DatetimeInterval.years(1).to_milliseconds() == 31_557_600_000
        assert DatetimeInterval.months(1).to_milliseconds() == 2_630_016_000

    def test_negative(self) -> None:
        """Test negative fields give a negative length."""
        assert DatetimeInterval(days=-1).to_milliseconds() == -86_400_000

    def test_zero(self) -> None:
        """Test the zero interval has zero length."""
        assert DatetimeInterval().to_milliseconds() == 0


# =============================================================================
# Rendering Tests
# =============================================================================


class TestIntervalForHumans:
    """Tests for for_humans."""

    @pytest.mark.parametrize(
        ("interval", "expected"),
        [
            (DatetimeInterval(years=1, days=2), "1 year 2 days"),
            (DatetimeInterval(months=1), "1 month"),
            (DatetimeInterval(hours=2, minutes=1, seconds=30), "2 hours 1 minute 30 seconds"),
            (DatetimeInterval(milliseconds=1), "1 ms"),
            (DatetimeInterval(milliseconds=250), "250 ms"),
            (DatetimeInterval(days=-3), "-3 days"),
            (DatetimeInterval(days=-1), "-1 day"),
            (DatetimeInterval(), "0 seconds"),
        ],
    )
    def test_rendering(self, interval: DatetimeInterval, expected: str) -> None:
        """Test non-zero fields render in fixed order."""
        assert interval.for_humans() == expected

    def test_str_is_for_humans(self) -> None:
        """Test str() renders the interval."""
        assert str(DatetimeInterval(days=2)) == "2 days"

    def test_unknown_locale_falls_back(self) -> None:
        """Test an unknown locale key renders in English."""
        assert DatetimeInterval(days=2).for_humans("xx") == "2 days"

    def test_uses_process_locale(self) -> None:
        """Test the default locale is the process-wide current key."""
        set_locale("en")
        assert DatetimeInterval(hours=1).for_humans() == "1 hour"


# =============================================================================
# Equality and Representation Tests
# =============================================================================


class TestIntervalEquality:
    """Tests for equality, hashing and repr."""

    def test_field_wise_equality(self) -> None:
        """Test equal fields are equal; equal lengths are not enough."""
        assert DatetimeInterval(hours=1) == DatetimeInterval.hours(1)
        assert DatetimeInterval(minutes=60) != DatetimeInterval(hours=1)

    def test_hash(self) -> None:
        """Test equal intervals hash alike."""
        assert len({DatetimeInterval(days=1), DatetimeInterval.days(1)}) == 1

    def test_repr(self) -> None:
        """Test repr lists non-zero fields."""
        assert repr(DatetimeInterval(years=2, months=-6)) == "DatetimeInterval(years=2, months=-6)"
        assert repr(DatetimeInterval()) == "DatetimeInterval()"

    def test_bool(self) -> None:
        """Test truthiness follows is_zero."""
        assert not DatetimeInterval()
        assert DatetimeInterval(seconds=1)
