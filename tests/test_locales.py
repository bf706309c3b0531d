"""Tests for the locale table and the process-wide locale key."""

from __future__ import annotations

import pytest

from kalends import (
    Datetime,
    DatetimeInterval,
    Locale,
    LocaleNotFoundError,
    available_locales,
    configure,
    current_locale,
    get_locale,
    register_locale,
    reset_locale,
    set_locale,
)
from kalends import locales
from kalends.locales import ENGLISH, has_locale

FRENCH = Locale(
    just_now="à l'instant",
    ago_template="il y a {n} {unit}",
    in_template="dans {n} {unit}",
    units={
        "year": ("an", "ans"),
        "month": ("mois", "mois"),
        "day": ("jour", "jours"),
        "hour": ("heure", "heures"),
        "minute": ("minute", "minutes"),
        "second": ("seconde", "secondes"),
        "ms": ("ms", "ms"),
    },
    separator=", ",
    zero_interval="0 seconde",
)


@pytest.fixture
def french(monkeypatch: pytest.MonkeyPatch) -> Locale:
    """Register a French locale for the duration of one test."""
    monkeypatch.setitem(locales._registry, "fr", FRENCH)
    return FRENCH


# =============================================================================
# Locale Value Tests
# =============================================================================


class TestLocale:
    """Tests for Locale phrase rendering."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "1 day ago"), (2, "2 days ago"), (0, "0 days ago"), (-1, "-1 day ago")],
    )
    def test_ago_pluralization(self, n: int, expected: str) -> None:
        """Test the plural form is used unless abs(n) == 1."""
        assert ENGLISH.ago(n, "day") == expected

    def test_in(self) -> None:
        """Test future phrases."""
        assert ENGLISH.in_(1, "hour") == "in 1 hour"
        assert ENGLISH.in_(5, "minute") == "in 5 minutes"

    def test_ms_is_never_pluralized(self) -> None:
        """Test the millisecond unit has one form."""
        assert ENGLISH.quantity(250, "ms") == "250 ms"

    def test_interval_parts(self) -> None:
        """Test parts are joined, or the zero phrase is used."""
        assert ENGLISH.interval(["1 year", "2 days"]) == "1 year 2 days"
        assert ENGLISH.interval([]) == "0 seconds"


# =============================================================================
# Registry Tests
# =============================================================================


class TestRegistry:
    """Tests for the locale registry."""

    def test_english_is_built_in(self) -> None:
        """Test 'en' is always registered."""
        assert has_locale("en")
        assert "en" in available_locales()
        assert get_locale("en") is ENGLISH

    def test_unknown_key_falls_back(self) -> None:
        """Test get_locale falls back to English."""
        assert get_locale("xx") is ENGLISH

    def test_register(self, french: Locale) -> None:
        """Test a registered locale is found."""
        assert has_locale("fr")
        assert get_locale("fr") is french
        assert available_locales() == ["en", "fr"]

    def test_register_locale_function(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test register_locale adds an entry."""
        monkeypatch.setattr(locales, "_registry", dict(locales._registry))
        register_locale("en-GB", ENGLISH)
        assert has_locale("en-GB")


# =============================================================================
# Process-wide Locale Tests
# =============================================================================


class TestProcessLocale:
    """Tests for set_locale, current_locale and reset_locale."""

    def test_default(self) -> None:
        """Test the default key is 'en'."""
        assert current_locale() == "en"

    def test_set_locale(self, french: Locale) -> None:
        """Test switching the process-wide key."""
        set_locale("fr")
        assert current_locale() == "fr"
        assert get_locale() is french

    def test_set_unknown_locale_raises(self) -> None:
        """Test switching to an unknown key fails and keeps the current key."""
        with pytest.raises(LocaleNotFoundError) as exc_info:
            set_locale("zz")
        assert str(exc_info.value) == "Locale not found: zz"
        assert current_locale() == "en"

    def test_locale_not_found_is_key_error(self) -> None:
        """Test LocaleNotFoundError can be caught as KeyError."""
        with pytest.raises(KeyError):
            set_locale("zz")

    def test_reset_uses_configured_locale(self, french: Locale) -> None:
        """Test reset_locale restores the configured key."""
        configure(locale="fr")
        reset_locale()
        assert current_locale() == "fr"

    def test_reset_ignores_unknown_configured_locale(self) -> None:
        """Test an unregistered configured key resets to 'en'."""
        configure(locale="zz")
        reset_locale()
        assert current_locale() == "en"


# =============================================================================
# Rendering Through Values
# =============================================================================


class TestLocalizedRendering:
    """Tests for locale resolution in Datetime and DatetimeInterval."""

    def test_diff_for_humans_per_call(self, french: Locale) -> None:
        """Test a per-call locale."""
        dt = Datetime("2024-01-04")
        assert dt.diff_for_humans("2024-01-01", locale="fr") == "dans 3 jours"
        assert Datetime("2024-01-01").diff_for_humans("2024-01-02", locale="fr") == "il y a 1 jour"

    def test_diff_for_humans_per_value(self, french: Locale) -> None:
        """Test a per-value locale beats the process key."""
        dt = Datetime("2024-01-04").with_locale("fr")
        assert dt.diff_for_humans("2024-01-01") == "dans 3 jours"

    def test_diff_for_humans_config_locale(self, french: Locale) -> None:
        """Test a config locale beats a per-value locale."""
        dt = Datetime("2024-01-04", {"locale": "fr"}).with_locale("en")
        assert dt.locale == "fr"

    def test_diff_for_humans_process(self, french: Locale) -> None:
        """Test the process key is the fallback."""
        set_locale("fr")
        assert Datetime("2024-01-01").diff_for_humans("2024-01-01") == "à l'instant"

    def test_unknown_per_value_locale_renders_english(self) -> None:
        """Test an unknown config locale renders in English."""
        dt = Datetime("2024-01-04", {"locale": "xx"})
        assert dt.locale == "xx"
        assert dt.diff_for_humans("2024-01-01") == "in 3 days"

    def test_interval_for_humans(self, french: Locale) -> None:
        """Test intervals use the locale's units and separator."""
        interval = DatetimeInterval(years=2, days=1)
        assert interval.for_humans("fr") == "2 ans, 1 jour"
        assert DatetimeInterval().for_humans("fr") == "0 seconde"

    def test_interval_process_locale(self, french: Locale) -> None:
        """Test intervals default to the process key."""
        set_locale("fr")
        assert DatetimeInterval(hours=3).for_humans() == "3 heures"
