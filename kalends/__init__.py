"""Kalends: calendar-aware date/time values for Python.

Kalends provides an immutable instant with arithmetic across irregular
calendar units, humanized relative phrases, signed calendar durations and
lazy ranges of instants. Calendar fields are projected in UTC with
millisecond resolution; a configured timezone is stored but not applied.

Core Types:
    Datetime: An instant (add_months clamps Jan 31 to Feb 28/29)
    DatetimeInterval: Years..milliseconds, stored without normalization
    DatetimePeriod: Instants from start to end, one interval apart

Units:
    TimeUnit: Calendar units (YEAR, MONTH, DAY, ...)

Parsing:
    parse_relative: Resolve "+3 days", "next month", ...
    from_string: Relative expression or calendar string

Configuration:
    configure, get_config, reset_config: Process-wide settings
    DatetimeConfig, ConfigOverride: Configuration records

Locales:
    Locale, register_locale, set_locale, get_locale: Phrase tables

Exceptions:
    KalendsError: Base exception
    InvalidInputError: Unsupported constructor input
    ParseError: Failed to parse a calendar string
    InvalidDateStringError: Strict-mode date string failure
    AmbiguousRelativeStringError: Strict-mode relative string failure
    LocaleNotFoundError: Unknown locale key
    ConfigurationError: Invalid configuration

Example:
    >>> from kalends import Datetime, DatetimeInterval
    >>> Datetime("2024-01-31").add_months(1).format("YYYY-MM-DD")
    '2024-02-29'
    >>> DatetimeInterval(years=1, days=2).for_humans()
    '1 year 2 days'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration
from kalends.config import (
    ConfigOverride,
    DatetimeConfig,
    configure,
    get_config,
    reset_config,
)

# Core types
from kalends.core.datetime import Datetime
from kalends.core.interval import DatetimeInterval
from kalends.core.period import DatetimePeriod

# Exceptions
from kalends.errors import (
    AmbiguousRelativeStringError,
    ConfigurationError,
    InvalidDateStringError,
    InvalidInputError,
    KalendsError,
    LocaleNotFoundError,
    ParseError,
)

# Parsing
from kalends.infer import from_string, parse_relative

# Locales
from kalends.locales import (
    Locale,
    available_locales,
    current_locale,
    get_locale,
    register_locale,
    reset_locale,
    set_locale,
)

# Units
from kalends.units.timeunit import TimeUnit

__all__: list[str] = [
    "__version__",
    # Core types
    "Datetime",
    "DatetimeInterval",
    "DatetimePeriod",
    # Units
    "TimeUnit",
    # Parsing
    "parse_relative",
    "from_string",
    # Configuration
    "DatetimeConfig",
    "ConfigOverride",
    "configure",
    "get_config",
    "reset_config",
    # Locales
    "Locale",
    "register_locale",
    "available_locales",
    "get_locale",
    "set_locale",
    "current_locale",
    "reset_locale",
    # Exceptions
    "KalendsError",
    "InvalidInputError",
    "ParseError",
    "InvalidDateStringError",
    "AmbiguousRelativeStringError",
    "LocaleNotFoundError",
    "ConfigurationError",
]
