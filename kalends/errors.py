"""Kalends exception hierarchy.

All Kalends-specific exceptions inherit from KalendsError. Each one also
inherits from the closest builtin so callers that only know the standard
exceptions can still catch them.
"""

from __future__ import annotations


class KalendsError(Exception):
    """Base exception for all Kalends errors."""

    pass


class InvalidInputError(KalendsError, TypeError):
    """Unsupported input for Datetime construction.

    Raised when the constructor receives a value of a kind it cannot
    interpret.

    Examples:
        - A list or dict passed as the datetime value
        - A bool (deliberately not treated as a number)
    """

    pass


class ParseError(KalendsError, ValueError):
    """Failed to parse a calendar string.

    Raised by the low-level string parser. Datetime construction turns it
    into InvalidDateStringError in strict mode, or into an invalid instant
    otherwise.
    """

    pass


class InvalidDateStringError(ParseError):
    """Textual input failed calendar parsing under strict mode.

    Examples:
        - Datetime("not-a-date", {"strict": True})
        - Datetime("2024-02-30", {"strict": True})
    """

    pass


class AmbiguousRelativeStringError(ParseError):
    """Relative-string grammar did not match under strict mode.

    Examples:
        - parse_relative("infinity", config={"strict": True})
        - parse_relative("", config={"strict": True})
    """

    pass


class LocaleNotFoundError(KalendsError, KeyError):
    """An explicit locale switch named a key absent from the locale table.

    Rendering with an unknown locale never raises; it falls back to the
    default locale instead.
    """

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ConfigurationError(KalendsError, ValueError):
    """Invalid configuration record.

    Examples:
        - first_day_of_week outside 0-6
        - Unknown configuration option
    """

    pass


__all__ = [
    "KalendsError",
    "InvalidInputError",
    "ParseError",
    "InvalidDateStringError",
    "AmbiguousRelativeStringError",
    "LocaleNotFoundError",
    "ConfigurationError",
]
