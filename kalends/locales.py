"""Locale table for humanized output.

A Locale knows how to render the phrases Kalends produces for people:
"3 days ago", "in 2 hours", "just now", and interval listings such as
"1 year 2 months". Locales live in an open registry keyed by locale name,
so new languages can be added without touching the arithmetic code.

The module also holds the process-wide current locale key, read whenever
a Datetime has no locale of its own. Changing it with set_locale() is a
single-writer operation: it is not safe to call from several threads at
once without external locking.

Examples:
    >>> get_locale("en").ago(3, "day")
    '3 days ago'
    >>> get_locale("en").in_(1, "hour")
    'in 1 hour'
    >>> get_locale("xx").just_now  # unknown keys fall back to English
    'just now'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from kalends.config import get_config
from kalends.errors import LocaleNotFoundError

DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class Locale:
    """Phrase rules for one language.

    Attributes:
        just_now: Phrase for a difference below one second.
        ago_template: Template for past differences, with {n} and {unit}.
        in_template: Template for future differences, with {n} and {unit}.
        units: Unit key -> (singular, plural) names. Keys are the
            TimeUnit values: year, month, day, hour, minute, second, ms.
        separator: Joins the parts of an interval phrase.
        zero_interval: Phrase for an interval with no non-zero parts.
    """

    just_now: str
    ago_template: str
    in_template: str
    units: Mapping[str, tuple[str, str]]
    separator: str = " "
    zero_interval: str = ""

    def unit(self, key: str, n: int | float) -> str:
        """Return the unit name for a count, plural unless abs(n) == 1."""
        singular, plural = self.units[key]
        return singular if abs(n) == 1 else plural

    def quantity(self, n: int | float, key: str) -> str:
        """Render a count with its pluralized unit name ("2 days")."""
        return f"{n} {self.unit(key, n)}"

    def ago(self, n: int, key: str) -> str:
        """Render a past difference ("2 days ago")."""
        return self.ago_template.format(n=n, unit=self.unit(key, n))

    def in_(self, n: int, key: str) -> str:
        """Render a future difference ("in 2 days")."""
        return self.in_template.format(n=n, unit=self.unit(key, n))

    def interval(self, parts: list[str]) -> str:
        """Join interval parts, or return the zero phrase if there are none."""
        return self.separator.join(parts) if parts else self.zero_interval


ENGLISH = Locale(
    just_now="just now",
    ago_template="{n} {unit} ago",
    in_template="in {n} {unit}",
    units={
        "year": ("year", "years"),
        "month": ("month", "months"),
        "day": ("day", "days"),
        "hour": ("hour", "hours"),
        "minute": ("minute", "minutes"),
        "second": ("second", "seconds"),
        "ms": ("ms", "ms"),
    },
    separator=" ",
    zero_interval="0 seconds",
)

_registry: dict[str, Locale] = {DEFAULT_LOCALE: ENGLISH}
_current: str = DEFAULT_LOCALE


def register_locale(key: str, locale: Locale) -> None:
    """Add or replace a locale in the registry.

    Args:
        key: Locale key, e.g. "fr".
        locale: The phrase rules.
    """
    _registry[key] = locale


def has_locale(key: str) -> bool:
    """Return True if the registry holds the key."""
    return key in _registry


def available_locales() -> list[str]:
    """Return the registered locale keys, sorted."""
    return sorted(_registry)


def get_locale(key: str | None = None) -> Locale:
    """Return the locale for a key, falling back to English.

    Args:
        key: Locale key; None means the process-wide current locale.

    Returns:
        The registered Locale, or the English locale for unknown keys.
    """
    if key is None:
        key = _current
    return _registry.get(key, _registry[DEFAULT_LOCALE])


def set_locale(key: str) -> None:
    """Set the process-wide current locale key.

    Raises:
        LocaleNotFoundError: If the key is not registered.
    """
    global _current
    if key not in _registry:
        raise LocaleNotFoundError(f"Locale not found: {key}")
    _current = key


def current_locale() -> str:
    """Return the process-wide current locale key."""
    return _current


def reset_locale() -> None:
    """Restore the current locale key to the configured default."""
    global _current
    configured = get_config().locale
    _current = configured if configured in _registry else DEFAULT_LOCALE


__all__ = [
    "DEFAULT_LOCALE",
    "ENGLISH",
    "Locale",
    "register_locale",
    "has_locale",
    "available_locales",
    "get_locale",
    "set_locale",
    "current_locale",
    "reset_locale",
]
