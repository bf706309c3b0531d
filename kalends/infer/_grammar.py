"""Grammar for relative date strings.

This module provides the regex patterns and unit tables for relative
expressions such as "+3 days", "-2 weeks", "500ms", "next month" and
"last year", and turns a match into a signed step.

Internal module - use parse_relative() from kalends.infer instead.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple, Optional


class RelativeDirection(Enum):
    """Direction keyword of a "next X" / "last X" expression."""

    NEXT = "next"
    LAST = "last"


# Grammar unit -> (Datetime method suffix, multiplier). A week is 7 days.
UNITS: dict[str, tuple[str, int]] = {
    "year": ("years", 1),
    "month": ("months", 1),
    "week": ("days", 7),
    "day": ("days", 1),
    "hour": ("hours", 1),
    "minute": ("minutes", 1),
    "min": ("minutes", 1),
    "second": ("seconds", 1),
    "sec": ("seconds", 1),
    "ms": ("milliseconds", 1),
}


class RelativeStep(NamedTuple):
    """A parsed relative expression: move by amount of unit."""

    amount: int  # signed, already multiplied (weeks become days)
    unit: str  # Datetime method suffix: years, months, days, ...


# Match "+3 days", "-2 weeks", "10 min", "500ms"
OFFSET_PATTERN = re.compile(
    r"^([+-]?\d+)\s*(year|month|week|day|hour|minute|min|second|sec|ms)s?$"
)

# Match "next month", "last week" (no millisecond form)
NEXT_LAST_PATTERN = re.compile(
    r"^(next|last)\s+(year|month|week|day|hour|minute|min|second|sec)$"
)


def normalize(text: str) -> str:
    """Trim and lowercase a relative expression."""
    return text.strip().lower()


def match_offset(text: str) -> Optional[RelativeStep]:
    """Match a signed count with a unit.

    Args:
        text: Normalized input.

    Returns:
        RelativeStep, or None if text is not an offset expression.

    Examples:
        >>> match_offset("-2 weeks")
        RelativeStep(amount=-14, unit='days')
        >>> match_offset("500ms")
        RelativeStep(amount=500, unit='milliseconds')
    """
    match = OFFSET_PATTERN.match(text)
    if not match:
        return None
    unit, multiplier = UNITS[match.group(2)]
    return RelativeStep(int(match.group(1)) * multiplier, unit)


def match_next_last(text: str) -> Optional[RelativeStep]:
    """Match "next <unit>" or "last <unit>".

    Examples:
        >>> match_next_last("last year")
        RelativeStep(amount=-1, unit='years')
    """
    match = NEXT_LAST_PATTERN.match(text)
    if not match:
        return None
    direction = RelativeDirection(match.group(1))
    unit, multiplier = UNITS[match.group(2)]
    sign = 1 if direction is RelativeDirection.NEXT else -1
    return RelativeStep(sign * multiplier, unit)


def match_relative(text: str) -> Optional[RelativeStep]:
    """Try every relative form in turn."""
    normalized = normalize(text)
    return match_offset(normalized) or match_next_last(normalized)
