"""Calendar-string parsing.

This module turns date/time strings into epoch milliseconds. Each accepted
shape is described by a FormatTemplate: a compiled pattern plus an
extractor that pulls the calendar components out of a match. Templates are
tried in order and the first one that matches and validates wins.

Accepted shapes:
    ISO 8601:
        - "2024", "2024-05", "2024-05-01"
        - "+010000-01-01" (expanded years)
        - "2024-05-01T12:34:56", "2024-05-01 12:34"
        - "2024-05-01T12:34:56.789Z", "2024-05-01T12:34:56+05:30"
    Slash dates:
        - "2024/05/01" (YMD), "05/01/2024" (MDY), optional time
    Named months:
        - "May 1, 2024", "1 May 2024", "Wed, 01 May 2024 12:34:56 GMT"

Strings without a zone designator are read as UTC wall-clock time. A zone
offset only shifts the result to its UTC instant; it is not retained.

Examples:
    >>> parse_datetime_string("1970-01-01T00:00:00Z")
    0
    >>> parse_datetime_string("1970-01-02")
    86400000
    >>> parse_datetime_string("Jan 2, 1970")
    86400000
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from kalends._internal.calendar import fields_to_ms
from kalends._internal.constants import MS_PER_MINUTE
from kalends._internal.validation import validate_fields, validate_range
from kalends.errors import ParseError

Components = dict[str, Optional[int]]


@dataclass(frozen=True)
class FormatTemplate:
    """A string shape the parser accepts.

    Attributes:
        name: Human-readable name for the format.
        pattern: Compiled regex pattern for matching.
        extractor: Function to extract components from a regex match.
    """

    name: str
    pattern: re.Pattern[str]
    extractor: Callable[[re.Match[str]], Components]


# Month name mappings
MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

WEEKDAY_NAMES = frozenset(
    {
        "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
        "mon", "tue", "tues", "wed", "thu", "thur", "thurs", "fri", "sat", "sun",
    }
)

# Shared fragments. Each template compiles its own copy, so the named
# groups never collide within one pattern.
_TIME = (
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"
    r"(?:\s*(?P<ampm>[AaPp][Mm]))?"
)
_ZONE = (
    r"(?:\s*(?P<zone>[Zz]|(?:GMT|UTC)?[+-]\d{2}(?::?\d{2})?|GMT|UTC))?"
)

_ISO_PATTERN = re.compile(
    r"^(?P<year>[+-]\d{6}|\d{4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:[Tt ]" + _TIME + _ZONE + r")?"
    r")?)?$",
    re.ASCII,
)

_SLASH_PATTERN = re.compile(
    r"^(?P<a>\d{1,4})/(?P<b>\d{1,2})/(?P<c>\d{1,4})"
    r"(?:(?:[Tt]|\s+)" + _TIME + _ZONE + r")?$",
    re.ASCII,
)

_NAMED_MDY_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]+)\.?,?\s+)?"
    r"(?P<month_name>[A-Za-z]+)\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?,?\s+(?P<year>\d{4})"
    r"(?:,?\s+" + _TIME + _ZONE + r")?$",
    re.ASCII,
)

_NAMED_DMY_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]+)\.?,?\s+)?"
    r"(?P<day>\d{1,2})(?:st|nd|rd|th)?\s+(?P<month_name>[A-Za-z]+)\.?,?\s+(?P<year>\d{4})"
    r"(?:,?\s+" + _TIME + _ZONE + r")?$",
    re.ASCII,
)


def _extract_time(match: re.Match[str]) -> Components:
    """Extract time-of-day and zone components shared by all templates."""
    if match.group("hour") is None:
        return {
            "hour": 0,
            "minute": 0,
            "second": 0,
            "millisecond": 0,
            "offset": None,
        }

    hour = int(match.group("hour"))
    ampm = match.group("ampm")
    if ampm:
        validate_range("hour", hour, 1, 12)
        if ampm.upper() == "AM":
            hour = 0 if hour == 12 else hour
        else:
            hour = hour if hour == 12 else hour + 12

    fraction = match.group("fraction")
    return {
        "hour": hour,
        "minute": int(match.group("minute")),
        "second": int(match.group("second") or 0),
        # Truncate to milliseconds
        "millisecond": int(fraction[:3].ljust(3, "0")) if fraction else 0,
        "offset": _parse_zone(match.group("zone")),
    }


def _parse_zone(zone: str | None) -> int | None:
    """Return the zone offset in minutes east of UTC, or None if absent."""
    if zone is None:
        return None
    zone = zone.upper()
    for prefix in ("GMT", "UTC"):
        if zone.startswith(prefix):
            zone = zone[len(prefix):]
    if zone in ("", "Z"):
        return 0

    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4] or 0)
    validate_range("offset hours", hours, 0, 23)
    validate_range("offset minutes", minutes, 0, 59)
    return sign * (hours * 60 + minutes)


def _extract_iso(match: re.Match[str]) -> Components:
    """Extract components from an ISO 8601 match."""
    components = {
        "year": int(match.group("year")),
        "month": int(match.group("month") or 1),
        "day": int(match.group("day") or 1),
    }
    components.update(_extract_time(match))
    return components


def _extract_slash(match: re.Match[str]) -> Components:
    """Extract components from a slash date, YMD or MDY by year position."""
    a, b, c = match.group("a"), match.group("b"), match.group("c")
    if len(a) == 4:
        components = {"year": int(a), "month": int(b), "day": int(c)}
    elif len(c) == 4:
        components = {"year": int(c), "month": int(a), "day": int(b)}
    else:
        raise ParseError(f"ambiguous slash date: {match.group(0)!r}")
    components.update(_extract_time(match))
    return components


def _extract_named(match: re.Match[str]) -> Components:
    """Extract components from a named-month match."""
    weekday = match.group("weekday")
    if weekday is not None and weekday.lower() not in WEEKDAY_NAMES:
        raise ParseError(f"unknown weekday name: {weekday!r}")

    month = MONTH_NAMES.get(match.group("month_name").lower())
    if month is None:
        raise ParseError(f"unknown month name: {match.group('month_name')!r}")

    components = {
        "year": int(match.group("year")),
        "month": month,
        "day": int(match.group("day")),
    }
    components.update(_extract_time(match))
    return components


TEMPLATES: tuple[FormatTemplate, ...] = (
    FormatTemplate("iso8601", _ISO_PATTERN, _extract_iso),
    FormatTemplate("slash_date", _SLASH_PATTERN, _extract_slash),
    FormatTemplate("named_month_mdy", _NAMED_MDY_PATTERN, _extract_named),
    FormatTemplate("named_month_dmy", _NAMED_DMY_PATTERN, _extract_named),
)


def parse_datetime_string(text: str) -> int:
    """Parse a calendar string into epoch milliseconds.

    Args:
        text: The string to parse. Leading/trailing whitespace is ignored.

    Returns:
        Milliseconds since 1970-01-01T00:00:00.000Z.

    Raises:
        ParseError: If no template matches or the components are invalid.

    Examples:
        >>> parse_datetime_string("2024-05-01T12:34:56.789Z")
        1714566896789
        >>> parse_datetime_string("2024-05-01T12:34:56.789+02:00")
        1714559696789
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError("empty date string")

    last_error: ParseError | None = None
    for template in TEMPLATES:
        match = template.pattern.match(stripped)
        if match is None:
            continue
        try:
            components = template.extractor(match)
            return _combine(components)
        except ParseError as e:
            last_error = e

    if last_error is not None:
        raise ParseError(f"invalid date string {text!r}: {last_error}") from last_error
    raise ParseError(f"unrecognized date string: {text!r}")


def _combine(components: Components) -> int:
    """Validate components and combine them into epoch milliseconds."""
    year = components["year"]
    month = components["month"]
    day = components["day"]
    hour = components["hour"]
    minute = components["minute"]
    second = components["second"]
    millisecond = components["millisecond"]
    validate_fields(year, month, day, hour, minute, second, millisecond)

    ms = fields_to_ms(year, month, day, hour, minute, second, millisecond)
    offset = components["offset"]
    if offset:
        ms -= offset * MS_PER_MINUTE
    return ms


__all__ = [
    "FormatTemplate",
    "TEMPLATES",
    "MONTH_NAMES",
    "parse_datetime_string",
]
