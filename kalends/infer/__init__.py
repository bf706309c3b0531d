"""Relative and free-form date string parsing.

This module resolves strings that describe a moment relative to a base
instant, and strings that may be either relative or absolute.

Public API:
    parse_relative: Resolve "+3 days", "-2 weeks", "next month", ...
    from_string: Relative expression first, calendar string second.

The relative grammar (case-insensitive, surrounding whitespace ignored):
    - ``[+-]N <unit>[s]`` with unit one of year, month, week, day, hour,
      minute, min, second, sec, ms
    - ``next <unit>`` / ``last <unit>`` (no ms form)

Months and years clamp the day of month; a week is exactly 7 days.

Examples:
    >>> from kalends.infer import parse_relative
    >>> parse_relative("+3 days", "2024-01-30").iso
    '2024-02-02T00:00:00.000Z'
    >>> parse_relative("next month", "2024-01-31").iso
    '2024-02-29T00:00:00.000Z'
"""

from __future__ import annotations

import logging

from kalends.config import ConfigInput, coerce_override, resolve
from kalends.core.datetime import Datetime, DatetimeInput
from kalends.errors import (
    AmbiguousRelativeStringError,
    InvalidDateStringError,
    InvalidInputError,
)
from kalends.infer._grammar import RelativeStep, match_relative

logger = logging.getLogger(__name__)


def _apply(base: Datetime, step: RelativeStep) -> Datetime:
    """Move base by a step, through add_* or sub_* by the sign."""
    if step.amount >= 0:
        return getattr(base, f"add_{step.unit}")(step.amount)
    return getattr(base, f"sub_{step.unit}")(-step.amount)


def parse_relative(
    text: str,
    base: DatetimeInput = None,
    config: ConfigInput = None,
) -> Datetime:
    """Resolve a relative date string against a base instant.

    Args:
        text: The expression, e.g. "+3 days", "-2 weeks", "last year".
        base: The base instant, any Datetime constructor input; None
            means now.
        config: Per-call configuration override. It is also carried by
            the base, so the result keeps it. Without one, a Datetime
            base keeps its own override.

    Returns:
        The resolved Datetime. When the text is not a relative
        expression and strict mode is off, the text is parsed as a
        calendar string instead and the result may be invalid.

    Raises:
        AmbiguousRelativeStringError: If the text does not match and
            strict mode is on (per-call, then base, then process-wide).
        InvalidInputError: If text is not a string.

    Examples:
        >>> parse_relative("-1 year", "2024-02-29").iso
        '2023-02-28T00:00:00.000Z'
        >>> parse_relative("2024-05-01", "2020-01-01").iso
        '2024-05-01T00:00:00.000Z'
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"relative date must be a string, got {type(text).__name__}")

    override = coerce_override(config)
    # A Datetime base keeps its own override unless the call brings one
    if isinstance(base, Datetime) and override is None:
        anchor = base
    else:
        anchor = Datetime(base, override)

    step = match_relative(text)
    if step is not None:
        return _apply(anchor, step)

    if resolve("strict", call=override, instance=anchor.config):
        raise AmbiguousRelativeStringError(
            f"Invalid or ambiguous relative date string: {text}"
        )
    if resolve("verbose", call=override):
        logger.debug("No relative match for %r, parsing as a date string", text)
    return Datetime(text, override)


def from_string(text: str, config: ConfigInput = None) -> Datetime:
    """Parse a relative expression or a calendar string.

    The relative grammar is tried first against the current time. If it
    does not match, the text is parsed as a calendar string.

    Args:
        text: The string to parse.
        config: Per-call configuration override.

    Returns:
        The parsed Datetime. Outside strict mode an unparseable string
        gives an invalid Datetime.

    Raises:
        InvalidDateStringError: In strict mode, if the text is neither a
            relative expression nor a calendar string.

    Examples:
        >>> from_string("2024-05-01T12:00:00Z").hour
        12
        >>> from_string("garbage").is_valid
        False
    """
    override = coerce_override(config)
    try:
        return parse_relative(text, None, override)
    except AmbiguousRelativeStringError as e:
        if resolve("verbose", call=override):
            logger.debug("Strict relative parse of %r failed, trying a date string", text)
        # A blank string would otherwise construct "now"
        if not text.strip():
            raise InvalidDateStringError(f"Invalid date string: {text!r}") from e
        try:
            return Datetime(text, override)
        except InvalidDateStringError as exc:
            raise InvalidDateStringError(f"Invalid date string: {text}") from exc


__all__ = [
    "parse_relative",
    "from_string",
]
