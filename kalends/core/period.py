"""DatetimePeriod class: a lazy range of instants.

A period walks from a start instant toward an end instant in steps of a
DatetimeInterval. Nothing is materialized up front; every iteration
recomputes the sequence from the start, so a period can be traversed any
number of times.

Examples:
    >>> p = DatetimePeriod("2024-01-01", "2024-01-03")
    >>> [d.day for d in p]
    [1, 2, 3]

    >>> p = DatetimePeriod("2024-01-31", "2024-04-30", DatetimeInterval.months(1))
    >>> [d.format("YYYY-MM-DD") for d in p]
    ['2024-01-31', '2024-02-29', '2024-03-29', '2024-04-29']
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from kalends.config import resolve
from kalends.core.datetime import Datetime, DatetimeInput
from kalends.core.interval import DatetimeInterval
from kalends.errors import InvalidInputError

logger = logging.getLogger(__name__)


class DatetimePeriod:
    """A range of instants from start toward end, one interval apart.

    Iteration yields start, start + interval, start + 2 intervals, ...
    for as long as the value is not after end. Each step applies the
    interval to the previous value (years first, milliseconds last), so
    month clamping accumulates: Jan 31 stepping by one month gives
    Feb 29, then Mar 29.

    A period whose start is after its end yields start once.

    Note:
        An interval that never moves forward (all zero, or negative with
        start <= end) makes iteration infinite. Bound such traversals on
        the caller side, e.g. with itertools.islice.

    Attributes:
        start: The first instant.
        end: The inclusive upper bound.
        interval: The step between instants.
    """

    __slots__ = ("_start", "_end", "_interval")

    def __init__(
        self,
        start: DatetimeInput,
        end: DatetimeInput,
        interval: DatetimeInterval | None = None,
    ) -> None:
        """Create a period.

        Args:
            start: The first instant, any Datetime constructor input.
            end: The inclusive bound, any Datetime constructor input.
            interval: The step; defaults to one day.

        Raises:
            InvalidInputError: If interval is not a DatetimeInterval.
        """
        if interval is None:
            interval = DatetimeInterval.days(1)
        if not isinstance(interval, DatetimeInterval):
            raise InvalidInputError(
                f"interval must be a DatetimeInterval, got {type(interval).__name__}"
            )
        self._start = Datetime(start)
        self._end = Datetime(end)
        self._interval = interval

    @property
    def start(self) -> Datetime:
        return self._start

    @property
    def end(self) -> Datetime:
        return self._end

    @property
    def interval(self) -> DatetimeInterval:
        return self._interval

    def __iter__(self) -> Iterator[Datetime]:
        """Yield the instants of the period, recomputed on every call."""
        current = self._start.clone()
        end = self._end
        yielded = False

        if self._interval.is_zero and not current.is_after(end) and resolve("verbose"):
            logger.debug("Iterating %r with a zero interval never advances", self)

        while current.is_before(end) or current.is_same(end):
            yield current.clone()
            yielded = True
            current = current.add_interval(self._interval)
            if current.is_after(end):
                break

        if not yielded and self._start.is_after(end):
            yield self._start.clone()

    def to_list(self) -> list[Datetime]:
        """Materialize the period.

        Examples:
            >>> len(DatetimePeriod("2024-01-01", "2024-01-01T12:00:00Z",
            ...                    DatetimeInterval.hours(6)).to_list())
            3
        """
        return list(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatetimePeriod):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._interval == other._interval
        )

    def __hash__(self) -> int:
        return hash((self._start, self._end, self._interval))

    def __repr__(self) -> str:
        return (
            f"DatetimePeriod({self._start.to_iso_string()!r}, "
            f"{self._end.to_iso_string()!r}, {self._interval!r})"
        )


__all__ = ["DatetimePeriod"]
