"""Eagerly cached clock-time value.

Stores hour, minute and second alongside the millisecond count and
recomputes all three whenever the value changes, so reads are plain
attribute lookups.  Functionally equivalent to
:class:`~clocktime.LazyClockTime`; choose it when components are read
far more often than the value is mutated (e.g. a display refreshed
many times per tick).
"""

from __future__ import annotations

from typing import Self

from clocktime._clock_time import ClockTime, parts_to_milliseconds, split_milliseconds


class EagerClockTime(ClockTime):
    """Clock-time value with cached hour/minute/second components.

    Args:
        milliseconds: Initial duration.  Defaults to ``0``.
    """

    def __init__(self, milliseconds: float = 0) -> None:
        self._milliseconds = milliseconds
        self._compute()

    @classmethod
    def from_parts(cls, hour: float, minute: float, second: float) -> Self:
        """Create a value from an ``(hour, minute, second)`` triple.

        The given parts are cached verbatim and the millisecond count
        is derived from them.  Parts outside their normal range (e.g.
        ``minute=75``) are reported as given until the next
        ``consume``/``extend`` normalises them.
        """
        instance = cls(parts_to_milliseconds(hour, minute, second))
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        return instance

    @property
    def milliseconds(self) -> float:
        return self._milliseconds

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    def consume(self, milliseconds: float) -> Self:
        self._milliseconds = max(self._milliseconds - milliseconds, 0)
        self._compute()
        return self

    def extend(self, milliseconds: float) -> Self:
        self._milliseconds += milliseconds
        self._compute()
        return self

    def _compute(self) -> None:
        """Refresh the cached components from the millisecond count."""
        self._hour, self._minute, self._second = split_milliseconds(
            self._milliseconds
        )
