"""Lazily computed clock-time value (the default implementation).

Only the millisecond count is stored; hour, minute and second are
derived from it on every access.  This keeps mutation trivial and is
the implementation :class:`~clocktime.ClockSettings` selects unless
configured otherwise.
"""

from __future__ import annotations

from typing import Self

from clocktime._clock_time import ClockTime, split_milliseconds


class LazyClockTime(ClockTime):
    """Clock-time value that recomputes its components on access.

    Args:
        milliseconds: Initial duration.  Defaults to ``0``.
    """

    def __init__(self, milliseconds: float = 0) -> None:
        self._milliseconds = milliseconds

    @property
    def milliseconds(self) -> float:
        return self._milliseconds

    @property
    def hour(self) -> int:
        return split_milliseconds(self._milliseconds)[0]

    @property
    def minute(self) -> int:
        return split_milliseconds(self._milliseconds)[1]

    @property
    def second(self) -> int:
        return split_milliseconds(self._milliseconds)[2]

    def consume(self, milliseconds: float) -> Self:
        self._milliseconds -= milliseconds
        if self._milliseconds <= 0:
            self._milliseconds = 0
        return self

    def extend(self, milliseconds: float) -> Self:
        self._milliseconds += milliseconds
        return self
