"""Abstract clock-time value type.

A :class:`ClockTime` is an amount of elapsed time stored as a count of
milliseconds and decomposed into hour/minute/second components for
display::

    hour   = floor(ms / 3_600_000)          # unbounded, never wraps at 24
    minute = floor(ms / 60_000) mod 60
    second = floor(ms / 1_000) mod 60

Concrete subclasses decide how the components are stored (see
:class:`~clocktime.LazyClockTime` and :class:`~clocktime.EagerClockTime`).
Everything that can be expressed in terms of ``milliseconds`` and the
two mutators lives here, so both storage strategies share the unit
conversions, the convenience mutators, formatting and the Python
comparison/arithmetic protocols.

Values are **mutable**: ``consume`` and ``extend`` change the receiver
in place and return it for chaining.  Use :meth:`ClockTime.clone` (or
the ``+`` / ``-`` operators, which always build a new value) when an
independent copy is needed.

Mutation is not thread-safe.  Confine each instance to a single thread
or task, or guard it with an external lock.
"""

from __future__ import annotations

import functools
import math
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Self

from clocktime._format import DEFAULT_PATTERN, format_clock

SECOND_IN_MINUTE = 60
MINUTE_IN_HOUR = 60
MILLISECONDS_IN_SECOND = 1000
MILLISECONDS_IN_MINUTE = 60_000
MILLISECONDS_IN_HOUR = 3_600_000


def split_milliseconds(milliseconds: float) -> tuple[int, int, int]:
    """Decompose *milliseconds* into ``(hour, minute, second)``.

    Uses floor division, so fractional milliseconds are truncated
    toward negative infinity.
    """
    hour = int(milliseconds // MILLISECONDS_IN_HOUR)
    minute = int(milliseconds // MILLISECONDS_IN_MINUTE) % MINUTE_IN_HOUR
    second = int(milliseconds // MILLISECONDS_IN_SECOND) % SECOND_IN_MINUTE
    return hour, minute, second


def parts_to_milliseconds(hour: float, minute: float, second: float) -> float:
    """Combine an ``(hour, minute, second)`` triple into milliseconds."""
    return (
        hour * MILLISECONDS_IN_HOUR
        + minute * MILLISECONDS_IN_MINUTE
        + second * MILLISECONDS_IN_SECOND
    )


@functools.total_ordering
class ClockTime(ABC):
    """Base class for clock-time values.

    Subclasses must accept a single ``milliseconds`` positional
    argument in their constructor and implement the four accessors
    plus :meth:`consume` and :meth:`extend`.

    Example::

        t = LazyClockTime.from_minutes(90)
        t.to_hours()              # 1.5
        t.consume_minute(5)
        t.format("h:mm")          # '1:25'
    """

    SECOND_IN_MINUTE = SECOND_IN_MINUTE
    MINUTE_IN_HOUR = MINUTE_IN_HOUR
    MILLISECONDS_IN_SECOND = MILLISECONDS_IN_SECOND
    MILLISECONDS_IN_MINUTE = MILLISECONDS_IN_MINUTE
    MILLISECONDS_IN_HOUR = MILLISECONDS_IN_HOUR

    # -- construction -------------------------------------------------------

    @classmethod
    def from_milliseconds(cls, milliseconds: float = 0) -> Self:
        """Create a value holding *milliseconds*."""
        return cls(milliseconds)

    @classmethod
    def from_seconds(cls, seconds: float) -> Self:
        """Create a value from a number of seconds."""
        return cls(seconds * MILLISECONDS_IN_SECOND)

    @classmethod
    def from_minutes(cls, minutes: float) -> Self:
        """Create a value from a number of minutes."""
        return cls(minutes * MILLISECONDS_IN_MINUTE)

    @classmethod
    def from_hours(cls, hours: float) -> Self:
        """Create a value from a number of hours."""
        return cls(hours * MILLISECONDS_IN_HOUR)

    @classmethod
    def from_parts(cls, hour: float, minute: float, second: float) -> Self:
        """Create a value from an ``(hour, minute, second)`` triple.

        The parts need not be normalised: ``from_parts(0, 75, 0)`` is
        the same duration as ``from_parts(1, 15, 0)``.
        """
        return cls(parts_to_milliseconds(hour, minute, second))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        """Create a value from a :class:`~datetime.timedelta`.

        Sub-millisecond precision is floored away.
        """
        return cls(delta // timedelta(milliseconds=1))

    def clone(self) -> Self:
        """Return an independent copy with the same millisecond value."""
        return type(self)(self.milliseconds)

    __copy__ = clone

    # -- accessors ----------------------------------------------------------

    @property
    @abstractmethod
    def milliseconds(self) -> float:
        """The duration in milliseconds."""

    @property
    @abstractmethod
    def hour(self) -> int:
        """Hour component, unbounded above."""

    @property
    @abstractmethod
    def minute(self) -> int:
        """Minute component, ``0`` to ``59``."""

    @property
    @abstractmethod
    def second(self) -> int:
        """Second component, ``0`` to ``59``."""

    # -- mutation -----------------------------------------------------------

    @abstractmethod
    def consume(self, milliseconds: float) -> Self:
        """Subtract *milliseconds*, clamping the result at zero.

        Returns:
            ``self``, for chaining.
        """

    @abstractmethod
    def extend(self, milliseconds: float) -> Self:
        """Add *milliseconds* with no upper bound.

        Returns:
            ``self``, for chaining.
        """

    def consume_time(self, other: ClockTime) -> Self:
        """Subtract the duration held by *other* (clamped at zero)."""
        return self.consume(other.milliseconds)

    def extend_time(self, other: ClockTime) -> Self:
        """Add the duration held by *other*."""
        return self.extend(other.milliseconds)

    def consume_second(self, seconds: float) -> Self:
        return self.consume(seconds * MILLISECONDS_IN_SECOND)

    def consume_minute(self, minutes: float) -> Self:
        return self.consume(minutes * MILLISECONDS_IN_MINUTE)

    def consume_hour(self, hours: float) -> Self:
        return self.consume(hours * MILLISECONDS_IN_HOUR)

    def extend_second(self, seconds: float) -> Self:
        return self.extend(seconds * MILLISECONDS_IN_SECOND)

    def extend_minute(self, minutes: float) -> Self:
        return self.extend(minutes * MILLISECONDS_IN_MINUTE)

    def extend_hour(self, hours: float) -> Self:
        return self.extend(hours * MILLISECONDS_IN_HOUR)

    # -- conversion ---------------------------------------------------------

    def to_seconds(self) -> float:
        """Return the duration in seconds, without rounding."""
        return self.milliseconds / MILLISECONDS_IN_SECOND

    def to_minutes(self) -> float:
        """Return the duration in minutes, without rounding."""
        return self.milliseconds / MILLISECONDS_IN_MINUTE

    def to_hours(self) -> float:
        """Return the duration in hours, without rounding."""
        return self.milliseconds / MILLISECONDS_IN_HOUR

    def to_seconds_int(self) -> int:
        """Return the duration in whole seconds (floored)."""
        return math.floor(self.to_seconds())

    def to_minutes_int(self) -> int:
        """Return the duration in whole minutes (floored)."""
        return math.floor(self.to_minutes())

    def to_hours_int(self) -> int:
        """Return the duration in whole hours (floored)."""
        return math.floor(self.to_hours())

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.milliseconds)

    def format(self, pattern: str = DEFAULT_PATTERN) -> str:
        """Render the value with an ``hh``/``mm``/``ss`` pattern.

        See :func:`clocktime._format.format_clock` for the token rules.
        """
        return format_clock(self.hour, self.minute, self.second, pattern)

    # -- Python protocols ---------------------------------------------------

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(milliseconds={self.milliseconds!r})"

    def __bool__(self) -> bool:
        return self.milliseconds != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.milliseconds == other.milliseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.milliseconds < other.milliseconds

    def __add__(self, other: object) -> Self:
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.clone().extend_time(other)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.clone().consume_time(other)
