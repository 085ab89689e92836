"""Monotonic clock port and system adapter.

Provides ClockPort (Protocol) and SystemClock for measuring the wall
time a :class:`~clocktime.Countdown` consumes between ticks.

time.monotonic() is immune to NTP adjustments and manual system-clock
changes.  The epoch is arbitrary; only *differences* between now()
calls are meaningful (PEP 418).
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Monotonic clock for timing measurements.

    The default implementation wraps ``time.monotonic()``.  Tests
    inject :class:`clocktime.testing.FakeClock` for reproducible
    timing.
    """

    def now(self) -> float:
        """Return monotonic time in seconds.

        Returns:
            A float representing seconds from an arbitrary epoch.
            Only the *difference* between two calls is meaningful.
        """
        ...


class SystemClock:
    """Production clock wrapping ``time.monotonic()``.

    Satisfies :class:`ClockPort` via structural subtyping (PEP 544).
    """

    def now(self) -> float:
        """Return monotonic time in seconds."""
        return time.monotonic()
