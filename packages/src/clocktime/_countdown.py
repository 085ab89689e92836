"""Countdown timer driven by a monotonic clock.

A :class:`Countdown` owns a :class:`~clocktime.ClockTime` holding the
remaining time.  Each :meth:`Countdown.tick` reads the injected
:class:`~clocktime.ClockPort` and consumes the wall time elapsed since
the previous tick, so remaining time stays accurate however irregular
the ticks are.  Consumption clamps at zero; a countdown never goes
negative.

:func:`run_countdown` drives a countdown from an asyncio task::

    countdown = Countdown(LazyClockTime.from_minutes(25), SystemClock())
    await run_countdown(countdown, on_tick=lambda t: print(t))
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from clocktime._clock import ClockPort
from clocktime._clock_time import MILLISECONDS_IN_SECOND, ClockTime

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]
TickCallback = Callable[[ClockTime], None]


class Countdown:
    """Remaining-time tracker.

    Args:
        remaining: Time left on the countdown.  Mutated in place by
            :meth:`tick` and :meth:`extend`; pass a clone if the
            caller needs to keep the original.
        clock: Monotonic time source.
    """

    def __init__(self, remaining: ClockTime, clock: ClockPort) -> None:
        self._remaining = remaining
        self._clock = clock
        self._last = clock.now()

    @property
    def remaining(self) -> ClockTime:
        return self._remaining

    @property
    def expired(self) -> bool:
        """``True`` once no time is left."""
        return not self._remaining

    def tick(self) -> float:
        """Consume the time elapsed since the previous tick.

        Returns:
            The elapsed time in milliseconds that was consumed
            (before clamping).
        """
        now = self._clock.now()
        elapsed = (now - self._last) * MILLISECONDS_IN_SECOND
        self._last = now
        self._remaining.consume(elapsed)
        return elapsed

    def extend(self, milliseconds: float) -> None:
        """Add *milliseconds* to the remaining time."""
        self._remaining.extend(milliseconds)


async def run_countdown(
    countdown: Countdown,
    *,
    interval: float = 1.0,
    on_tick: TickCallback | None = None,
    sleep: SleepFunc = asyncio.sleep,
) -> None:
    """Tick *countdown* every *interval* seconds until it expires.

    *on_tick* receives the remaining time after every tick, including
    the final one that reaches zero.

    Args:
        countdown: The countdown to drive.
        interval: Seconds between ticks.  Must be positive.
        on_tick: Optional callback invoked after each tick.
        sleep: Awaitable sleep function, injectable for tests.

    Raises:
        ValueError: If *interval* is not positive.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")

    logger.info("Countdown started with %s remaining", countdown.remaining)
    while not countdown.expired:
        await sleep(interval)
        countdown.tick()
        if on_tick is not None:
            on_tick(countdown.remaining)
    logger.info("Countdown expired")
