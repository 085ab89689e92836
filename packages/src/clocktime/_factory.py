"""Injectable factory for building clock-time values.

Application code that should not care *which* storage strategy backs
its values takes a :class:`ClockTimeFactory` as a dependency instead
of naming :class:`~clocktime.LazyClockTime` or
:class:`~clocktime.EagerClockTime` directly::

    def start_timer(factory: ClockTimeFactory) -> ClockTime:
        return factory.of_minutes(25)

    factory = build_factory(Settings())
    timer = start_timer(factory)

No process-wide default factory exists.  Each application builds one
at start-up (usually via :func:`build_factory`) and passes it to the
code that needs it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from clocktime._clock_time import ClockTime
from clocktime._eager import EagerClockTime
from clocktime._errors import ConfigurationError
from clocktime._lazy import LazyClockTime
from clocktime._settings import ClockSettings, Settings

logger = logging.getLogger(__name__)

IMPLEMENTATIONS: dict[str, type[ClockTime]] = {
    "lazy": LazyClockTime,
    "eager": EagerClockTime,
}


@dataclass
class ClockTimeFactory:
    """Builds values of a configurable :class:`ClockTime` subclass.

    Args:
        implementation: The concrete class to instantiate.  May be
            left unset and registered later with
            :meth:`set_implementation`.

    Raises:
        ConfigurationError: From every ``of*`` method while no
            implementation is registered.
    """

    implementation: type[ClockTime] | None = None

    def set_implementation(self, implementation: type[ClockTime]) -> None:
        """Register *implementation*, replacing any previous one.

        Not synchronised; register before sharing the factory across
        threads.
        """
        if self.implementation is not None:
            logger.debug(
                "Replacing ClockTime implementation %s with %s",
                self.implementation.__name__,
                implementation.__name__,
            )
        else:
            logger.debug("Registered ClockTime implementation %s", implementation.__name__)
        self.implementation = implementation

    def _require(self) -> type[ClockTime]:
        if self.implementation is None:
            raise ConfigurationError("no ClockTime implementation registered")
        return self.implementation

    def of(self, milliseconds: float = 0) -> ClockTime:
        """Create a value holding *milliseconds*."""
        return self._require().from_milliseconds(milliseconds)

    def of_seconds(self, seconds: float) -> ClockTime:
        return self._require().from_seconds(seconds)

    def of_minutes(self, minutes: float) -> ClockTime:
        return self._require().from_minutes(minutes)

    def of_hours(self, hours: float) -> ClockTime:
        return self._require().from_hours(hours)

    def of_parts(self, hour: float, minute: float, second: float) -> ClockTime:
        """Create a value from an ``(hour, minute, second)`` triple."""
        return self._require().from_parts(hour, minute, second)


def build_factory(settings: Settings | ClockSettings) -> ClockTimeFactory:
    """Create a :class:`ClockTimeFactory` from configuration.

    Args:
        settings: Root :class:`Settings` or just its
            :class:`ClockSettings` section.

    Returns:
        A factory with the configured implementation registered.

    Raises:
        ConfigurationError: If the configured implementation name is
            unknown.  Only reachable when validation was bypassed
            (e.g. ``model_construct``).
    """
    clock = settings.clock if isinstance(settings, Settings) else settings
    try:
        implementation = IMPLEMENTATIONS[clock.implementation]
    except KeyError:
        raise ConfigurationError(
            f"Unknown ClockTime implementation '{clock.implementation}'. "
            f"Choose from: {', '.join(IMPLEMENTATIONS)}"
        ) from None
    return ClockTimeFactory(implementation)
