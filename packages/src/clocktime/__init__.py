"""clocktime.

A lightweight, mutable duration value stored in milliseconds, with
hour/minute/second decomposition, unit conversion, consume/extend
arithmetic and pattern-based formatting.
"""

from importlib.metadata import PackageNotFoundError, version

from clocktime._clock import ClockPort, SystemClock
from clocktime._clock_time import ClockTime
from clocktime._countdown import Countdown, run_countdown
from clocktime._eager import EagerClockTime
from clocktime._errors import ClockTimeError, ConfigurationError
from clocktime._factory import ClockTimeFactory, build_factory
from clocktime._format import DEFAULT_PATTERN, format_clock
from clocktime._lazy import LazyClockTime
from clocktime._logging import JsonFormatter, configure_logging
from clocktime._settings import ClockSettings, LoggingSettings, Settings

try:
    __version__ = version("clocktime")
except PackageNotFoundError:
    # Fallback for source checkouts without installed metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Values
    "ClockTime",
    "EagerClockTime",
    "LazyClockTime",
    # Formatting
    "DEFAULT_PATTERN",
    "format_clock",
    # Factory
    "ClockTimeFactory",
    "build_factory",
    # Countdown
    "ClockPort",
    "Countdown",
    "SystemClock",
    "run_countdown",
    # Errors
    "ClockTimeError",
    "ConfigurationError",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "ClockSettings",
    "LoggingSettings",
    "Settings",
]
