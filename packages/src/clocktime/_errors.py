"""Exception hierarchy for clocktime.

Value operations (construction, consume/extend, conversion, formatting)
are total over their numeric domain and never raise.  The only failure
mode is *configuration*: asking a :class:`~clocktime.ClockTimeFactory`
to build a value before an implementation class has been chosen.

Callers that want to handle every library error in one place catch
:class:`ClockTimeError`.
"""

from __future__ import annotations


class ClockTimeError(Exception):
    """Base class for all clocktime errors."""


class ConfigurationError(ClockTimeError):
    """Raised when a factory is used without a usable implementation.

    Covers both a factory that has no implementation registered and
    a configuration naming an implementation that does not exist.
    """
