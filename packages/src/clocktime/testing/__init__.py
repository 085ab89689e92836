"""Public test-support utilities for clocktime.

Re-exports test doubles and factories so that consumer test suites
can import everything from a single ``clocktime.testing`` namespace
instead of reaching into private modules.

Provided symbols:

- :class:`FakeClock`: manually advanced clock for countdown tests.
- :func:`make_settings`: factory for ``Settings`` without ``.env`` files.
"""

from clocktime.testing._clock import FakeClock
from clocktime.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
