"""Pattern-based rendering of hour/minute/second triples.

Patterns are case-insensitive and use six tokens::

    hh / mm / ss   zero-padded to two digits (wider values kept whole)
    h  / m  / s    unpadded

Substitution order is ``hh``, ``mm``, ``ss``, ``h``, ``m``, ``s`` so
that two-letter tokens are consumed before their one-letter prefixes.
Each token replaces its **first occurrence only**, so a repeated
token leaks into the shorter token's pass::

    >>> format_clock(1, 2, 3, "hh hh")
    '01 1h'

A substituted value can never re-introduce a token since values are
digits only.
"""

from __future__ import annotations

DEFAULT_PATTERN = "hh:mm:ss"


def format_clock(
    hour: int,
    minute: int,
    second: int,
    pattern: str = DEFAULT_PATTERN,
) -> str:
    """Render *hour*, *minute* and *second* according to *pattern*.

    Args:
        hour: Hour component (unbounded).
        minute: Minute component.
        second: Second component.
        pattern: Format pattern; see module docstring for tokens.

    Returns:
        The rendered string.  Characters that are not tokens are kept
        as-is (after lower-casing).
    """
    h, m, s = str(hour), str(minute), str(second)
    substitutions = (
        ("hh", h.zfill(2)),
        ("mm", m.zfill(2)),
        ("ss", s.zfill(2)),
        ("h", h),
        ("m", m),
        ("s", s),
    )

    result = pattern.lower()
    for token, value in substitutions:
        result = result.replace(token, value, 1)
    return result
