"""Unit tests for clocktime._format — pattern substitution.

Test Techniques Used:
    - Specification-based Testing: Token table and padding rules
    - Boundary Value Analysis: Single-digit, two-digit, three-digit values
    - Error Guessing: Repeated tokens, upper-case patterns, literal text
"""

from __future__ import annotations

import pytest

from clocktime import DEFAULT_PATTERN, format_clock


class TestTokens:
    """Padded and unpadded tokens.

    Technique: Specification-based Testing.
    """

    def test_default_pattern(self) -> None:
        assert DEFAULT_PATTERN == "hh:mm:ss"
        assert format_clock(8, 20, 8) == "08:20:08"

    def test_unpadded_tokens(self) -> None:
        assert format_clock(1, 2, 3, "h:m:s") == "1:2:3"

    def test_mixed_tokens(self) -> None:
        assert format_clock(1, 2, 3, "h:mm:ss") == "1:02:03"

    def test_partial_pattern(self) -> None:
        assert format_clock(0, 6, 27, "mm:ss") == "06:27"

    def test_literal_text_kept(self) -> None:
        assert format_clock(1, 2, 3, "[hh]-[mm]") == "[01]-[02]"


class TestPadding:
    """Zero padding to width two, never truncating.

    Technique: Boundary Value Analysis.
    """

    @pytest.mark.parametrize(
        ("hour", "expected"),
        [(0, "00"), (9, "09"), (10, "10"), (99, "99"), (123, "123")],
    )
    def test_hour_padding(self, hour: int, expected: str) -> None:
        assert format_clock(hour, 0, 0, "hh") == expected


class TestPatternQuirks:
    """Case folding and first-occurrence substitution.

    Technique: Error Guessing.
    """

    def test_pattern_is_case_insensitive(self) -> None:
        assert format_clock(1, 2, 3, "HH:MM:SS") == "01:02:03"

    def test_repeated_token_replaced_once(self) -> None:
        """Only the first ``hh`` is expanded; the second falls to ``h``."""
        assert format_clock(1, 2, 3, "hh hh") == "01 1h"

    def test_repeated_single_token_replaced_once(self) -> None:
        assert format_clock(1, 2, 3, "s s") == "3 s"

    def test_empty_pattern(self) -> None:
        assert format_clock(1, 2, 3, "") == ""
