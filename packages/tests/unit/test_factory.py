"""Unit tests for clocktime._factory — implementation selection.

Test Techniques Used:
    - Specification-based Testing: Factory methods delegate to the
      registered class
    - Error Condition Testing: Unconfigured factory, unknown
      implementation name
    - State Transition Testing: Last-write-wins registration
"""

from __future__ import annotations

import logging

import pytest

from clocktime import (
    ClockSettings,
    ClockTimeError,
    ClockTimeFactory,
    ConfigurationError,
    EagerClockTime,
    LazyClockTime,
    build_factory,
)
from clocktime.testing import make_settings


class TestUnconfiguredFactory:
    """A factory without an implementation refuses to build.

    Technique: Error Condition Testing.
    """

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("of", ()),
            ("of_seconds", (1,)),
            ("of_minutes", (1,)),
            ("of_hours", (1,)),
            ("of_parts", (1, 2, 3)),
        ],
    )
    def test_raises_configuration_error(self, method: str, args: tuple[int, ...]) -> None:
        factory = ClockTimeFactory()
        with pytest.raises(ConfigurationError, match="no ClockTime implementation"):
            getattr(factory, method)(*args)

    def test_configuration_error_is_clocktime_error(self) -> None:
        assert issubclass(ConfigurationError, ClockTimeError)


class TestRegistration:
    """set_implementation() replaces the previous class.

    Technique: State Transition Testing.
    """

    def test_register_then_build(self) -> None:
        factory = ClockTimeFactory()
        factory.set_implementation(EagerClockTime)
        assert isinstance(factory.of(1), EagerClockTime)

    def test_last_write_wins(self) -> None:
        factory = ClockTimeFactory(LazyClockTime)
        factory.set_implementation(EagerClockTime)
        factory.set_implementation(LazyClockTime)
        assert type(factory.of()) is LazyClockTime

    def test_factories_are_independent(self) -> None:
        lazy = ClockTimeFactory(LazyClockTime)
        eager = ClockTimeFactory(EagerClockTime)
        assert type(lazy.of()) is LazyClockTime
        assert type(eager.of()) is EagerClockTime

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        factory = ClockTimeFactory(LazyClockTime)
        with caplog.at_level(logging.DEBUG, logger="clocktime._factory"):
            factory.set_implementation(EagerClockTime)
        assert "Replacing ClockTime implementation LazyClockTime with EagerClockTime" in (
            caplog.text
        )


class TestFactoryMethods:
    """of* methods delegate to the registered class.

    Technique: Specification-based Testing.
    """

    def test_of_defaults_to_zero(self, clock_factory: ClockTimeFactory) -> None:
        assert clock_factory.of().milliseconds == 0

    def test_of(self, clock_factory: ClockTimeFactory) -> None:
        assert clock_factory.of(4_532_500).format() == "01:15:32"

    def test_unit_methods(self, clock_factory: ClockTimeFactory) -> None:
        assert clock_factory.of_seconds(100).second == 40
        assert clock_factory.of_minutes(50).minute == 50
        assert clock_factory.of_hours(10).hour == 10

    def test_of_parts_uses_implementation_semantics(
        self, eager_factory: ClockTimeFactory
    ) -> None:
        """Eager from_parts caches parts verbatim."""
        assert eager_factory.of_parts(0, 75, 0).minute == 75

    def test_clone_keeps_implementation(self, eager_factory: ClockTimeFactory) -> None:
        assert type(eager_factory.of(5).clone()) is EagerClockTime


class TestBuildFactory:
    """build_factory() wires the configured implementation.

    Technique: Specification-based Testing.
    """

    def test_default_is_lazy(self) -> None:
        assert build_factory(make_settings()).implementation is LazyClockTime

    def test_eager_from_root_settings(self) -> None:
        settings = make_settings(clock=ClockSettings(implementation="eager"))
        assert build_factory(settings).implementation is EagerClockTime

    def test_accepts_clock_section(self) -> None:
        factory = build_factory(ClockSettings(implementation="eager"))
        assert factory.implementation is EagerClockTime

    def test_unknown_implementation_raises(self) -> None:
        """Only reachable when pydantic validation is bypassed."""
        clock = ClockSettings.model_construct(implementation="bogus")
        with pytest.raises(ConfigurationError, match="bogus"):
            build_factory(clock)
