"""Command line interface for clocktime (Typer-based).

Provides :func:`build_cli` which constructs a Typer app with three
commands::

    clocktime format 30008000              # 08:20:08
    clocktime format 387000 --pattern mm:ss
    clocktime convert 4532500
    clocktime countdown 90 --interval 1

Global options (``--version``, ``--log-level``, ``--log-format``,
``--env-file``, ``--implementation``) are parsed by the group
callback, which loads :class:`~clocktime.Settings`, applies the
overrides, configures logging and builds the
:class:`~clocktime.ClockTimeFactory` shared by every command.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
from dataclasses import dataclass
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from clocktime import __version__
from clocktime._clock import ClockPort, SystemClock
from clocktime._countdown import Countdown, SleepFunc, run_countdown
from clocktime._errors import ConfigurationError
from clocktime._factory import ClockTimeFactory, build_factory
from clocktime._logging import configure_logging
from clocktime._settings import ClockSettings, LoggingSettings, Settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 3

# ---------------------------------------------------------------------------
# Allowed values (extracted from settings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)
_VALID_IMPLEMENTATIONS: tuple[str, ...] = get_args(
    ClockSettings.model_fields["implementation"].annotation,
)


@dataclass
class CliState:
    """Per-invocation state handed from the callback to commands."""

    settings: Settings
    factory: ClockTimeFactory


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"clocktime v{__version__}")
        raise typer.Exit()


def _validate_choice(value: str | None, choices: tuple[str, ...], option: str) -> None:
    if value is not None and value not in choices:
        raise typer.BadParameter(
            f"Invalid value '{value}'. Choose from: {', '.join(choices)}",
            param_hint=f"'{option}'",
        )


def build_cli(
    *,
    settings_class: type[Settings] = Settings,
    clock: ClockPort | None = None,
    sleep: SleepFunc = asyncio.sleep,
) -> typer.Typer:
    """Construct the ``clocktime`` Typer app.

    Args:
        settings_class: Settings model to load configuration with.
        clock: Monotonic clock for ``countdown``.  Defaults to
            :class:`~clocktime.SystemClock`.
        sleep: Awaitable sleep used by ``countdown`` between ticks.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    cli = typer.Typer(
        help="Format, convert and count down clock-time durations.",
        no_args_is_help=True,
    )

    # -- global options -----------------------------------------------------

    @cli.callback()
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                callback=_version_callback,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
        implementation: Annotated[
            str | None,
            typer.Option(
                "--implementation",
                help="Override the ClockTime storage strategy (lazy or eager).",
            ),
        ] = None,
    ) -> None:
        log_level = log_level.upper() if log_level is not None else None
        log_format = log_format.lower() if log_format is not None else None
        implementation = implementation.lower() if implementation is not None else None
        _validate_choice(log_level, _VALID_LOG_LEVELS, "--log-level")
        _validate_choice(log_format, _VALID_LOG_FORMATS, "--log-format")
        _validate_choice(implementation, _VALID_IMPLEMENTATIONS, "--implementation")

        # -- build settings -------------------------------------------------
        try:
            settings = settings_class(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        # -- apply CLI overrides --------------------------------------------
        if log_level is not None:
            settings.logging = settings.logging.model_copy(update={"level": log_level})
        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format},
            )
        if implementation is not None:
            settings.clock = settings.clock.model_copy(
                update={"implementation": implementation},
            )

        configure_logging(settings.logging, service="clocktime", version=__version__)

        try:
            factory = build_factory(settings)
        except ConfigurationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        ctx.obj = CliState(settings=settings, factory=factory)

    # -- commands -----------------------------------------------------------

    @cli.command("format")
    def format_command(
        ctx: typer.Context,
        milliseconds: Annotated[int, typer.Argument(help="Duration in milliseconds.")],
        pattern: Annotated[
            str | None,
            typer.Option("--pattern", "-p", help="Pattern using hh/mm/ss tokens."),
        ] = None,
    ) -> None:
        """Print a duration using an hh/mm/ss pattern."""
        state: CliState = ctx.obj
        value = state.factory.of(milliseconds)
        typer.echo(value.format(pattern or state.settings.clock.default_format))

    @cli.command("convert")
    def convert_command(
        ctx: typer.Context,
        milliseconds: Annotated[int, typer.Argument(help="Duration in milliseconds.")],
    ) -> None:
        """Print a duration in seconds, minutes and hours."""
        state: CliState = ctx.obj
        value = state.factory.of(milliseconds)
        typer.echo(f"seconds: {value.to_seconds()} ({value.to_seconds_int()})")
        typer.echo(f"minutes: {value.to_minutes()} ({value.to_minutes_int()})")
        typer.echo(f"hours: {value.to_hours()} ({value.to_hours_int()})")

    @cli.command("countdown")
    def countdown_command(
        ctx: typer.Context,
        seconds: Annotated[float, typer.Argument(help="Countdown length in seconds.")],
        interval: Annotated[
            float,
            typer.Option("--interval", "-i", help="Seconds between updates."),
        ] = 1.0,
        pattern: Annotated[
            str | None,
            typer.Option("--pattern", "-p", help="Pattern using hh/mm/ss tokens."),
        ] = None,
    ) -> None:
        """Count down from SECONDS, printing the remaining time."""
        state: CliState = ctx.obj
        resolved_pattern = pattern or state.settings.clock.default_format
        countdown = Countdown(
            state.factory.of_seconds(seconds),
            clock if clock is not None else SystemClock(),
        )
        typer.echo(countdown.remaining.format(resolved_pattern))

        try:
            with contextlib.suppress(KeyboardInterrupt):
                asyncio.run(
                    run_countdown(
                        countdown,
                        interval=interval,
                        on_tick=lambda t: typer.echo(t.format(resolved_pattern)),
                        sleep=sleep,
                    )
                )
        except SystemExit:
            raise
        except Exception as exc:
            logger.error("Runtime error: %s", exc)
            sys.exit(EXIT_RUNTIME_ERROR)

    return cli


def main() -> None:
    """Console-script entry point."""
    build_cli()()
