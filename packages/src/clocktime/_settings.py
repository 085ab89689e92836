"""Configuration via pydantic-settings.

Settings are loaded from environment variables prefixed with
``CLOCKTIME_`` and/or a ``.env`` file.  Nested models use ``__`` as
the delimiter, e.g. ``CLOCKTIME_CLOCK__IMPLEMENTATION=eager``.

Two concerns are configurable:

* **Clock**: which :class:`~clocktime.ClockTime` implementation
  :func:`~clocktime.build_factory` wires up, and the default display
  pattern used by the command line.
* **Logging**: level, format, optional file sink, rotation.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from clocktime._format import DEFAULT_PATTERN

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings; nested via composition)
# -------------------------------------------------------------------


class ClockSettings(BaseModel):
    """Clock-time implementation and display configuration.

    Environment variables (with ``__`` nesting)::

        CLOCKTIME_CLOCK__IMPLEMENTATION=eager
        CLOCKTIME_CLOCK__DEFAULT_FORMAT=h:mm:ss
    """

    implementation: Literal["lazy", "eager"] = Field(
        default="lazy",
        description=(
            "Storage strategy for values built by the factory. "
            "'lazy' derives hour/minute/second on every read; "
            "'eager' caches them and recomputes on mutation."
        ),
    )
    default_format: str = Field(
        default=DEFAULT_PATTERN,
        min_length=1,
        description="Pattern used when no explicit pattern is given.",
    )


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"text"`` (default): human-readable timestamped lines.
    - ``"json"``: structured JSON lines for log aggregators.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for clocktime.

    Example ``.env``::

        CLOCKTIME_CLOCK__IMPLEMENTATION=eager
        CLOCKTIME_LOGGING__LEVEL=DEBUG
        CLOCKTIME_LOGGING__FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOCKTIME_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    clock: ClockSettings = Field(
        default_factory=ClockSettings,
        description="Clock-time implementation settings.",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
