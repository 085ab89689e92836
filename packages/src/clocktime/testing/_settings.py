"""Test factory for clocktime Settings.

Provides :func:`make_settings`, a convenience factory that creates
:class:`~clocktime.Settings` instances without depending on ``.env``
files or real environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from clocktime._settings import Settings


class _IsolatedSettings(Settings):
    """Settings subclass that ignores all ambient configuration sources.

    Overrides :meth:`settings_customise_sources` to return only
    ``init_settings``, stripping the environment, dotenv and secrets
    sources so tests are deterministic regardless of the host.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


def make_settings(**overrides: Any) -> Settings:
    """Create a ``Settings`` instance with model defaults plus *overrides*.

    Example::

        settings = make_settings()
        assert settings.clock.implementation == "lazy"

        from clocktime import ClockSettings
        eager = make_settings(clock=ClockSettings(implementation="eager"))
    """
    # _env_file is a valid pydantic-settings runtime kwarg that is not
    # reflected in the generated __init__ signature.
    return _IsolatedSettings(_env_file=None, **overrides)  # type: ignore[call-arg]
