"""Unified settings: init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: explicit overrides passed by the caller
  2. Env vars: ``LAZYGRAPH_*`` prefix
  3. TOML file: ``lazygraph.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`lazygraph.config.discovery`.

Library functions read defaults through :func:`get_settings`, which loads
the settings once per process. :func:`use_settings` installs an explicit
instance (or resets to lazy loading with ``None``).
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from lazygraph.config.discovery import find_config, read_toml
from lazygraph.config.models import DotConfig, SearchConfig, TraversalConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``lazygraph.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class LazyGraphSettings(BaseSettings):
    """Unified settings for lazygraph.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Enable DEBUG logging for the ``lazygraph`` logger.
        log_json: Render log lines as JSON instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LAZYGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- Logging flags ---
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections (reuse frozen models) ---
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    dot: DotConfig = Field(default_factory=DotConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> LazyGraphSettings:
        """Construct settings from every source.

        Discovers ``lazygraph.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges *overrides* with the highest
        priority.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


_active: LazyGraphSettings | None = None


def get_settings() -> LazyGraphSettings:
    """Return the process settings, loading them on first use."""
    global _active
    if _active is None:
        _active = LazyGraphSettings.load()
    return _active


def use_settings(settings: LazyGraphSettings | None) -> None:
    """Install *settings* as the process settings (``None`` reloads lazily)."""
    global _active
    _active = settings
