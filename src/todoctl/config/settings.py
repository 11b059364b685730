"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TODOCTL_*`` prefix
  3. TOML file    — ``todoctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses ``find_config`` and ``read_config`` from
:mod:`todoctl.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from todoctl.config.discovery import find_config, read_config
from todoctl.config.models import ShellConfig, StorageConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``todoctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TodoSettings(BaseSettings):
    """Unified settings for the todoctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        root: Directory relative paths resolve against (parent of
            ``todoctl.toml``, or CWD if no config found).
        config_path: The TOML file in use, or None.
        data_file: Explicit backing-file override, or None for the
            ``[storage]`` section's location.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TODOCTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML — derived from config location) ---
    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    data_file: Path | None = None

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)

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

    @property
    def resolved_data_file(self) -> Path:
        """Absolute path of the backing file."""
        path = self.data_file or Path(self.storage.directory) / self.storage.file_name
        return path if path.is_absolute() else self.root / path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> TodoSettings:
        """Construct settings from CLI invocation.

        Discovers ``todoctl.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.  Flags passed
        as None are dropped so lower-priority sources still apply.
        """
        toml_path = find_config(root, explicit=config_path)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **flags,
            )
        finally:
            _tls.toml_path = None
