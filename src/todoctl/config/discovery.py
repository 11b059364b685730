"""Locating and reading todoctl.toml.

Lookup order: the ``--config`` path, then the TODOCTL_CONFIG env var, then
a walk up from the starting directory to the filesystem root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "todoctl.toml"
CONFIG_ENV_VAR = "TODOCTL_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the config file to use, or None to run on defaults.

    An *explicit* path or the env var is taken as given: if it names no
    file, no config is used and the walk-up is skipped.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None
    return _walk_up((start or Path.cwd()).resolve())


def _walk_up(directory: Path) -> Path | None:
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: if the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
