"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, todoctl.toml only contains overrides.
An empty (or absent) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    directory: str = "data"
    file_name: str = "tasks.txt"


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    show_banner: bool = True

