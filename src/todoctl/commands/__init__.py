"""Subcommand modules for todoctl.

Provides register_commands() which uses deferred imports to keep
``todoctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from todoctl.commands.do import do
    from todoctl.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(do)
