"""Display and line-source collaborators for an interactive session.

A display accepts pre-formatted text. A line source is any iterable of
raw input lines; iteration ends at end of input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

import click

LineSource = Iterable[str]


class Display(Protocol):
    """Anything that can show a pre-formatted message."""

    def show(self, message: str) -> None: ...


class ConsoleDisplay:
    """Display writing to stdout (or stderr) through Click."""

    def __init__(self, *, err: bool = False) -> None:
        self._err = err

    def show(self, message: str) -> None:
        click.echo(message, err=self._err)


def prompt_lines(prompt: str) -> Iterator[str]:
    """Yield lines typed at *prompt* until end of input."""
    while True:
        try:
            line = click.prompt(
                prompt.rstrip(),
                default="",
                show_default=False,
                prompt_suffix=" " if prompt.endswith(" ") else "",
            )
        except (EOFError, click.Abort):
            return
        yield line
