"""Command: run a single session command and exit."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext


@click.command(
    cls=TodoCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  todoctl do todo read book
  todoctl do deadline return book /by 2023-12-25
  todoctl do event team sync /at Mon 2-4pm
  todoctl do done 2
  todoctl --json do list""",
)
@click.argument("words", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def do(app: AppContext, words: tuple[str, ...]) -> None:
    """Run one command line (e.g. 'todo read book') against the saved list."""
    result = app.session.handle(" ".join(words))
    app.emit(result)
