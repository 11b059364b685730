"""Command: interactive task session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext

BANNER = "todoctl — type 'help' for commands, 'exit' to quit."


def run_shell(app: AppContext) -> None:
    """Run the read-eval-print loop until ``exit`` or end of input."""
    from todoctl.output.display import prompt_lines

    if app.settings.shell.show_banner and not app.settings.json_output:
        app.display.show(BANNER)
    session = app.session
    session.run(prompt_lines(app.settings.shell.prompt), app.render)


@click.command(
    cls=TodoCommand,
    examples="""\
  todoctl shell
  todoctl --data-file ~/tasks.txt shell
  todoctl --json shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Start an interactive session (the default with no subcommand)."""
    run_shell(app)
