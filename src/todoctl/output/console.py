"""Rich Console factory and theme for todoctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TODO_THEME = Theme(
    {
        "todo.ok": "bold green",
        "todo.error": "bold red",
        "todo.warning": "bold yellow",
        "todo.op": "bold cyan",
        "todo.key": "dim",
        "todo.index": "bold blue",
        "todo.done": "green",
        "todo.pending": "dim",
        "todo.label": "magenta",
        "todo.kind.todo": "yellow",
        "todo.kind.deadline": "red",
        "todo.kind.event": "cyan",
    }
)

_KIND_STYLES: dict[str, str] = {
    "todo": "todo.kind.todo",
    "deadline": "todo.kind.deadline",
    "event": "todo.kind.event",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TODO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a task kind."""
    return _KIND_STYLES.get(kind, "")
