"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

Task text always goes through :class:`rich.text.Text` so brackets in a
description are never read as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from todoctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from todoctl.services.result import ServiceResult

_KIND_TAGS: dict[str, str] = {"todo": "T", "deadline": "D", "event": "E"}
_LABEL_PREFIXES: dict[str, str] = {"deadline": "by", "event": "at"}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("index", "")) for item in items)
    if result.op == "date":
        return str(result.data.get("label", ""))

    return f"OK: {result.op}"


def task_line(task: dict[str, Any]) -> Text:
    """Render one task as ``[T][X] description (by: label)``."""
    kind = str(task.get("kind", "todo"))
    tag = _KIND_TAGS.get(kind, "?")
    line = Text()
    line.append(f"[{tag}]", style=style_for_kind(kind))
    if task.get("done"):
        line.append("[X]", style="todo.done")
    else:
        line.append("[ ]", style="todo.pending")
    line.append(f" {task.get('description', '')}")
    label = task.get("label")
    if label is not None:
        prefix = _LABEL_PREFIXES.get(kind, "on")
        line.append(f" ({prefix}: ")
        line.append(str(label), style="todo.label")
        line.append(")")
    return line


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="todo.ok")
    op = Text(f"  {result.op}", style="todo.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="todo.key")
    v = Text(str(value), style="todo.index" if key == "index" else "")
    console.print(k, v, end="")
    console.print()


def _count_line(count: int) -> str:
    return f"{count} task" if count == 1 else f"{count} tasks"


def _task_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of numbered task lines."""
    table = Table(show_header=False, show_lines=False, pad_edge=False, box=None, expand=False)
    table.add_column("#", style="todo.index", justify="right", no_wrap=True)
    table.add_column("Task")
    for item in items:
        table.add_row(f"{item.get('index', '')}.", task_line(item))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="todo.error")
    op = Text(f"  {result.op}", style="todo.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/delete/done results."""
    _status_line(console, result)
    task = result.data.get("task")
    if task:
        console.print(Text("  "), task_line(task))
    if "index" in result.data and verbose:
        _field(console, "index", result.data["index"])
    if "count" in result.data:
        console.print(Text(f"  Now {_count_line(result.data['count'])} in the list."))


# ── Query renderers ───────────────────────────────────────────────────


def _render_task_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list or find results as a numbered table."""
    items = result.data.get("items", [])
    if not items:
        if result.op == "find":
            console.print(Text(f"No tasks match '{result.data.get('keyword', '')}'."))
        else:
            console.print(Text("No tasks yet."))
        return
    console.print(_task_table(items))
    console.print(Text(f"\n{_count_line(result.data.get('count', len(items)))}"))


def _render_date(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data.get("label", "")), style="todo.label"))


def _render_help(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the usage summary as a two-column table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Command", style="todo.op", no_wrap=True)
    table.add_column("Effect")
    for row in result.data.get("commands", []):
        table.add_row(Text(str(row.get("usage", ""))), Text(str(row.get("effect", ""))))
    console.print(table)


def _render_exit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("Bye.", style="todo.ok"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + key-value fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add": _render_mutation,
    "delete": _render_mutation,
    "done": _render_mutation,
    # Queries
    "list": _render_task_table,
    "find": _render_task_table,
    # Utilities
    "date": _render_date,
    "help": _render_help,
    "exit": _render_exit,
}
