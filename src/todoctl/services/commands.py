"""Command set — one-shot actions produced by the parser.

Every command runs against a :class:`CommandContext` holding the session's
task list, storage handle and display, and returns a ServiceResult.
Commands borrow those references; the session owns them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel

from todoctl.domain.errors import TaskError
from todoctl.domain.tasks import Task
from todoctl.services.result import ServiceResult

if TYPE_CHECKING:
    from todoctl.domain.task_list import TaskList
    from todoctl.infrastructure.storage import TaskStorage
    from todoctl.output.display import Display

logger = logging.getLogger(__name__)

# (keyword, grammar, effect) rows reported by ``help``.
USAGE: tuple[tuple[str, str, str], ...] = (
    ("list", "list", "List all tasks"),
    ("todo", "todo <description>", "Add a plain task"),
    ("deadline", "deadline <description> /by <date>", "Add a task with a due date"),
    ("event", "event <description> /at <date>", "Add an event"),
    ("done", "done <number>", "Mark a task complete"),
    ("delete", "delete <number>", "Remove a task"),
    ("find", "find <keyword>", "List tasks whose description contains the keyword"),
    ("date", "date <YYYY-MM-DD>", "Show a date as 'MMM d yyyy'"),
    ("help", "help", "Show this summary"),
    ("exit", "exit", "End the session"),
)


@dataclass
class CommandContext:
    """References a command needs while it runs."""

    task_list: TaskList
    storage: TaskStorage
    display: Display


class Command(BaseModel, ABC):
    """Base for all executable commands."""

    model_config = {"frozen": True}

    op: ClassVar[str]

    @abstractmethod
    def execute(self, ctx: CommandContext) -> ServiceResult:
        """Run the command against *ctx*."""


# ── Mutating commands ─────────────────────────────────────────────────


class AddCommand(Command):
    op: ClassVar[str] = "add"

    task: Task

    def execute(self, ctx: CommandContext) -> ServiceResult:
        ctx.task_list.add(self.task)
        ctx.storage.save(ctx.task_list)
        logger.debug("Added %s task", self.task.kind)
        return ServiceResult(
            ok=True,
            op=self.op,
            data={"task": self.task.to_data(), "count": len(ctx.task_list)},
        )


class DeleteCommand(Command):
    op: ClassVar[str] = "delete"

    index: int

    def execute(self, ctx: CommandContext) -> ServiceResult:
        try:
            removed = ctx.task_list.remove_at(self.index)
        except TaskError as exc:
            return ServiceResult.failure(self.op, exc)
        ctx.storage.save(ctx.task_list)
        return ServiceResult(
            ok=True,
            op=self.op,
            data={
                "index": self.index,
                "task": removed.to_data(),
                "count": len(ctx.task_list),
            },
        )


class DoneCommand(Command):
    op: ClassVar[str] = "done"

    index: int

    def execute(self, ctx: CommandContext) -> ServiceResult:
        try:
            task = ctx.task_list.mark_done_at(self.index)
        except TaskError as exc:
            return ServiceResult.failure(self.op, exc)
        ctx.storage.save(ctx.task_list)
        return ServiceResult(
            ok=True,
            op=self.op,
            data={"index": self.index, "task": task.to_data()},
        )


# ── Read-only commands ────────────────────────────────────────────────


def _items(numbered: list[tuple[int, Task]]) -> list[dict[str, object]]:
    return [{"index": i, **task.to_data()} for i, task in numbered]


class ListCommand(Command):
    op: ClassVar[str] = "list"

    def execute(self, ctx: CommandContext) -> ServiceResult:
        items = _items(ctx.task_list.numbered())
        return ServiceResult(ok=True, op=self.op, data={"items": items, "count": len(items)})


class FindCommand(Command):
    op: ClassVar[str] = "find"

    keyword: str

    def execute(self, ctx: CommandContext) -> ServiceResult:
        items = _items(ctx.task_list.find_by_keyword(self.keyword))
        return ServiceResult(
            ok=True,
            op=self.op,
            data={"keyword": self.keyword, "items": items, "count": len(items)},
        )


class DateCommand(Command):
    op: ClassVar[str] = "date"

    label: str

    def execute(self, ctx: CommandContext) -> ServiceResult:
        return ServiceResult(ok=True, op=self.op, data={"label": self.label})


class HelpCommand(Command):
    op: ClassVar[str] = "help"

    def execute(self, ctx: CommandContext) -> ServiceResult:
        commands = [
            {"keyword": keyword, "usage": usage, "effect": effect}
            for keyword, usage, effect in USAGE
        ]
        return ServiceResult(ok=True, op=self.op, data={"commands": commands})


class ExitCommand(Command):
    op: ClassVar[str] = "exit"

    def execute(self, ctx: CommandContext) -> ServiceResult:
        return ServiceResult(ok=True, op=self.op, exit_requested=True)
