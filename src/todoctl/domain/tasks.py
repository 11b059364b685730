"""Task models — plain to-dos, deadlines, and events.

Each variant declares its :class:`TaskKind` and a one-letter storage tag.
The description is assumed non-blank; the parser enforces that before a
task is ever constructed.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel

from todoctl.domain.types import TaskKind


class Task(BaseModel):
    """Base task: a description plus a completion flag."""

    kind: ClassVar[TaskKind] = TaskKind.TODO
    tag: ClassVar[str] = "T"

    description: str
    done: bool = False

    @property
    def label(self) -> str | None:
        """The date/period label, or None for variants that have none."""
        return None

    def mark_done(self) -> None:
        self.done = True

    def to_data(self) -> dict[str, Any]:
        """Plain dict used in service result payloads."""
        data: dict[str, Any] = {
            "kind": str(self.kind),
            "description": self.description,
            "done": self.done,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


class Todo(Task):
    """A plain to-do with no date attached."""


class Deadline(Task):
    """A task due by a date (or free-text moment)."""

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE
    tag: ClassVar[str] = "D"

    due_label: str

    @property
    def label(self) -> str | None:
        return self.due_label


class Event(Task):
    """A task happening at a date (or free-text period)."""

    kind: ClassVar[TaskKind] = TaskKind.EVENT
    tag: ClassVar[str] = "E"

    period_label: str

    @property
    def label(self) -> str | None:
        return self.period_label


TASK_TYPES_BY_TAG: dict[str, type[Task]] = {
    Todo.tag: Todo,
    Deadline.tag: Deadline,
    Event.tag: Event,
}


def build_task(tag: str, description: str, *, done: bool = False, label: str | None = None) -> Task:
    """Construct the variant named by its storage *tag*.

    Raises:
        KeyError: if *tag* names no variant.
        ValueError: if *label* is missing for a dated variant or given for a plain one.
    """
    task_cls = TASK_TYPES_BY_TAG[tag]
    if task_cls is Todo:
        if label is not None:
            msg = "Plain tasks carry no label"
            raise ValueError(msg)
        return Todo(description=description, done=done)
    if label is None:
        msg = f"{task_cls.kind} tasks require a label"
        raise ValueError(msg)
    if task_cls is Deadline:
        return Deadline(description=description, done=done, due_label=label)
    return Event(description=description, done=done, period_label=label)
