"""TaskList — the ordered, 1-indexed collection a session works on.

Positions are 0-based internally and 1-based at every public method.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from todoctl.domain.codec import decode_task, encode_task
from todoctl.domain.errors import ErrorCode, TaskError
from todoctl.domain.tasks import Task


class TaskList:
    """Ordered, mutable sequence of tasks in insertion order."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove_at(self, index: int) -> Task:
        """Remove and return the task at 1-based *index*."""
        self._check_index(index)
        return self._tasks.pop(index - 1)

    def mark_done_at(self, index: int) -> Task:
        """Mark the task at 1-based *index* done and return it."""
        self._check_index(index)
        task = self._tasks[index - 1]
        task.mark_done()
        return task

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index - 1]

    def numbered(self) -> list[tuple[int, Task]]:
        """All tasks paired with their 1-based index."""
        return list(enumerate(self._tasks, start=1))

    def find_by_keyword(self, keyword: str) -> list[tuple[int, Task]]:
        """Tasks whose description contains *keyword*, ignoring case.

        Matches keep their original relative order and 1-based index.
        """
        needle = keyword.lower()
        return [
            (i, task) for i, task in self.numbered() if needle in task.description.lower()
        ]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def serialize(self) -> list[str]:
        return [encode_task(task) for task in self._tasks]

    @classmethod
    def deserialize(cls, lines: Iterable[str]) -> TaskList:
        """Rebuild a list from storage lines; blank lines are skipped.

        Raises:
            TaskError: ``CORRUPT_DATA`` for the first malformed line.
        """
        tasks = [
            decode_task(line, line_number=n)
            for n, line in enumerate(lines, start=1)
            if line.strip()
        ]
        return cls(tasks)

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= len(self._tasks):
            raise TaskError(
                ErrorCode.INDEX_OUT_OF_RANGE,
                f"Task {index} does not exist (list has {len(self._tasks)} tasks)",
                index=index,
                size=len(self._tasks),
            )
