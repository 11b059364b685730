"""TaskSession — owns the task list and storage for one run.

Pipeline per line: CLASSIFY → PARSE → EXECUTE → RESPOND

INVARIANT: ``handle()`` never raises for bad input or storage trouble.
Every outcome is a ServiceResult, and only a successful ``exit`` sets
``exit_requested``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from todoctl.domain.errors import ErrorCode, TaskError
from todoctl.domain.task_list import TaskList
from todoctl.domain.types import classify
from todoctl.services.commands import CommandContext
from todoctl.services.parser import parse
from todoctl.services.result import ServiceResult

if TYPE_CHECKING:
    from todoctl.infrastructure.storage import TaskStorage
    from todoctl.output.display import Display, LineSource

logger = logging.getLogger(__name__)

# Startup failures that fall back to an empty list instead of aborting.
RECOVERABLE_LOAD_ERRORS = frozenset({ErrorCode.CORRUPT_DATA, ErrorCode.STORAGE_UNAVAILABLE})


class TaskSession:
    """One interactive session over a single task list and backing file."""

    def __init__(self, task_list: TaskList, storage: TaskStorage, display: Display) -> None:
        self.task_list = task_list
        self.storage = storage
        self.display = display

    @classmethod
    def open(cls, storage: TaskStorage, display: Display) -> TaskSession:
        """Load the saved list, or start empty and recreate the backing file.

        A missing/unreadable file and a corrupt line are handled by the same
        recovery path; the error code only changes what is logged.
        """
        try:
            task_list = TaskList.deserialize(storage.load_data())
        except TaskError as exc:
            if exc.code not in RECOVERABLE_LOAD_ERRORS:
                raise
            logger.info("Starting with an empty task list (%s): %s", exc.code, exc.message)
            display.show(exc.message)
            task_list = TaskList()
            storage.create_new_data(display)
        else:
            logger.debug("Loaded %d tasks from %s", len(task_list), storage.path)
        return cls(task_list, storage, display)

    @property
    def context(self) -> CommandContext:
        return CommandContext(task_list=self.task_list, storage=self.storage, display=self.display)

    def handle(self, line: str) -> ServiceResult:
        """Parse and execute one raw input line."""
        try:
            command = parse(line)
        except TaskError as exc:
            logger.debug("Rejected line (%s): %r", exc.code, line)
            return ServiceResult.failure(str(classify(line)), exc)

        try:
            return command.execute(self.context)
        except TaskError as exc:
            logger.info("%s failed (%s): %s", command.op, exc.code, exc.message)
            return ServiceResult.failure(command.op, exc)

    def run(self, lines: LineSource, render: Callable[[ServiceResult], str]) -> bool:
        """Handle *lines* until an ``exit`` command or end of input.

        Each result is rendered and shown on the session display.
        Returns True if the session ended through ``exit``.
        """
        for line in lines:
            if not line.strip():
                continue
            result = self.handle(line)
            self.display.show(render(result))
            if result.exit_requested:
                return True
        return False
