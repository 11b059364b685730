"""Flat-file storage for a task list.

INVARIANT: The file always holds the whole list. Every save rewrites it
from ``TaskList.serialize()``, one task per line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from todoctl.domain.errors import ErrorCode, TaskError

if TYPE_CHECKING:
    from todoctl.domain.task_list import TaskList
    from todoctl.output.display import Display

logger = logging.getLogger(__name__)


class TaskStorage:
    """Reads and writes the backing file at *path*."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_data(self) -> list[str]:
        """Return the raw lines of the backing file.

        Raises:
            TaskError: ``STORAGE_UNAVAILABLE`` if the file or its directory
                is missing or unreadable; ``CORRUPT_DATA`` if it is not UTF-8.
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TaskError(
                ErrorCode.STORAGE_UNAVAILABLE,
                f"Cannot read task file {self.path}: {exc.strerror or exc}",
                path=str(self.path),
            ) from exc
        except UnicodeDecodeError as exc:
            raise TaskError(
                ErrorCode.CORRUPT_DATA,
                f"Corrupt data in {self.path}: not valid UTF-8 at byte {exc.start}",
                path=str(self.path),
                byte_offset=exc.start,
            ) from exc
        logger.debug("Loaded %s", self.path)
        return content.splitlines()

    def create_new_data(self, display: Display) -> None:
        """Create the directory and an empty backing file, reporting via *display*.

        An existing file is left untouched. Failures are reported, not raised.
        """
        display.show(f"Creating task file at {self.path}")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create %s: %s", self.path, exc)
            display.show(f"Could not create task file: {exc.strerror or exc}")
            return
        logger.info("Created task file %s", self.path)
        display.show("Task file ready.")

    def save(self, task_list: TaskList) -> None:
        """Overwrite the backing file with *task_list*.

        Raises:
            TaskError: ``STORAGE_UNAVAILABLE`` on any write failure.
        """
        lines = task_list.serialize()
        content = "".join(f"{line}\n" for line in lines)
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise TaskError(
                ErrorCode.STORAGE_UNAVAILABLE,
                f"Cannot write task file {self.path}: {exc.strerror or exc}",
                path=str(self.path),
            ) from exc
        logger.debug("Saved %d tasks to %s", len(lines), self.path)
