"""Shared pytest fixtures and test helpers for todoctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from todoctl.domain.task_list import TaskList
from todoctl.infrastructure.storage import TaskStorage
from todoctl.services.commands import CommandContext
from todoctl.services.session import TaskSession


class RecordingDisplay:
    """Display that keeps every message for later assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def show(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of an (initially absent) backing file inside a temp data dir."""
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture
def storage(data_file: Path) -> TaskStorage:
    """Storage whose backing file already exists and is empty."""
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.touch()
    return TaskStorage(data_file)


@pytest.fixture
def ctx(storage: TaskStorage, display: RecordingDisplay) -> CommandContext:
    """Command context over an empty task list."""
    return CommandContext(task_list=TaskList(), storage=storage, display=display)


@pytest.fixture
def session(storage: TaskStorage, display: RecordingDisplay) -> TaskSession:
    """Session opened over an empty, existing backing file."""
    return TaskSession.open(storage, display)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated task file.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("TODOCTL_CONFIG", raising=False)
    monkeypatch.delenv("TODOCTL_DATA_FILE", raising=False)
    monkeypatch.chdir(tmp_path)
