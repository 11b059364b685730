"""Tests for the one-shot ``do`` command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from todoctl.cli import cli


def _do(runner: CliRunner, *words: str, flags: tuple[str, ...] = ()) -> object:
    return runner.invoke(cli, [*flags, "do", *words])


@pytest.mark.usefixtures("_isolated_root")
class TestDoCommand:
    def test_first_run_creates_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = _do(cli_runner, "todo", "read", "book")
        assert result.exit_code == 0
        assert (tmp_path / "data" / "tasks.txt").read_text() == "T | 0 | read book\n"

    def test_deadline_json(self, cli_runner: CliRunner) -> None:
        result = _do(cli_runner, "deadline", "buy", "milk", "/by", "2023-12-25", flags=("--json",))
        assert result.exit_code == 0
        data = json.loads(result.output[result.output.index("{") :])
        assert data["ok"] is True
        assert data["data"]["task"]["label"] == "Dec 25 2023"

    def test_deadline_fallback_label(self, cli_runner: CliRunner) -> None:
        result = _do(cli_runner, "deadline", "buy", "milk", "/by", "next", "week")
        assert result.exit_code == 0
        assert "(by: next week)" in result.output

    def test_state_persists_between_invocations(self, cli_runner: CliRunner) -> None:
        _do(cli_runner, "todo", "buy", "milk")
        _do(cli_runner, "event", "party", "/at", "Sat")
        _do(cli_runner, "done", "2")
        result = _do(cli_runner, "find", "MILK")
        assert result.exit_code == 0
        assert "[T][ ] buy milk" in result.output
        assert "party" not in result.output
        listed = _do(cli_runner, "list")
        assert "[E][X] party (at: Sat)" in listed.output

    def test_delete_out_of_range_exits_1(self, cli_runner: CliRunner) -> None:
        _do(cli_runner, "todo", "a")
        result = _do(cli_runner, "delete", "5")
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_negative_index_is_passed_through(self, cli_runner: CliRunner) -> None:
        _do(cli_runner, "todo", "a")
        result = _do(cli_runner, "done", "-1")
        assert result.exit_code == 1

    def test_not_a_number_json(self, cli_runner: CliRunner) -> None:
        result = _do(cli_runner, "delete", "abc", flags=("--json",))
        assert result.exit_code == 1
        data = json.loads(result.output[result.output.index("{") :])
        assert data["error"]["code"] == "NOT_A_NUMBER"

    def test_date_quiet(self, cli_runner: CliRunner) -> None:
        result = _do(cli_runner, "date", "2023-12-25", flags=("-q",))
        assert result.exit_code == 0
        assert result.output.strip().endswith("Dec 25 2023")

    def test_invalid_date(self, cli_runner: CliRunner) -> None:
        result = _do(cli_runner, "date", "tomorrow", flags=("--json",))
        assert result.exit_code == 1
        data = json.loads(result.output[result.output.index("{") :])
        assert data["error"]["code"] == "INVALID_DATE"

    def test_data_file_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "mine.txt"
        result = _do(cli_runner, "todo", "x", flags=("-f", str(target)))
        assert result.exit_code == 0
        assert target.read_text() == "T | 0 | x\n"

    def test_config_storage_section(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "todoctl.toml").write_text('[storage]\ndirectory = "state"\n')
        result = _do(cli_runner, "todo", "x")
        assert result.exit_code == 0
        assert (tmp_path / "state" / "tasks.txt").is_file()

    def test_corrupt_file_recovers(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "data" / "tasks.txt"
        data.parent.mkdir()
        data.write_text("not a task line\n")
        result = _do(cli_runner, "list")
        assert result.exit_code == 0
        assert "Corrupt data on line 1" in result.output

    def test_requires_words(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["do"])
        assert result.exit_code == 2
