"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from todoctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["shell", "--examples"], ["todoctl shell"]),
    (["do", "--examples"], ["todoctl do todo read book", "/by 2023-12-25"]),
]


@pytest.mark.parametrize(
    "args,expected",
    EXAMPLES_COMMANDS,
    ids=[args[0] for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in expected:
        assert keyword in result.output


HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["--json", "--data-file", "shell", "do"]),
    (["shell", "--help"], ["interactive", "--examples"]),
    (["do", "--help"], ["WORDS", "--examples"]),
]


@pytest.mark.parametrize(
    "args,expected",
    HELP_COMMANDS,
    ids=["root", "shell", "do"],
)
def test_help_output(cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in expected:
        assert keyword in result.output
