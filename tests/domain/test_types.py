"""Tests for task/command kinds and the command classifier."""

import pytest

from todoctl.domain.types import CommandType, TaskKind, classify, split_command

ENUM_CASES = [
    (TaskKind, {"todo", "deadline", "event"}),
    (
        CommandType,
        {"date", "deadline", "delete", "done", "event", "exit", "find", "help", "invalid", "list", "todo"},
    ),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)


class TestSplitCommand:
    def test_token_and_rest(self) -> None:
        assert split_command("deadline buy milk /by today") == ("deadline", "buy milk /by today")

    def test_whitespace_run(self) -> None:
        assert split_command("find \t  milk") == ("find", "milk")

    def test_token_only(self) -> None:
        assert split_command("list") == ("list", "")

    def test_empty_line(self) -> None:
        assert split_command("") == ("", "")
        assert split_command("   ") == ("", "")


class TestClassify:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("list", CommandType.LIST),
            ("todo read book", CommandType.TODO),
            ("deadline x /by y", CommandType.DEADLINE),
            ("event x /at y", CommandType.EVENT),
            ("done 1", CommandType.DONE),
            ("delete 2", CommandType.DELETE),
            ("find book", CommandType.FIND),
            ("date 2023-12-25", CommandType.DATE),
            ("help", CommandType.HELP),
            ("exit", CommandType.EXIT),
        ],
    )
    def test_known_keywords(self, line: str, expected: CommandType) -> None:
        assert classify(line) is expected

    def test_case_insensitive(self) -> None:
        assert classify("LIST") is CommandType.LIST
        assert classify("ToDo read") is CommandType.TODO

    @pytest.mark.parametrize("line", ["", "   ", "blah", "todos x", "invalid", "listing"])
    def test_unknown_is_invalid(self, line: str) -> None:
        assert classify(line) is CommandType.INVALID

    def test_of_never_returns_invalid_for_keyword_text(self) -> None:
        assert CommandType.of("invalid") is CommandType.INVALID
