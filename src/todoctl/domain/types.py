"""Task kinds and command kinds, plus the command classifier.

The classifier is total: any line maps to exactly one ``CommandType``,
with ``INVALID`` as the catch-all.
"""

from __future__ import annotations

from enum import StrEnum


class TaskKind(StrEnum):
    """The three task variants."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


class CommandType(StrEnum):
    """Closed set of command kinds recognised by the parser."""

    DATE = "date"
    DEADLINE = "deadline"
    DELETE = "delete"
    DONE = "done"
    EVENT = "event"
    EXIT = "exit"
    FIND = "find"
    HELP = "help"
    INVALID = "invalid"
    LIST = "list"
    TODO = "todo"

    @classmethod
    def of(cls, token: str) -> CommandType:
        """Match *token* case-insensitively against the known keywords."""
        lowered = token.lower()
        for command_type in cls:
            if command_type is not cls.INVALID and lowered == command_type.value:
                return command_type
        return cls.INVALID


def split_command(line: str) -> tuple[str, str]:
    """Split *line* on its first whitespace run into ``(token, rest)``."""
    parts = line.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def classify(line: str) -> CommandType:
    """Return the command kind named by the first token of *line*."""
    token, _ = split_command(line)
    return CommandType.of(token)
