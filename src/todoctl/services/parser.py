"""Parser — turns one raw input line into an executable Command.

Dispatch on :class:`CommandType` happens here and nowhere else.  Each
kind has its own grammar check; a failed check raises :class:`TaskError`
with the matching code.

``deadline`` and ``event`` accept free text where the date would be and
store it verbatim, while ``date`` rejects anything that is not a strict
ISO date.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from todoctl.domain.dates import format_label, label_or_text, parse_iso_date
from todoctl.domain.errors import ErrorCode, TaskError
from todoctl.domain.tasks import Deadline, Event, Todo
from todoctl.domain.types import CommandType, classify
from todoctl.services.commands import (
    AddCommand,
    Command,
    DateCommand,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
)

logger = logging.getLogger(__name__)

DEADLINE_MARKER = "/by"
EVENT_MARKER = "/at"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse(line: str) -> Command:
    """Parse *line* into a Command.

    Raises:
        TaskError: ``INVALID_COMMAND``, ``INVALID_DATE`` or ``NOT_A_NUMBER``.
    """
    command_type = classify(line)
    parser = _PARSERS.get(command_type)
    if parser is None:
        raise _invalid(line)
    command = parser(line)
    logger.debug("Parsed %s command", command_type)
    return command


# ── Helpers ───────────────────────────────────────────────────────────


def _invalid(line: str) -> TaskError:
    return TaskError(ErrorCode.INVALID_COMMAND, "Unrecognised command", line=line)


def _argument(line: str, command_type: CommandType) -> str:
    """The trimmed text left once the first lowercase keyword is removed.

    A keyword typed in another case still classifies, but is not removed.
    """
    return line.replace(command_type.value, "", 1).strip()


def _exact(line: str, command_type: CommandType) -> None:
    if line.strip() != command_type.value:
        raise TaskError(
            ErrorCode.INVALID_COMMAND,
            f"'{command_type}' takes no arguments",
            line=line,
        )


def _index(line: str, command_type: CommandType) -> int:
    text = _argument(line, command_type)
    if not _INTEGER.fullmatch(text):
        raise TaskError(ErrorCode.NOT_A_NUMBER, f"Not a task number: {text!r}", value=text)
    return int(text)


def _dated_parts(line: str, command_type: CommandType, marker: str) -> tuple[str, str]:
    """Split ``<desc> <marker> <when>`` into non-blank ``(desc, label)``."""
    parts = _argument(line, command_type).split(marker)
    if len(parts) != 2:
        raise TaskError(
            ErrorCode.INVALID_COMMAND,
            f"Expected '<description> {marker} <date>'",
            line=line,
        )
    description, when = (part.strip() for part in parts)
    if not description or not when:
        raise TaskError(
            ErrorCode.INVALID_COMMAND,
            f"Both the description and the text after {marker} are required",
            line=line,
        )
    return description, label_or_text(when)


# ── Per-kind parsers ──────────────────────────────────────────────────


def _parse_todo(line: str) -> Command:
    # Every occurrence of the keyword is dropped, not just the leading one.
    description = line.replace(CommandType.TODO.value, "").strip()
    if not description:
        raise TaskError(ErrorCode.INVALID_COMMAND, "A todo needs a description", line=line)
    return AddCommand(task=Todo(description=description))


def _parse_deadline(line: str) -> Command:
    description, label = _dated_parts(line, CommandType.DEADLINE, DEADLINE_MARKER)
    return AddCommand(task=Deadline(description=description, due_label=label))


def _parse_event(line: str) -> Command:
    description, label = _dated_parts(line, CommandType.EVENT, EVENT_MARKER)
    return AddCommand(task=Event(description=description, period_label=label))


def _parse_delete(line: str) -> Command:
    return DeleteCommand(index=_index(line, CommandType.DELETE))


def _parse_done(line: str) -> Command:
    return DoneCommand(index=_index(line, CommandType.DONE))


def _parse_find(line: str) -> Command:
    keyword = _argument(line, CommandType.FIND).lower()
    if not keyword:
        raise TaskError(ErrorCode.INVALID_COMMAND, "find needs a keyword", line=line)
    return FindCommand(keyword=keyword)


def _parse_date(line: str) -> Command:
    text = _argument(line, CommandType.DATE)
    parsed = parse_iso_date(text)
    if parsed is None:
        raise TaskError(ErrorCode.INVALID_DATE, f"Not a YYYY-MM-DD date: {text!r}", value=text)
    return DateCommand(label=format_label(parsed))


def _parse_list(line: str) -> Command:
    _exact(line, CommandType.LIST)
    return ListCommand()


def _parse_help(line: str) -> Command:
    _exact(line, CommandType.HELP)
    return HelpCommand()


def _parse_exit(line: str) -> Command:
    _exact(line, CommandType.EXIT)
    return ExitCommand()


_PARSERS: dict[CommandType, Callable[[str], Command]] = {
    CommandType.DATE: _parse_date,
    CommandType.DEADLINE: _parse_deadline,
    CommandType.DELETE: _parse_delete,
    CommandType.DONE: _parse_done,
    CommandType.EVENT: _parse_event,
    CommandType.EXIT: _parse_exit,
    CommandType.FIND: _parse_find,
    CommandType.HELP: _parse_help,
    CommandType.LIST: _parse_list,
    CommandType.TODO: _parse_todo,
}
