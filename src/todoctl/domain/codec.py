"""Line codec for persisted tasks.

One task per line::

    T | 0 | read book
    D | 1 | return book | Dec 25 2023
    E | 0 | project meeting | Mon 2-4pm

Fields are joined by ``" | "``. Inside text fields a backslash is written
``\\\\`` and a pipe ``\\|``, so an unescaped ``|`` is always a delimiter.
Line breaks are written ``\\n`` and ``\\r``; every other character that
:meth:`str.splitlines` treats as a boundary is written ``\\uXXXX``, so one
task always stays on one line.
"""

from __future__ import annotations

import string
from collections.abc import Iterator
from itertools import islice

from todoctl.domain.errors import ErrorCode, TaskError
from todoctl.domain.tasks import TASK_TYPES_BY_TAG, Task, Todo, build_task

DELIMITER = " | "

_DONE_FLAGS = {"1": True, "0": False}

# Characters str.splitlines() breaks on, other than "\n" and "\r".
_OTHER_BREAKS = "\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "|": "\\|",
    "\n": "\\n",
    "\r": "\\r",
    **{ch: f"\\u{ord(ch):04x}" for ch in _OTHER_BREAKS},
}

_SIMPLE_UNESCAPES = {"\\": "\\", "|": "|", "n": "\n", "r": "\r"}


def escape_field(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def encode_task(task: Task) -> str:
    """Encode *task* as a single storage line."""
    fields = [task.tag, "1" if task.done else "0", escape_field(task.description)]
    if task.label is not None:
        fields.append(escape_field(task.label))
    return DELIMITER.join(fields)


def split_fields(line: str) -> list[str]:
    """Split *line* on unescaped pipes, unescaping each field.

    The single spaces around every delimiter are required and removed.

    Raises:
        ValueError: on a dangling escape, an unknown escape, or a
            delimiter without its surrounding spaces.
    """
    raw: list[str] = []
    buf: list[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == "\\":
            buf.append(_unescape(chars))
        elif ch == "|":
            raw.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    raw.append("".join(buf))

    fields: list[str] = []
    last = len(raw) - 1
    for i, field in enumerate(raw):
        if i > 0:
            if not field.startswith(" "):
                msg = "Missing space after delimiter"
                raise ValueError(msg)
            field = field[1:]
        if i < last:
            if not field.endswith(" "):
                msg = "Missing space before delimiter"
                raise ValueError(msg)
            field = field[:-1]
        fields.append(field)
    return fields


def _unescape(chars: Iterator[str]) -> str:
    """Consume the escape body following a backslash and return its character."""
    nxt = next(chars, None)
    if nxt in _SIMPLE_UNESCAPES:
        return _SIMPLE_UNESCAPES[nxt]
    if nxt == "u":
        digits = "".join(islice(chars, 4))
        if len(digits) == 4 and all(d in string.hexdigits for d in digits):
            return chr(int(digits, 16))
    msg = "Invalid escape sequence"
    raise ValueError(msg)


def decode_task(line: str, *, line_number: int = 0) -> Task:
    """Decode one storage line back into a task.

    Raises:
        TaskError: ``CORRUPT_DATA`` when the line does not match the
            field grammar for its declared type.
    """
    try:
        fields = split_fields(line)
    except ValueError as exc:
        raise _corrupt(line_number, line, str(exc)) from exc

    tag = fields[0]
    task_cls = TASK_TYPES_BY_TAG.get(tag)
    if task_cls is None:
        raise _corrupt(line_number, line, f"Unknown task type {tag!r}")

    expected = 3 if task_cls is Todo else 4
    if len(fields) != expected:
        raise _corrupt(
            line_number, line, f"Expected {expected} fields for type {tag}, got {len(fields)}"
        )

    done = _DONE_FLAGS.get(fields[1])
    if done is None:
        raise _corrupt(line_number, line, f"Invalid completion flag {fields[1]!r}")

    description = fields[2]
    if not description.strip():
        raise _corrupt(line_number, line, "Blank description")

    label = fields[3] if expected == 4 else None
    return build_task(tag, description, done=done, label=label)


def _corrupt(line_number: int, line: str, reason: str) -> TaskError:
    return TaskError(
        ErrorCode.CORRUPT_DATA,
        f"Corrupt data on line {line_number}: {reason}",
        line_number=line_number,
        line=line,
    )
