"""Error codes and the package's single exception type.

Domain and infrastructure code raise :class:`TaskError`; the service
layer turns it into a failed ``ServiceResult`` carrying the same code.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Every failure kind a session can report."""

    INVALID_COMMAND = "INVALID_COMMAND"
    INVALID_DATE = "INVALID_DATE"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    CORRUPT_DATA = "CORRUPT_DATA"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


class TaskError(Exception):
    """A recoverable failure tagged with an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail
