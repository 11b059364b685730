"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from todoctl.domain.errors import ErrorCode, TaskError
from todoctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="add", data={"count": 1})
        assert result.ok is True
        assert result.op == "add"
        assert result.data == {"count": 1}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None
        assert result.exit_requested is False

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_A_NUMBER", message="Not a task number")
        result = ServiceResult(ok=False, op="done", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_A_NUMBER"

    def test_failure_from_task_error(self) -> None:
        exc = TaskError(ErrorCode.INDEX_OUT_OF_RANGE, "Task 5 does not exist", index=5)
        result = ServiceResult.failure("delete", exc)
        assert result.ok is False
        assert result.op == "delete"
        assert result.error == ServiceError(
            code="INDEX_OUT_OF_RANGE", message="Task 5 does not exist", detail={"index": 5}
        )
        assert result.exit_requested is False

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="date", data={"label": "Dec 25 2023"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "date"
        assert parsed["data"]["label"] == "Dec 25 2023"
        assert parsed["exit_requested"] is False

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="list")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="INVALID_COMMAND", message="bad")
        assert error.detail == {}
