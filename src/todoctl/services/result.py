"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: Every handled line yields exactly one ServiceResult.
The interactive shell and the one-shot ``do`` command both consume it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from todoctl.domain.errors import TaskError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
        exit_requested: True only for a successful ``exit`` command.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
    exit_requested: bool = False

    @classmethod
    def failure(cls, op: str, exc: TaskError) -> ServiceResult:
        """Build a failed result from a :class:`TaskError`."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(exc.code), message=exc.message, detail=exc.detail),
        )
