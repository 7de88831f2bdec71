"""Service results: the single return type of every panpizza service call.

A pan that yields no recipe is an ordinary outcome, not an exception, so
callers branch on ``ok`` and read ``error.code``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure reasons."""

    NO_RECIPE = "NO_RECIPE"
    INVALID_UNIT_SYSTEM = "INVALID_UNIT_SYSTEM"
    EXPORT_FAILED = "EXPORT_FAILED"


class ServiceError(BaseModel):
    """Why an operation produced nothing."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation produced its payload.
        op: Operation name, e.g. ``"compute_recipe"`` or ``"export_pdf"``.
        data: The payload of a successful call.
        warnings: Plugin trouble that did not stop the operation.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
