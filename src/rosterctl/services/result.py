"""Result envelope returned by ``ReportService.run()``.

INVARIANT: ``ok`` is True exactly when ``error`` is None, and a failed
result carries no data. The CLI writes successes to stdout and failures
to stderr; ``--json`` dumps the model unchanged.
"""

from __future__ import annotations

from traceback import format_exception
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Why a run failed, including the formatted traceback when one exists."""

    model_config = {"frozen": True}

    code: str
    message: str
    exception: str = ""
    traceback: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException, *, code: str) -> ServiceError:
        return cls(
            code=code,
            message=str(exc),
            exception=type(exc).__name__,
            traceback="".join(format_exception(exc)),
        )


class ServiceResult(BaseModel):
    """Outcome of one report run.

    Attributes:
        ok: Whether every step completed.
        op: Operation name used to pick a renderer (``"roster_report"``).
        data: Step snapshots keyed by section on success.
        error: Set when ``ok`` is False.
        meta: Reference date and, under ``--verbose``, the step timing tree.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> ServiceResult:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("a failed result needs an error")
        if not self.ok and self.data:
            raise ValueError("a failed result carries no data")
        return self
