"""Step timings for the report pipeline.

``@traced`` wraps ``ReportService.run``. When telemetry is on it opens a
root span, every ``step(...)`` inside the run becomes a child span that
records its duration and how many rows it produced, and the finished tree
lands in ``ServiceResult.meta["telemetry"]``.

``step`` always yields a Span, so callers set ``span.rows`` without
checking whether telemetry is on. Outside a traced run the span is simply
not attached to anything.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog

from rosterctl.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """One timed step; ``rows`` is what the step emitted, if it counted."""

    name: str
    rows: int | None = None
    children: list[Span] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)
    duration_ms: float = 0.0

    def close(self) -> None:
        self.duration_ms = (time.perf_counter() - self.started) * 1000

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.rows is not None:
            out["rows"] = self.rows
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def step(name: str) -> Iterator[Span]:
    """Time one pipeline step under the active run, if any."""
    span = Span(name)
    parent = _current_span.get()
    if parent is None:
        yield span
        return

    parent.children.append(span)
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.close()
        _current_span.reset(token)


def traced(
    method: Callable[..., ServiceResult],
) -> Callable[..., ServiceResult]:
    """Time a service method and attach its step tree to the result meta."""

    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> ServiceResult:
        if not _enabled.get():
            return method(*args, **kwargs)

        root = Span(method.__qualname__)
        token = _current_span.set(root)
        try:
            result = method(*args, **kwargs)
        finally:
            root.close()
            _current_span.reset(token)
            structlog.get_logger("rosterctl.telemetry").debug(
                "run.timed",
                run=root.name,
                duration_ms=round(root.duration_ms, 2),
                steps=len(root.children),
            )

        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    """Turn step timing on (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
