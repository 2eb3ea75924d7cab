"""Output mode dispatch.

The CLI renders ServiceResult for humans (rich, see
:mod:`rosterctl.output.renderers`) or machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from rosterctl.config.models import FormatConfig
from rosterctl.output.renderers import render_result

if TYPE_CHECKING:
    from rosterctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a result should be presented."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False
    display: FormatConfig = Field(default_factory=FormatConfig)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode serializes the whole result (Decimals as strings, dates as
    ISO 8601). Human mode dispatches to the op-specific renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose, display=settings.display)
