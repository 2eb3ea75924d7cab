"""structlog wiring for rosterctl.

All log output goes to stderr so stdout carries only the report. structlog
loggers and the stdlib loggers used by the services share one
ProcessorFormatter, which means both come out as console lines or, with
``--log-json``, as JSON objects.

``ReportService.run`` binds ``op`` and ``as_of`` with
``structlog.contextvars``; every line logged during a run carries them.
"""

from __future__ import annotations

import logging
import sys
from datetime import date
from decimal import Decimal
from typing import Any

import structlog

PACKAGE_LOGGER = "rosterctl"


def _report_values(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render dates as ISO strings and Decimals exactly, as the JSON output does."""
    for key, value in event_dict.items():
        if isinstance(value, date):
            event_dict[key] = value.isoformat()
        elif isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _report_values,
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to one stderr handler.

    Safe to call repeatedly; the root handler is replaced each time.

    Args:
        verbose: DEBUG for ``rosterctl.*`` loggers, otherwise WARNING.
        log_json: JSON lines instead of the console renderer.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
