"""Command: run the roster report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterCommand

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext


@click.command(
    cls=RosterCommand,
    examples=(
        "rosterctl report",
        "rosterctl --as-of 2024-01-01 report",
        "rosterctl --json report",
        "rosterctl -v --log-json report",
    ),
)
@click.pass_obj
def report(app: AppContext) -> None:
    """Build the seed roster and print the full report."""
    from rosterctl.services.report import ReportService

    app.emit(ReportService(app.settings).run())
