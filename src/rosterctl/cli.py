"""Root CLI group for rosterctl with global flags and command registration.

Invoked without a subcommand, it runs ``report``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl import __version__
from rosterctl.commands import register_commands
from rosterctl.commands._base import RosterGroup
from rosterctl.commands._context import AppContext
from rosterctl.config.settings import RosterSettings

if TYPE_CHECKING:
    from datetime import datetime


@click.group(
    cls=RosterGroup,
    invoke_without_command=True,
    examples=(
        "rosterctl",
        "rosterctl --as-of 2024-01-01",
        "rosterctl --json",
    ),
)
@click.version_option(version=__version__, prog_name="rosterctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and step timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--as-of",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date for ages (default: today).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    as_of: datetime | None,
) -> None:
    """rosterctl — employee roster report."""
    settings = RosterSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        as_of=as_of.date() if as_of else None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from rosterctl.commands.report import report

        ctx.invoke(report)


register_commands(cli)
