"""Rich Console factory and theme for rosterctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROSTER_THEME = Theme(
    {
        "roster.ok": "bold green",
        "roster.error": "bold red",
        "roster.op": "bold cyan",
        "roster.banner": "bold",
        "roster.section": "bold cyan",
        "roster.rule": "dim",
        "roster.role": "bold magenta",
        "roster.key": "dim",
        "roster.money": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Lines are never wrapped: the report is line-oriented and employee rows
    can exceed the rule width.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROSTER_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
