"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from rich.text import Text

from rosterctl.config.models import FormatConfig
from rosterctl.domain.employee import format_row
from rosterctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rosterctl.domain.formatting import DisplayFormat
    from rosterctl.services.result import ServiceResult

BANNER = "=== EMPLOYEE ROSTER REPORT ==="

MONTH_NAMES: dict[int, str] = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    display: FormatConfig | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    display = display or FormatConfig()
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, display)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def join_months(months: list[int]) -> str:
    """Human list of month names.

    Examples:
        >>> join_months([10, 12])
        'October and December'
        >>> join_months([1, 2, 3])
        'January, February and March'
    """
    names = [MONTH_NAMES[m] for m in months]
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


# ── Helpers ───────────────────────────────────────────────────────────


def _section(console: Console, label: str, title: str, display: FormatConfig) -> None:
    """Print a section header followed by a full-width rule."""
    console.print(Text(f"{label} - {title}:", style="roster.section"))
    console.print(Text("─" * display.rule_width, style="roster.rule"))


def _rows(
    console: Console, rows: list[dict[str, Any]], fmt: DisplayFormat, indent: str = ""
) -> None:
    for row in rows:
        console.print(Text(f"{indent}{format_row(row, fmt)}"))


def _percent(value: Decimal, fmt: DisplayFormat) -> str:
    text = f"{Decimal(value).normalize():f}"
    return text.replace(".", fmt.decimal_separator)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("meta:", style="roster.key"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=2)
        else:
            console.print(Text(f"  {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 2,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")
    rows = span_data.get("rows")
    if rows is not None:
        line.append(f"  ({rows} rows)", style="dim")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="roster.error")
    line.append(f"  {result.op}", style="roster.op")
    line.append(f" — {msg}")
    console.print(line)

    tb = err.traceback if err else ""
    if tb:
        console.print()
        console.print(Text(tb.rstrip("\n")))


# ── Generic renderer ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, display: FormatConfig) -> None:
    line = Text("OK", style="roster.ok")
    line.append(f"  {result.op}", style="roster.op")
    console.print(line)
    for key, value in result.data.items():
        field = Text(f"  {key}: ", style="roster.key")
        field.append(str(value))
        console.print(field)


# ── Report renderer ───────────────────────────────────────────────────


def _render_report(result: ServiceResult, console: Console, display: FormatConfig) -> None:
    """Render the full roster report, one section per pipeline step."""
    d = result.data
    fmt = display.display_format()

    console.print(Text(BANNER, style="roster.banner"))
    console.print()

    console.print(Text(f"3.1 - {d['inserted']} employees inserted."))
    console.print()

    removed = d["removed"]
    if removed["count"]:
        console.print(Text(f"3.2 - Employee '{removed['name']}' removed from the roster."))
    else:
        console.print(Text(f"3.2 - No employee named '{removed['name']}' on the roster."))
    console.print()

    _section(console, "3.3", "ALL EMPLOYEES", display)
    _rows(console, d["employees"], fmt)
    console.print()

    pct = _percent(d["raise_percent"], fmt)
    console.print(Text(f"3.4 - {pct}% raise applied to all employees."))
    console.print()

    _section(console, "3.5/3.6", "EMPLOYEES GROUPED BY ROLE", display)
    for role, members in d["by_role"].items():
        header = Text("ROLE: ")
        header.append(role, style="roster.role")
        console.print(header)
        _rows(console, members, fmt, indent="  • ")
        console.print()

    birthdays = d["birthdays"]
    months = join_months(birthdays["months"]).upper()
    _section(console, "3.8", f"EMPLOYEES WITH BIRTHDAYS IN {months}", display)
    for row in birthdays["employees"]:
        console.print(Text(f"{row['name']} - {fmt.date(row['birth_date'])}"))
    console.print()

    _section(console, "3.9", "OLDEST EMPLOYEE", display)
    senior = d["oldest"]
    if senior:
        console.print(Text(f"Name: {senior['name']} | Age: {senior['age']} years"))
    else:
        console.print(Text("(no employees)", style="roster.key"))
    console.print()

    _section(console, "3.10", "EMPLOYEES IN ALPHABETICAL ORDER", display)
    _rows(console, d["alphabetical"], fmt)
    console.print()

    _section(console, "3.11", "TOTAL SALARIES", display)
    total = Text("Total: ")
    total.append(fmt.number(d["total_salary"]), style="roster.money")
    console.print(total)
    console.print()

    wage = fmt.number(d["minimum_wage"])
    _section(console, "3.12", f"SALARIES IN MINIMUM WAGES ({wage})", display)
    for row in d["minimum_wage_multiples"]:
        console.print(Text(f"{row['name']}: {fmt.number(row['multiple'])} minimum wages"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "roster_report": _render_report,
}
