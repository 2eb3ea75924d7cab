"""ReportService — the roster report pipeline.

Linear sequence of list transformations over one roster owned by the run:

  3.1   insert the seed roster
  3.2   remove the excluded name
  3.3   list everyone
  3.4   apply the raise
  3.5/6 group by role
  3.8   birthdays in the configured months
  3.9   oldest employee
  3.10  alphabetical listing
  3.11  salary total
  3.12  salaries as minimum-wage multiples

INVARIANT: ``run()`` is the single error boundary. An InvalidArgument
anywhere in the pipeline aborts the whole run and comes back as a failed
ServiceResult; nothing is partially recovered.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

import structlog

from rosterctl.domain.errors import InvalidArgument
from rosterctl.domain.seed import build_roster
from rosterctl.services import roster as ops
from rosterctl.services.result import ServiceError, ServiceResult
from rosterctl.services.telemetry import step, traced

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings
    from rosterctl.domain.employee import Employee

logger = logging.getLogger(__name__)

OP_REPORT = "roster_report"


class ReportService:
    """Runs the report pipeline against a roster.

    Usage::

        result = ReportService(settings).run()
        if result.ok:
            result.data["total_salary"]
    """

    def __init__(self, settings: RosterSettings) -> None:
        self._settings = settings

    @traced
    def run(self, roster: list[Employee] | None = None) -> ServiceResult:
        """Run every step in order and return the snapshots.

        Args:
            roster: Employees to report on. Defaults to a fresh seed roster.
                The list is not modified, but its employees receive the raise.
        """
        today = self._settings.reference_date()
        with structlog.contextvars.bound_contextvars(op=OP_REPORT, as_of=today):
            try:
                data = self._pipeline(roster, today)
            except InvalidArgument as exc:
                logger.debug("Report aborted: %s", exc, exc_info=True)
                return ServiceResult(
                    ok=False,
                    op=OP_REPORT,
                    error=ServiceError.from_exception(exc, code="INVALID_ARGUMENT"),
                    meta={"as_of": today},
                )
        return ServiceResult(ok=True, op=OP_REPORT, data=data, meta={"as_of": today})

    def _pipeline(self, roster: list[Employee] | None, today: date) -> dict[str, Any]:
        cfg = self._settings.report
        data: dict[str, Any] = {}

        with step("insert") as span:
            employees = list(roster) if roster is not None else build_roster(today=today)
            data["inserted"] = span.rows = len(employees)

        with step("remove") as span:
            before = len(employees)
            employees = ops.remove_by_name(employees, cfg.excluded_name)
            data["removed"] = {"name": cfg.excluded_name, "count": before - len(employees)}
            span.rows = len(employees)

        with step("list") as span:
            data["employees"] = [e.snapshot() for e in employees]
            span.rows = len(data["employees"])

        with step("raise") as span:
            ops.apply_raise(employees, cfg.raise_percent)
            data["raise_percent"] = cfg.raise_percent
            span.rows = len(employees)

        with step("group_by_role") as span:
            groups = ops.group_by_role(employees)
            data["by_role"] = {
                role: [e.snapshot() for e in members] for role, members in groups.items()
            }
            span.rows = len(groups)

        with step("birthdays") as span:
            matches = ops.born_in_months(employees, cfg.birthday_months)
            data["birthdays"] = {
                "months": list(cfg.birthday_months),
                "employees": [{"name": e.name, "birth_date": e.birth_date} for e in matches],
            }
            span.rows = len(matches)

        with step("oldest") as span:
            senior = ops.oldest(employees, on=today)
            data["oldest"] = (
                {"name": senior.name, "birth_date": senior.birth_date, "age": senior.age(today)}
                if senior is not None
                else None
            )
            span.rows = int(senior is not None)

        with step("alphabetical") as span:
            data["alphabetical"] = [e.snapshot() for e in ops.sort_by_name(employees)]
            span.rows = len(data["alphabetical"])

        with step("total") as span:
            data["total_salary"] = ops.total_salary(employees)
            span.rows = len(employees)

        with step("minimum_wage") as span:
            data["minimum_wage"] = cfg.minimum_wage
            data["minimum_wage_multiples"] = [
                {"name": e.name, "multiple": multiple}
                for e, multiple in ops.minimum_wage_multiples(employees, cfg.minimum_wage)
            ]
            span.rows = len(data["minimum_wage_multiples"])

        logger.debug("Report complete: %d employees", len(employees))
        return data
