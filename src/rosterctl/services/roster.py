"""Roster operations — pure functions over a list of Employee.

Each function takes the roster as an argument and returns a new value;
only :func:`apply_raise` mutates, and it mutates the employees (salary),
never the list itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from rosterctl.domain.employee import Employee, name_key

logger = logging.getLogger(__name__)


def remove_by_name(roster: Sequence[Employee], name: str) -> list[Employee]:
    """Drop every employee whose name case-insensitively equals *name*.

    Order of the survivors is preserved. An absent name yields an
    equal-length copy.
    """
    target = name.strip().casefold()
    kept = [e for e in roster if e.name.casefold() != target]
    logger.debug("Removed %d employee(s) named %r", len(roster) - len(kept), name)
    return kept


def apply_raise(roster: Iterable[Employee], percent: Decimal | int | str) -> None:
    """Apply a *percent* raise to every employee in place."""
    for employee in roster:
        employee.apply_raise(percent)


def group_by_role(roster: Iterable[Employee]) -> dict[str, list[Employee]]:
    """Partition the roster by role.

    Keys are returned in alphabetical order; members keep roster order.
    """
    groups: dict[str, list[Employee]] = {}
    for employee in roster:
        groups.setdefault(employee.role, []).append(employee)
    return {role: groups[role] for role in sorted(groups)}


def born_in_months(roster: Iterable[Employee], months: Iterable[int]) -> list[Employee]:
    """Employees whose birth month is any of *months*, in roster order."""
    wanted = tuple(months)
    return [e for e in roster if any(e.born_in_month(m) for m in wanted)]


def oldest(roster: Iterable[Employee], *, on: date | None = None) -> Employee | None:
    """The employee with the greatest age in whole years.

    Ties go to the first one encountered. Returns None for an empty roster.
    """
    return max(roster, key=lambda e: e.age(on), default=None)


def sort_by_name(roster: Iterable[Employee]) -> list[Employee]:
    """A new list in natural (case-insensitive name) order."""
    return sorted(roster, key=name_key)


def total_salary(roster: Iterable[Employee]) -> Decimal:
    return sum((e.salary for e in roster), Decimal(0))


def minimum_wage_multiples(
    roster: Iterable[Employee], minimum_wage: Decimal | int | str
) -> list[tuple[Employee, Decimal]]:
    """Pair each employee with their salary as a multiple of *minimum_wage*."""
    return [(e, e.minimum_wage_multiple(minimum_wage)) for e in roster]
