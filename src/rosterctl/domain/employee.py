"""Employee — a Person with a salary and a role.

Composition, not inheritance: an Employee embeds a :class:`Person` and
exposes its fields and operations directly. Salary and role are mutable;
every write goes through the same validation as construction.

INVARIANT: 0.01 <= to_cents(salary) and salary <= MAX_SALARY, and role is
non-empty, for the lifetime of the object.

Ordering and equality are explicit functions (:func:`compare_by_name`,
:func:`name_key`, :func:`same_employee`) rather than operator overloads.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from rosterctl.domain.errors import InvalidArgument
from rosterctl.domain.formatting import BRAZILIAN_FORMAT, DisplayFormat, to_cents
from rosterctl.domain.person import Person, format_identity

MAX_SALARY = Decimal("999999999999999.99")


def _to_decimal(value: Any, label: str) -> Decimal:
    if value is None:
        raise InvalidArgument(f"{label} must not be null")
    if isinstance(value, bool):
        raise InvalidArgument(f"{label} must be a number, got {value!r}")
    try:
        # floats go through str(): 0.1 -> Decimal("0.1")
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidArgument(f"{label} must be a number, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidArgument(f"{label} must be finite, got {value!r}")
    return amount


def _check_salary(salary: Any) -> Decimal:
    amount = _to_decimal(salary, "Salary")
    if amount > MAX_SALARY:
        raise InvalidArgument(f"Salary must not exceed {MAX_SALARY}, got {salary!r}")
    # positive once rounded to cents
    if to_cents(amount) <= 0:
        raise InvalidArgument(f"Salary must be positive in cents, got {salary!r}")
    return amount


def _check_role(role: Any) -> str:
    if role is not None and not isinstance(role, str):
        raise InvalidArgument(f"Role must be a string, got {role!r}")
    if role is None or not role.strip():
        raise InvalidArgument("Role must not be empty")
    return role.strip()


class Employee:
    """An employee on the roster."""

    __slots__ = ("_person", "_salary", "_role")

    def __init__(
        self,
        name: str,
        birth_date: date,
        salary: Decimal | int | str,
        role: str,
        *,
        today: date | None = None,
    ) -> None:
        self._person = Person(name, birth_date, today=today)
        self._salary = _check_salary(salary)
        self._role = _check_role(role)

    # --- Person surface ---

    @property
    def person(self) -> Person:
        return self._person

    @property
    def name(self) -> str:
        return self._person.name

    @property
    def birth_date(self) -> date:
        return self._person.birth_date

    def age(self, on: date | None = None) -> int:
        return self._person.age(on)

    # --- Mutable fields ---

    @property
    def salary(self) -> Decimal:
        return self._salary

    @salary.setter
    def salary(self, value: Decimal | int | str) -> None:
        self._salary = _check_salary(value)

    @property
    def role(self) -> str:
        return self._role

    @role.setter
    def role(self, value: str) -> None:
        self._role = _check_role(value)

    # --- Salary operations ---

    def apply_raise(self, percent: Decimal | int | str) -> Decimal:
        """Raise the salary by *percent* and return the new salary.

        The result is rounded to cents, half-up: ``2009.44`` raised by
        ``10`` becomes ``2210.38``.

        Raises:
            InvalidArgument: If *percent* is negative or the raised salary
                would exceed MAX_SALARY.
        """
        pct = _to_decimal(percent, "Percent")
        if pct < 0:
            raise InvalidArgument(f"Percent must not be negative, got {percent!r}")
        factor = Decimal(1) + pct / Decimal(100)
        self.salary = to_cents(self._salary * factor)
        return self._salary

    def minimum_wage_multiple(self, minimum_wage: Decimal | int | str) -> Decimal:
        """Salary expressed as a multiple of *minimum_wage*, rounded half-up to cents.

        Raises:
            InvalidArgument: If *minimum_wage* is not positive.
        """
        wage = _to_decimal(minimum_wage, "Minimum wage")
        if wage <= 0:
            raise InvalidArgument(f"Minimum wage must be positive, got {minimum_wage!r}")
        return to_cents(self._salary / wage)

    def born_in_month(self, month: int) -> bool:
        """Whether the birth month equals *month* (1-12).

        Raises:
            InvalidArgument: If *month* is outside 1-12.
        """
        if not 1 <= month <= 12:
            raise InvalidArgument(f"Month must be between 1 and 12, got {month}")
        return self._person.birth_date.month == month

    # --- Identity and display ---

    def identity(self) -> tuple[str, date, Decimal, str]:
        """Hashable key for equality: Person identity plus ``(salary, role)``."""
        return (*self._person.identity(), self._salary, self._role)

    def describe(self, fmt: DisplayFormat = BRAZILIAN_FORMAT) -> str:
        return format_row(self.snapshot(), fmt)

    def snapshot(self) -> dict[str, Any]:
        """Plain-dict copy of the current field values."""
        return {
            "name": self.name,
            "birth_date": self.birth_date,
            "salary": self._salary,
            "role": self._role,
        }

    def __repr__(self) -> str:
        return (
            f"Employee(name={self.name!r}, birth_date={self.birth_date!r}, "
            f"salary={self._salary!r}, role={self._role!r})"
        )


# ---------------------------------------------------------------------------
# Ordering and equality
# ---------------------------------------------------------------------------


def name_key(employee: Employee) -> str:
    """Sort key for the natural (case-insensitive name) order."""
    return employee.name.casefold()


def compare_by_name(a: Employee, b: Employee) -> int:
    """Three-way case-insensitive name comparison: -1, 0, or 1."""
    left, right = name_key(a), name_key(b)
    return (left > right) - (left < right)


def same_employee(a: Employee, b: Employee) -> bool:
    """Equal iff name, birth date, salary, and role all match."""
    return a.identity() == b.identity()


def format_row(row: Mapping[str, Any], fmt: DisplayFormat = BRAZILIAN_FORMAT) -> str:
    """Render an employee snapshot (see :meth:`Employee.snapshot`) as one line.

    Examples:
        ``Name: Maria | Birth: 18/10/2000 | Salary: 2.009,44 | Role: Operador``
    """
    identity = format_identity(row["name"], row["birth_date"], fmt)
    return f"{identity} | Salary: {fmt.number(row['salary'])} | Role: {row['role']}"
