"""Literal seed roster used by the report run."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from rosterctl.domain.employee import Employee

# (name, birth date, salary, role), in insertion order
SEED_EMPLOYEES: tuple[tuple[str, date, Decimal, str], ...] = (
    ("Maria", date(2000, 10, 18), Decimal("2009.44"), "Operador"),
    ("João", date(1990, 5, 12), Decimal("2284.38"), "Operador"),
    ("Caio", date(1961, 5, 2), Decimal("9836.14"), "Coordenador"),
    ("Miguel", date(1988, 10, 14), Decimal("19119.88"), "Diretor"),
    ("Alice", date(1995, 1, 5), Decimal("2234.68"), "Recepcionista"),
    ("Heitor", date(1999, 11, 19), Decimal("1582.72"), "Operador"),
    ("Arthur", date(1993, 3, 31), Decimal("4071.84"), "Contador"),
    ("Laura", date(1994, 7, 8), Decimal("3017.45"), "Gerente"),
    ("Heloísa", date(2003, 5, 24), Decimal("1606.85"), "Eletricista"),
    ("Helena", date(1996, 9, 2), Decimal("2799.93"), "Gerente"),
)


def build_roster(*, today: date | None = None) -> list[Employee]:
    """Construct a fresh, independently mutable roster from the seed rows."""
    return [
        Employee(name, birth_date, salary, role, today=today)
        for name, birth_date, salary, role in SEED_EMPLOYEES
    ]
