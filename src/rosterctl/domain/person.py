"""Person — identity plus birth date.

A Person is immutable once constructed. Age is always computed against a
reference date; callers that need deterministic results pass ``on=``.
"""

from __future__ import annotations

from datetime import date

from rosterctl.domain.errors import InvalidArgument
from rosterctl.domain.formatting import BRAZILIAN_FORMAT, DisplayFormat


def whole_years_between(start: date, end: date) -> int:
    """Count complete years from *start* to *end*.

    Examples:
        >>> whole_years_between(date(2000, 10, 18), date(2024, 10, 17))
        23
        >>> whole_years_between(date(2000, 10, 18), date(2024, 10, 18))
        24
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def format_identity(name: str, birth_date: date, fmt: DisplayFormat = BRAZILIAN_FORMAT) -> str:
    return f"Name: {name} | Birth: {fmt.date(birth_date)}"


class Person:
    """A named person with a birth date.

    Raises:
        InvalidArgument: If *name* is empty or blank, or *birth_date* is
            missing or later than *today* (default: the system date).
    """

    __slots__ = ("_name", "_birth_date")

    def __init__(self, name: str, birth_date: date, *, today: date | None = None) -> None:
        if name is not None and not isinstance(name, str):
            raise InvalidArgument(f"Name must be a string, got {name!r}")
        if name is None or not name.strip():
            raise InvalidArgument("Name must not be empty")
        if birth_date is None:
            raise InvalidArgument("Birth date must not be null")
        if not isinstance(birth_date, date):
            raise InvalidArgument(f"Birth date must be a date, got {birth_date!r}")
        reference = today or date.today()
        if birth_date > reference:
            raise InvalidArgument(f"Birth date must not be in the future: {birth_date.isoformat()}")
        self._name = name.strip()
        self._birth_date = birth_date

    @property
    def name(self) -> str:
        return self._name

    @property
    def birth_date(self) -> date:
        return self._birth_date

    def age(self, on: date | None = None) -> int:
        """Whole years between the birth date and *on* (default: today)."""
        return whole_years_between(self._birth_date, on or date.today())

    def identity(self) -> tuple[str, date]:
        """Hashable key for equality: ``(name, birth_date)``."""
        return (self._name, self._birth_date)

    def describe(self, fmt: DisplayFormat = BRAZILIAN_FORMAT) -> str:
        return format_identity(self._name, self._birth_date, fmt)

    def __repr__(self) -> str:
        return f"Person(name={self._name!r}, birth_date={self._birth_date!r})"


def same_person(a: Person, b: Person) -> bool:
    """Structural equality over name and birth date."""
    return a.identity() == b.identity()
