"""Tests for the literal seed roster."""

from datetime import date
from decimal import Decimal

import pytest

from rosterctl.domain.errors import InvalidArgument
from rosterctl.domain.seed import SEED_EMPLOYEES, build_roster


class TestBuildRoster:
    def test_ten_employees_in_order(self, reference_date: date) -> None:
        roster = build_roster(today=reference_date)
        assert [e.name for e in roster] == [row[0] for row in SEED_EMPLOYEES]
        assert len(roster) == 10

    def test_first_row(self, reference_date: date) -> None:
        maria = build_roster(today=reference_date)[0]
        assert maria.name == "Maria"
        assert maria.birth_date == date(2000, 10, 18)
        assert maria.salary == Decimal("2009.44")
        assert maria.role == "Operador"

    def test_fresh_objects_each_call(self, reference_date: date) -> None:
        first = build_roster(today=reference_date)
        second = build_roster(today=reference_date)
        first[0].apply_raise(10)
        assert second[0].salary == Decimal("2009.44")

    def test_reference_before_births_fails(self) -> None:
        with pytest.raises(InvalidArgument, match="future"):
            build_roster(today=date(1990, 1, 1))
