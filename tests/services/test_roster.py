"""Tests for the pure roster operations."""

from datetime import date
from decimal import Decimal

import pytest

from rosterctl.domain.employee import Employee, compare_by_name
from rosterctl.domain.errors import InvalidArgument
from rosterctl.services.roster import (
    apply_raise,
    born_in_months,
    group_by_role,
    minimum_wage_multiples,
    oldest,
    remove_by_name,
    sort_by_name,
    total_salary,
)


class TestRemoveByName:
    def test_removes_joao(self, roster: list[Employee]) -> None:
        kept = remove_by_name(roster, "João")
        assert len(kept) == 9
        assert all(e.name.casefold() != "joão" for e in kept)

    @pytest.mark.parametrize("name", ["JOÃO", "joão", "  João "])
    def test_case_insensitive(self, roster: list[Employee], name: str) -> None:
        assert len(remove_by_name(roster, name)) == 9

    def test_absent_name_keeps_size_and_order(self, roster: list[Employee]) -> None:
        kept = remove_by_name(roster, "Nobody")
        assert kept == roster
        assert kept is not roster

    def test_does_not_mutate_input(self, roster: list[Employee]) -> None:
        remove_by_name(roster, "Maria")
        assert len(roster) == 10

    def test_casefold_matches_sharp_s(self, reference_date: date) -> None:
        staff = [Employee("Strauß", date(1990, 1, 1), 1000, "A", today=reference_date)]
        assert remove_by_name(staff, "STRASS") == staff
        assert remove_by_name(staff, "STRAUSS") == []

    def test_removes_every_match(self, reference_date: date) -> None:
        twins = [
            Employee("Ana", date(1990, 1, 1), 1000, "A", today=reference_date),
            Employee("ANA", date(1991, 1, 1), 1000, "B", today=reference_date),
            Employee("Bia", date(1992, 1, 1), 1000, "C", today=reference_date),
        ]
        assert [e.name for e in remove_by_name(twins, "ana")] == ["Bia"]


class TestApplyRaise:
    def test_every_salary_raised(self, roster: list[Employee]) -> None:
        before = [e.salary for e in roster]
        apply_raise(roster, 10)
        for old, e in zip(before, roster, strict=True):
            assert e.salary == (old * Decimal("1.1")).quantize(Decimal("0.01"), "ROUND_HALF_UP")

    def test_negative_rejected(self, roster: list[Employee]) -> None:
        with pytest.raises(InvalidArgument):
            apply_raise(roster, -5)

    def test_empty_roster(self) -> None:
        apply_raise([], 10)


class TestGroupByRole:
    def test_partition(self, roster: list[Employee]) -> None:
        groups = group_by_role(roster)
        members = [e for group in groups.values() for e in group]
        assert len(members) == len(roster)
        assert {id(e) for e in members} == {id(e) for e in roster}
        for role, group in groups.items():
            assert all(e.role == role for e in group)

    def test_keys_sorted(self, roster: list[Employee]) -> None:
        keys = list(group_by_role(roster))
        assert keys == sorted(keys)

    def test_members_keep_roster_order(self, roster: list[Employee]) -> None:
        operators = group_by_role(roster)["Operador"]
        assert [e.name for e in operators] == ["Maria", "João", "Heitor"]

    def test_empty(self) -> None:
        assert group_by_role([]) == {}


class TestBornInMonths:
    def test_october_and_december(self, roster: list[Employee]) -> None:
        names = [e.name for e in born_in_months(roster, [10, 12])]
        assert names == ["Maria", "Miguel"]

    def test_no_match(self, roster: list[Employee]) -> None:
        assert born_in_months(roster, [6]) == []

    def test_invalid_month(self, roster: list[Employee]) -> None:
        with pytest.raises(InvalidArgument):
            born_in_months(roster, [13])


class TestOldest:
    def test_caio(self, roster: list[Employee], reference_date: date) -> None:
        senior = oldest(roster, on=reference_date)
        assert senior is not None
        assert senior.name == "Caio"
        assert senior.age(reference_date) == 62

    def test_tie_goes_to_first(self, reference_date: date) -> None:
        # same age in whole years on the reference date
        first = Employee("First", date(1980, 6, 1), 1000, "X", today=reference_date)
        second = Employee("Second", date(1980, 2, 1), 1000, "X", today=reference_date)
        assert oldest([first, second], on=reference_date) is first

    def test_empty(self) -> None:
        assert oldest([]) is None


class TestSortByName:
    def test_alphabetical(self, roster: list[Employee]) -> None:
        names = [e.name for e in sort_by_name(roster)]
        assert names == [
            "Alice",
            "Arthur",
            "Caio",
            "Heitor",
            "Helena",
            "Heloísa",
            "João",
            "Laura",
            "Maria",
            "Miguel",
        ]

    def test_consistent_with_compare(self, roster: list[Employee]) -> None:
        ordered = sort_by_name(roster)
        for a, b in zip(ordered, ordered[1:], strict=False):
            assert compare_by_name(a, b) <= 0

    def test_idempotent(self, roster: list[Employee]) -> None:
        once = sort_by_name(roster)
        assert sort_by_name(once) == once

    def test_case_insensitive(self, reference_date: date) -> None:
        people = [
            Employee("bruno", date(1990, 1, 1), 1, "X", today=reference_date),
            Employee("Ana", date(1990, 1, 1), 1, "X", today=reference_date),
            Employee("carla", date(1990, 1, 1), 1, "X", today=reference_date),
        ]
        assert [e.name for e in sort_by_name(people)] == ["Ana", "bruno", "carla"]


class TestTotals:
    def test_total_salary(self, roster: list[Employee]) -> None:
        assert total_salary(roster) == sum((e.salary for e in roster), Decimal(0))

    def test_total_empty(self) -> None:
        assert total_salary([]) == Decimal(0)

    def test_minimum_wage_multiples(self, roster: list[Employee]) -> None:
        pairs = minimum_wage_multiples(roster, Decimal("1212.00"))
        assert [e.name for e, _ in pairs] == [e.name for e in roster]
        assert pairs[0][1] == Decimal("1.66")

    def test_minimum_wage_invalid(self, roster: list[Employee]) -> None:
        with pytest.raises(InvalidArgument):
            minimum_wage_multiples(roster, 0)
