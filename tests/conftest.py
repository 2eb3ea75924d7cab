"""Shared pytest fixtures for rosterctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date

import pytest
from click.testing import CliRunner

from rosterctl.config.settings import RosterSettings
from rosterctl.domain.employee import Employee
from rosterctl.domain.seed import build_roster
from rosterctl.services.telemetry import _current_span, disable_telemetry

# Fixed reference date so ages and "future" checks never depend on the clock.
REFERENCE_DATE = date(2024, 1, 1)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def roster(reference_date: date) -> list[Employee]:
    """Fresh seed roster of 10 employees."""
    return build_roster(today=reference_date)


@pytest.fixture
def settings(reference_date: date) -> RosterSettings:
    return RosterSettings.from_cli(as_of=reference_date)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    roster_logger = logging.getLogger("rosterctl")
    roster_level = roster_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    roster_logger.setLevel(roster_level)
    disable_telemetry()
    _current_span.set(None)
