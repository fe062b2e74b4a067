"""Shared pytest fixtures: restore report settings and build sample sessions."""

import pytest

from island_report.config import settings
from island_report.models import Budget, EventRecord
from island_report.session import InMemorySession

from island_kinds import Category, Resource


@pytest.fixture(autouse=True)
def reset_settings():
    original = (
        settings.trace_tally,
        settings.report_json_indent,
        settings.report_include_elapsed_ms,
    )
    yield
    (
        settings.trace_tally,
        settings.report_json_indent,
        settings.report_include_elapsed_ms,
    ) = original


@pytest.fixture
def finished_session() -> InMemorySession:
    return InMemorySession(
        resources={Resource.WOOD: 3, Resource.FISH: 5},
        visited_cells={(x, y) for x in range(29) for y in range(8)},
        scanned_cells={(x, y) for x in range(9) for y in range(10)},
        objective_list=["wood-contract", "fish-contract", "ore-contract", "quartz-contract"],
        budget_state=Budget(initial=1000, remaining=770),
        correct=True,
        events=[
            EventRecord(category=Category.FOUND, description="wood@(2,3)"),
            EventRecord(category=Category.MOVE, description="step"),
        ],
    )
