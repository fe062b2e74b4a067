"""Unit tests for live session counters and budget invariants."""

import random

import pytest

from island_report.errors import SnapshotInvariantError
from island_report.metrics import SessionMetrics
from island_report.models import Budget
from island_report.session import InMemorySession


def test_counts_follow_snapshot_collections(finished_session):
    metrics = SessionMetrics(finished_session)
    assert metrics.visited_count() == 232
    assert metrics.scanned_count() == 90
    assert metrics.objective_count() == 4


def test_size_aliases_remaining(finished_session):
    metrics = SessionMetrics(finished_session)
    assert metrics.budget_initial() == 1000
    assert metrics.budget_remaining() == 770
    assert metrics.size() == metrics.budget_remaining()


@pytest.mark.parametrize("seed", range(20))
def test_remaining_never_exceeds_initial_for_valid_budgets(seed):
    rng = random.Random(seed)
    initial = rng.randint(0, 50_000)
    remaining = rng.randint(0, initial)
    metrics = SessionMetrics(InMemorySession(budget_state=Budget(initial=initial, remaining=remaining)))
    assert metrics.budget_remaining() <= metrics.budget_initial()


@pytest.mark.parametrize("seed", range(10))
def test_remaining_above_initial_fails_fast(seed):
    rng = random.Random(seed)
    initial = rng.randint(0, 50_000)
    remaining = initial + rng.randint(1, 1_000)
    metrics = SessionMetrics(InMemorySession(budget_state=Budget(initial=initial, remaining=remaining)))
    with pytest.raises(SnapshotInvariantError, match="exceeds"):
        metrics.budget_remaining()
    with pytest.raises(SnapshotInvariantError):
        metrics.size()


def test_negative_budget_rejected():
    metrics = SessionMetrics(InMemorySession(budget_state=Budget(initial=100, remaining=-5)))
    with pytest.raises(SnapshotInvariantError, match="non-negative"):
        metrics.budget_initial()


def test_counts_are_live(finished_session):
    metrics = SessionMetrics(finished_session)
    finished_session.visited_cells.add((100, 100))
    finished_session.spend(30)
    assert metrics.visited_count() == 233
    assert metrics.budget_remaining() == 740
