"""Scalar session counters read live from a session snapshot."""

import logging

from .errors import SnapshotInvariantError
from .models import Budget
from .session import SessionSnapshot

logger = logging.getLogger(__name__)


class SessionMetrics:
    """Thin read-only accessors over the snapshot; nothing is cached."""

    def __init__(self, snapshot: SessionSnapshot) -> None:
        self.snapshot = snapshot

    def visited_count(self) -> int:
        return len(self.snapshot.visited())

    def scanned_count(self) -> int:
        return len(self.snapshot.scanned())

    def objective_count(self) -> int:
        return len(self.snapshot.objectives())

    def budget_initial(self) -> int:
        return self._checked_budget().initial

    def budget_remaining(self) -> int:
        return self._checked_budget().remaining

    def size(self) -> int:
        # Legacy alias of budget_remaining, still part of the report document.
        return self.budget_remaining()

    def _checked_budget(self) -> Budget:
        budget = self.snapshot.budget()
        initial, remaining = budget.initial, budget.remaining
        if initial < 0 or remaining < 0:
            logger.warning("negative budget initial=%s remaining=%s", initial, remaining)
            raise SnapshotInvariantError(
                f"Budget values must be non-negative (initial={initial}, remaining={remaining})"
            )
        if remaining > initial:
            logger.warning("budget overflow initial=%s remaining=%s", initial, remaining)
            raise SnapshotInvariantError(
                f"Remaining budget {remaining} exceeds initial budget {initial}"
            )
        return budget
