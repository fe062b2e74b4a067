"""Read-only session interface consumed from the simulation engine.

The engine adapter implements ``SessionSnapshot``; ``InMemorySession`` is a
plain container implementation for hosts that already hold the values.
"""

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .models import Budget, EventRecord


class SessionSnapshot:
    """Minimal interface implemented by every simulation session backend."""

    def collected_resources(self) -> Mapping[Any, int]:
        raise NotImplementedError

    def visited(self) -> Collection[Any]:
        raise NotImplementedError

    def scanned(self) -> Collection[Any]:
        raise NotImplementedError

    def objectives(self) -> Collection[Any]:
        raise NotImplementedError

    def budget(self) -> Budget:
        raise NotImplementedError

    def is_correct(self) -> bool:
        raise NotImplementedError

    def stats_log(self) -> Iterable[EventRecord]:
        raise NotImplementedError


@dataclass
class InMemorySession(SessionSnapshot):
    """Session state held in plain Python collections."""

    resources: dict[Any, int] = field(default_factory=dict)
    visited_cells: set[Any] = field(default_factory=set)
    scanned_cells: set[Any] = field(default_factory=set)
    objective_list: list[Any] = field(default_factory=list)
    budget_state: Budget = field(default_factory=lambda: Budget(initial=0, remaining=0))
    correct: bool = False
    events: list[EventRecord] = field(default_factory=list)

    def collected_resources(self) -> Mapping[Any, int]:
        return self.resources

    def visited(self) -> Collection[Any]:
        return self.visited_cells

    def scanned(self) -> Collection[Any]:
        return self.scanned_cells

    def objectives(self) -> Collection[Any]:
        return self.objective_list

    def budget(self) -> Budget:
        return self.budget_state

    def is_correct(self) -> bool:
        return self.correct

    def stats_log(self) -> Iterable[EventRecord]:
        return self.events

    def collect(self, kind: Any, amount: int) -> None:
        self.resources[kind] = self.resources.get(kind, 0) + amount

    def log(self, category: Any, description: str) -> None:
        self.events.append(EventRecord(category=category, description=description))

    def spend(self, cost: int) -> None:
        self.budget_state = Budget(
            initial=self.budget_state.initial,
            remaining=self.budget_state.remaining - cost,
        )
