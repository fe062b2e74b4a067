"""End-of-session report builder for the island exploration simulation.

This package reduces a simulation session's collected resources, visited
and scanned cells, budget and event log into a flat serializable report.
"""

from .errors import SnapshotInvariantError
from .models import Budget, EventRecord, ResourceTallyEntry, Verdict
from .reporting import SessionReport
from .session import InMemorySession, SessionSnapshot

__all__ = [
    "Budget",
    "EventRecord",
    "InMemorySession",
    "ResourceTallyEntry",
    "SessionReport",
    "SessionSnapshot",
    "SnapshotInvariantError",
    "Verdict",
]
