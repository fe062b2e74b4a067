"""Error raised when an upstream session snapshot breaks a report invariant."""


class SnapshotInvariantError(ValueError):
    """Malformed session state supplied by the simulation engine."""
