"""Binary OK/KO verdict derived from the session correctness predicate."""

from .errors import SnapshotInvariantError
from .models import Verdict
from .session import SessionSnapshot


def verdict(snapshot: SessionSnapshot) -> Verdict:
    """Return ``Verdict.ok`` when the session is correct, ``Verdict.ko`` otherwise."""

    correct = snapshot.is_correct()
    if not isinstance(correct, bool):
        raise SnapshotInvariantError(f"Correctness predicate returned {type(correct).__name__}, expected bool")
    return Verdict.ok if correct else Verdict.ko
