"""Resource tally reduction.

Turns the engine's per-kind collected amounts into an ordered list of
``ResourceTallyEntry`` values, one per kind, in the source mapping's
iteration order.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .config import settings
from .errors import SnapshotInvariantError
from .models import ResourceTallyEntry
from .utils import label_of

logger = logging.getLogger(__name__)


def build_resource_tally(source_tally: Mapping[Any, int]) -> list[ResourceTallyEntry]:
    """Copy each (kind, amount) pair of the source tally into an entry list."""

    entries: list[ResourceTallyEntry] = []
    seen_labels: set[str] = set()
    for kind, amount in source_tally.items():
        label = label_of(kind)
        if isinstance(amount, bool) or not isinstance(amount, int):
            logger.warning("invalid tally amount kind=%s amount=%r", label, amount)
            raise SnapshotInvariantError(f"Collected amount for {label} is not an integer: {amount!r}")
        if amount < 0:
            logger.warning("negative tally amount kind=%s amount=%s", label, amount)
            raise SnapshotInvariantError(f"Collected amount for {label} is negative: {amount}")
        if label in seen_labels:
            raise SnapshotInvariantError(f"Resource kind label {label} appears more than once")
        seen_labels.add(label)
        if settings.trace_tally:
            logger.debug("tally entry kind=%s amount=%s", label, amount)
        entries.append(ResourceTallyEntry(kind=kind, amount=amount))
    return entries


def tally_as_mapping(entries: list[ResourceTallyEntry]) -> dict[str, int]:
    """Return label -> amount for a built tally, keeping entry order."""

    return {label_of(entry.kind): entry.amount for entry in entries}
