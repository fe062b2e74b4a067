"""Event log flattening: category label -> description, last write wins."""

import logging
from collections.abc import Iterable
from typing import Any

from .errors import SnapshotInvariantError
from .models import EventRecord
from .utils import label_of

logger = logging.getLogger(__name__)


def flatten_event_log(log: Iterable[EventRecord | tuple[Any, str]]) -> dict[str, str]:
    """Reduce a chronological event log to one description per category.

    A category seen more than once keeps the description of its last
    occurrence; earlier descriptions are dropped.
    """

    flattened: dict[str, str] = {}
    for record in log:
        if isinstance(record, EventRecord):
            category, description = record.category, record.description
        else:
            try:
                category, description = record
            except (TypeError, ValueError) as exc:
                logger.warning("malformed event record record=%r", record)
                raise SnapshotInvariantError(f"Malformed event record: {record!r}") from exc
        flattened[label_of(category)] = description
    return flattened
