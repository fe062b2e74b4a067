"""Session report assembly and rendering.

``SessionReport`` captures the resource tally and the flattened event log
once, at construction. Every other field is read from the referenced
snapshot each time it is accessed, so a report built before the run ends
mixes frozen and live values. Build it after the run completes for a fully
consistent document.
"""

import json
import logging
from typing import Any

from .config import settings
from .errors import SnapshotInvariantError
from .metrics import SessionMetrics
from .models import ResourceTallyEntry, Verdict
from .outcome import verdict
from .schemas import CollectedLine, SessionReportDocument
from .session import SessionSnapshot
from .stats import flatten_event_log
from .tally import build_resource_tally, tally_as_mapping
from .utils import label_of

logger = logging.getLogger(__name__)


class SessionReport:
    """Summary of one simulation session, rendered as a flat document."""

    def __init__(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        self._metrics = SessionMetrics(snapshot)
        self._collected = build_resource_tally(snapshot.collected_resources())
        self._stats = flatten_event_log(snapshot.stats_log())
        self._elapsed_ms = 0
        logger.debug(
            "report captured kinds=%s stat_categories=%s",
            len(self._collected),
            len(self._stats),
        )

    @property
    def elapsed_ms(self) -> int:
        return self._elapsed_ms

    @elapsed_ms.setter
    def elapsed_ms(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SnapshotInvariantError(f"Elapsed time must be an integer, got {value!r}")
        if value < 0:
            raise SnapshotInvariantError(f"Elapsed time must be non-negative, got {value}")
        self._elapsed_ms = value

    @property
    def collected(self) -> list[ResourceTallyEntry]:
        return list(self._collected)

    def collected_map(self) -> dict[str, int]:
        return tally_as_mapping(self._collected)

    @property
    def visited(self) -> int:
        return self._metrics.visited_count()

    @property
    def scanned(self) -> int:
        return self._metrics.scanned_count()

    @property
    def contract_max(self) -> int:
        return self._metrics.objective_count()

    @property
    def result(self) -> Verdict:
        return verdict(self._snapshot)

    @property
    def initial(self) -> int:
        return self._metrics.budget_initial()

    @property
    def remaining(self) -> int:
        return self._metrics.budget_remaining()

    @property
    def stats(self) -> dict[str, str]:
        return dict(self._stats)

    @property
    def size(self) -> int:
        return self._metrics.size()

    def render(self) -> dict[str, Any]:
        """Return the report document built from current accessor values."""

        document = SessionReportDocument(
            collected=[
                CollectedLine(res=label_of(entry.kind), amount=entry.amount)
                for entry in self._collected
            ],
            visited=self.visited,
            scanned=self.scanned,
            contractMax=self.contract_max,
            result=self.result,
            initial=self.initial,
            remaining=self.remaining,
            stats=self.stats,
            size=self.size,
            ms=self._elapsed_ms if settings.report_include_elapsed_ms else None,
        )
        return document.model_dump(exclude_none=True)

    def to_json(self) -> str:
        """Serialize ``render()`` output to JSON text."""

        indent = settings.report_json_indent or None
        return json.dumps(self.render(), indent=indent, ensure_ascii=False)
