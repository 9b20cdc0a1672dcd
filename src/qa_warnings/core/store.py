"""Keyed aggregation of QA warnings."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from qa_warnings.errors import WarningParseError
from qa_warnings.models.warning import QAWarning, Severity

logger = logging.getLogger(__name__)


class WarningStore:
    """Collects warnings and merges those sharing an aggregation id.

    The store keeps its own copies, so warnings passed to
    :meth:`add_warning` are never mutated.
    """

    def __init__(self) -> None:
        self._warnings: dict[str, QAWarning] = {}
        self.max_severity: Severity = Severity.INFO
        self.total_count: int = 0

    def add_warning(self, warning: QAWarning) -> None:
        key = warning.aggregation_id
        existing = self._warnings.get(key)
        if existing is None:
            self._warnings[key] = warning.copy()
        else:
            existing.aggregate(warning)
            logger.debug("Merged warning %s (count=%d, severity=%s)", key, existing.count, existing.severity.value)
        if warning.severity > self.max_severity:
            self.max_severity = warning.severity
        self.total_count += warning.count

    def add_warnings(self, warnings: Iterable[QAWarning]) -> None:
        for w in warnings:
            self.add_warning(w)

    def warnings(self) -> list[QAWarning]:
        """Return aggregated warnings, most severe first."""
        return sorted(self._warnings.values())

    def reaches(self, threshold: Severity) -> bool:
        """True if any stored warning is at least as severe as threshold."""
        return bool(self._warnings) and self.max_severity >= threshold

    def get(self, aggregation_id: str) -> QAWarning | None:
        return self._warnings.get(aggregation_id)

    def __len__(self) -> int:
        return len(self._warnings)

    def __contains__(self, aggregation_id: object) -> bool:
        return aggregation_id in self._warnings

    def __iter__(self) -> Iterator[QAWarning]:
        return iter(self.warnings())

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_severity": self.max_severity.value,
            "nb_warnings": self.total_count,
            "warnings": [w.to_dict() for w in self.warnings()],
        }

    @classmethod
    def from_dict(cls, d: Any) -> WarningStore:
        if not isinstance(d, dict) or not isinstance(d.get("warnings"), list):
            raise WarningParseError("Expected an object with a 'warnings' list", field="warnings")
        store = cls()
        store.add_warnings(QAWarning.from_dict(item) for item in d["warnings"])
        return store


def aggregate_warnings(warnings: Iterable[QAWarning]) -> list[QAWarning]:
    """Merge warnings by aggregation id and sort them most severe first."""
    store = WarningStore()
    store.add_warnings(warnings)
    return store.warnings()
