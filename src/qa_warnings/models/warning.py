"""QA warning value type."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Any

from qa_warnings.errors import AggregationMismatchError, WarningParseError


class Severity(enum.Enum):
    INFO = "INFO"  # reported to the user, probably fine
    WARNING = "WARNING"  # looks wrong, but is sometimes legitimate
    IMPORTANT = "IMPORTANT"  # almost surely wrong, rarely allowed
    CRITICAL = "CRITICAL"  # never proceed with a critical issue

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_str(cls, s: str) -> Severity:
        """Look up a severity by its symbolic name, ignoring case."""
        if isinstance(s, str):
            name = s.strip().upper()
            for member in cls:
                if member.value == name:
                    return member
        raise WarningParseError(f"Unknown severity: {s!r}", field="severity")


_SEVERITY_ORDER: list[Severity] = list(Severity)

_IDENTITY_FIELDS = frozenset({"type", "bucket_id"})


@dataclass
class QAWarning:
    """A data-quality issue, possibly standing for several occurrences.

    ``type`` and ``bucket_id`` form the aggregation id and cannot be
    reassigned once the warning exists. ``count`` and ``severity`` only
    change through :meth:`aggregate`.

    Instances order most severe first: ``a < b`` holds when ``a`` is
    strictly more severe than ``b``, so ``sorted()`` puts critical
    warnings at the front and keeps input order among equal severities.
    """

    type: str
    bucket_id: str | None
    severity: Severity
    count: int = 1
    properties: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.type, str) or not self.type:
            raise ValueError("Warning type must be a non-empty string")
        if self.bucket_id == "":
            object.__setattr__(self, "bucket_id", None)
        elif self.bucket_id is not None and not isinstance(self.bucket_id, str):
            raise TypeError(f"bucket_id must be a string, got {type(self.bucket_id).__name__}")
        if not isinstance(self.severity, Severity):
            raise TypeError(f"severity must be a Severity, got {self.severity!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"count must be a positive integer, got {self.count!r}")
        if self.properties is None:
            self.properties = {}
        elif not isinstance(self.properties, dict):
            raise TypeError(f"properties must be a dict, got {type(self.properties).__name__}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IDENTITY_FIELDS and name in self.__dict__:
            raise AttributeError(f"'{name}' cannot be changed after construction")
        super().__setattr__(name, value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QAWarning):
            return NotImplemented
        return self.severity > other.severity

    @property
    def aggregation_id(self) -> str:
        """Key under which warnings of the same group are merged."""
        if self.bucket_id:
            return f"{self.type}_{self.bucket_id}"
        return self.type

    def aggregate(self, other: QAWarning) -> None:
        """Merge another warning of the same group into this one.

        Counts are summed and the more severe level wins. ``other`` is left
        unchanged and the properties of this warning are kept.

        Raises:
            AggregationMismatchError: The two aggregation ids differ.
        """
        if other.aggregation_id != self.aggregation_id:
            raise AggregationMismatchError(self.aggregation_id, other.aggregation_id)
        self.count += other.count
        if self.severity < other.severity:
            self.severity = other.severity

    def set_property(self, key: str, value: Any) -> None:
        """Set a display property; the last write for a key wins."""
        self.properties[key] = value

    def copy(self) -> QAWarning:
        return QAWarning(
            type=self.type,
            bucket_id=self.bucket_id,
            severity=self.severity,
            count=self.count,
            properties=copy.deepcopy(self.properties),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "bucket_id": self.bucket_id,
            "severity": self.severity.value,
            "count": self.count,
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, d: Any) -> QAWarning:
        """Build a warning from its serialized mapping.

        ``bucketId`` is accepted as an alias of ``bucket_id``. ``properties``
        may be omitted; every other field is required.

        Raises:
            WarningParseError: A field is missing or has the wrong shape.
        """
        if not isinstance(d, dict):
            raise WarningParseError(f"Expected a warning object, got {type(d).__name__}")

        wtype = d.get("type")
        if not isinstance(wtype, str) or not wtype:
            raise WarningParseError("Missing or empty 'type'", field="type")

        bucket_id = d["bucket_id"] if "bucket_id" in d else d.get("bucketId")
        if bucket_id is not None and not isinstance(bucket_id, str):
            raise WarningParseError("'bucket_id' must be a string or null", field="bucket_id")

        if "severity" not in d:
            raise WarningParseError("Missing 'severity'", field="severity")
        severity = Severity.from_str(d["severity"])

        count = d.get("count")
        if isinstance(count, bool) or not isinstance(count, int):
            raise WarningParseError("'count' must be an integer", field="count")
        if count < 1:
            raise WarningParseError(f"'count' must be at least 1, got {count}", field="count")

        properties = d.get("properties")
        if properties is None:
            properties = {}
        elif not isinstance(properties, dict):
            raise WarningParseError("'properties' must be an object", field="properties")
        check_properties(properties, "properties")

        return cls(
            type=wtype,
            bucket_id=bucket_id,
            severity=severity,
            count=count,
            properties=dict(properties),
        )


_JSON_SCALARS = (str, int, float, bool, type(None))


def check_properties(value: Any, path: str) -> None:
    """Reject property values that cannot survive a JSON round trip."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise WarningParseError(f"Non-string key {key!r} in '{path}'", field="properties")
            check_properties(item, f"{path}.{key}")
    elif isinstance(value, list):
        for i, item in enumerate(value):
            check_properties(item, f"{path}[{i}]")
    elif not isinstance(value, _JSON_SCALARS):
        raise WarningParseError(
            f"Unsupported value of type {type(value).__name__} in '{path}'", field="properties"
        )
