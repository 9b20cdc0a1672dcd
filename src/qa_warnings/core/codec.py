"""JSON / YAML load and dump of warning documents."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable

import yaml

from qa_warnings.errors import WarningParseError
from qa_warnings.models.warning import QAWarning, check_properties

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


def sort_warnings(warnings: Iterable[QAWarning]) -> list[QAWarning]:
    """Stable sort, most severe first."""
    return sorted(warnings)


def load_warnings(text: str) -> list[QAWarning]:
    """Parse warnings from JSON or YAML text.

    The document may be a list of warnings, a single warning object, or a
    store document holding a ``warnings`` list.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WarningParseError(f"Invalid JSON/YAML document: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        if "warnings" in data:
            items = data["warnings"]
            if not isinstance(items, list):
                raise WarningParseError("'warnings' must be a list", field="warnings")
        else:
            items = [data]
    elif isinstance(data, list):
        items = data
    else:
        raise WarningParseError(f"Unsupported document root: {type(data).__name__}")

    return [QAWarning.from_dict(item) for item in items]


def load_warnings_file(path: str | Path) -> list[QAWarning]:
    """Load warnings from a file; ``-`` reads standard input."""
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise WarningParseError(f"File not found: {p}") from e
        except OSError as e:
            raise WarningParseError(f"Could not read {p}: {e}") from e
    warnings = load_warnings(text)
    logger.debug("Loaded %d warnings from %s", len(warnings), path)
    return warnings


def dump_warnings(warnings: Iterable[QAWarning], fmt: str = "json") -> str:
    """Serialize warnings as JSON or YAML text.

    Raises:
        ValueError: Unknown format, or a property value with no JSON form.
    """
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {fmt!r} (expected one of {', '.join(OUTPUT_FORMATS)})")
    payload: list[dict[str, Any]] = []
    for w in warnings:
        try:
            check_properties(w.properties, "properties")
        except WarningParseError as e:
            raise ValueError(f"Cannot serialize warning '{w.aggregation_id}': {e}") from e
        payload.append(w.to_dict())
    if fmt == "json":
        return json.dumps(payload, indent=2)
    return yaml.safe_dump(payload, default_flow_style=False, sort_keys=False)
