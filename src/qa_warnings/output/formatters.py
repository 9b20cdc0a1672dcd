"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from qa_warnings.core.codec import dump_warnings
from qa_warnings.core.store import WarningStore
from qa_warnings.models.warning import QAWarning, Severity

console = Console()


def _summary_to_dict(store: WarningStore, fail_on: Severity) -> dict[str, Any]:
    by_severity = {s.value: 0 for s in sorted(Severity, reverse=True)}
    for w in store.warnings():
        by_severity[w.severity.value] += w.count
    return {
        "max_severity": store.max_severity.value,
        "nb_warnings": store.total_count,
        "groups": len(store),
        "by_severity": by_severity,
        "fail_on": fail_on.value,
        "failed": store.reaches(fail_on),
    }


def output_warnings(warnings: list[QAWarning], fmt: str) -> None:
    if fmt == "json":
        console.print_json(dump_warnings(warnings, "json"))
    elif fmt == "yaml":
        console.print(dump_warnings(warnings, "yaml"), markup=False, highlight=False, soft_wrap=True)
    else:
        from qa_warnings.output.tables import warning_table
        console.print(warning_table(warnings))


def output_summary(store: WarningStore, fmt: str, fail_on: Severity) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_summary_to_dict(store, fail_on), indent=2))
    elif fmt == "yaml":
        data = _summary_to_dict(store, fail_on)
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    else:
        from qa_warnings.output.tables import summary_table
        from qa_warnings.output.themes import styled_severity
        console.print(summary_table(store))
        console.print(
            f"\nMax severity: {styled_severity(store.max_severity)}, "
            f"{store.total_count} occurrence(s) in {len(store)} group(s)"
        )
