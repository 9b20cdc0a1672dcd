"""Rich table builders for each command."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.table import Table

from qa_warnings.core.store import WarningStore
from qa_warnings.models.warning import QAWarning, Severity
from qa_warnings.output.themes import severity_icon, styled_severity


def _format_properties(properties: dict[str, Any]) -> str:
    return "\n".join(f"{k}: {v}" for k, v in properties.items())


def warning_table(warnings: list[QAWarning], title: str = "QA Warnings") -> Table:
    table = Table(title=title, expand=True)
    table.add_column("", width=3, no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Bucket", style="magenta")
    table.add_column("Count", justify="right", style="bold")
    table.add_column("Properties", style="dim", max_width=60)

    for w in warnings:
        table.add_row(
            severity_icon(w.severity),
            styled_severity(w.severity),
            escape(w.type),
            escape(w.bucket_id or "-"),
            str(w.count),
            escape(_format_properties(w.properties)),
        )
    return table


def summary_table(store: WarningStore) -> Table:
    counts = {s: 0 for s in Severity}
    groups = {s: 0 for s in Severity}
    for w in store.warnings():
        counts[w.severity] += w.count
        groups[w.severity] += 1

    table = Table(title="Warning Summary", expand=False)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Groups", justify="right")
    table.add_column("Occurrences", justify="right", style="bold")
    for severity in sorted(Severity, reverse=True):
        table.add_row(styled_severity(severity), str(groups[severity]), str(counts[severity]))
    return table
