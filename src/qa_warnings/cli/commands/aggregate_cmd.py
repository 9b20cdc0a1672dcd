"""qaw aggregate <files> - Merge warnings and list them by severity."""

from __future__ import annotations

from typing import Optional

import typer

from qa_warnings.cli.commands._common import load_store, parse_severity, resolve_output
from qa_warnings.cli.options import FilesArgument, OutputOption
from qa_warnings.models.warning import Severity
from qa_warnings.output.formatters import output_warnings


def aggregate(
    files: list[str] = FilesArgument,
    output: Optional[str] = OutputOption,
    min_severity: Optional[str] = typer.Option(
        None, "--min-severity", "-s", help="Hide warnings below this severity: info, warning, important, critical",
    ),
) -> None:
    """Merge warnings sharing an aggregation id and print them, most severe first."""
    fmt = resolve_output(output)
    threshold = parse_severity(min_severity, Severity.INFO)
    store = load_store(files)
    warnings = [w for w in store.warnings() if w.severity >= threshold]
    output_warnings(warnings, fmt)
