"""qaw summary <files> - Summarize warnings and gate on severity."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from qa_warnings.cli.commands._common import load_store, parse_severity, resolve_output
from qa_warnings.cli.options import FilesArgument, OutputOption
from qa_warnings.config.settings import settings
from qa_warnings.output.formatters import output_summary

logger = logging.getLogger(__name__)

# Exit code when the fail-on threshold is reached
EXIT_THRESHOLD = 1


def summary(
    files: list[str] = FilesArgument,
    output: Optional[str] = OutputOption,
    fail_on: Optional[str] = typer.Option(
        None, "--fail-on", help="Exit with code 1 when a warning reaches this severity (default: critical)",
    ),
) -> None:
    """Count warnings per severity and report the most severe one."""
    fmt = resolve_output(output)
    threshold = parse_severity(fail_on, settings.fail_on)
    store = load_store(files)
    output_summary(store, fmt, threshold)

    if store.reaches(threshold):
        logger.info("Max severity %s reaches threshold %s", store.max_severity.value, threshold.value)
        raise typer.Exit(code=EXIT_THRESHOLD)
