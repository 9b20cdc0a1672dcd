"""Helpers shared by the warning commands."""

from __future__ import annotations

from typing import NoReturn, Optional

import typer

from qa_warnings.config.settings import settings
from qa_warnings.core.codec import load_warnings_file
from qa_warnings.core.store import WarningStore
from qa_warnings.errors import QAWarningError
from qa_warnings.models.warning import Severity

# Exit code when input cannot be read or parsed
EXIT_BAD_INPUT = 2


def fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=EXIT_BAD_INPUT)


def resolve_output(output: Optional[str]) -> str:
    fmt = (output or settings.default_output).lower()
    if fmt not in ("table", "json", "yaml"):
        fail(f"unknown output format '{fmt}' (expected table, json or yaml)")
    return fmt


def parse_severity(value: Optional[str], default: Severity) -> Severity:
    if value is None:
        return default
    try:
        return Severity.from_str(value)
    except QAWarningError as e:
        fail(str(e))


def load_store(files: list[str]) -> WarningStore:
    store = WarningStore()
    try:
        for path in files:
            store.add_warnings(load_warnings_file(path))
    except QAWarningError as e:
        fail(str(e))
    return store
