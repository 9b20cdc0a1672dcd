"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option(None, "--output", "-o", help="Output format: table, json, yaml")
FilesArgument = typer.Argument(..., help="Warning documents (JSON or YAML); use - for stdin")
