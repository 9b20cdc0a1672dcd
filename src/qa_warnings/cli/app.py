"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

from qa_warnings import __version__
from qa_warnings.observability.logging import configure_logging

app = typer.Typer(
    name="qaw",
    help="QA Warnings - aggregate and review data-quality warnings.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv)"),
) -> None:
    configure_logging(verbose)


@app.command()
def version() -> None:
    """Show the installed version."""
    typer.echo(f"qaw v{__version__}")


def _register_commands() -> None:
    from qa_warnings.cli.commands.aggregate_cmd import aggregate
    from qa_warnings.cli.commands.summary_cmd import summary

    app.command(name="aggregate", help="Merge warnings and list them by severity")(aggregate)
    app.command(name="summary", help="Summarize warnings and gate on severity")(summary)


_register_commands()


def main() -> None:
    app()
