"""echolog CLI -- typer-based demo for manual verification.

Commands:
    echolog demo <path>    Call every helper once, logging to <path>
"""

from __future__ import annotations

from pathlib import Path

import typer

import echolog
from echolog.exceptions import EchologError

app = typer.Typer(
    name="echolog",
    help="printf-style print and log helpers.",
    no_args_is_help=True,
)


@app.callback()
def _root() -> None:
    """printf-style print and log helpers."""


@app.command("demo")
def demo(
    path: Path = typer.Argument(..., help="File to append log lines to."),
    name: str = typer.Option("Outhere", "--name", "-n", help="Value substituted into every message."),
) -> None:
    """Exercise every helper once.

    Console lines go to stdout (stderr for the error line); the file at PATH
    receives the print-and-log, log-only and notate lines.
    """
    try:
        echolog.print("print function %s\n", name)
        echolog.print_notice("notice %s\n", name)
        echolog.print_error("error %s\n", name)
        echolog.print_warning("warning %s\n", name)
        echolog.print_and_log(path, "print and log: %s\n", name)
        echolog.log_to_file(path, "only_log output: %s\n", name)
        echolog.notate(path, "Alias: notate: print and log: %s\n", name)
    except EchologError as exc:
        typer.echo(f"demo failed: {exc}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the echolog CLI."""
    app()
