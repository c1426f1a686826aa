# pyright: reportUnusedCallResult=false
"""Staging commands."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from rich.markup import escape

from ._context import CLIContext
from ._shared import get_command_logger, get_console, handle_errors, open_repository

__all__ = ["add_command", "status_command"]


def add_command(
    file: Annotated[Path, Parameter(help="File to stage for the next commit")],
) -> None:
    """Store a file's content and stage it for the next commit."""
    ctx = CLIContext.get_current()
    console = get_console()
    logger = get_command_logger("add")
    repo = open_repository(logger)

    with handle_errors(logger):
        entry = repo.add(file)

    console.print(entry.hash)
    if not ctx.quiet:
        console.print(f"Added {escape(entry.path)}")


def status_command() -> None:
    """List the files staged for the next commit, in add order."""
    ctx = CLIContext.get_current()
    console = get_console()
    logger = get_command_logger("status")
    repo = open_repository(logger)

    with handle_errors(logger):
        entries = repo.staged()
        head = repo.head

    if ctx.verbose:
        console.print(f"[dim]HEAD: {head or '(no commits)'}[/dim]")

    if not entries:
        console.print("[dim]Nothing staged[/dim]")
        return

    console.print("[bold green]Staged files:[/bold green]")
    for entry in entries:
        console.print(
            f"  [green]+ {escape(entry.path)}[/green] [dim]{entry.hash[:8]}[/dim]"
        )
    noun = "entry" if len(entries) == 1 else "entries"
    console.print(f"\n[dim]{len(entries)} {noun} staged[/dim]")
