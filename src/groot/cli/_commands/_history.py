# pyright: reportUnusedCallResult=false
"""Commit and history commands."""

from typing import Annotated

from cyclopts import Parameter
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from groot.diff import DiffKind, DiffRun
from groot.history import FileDiff, FileStatus

from ._context import CLIContext
from ._shared import get_command_logger, get_console, handle_errors, open_repository

__all__ = ["commit_command", "log_command", "show_command"]

_SEPARATOR = "_" * 35

# Prefix and style per run kind
_RUN_STYLES: dict[DiffKind, tuple[str, str]] = {
    DiffKind.ADDED: ("++++ ", "green"),
    DiffKind.REMOVED: ("---- ", "red"),
    DiffKind.UNCHANGED: ("     ", "dim"),
}


def commit_command(
    message: Annotated[str, Parameter(help="Commit message")],
) -> None:
    """Record the staged files as a new commit."""
    console = get_console()
    logger = get_command_logger("commit")
    repo = open_repository(logger)

    with handle_errors(logger):
        digest = repo.commit(message)

    console.print(f"Commit successfully created: [yellow]{digest}[/yellow]")


def log_command(
    n: Annotated[
        int | None,
        Parameter(
            name=["--number", "-n"],
            help="Number of commits to show (default: all)",
        ),
    ] = None,
) -> None:
    """Show commits from newest to oldest."""
    console = get_console()
    logger = get_command_logger("log")
    repo = open_repository(logger)

    with handle_errors(logger):
        entries = repo.log(n)

    if not entries:
        console.print("[dim]No commits yet[/dim]")
        return

    for entry in entries:
        console.print(_SEPARATOR)
        console.print()
        console.print(f"Commit: [yellow]{entry.digest}[/yellow]")
        console.print(f"Date: {escape(entry.timestamp)}")
        console.print()
        console.print(Text(entry.message))
        console.print()


def _render_runs(runs: tuple[DiffRun, ...]) -> Text:
    text = Text()
    for run in runs:
        prefix, style = _RUN_STYLES[run.kind]
        for line in run.lines:
            text.append(prefix + line, style=style)
            if not line.endswith(("\n", "\r")):
                text.append("\n")
    text.rstrip()
    return text


def _print_file(console: Console, file: FileDiff, *, verbose: bool) -> None:
    header = f"File: [bold]{escape(file.path)}[/bold]"
    if verbose:
        header += f" [dim]{file.digest}[/dim]"
    console.print(header)
    console.print(Text(file.content))

    if file.status is FileStatus.FIRST_COMMIT:
        console.print("[dim]First commit[/dim]")
    elif file.status is FileStatus.NEW_FILE:
        console.print("[cyan]New file in this commit[/cyan]")
    else:
        console.print()
        console.print("Diff:")
        console.print(_render_runs(file.runs))


def show_command(
    commit: Annotated[str, Parameter(help="Digest of the commit to show")],
) -> None:
    """Show each file in a commit and its line diff against the parent."""
    ctx = CLIContext.get_current()
    console = get_console()
    logger = get_command_logger("show")
    repo = open_repository(logger)

    with handle_errors(logger):
        result = repo.show(commit)

    console.print(f"Changes in commit [yellow]{result.digest}[/yellow]:")
    if ctx.verbose:
        console.print(f"[dim]{escape(result.commit.message)}[/dim]")
    for file in result.files:
        _print_file(console, file, verbose=ctx.verbose)
