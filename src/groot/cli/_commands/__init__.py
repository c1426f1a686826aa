"""groot CLI commands."""
# pyright: reportUnusedCallResult=false

from cyclopts import App

from ._context import CLIContext
from ._history import commit_command, log_command, show_command
from ._repo import init_command
from ._shared import (
    ExitCode,
    exit_with_error,
    get_command_logger,
    get_console,
    get_error_console,
    handle_errors,
    open_repository,
)
from ._staging import add_command, status_command

__all__ = [
    "CLIContext",
    "ExitCode",
    "add_command",
    "commit_command",
    "exit_with_error",
    "get_command_logger",
    "get_console",
    "get_error_console",
    "handle_errors",
    "init_command",
    "log_command",
    "open_repository",
    "register_commands",
    "show_command",
    "status_command",
]


def register_commands(app: App) -> None:
    app.command(init_command, name="init")
    app.command(add_command, name="add")
    app.command(status_command, name="status")
    app.command(commit_command, name="commit")
    app.command(log_command, name="log")
    app.command(show_command, name="show")
