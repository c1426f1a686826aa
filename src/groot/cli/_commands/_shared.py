"""Helpers every groot command uses.

Commands print through Rich consoles built from the active CLIContext, open
the repository with :func:`open_repository` and run their work inside
:func:`handle_errors`, which turns any failure into exit status 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import IntEnum
from typing import Never

from rich.console import Console
from rich.markup import escape
from structlog.typing import FilteringBoundLogger

from groot.exceptions import GrootError, RepositoryNotInitializedError
from groot.repository import Repository
from groot.utils import create_null_logger

from ._context import CLIContext

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_command_logger",
    "get_console",
    "get_error_console",
    "handle_errors",
    "open_repository",
]


class ExitCode(IntEnum):
    """Exit codes for groot CLI commands.

    Every failure exits with ERROR; the message on the error console is the
    only thing that tells failure kinds apart.
    """

    SUCCESS = 0
    ERROR = 1


def get_console() -> Console:
    """Get a Rich console for standard output, honoring --no-color."""
    ctx = CLIContext.get_current()
    return Console(no_color=ctx.no_color, highlight=False)


def get_error_console() -> Console:
    """Get a Rich console for stderr, honoring --no-color."""
    ctx = CLIContext.get_current()
    return Console(stderr=True, no_color=ctx.no_color, highlight=False)


def get_command_logger(command: str) -> FilteringBoundLogger:
    """Get the CLI logger bound to a command name.

    Returns a logger that discards events when no CLI logger was configured.
    """
    ctx = CLIContext.get_current()
    if ctx.logger is None:
        return create_null_logger()
    return ctx.logger.bind(command=command)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Report a failure as ``Error: <message>`` and exit.

    Args:
        message: Plain text to print. Rich markup in it is escaped.
        code: Exit status.
        console: Where to print. Defaults to a fresh stderr console.

    Raises:
        SystemExit: Always.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)


def open_repository(logger: FilteringBoundLogger) -> Repository:
    """Open the repository for the current command.

    Uses --repo-root when given, otherwise searches upward from the current
    directory.

    Raises:
        SystemExit: If no repository is found.
    """
    ctx = CLIContext.get_current()
    try:
        return Repository.discover(
            ctx.repo_root,
            dir_name=ctx.config.repository.dir_name,
            logger=logger,
        )
    except RepositoryNotInitializedError as e:
        logger.warning("repository_not_found", path=str(e.path))
        exit_with_error(str(e))


@contextmanager
def handle_errors(logger: FilteringBoundLogger) -> Iterator[None]:
    """Report a command's failures and exit.

    Repository errors and I/O failures are logged, printed to the error
    console and turned into an ERROR exit. Nothing is retried.

    Args:
        logger: Logger bound to the running command.

    Raises:
        SystemExit: If the wrapped block raised a GrootError or OSError.
    """
    try:
        yield
    except GrootError as e:
        logger.error("command_failed", error=str(e), error_type=type(e).__name__)
        exit_with_error(str(e))
    except OSError as e:
        logger.error(
            "io_failed", error=str(e), error_type=type(e).__name__, path=e.filename
        )
        exit_with_error(f"I/O failure: {e}")
