# pyright: reportUnusedCallResult=false
"""Repository initialization command."""

from pathlib import Path

from rich.markup import escape

from groot.repository import Repository

from ._context import CLIContext
from ._shared import get_command_logger, get_console, handle_errors

__all__ = ["init_command"]


def init_command() -> None:
    """Create an empty groot repository in the current directory.

    Safe to run on an existing repository: nothing is overwritten.
    """
    ctx = CLIContext.get_current()
    console = get_console()
    logger = get_command_logger("init")
    worktree = ctx.repo_root if ctx.repo_root is not None else Path.cwd()

    with handle_errors(logger):
        result = Repository.init(
            worktree,
            dir_name=ctx.config.repository.dir_name,
            logger=logger,
        )

    repo_dir = escape(str(result.repository.repo_dir))
    if result.created:
        console.print(f"Initialized empty groot repository in {repo_dir}")
    else:
        console.print(f"[dim]Already initialized the repository in {repo_dir}[/dim]")
