"""The command-line interface for groot."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from groot.config import find_repository_root, safe_load_config
from groot.utils import create_cli_logger, get_repo_dir

from ._commands import register_commands
from ._commands._context import CLIContext


def _build_context(
    *,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    config_path: Path | None,
    repo_root: Path | None,
) -> CLIContext:
    """Load configuration and open the log file for one invocation."""
    overrides = {"logging": {"level": "debug"}} if verbose else None
    config, config_error = safe_load_config(
        config_path=config_path, repo_root=repo_root, cli_overrides=overrides
    )

    dir_name = config.repository.dir_name
    # An uninitialized --repo-root gets no log directory
    worktree = find_repository_root(repo_root, dir_name=dir_name)
    logger = create_cli_logger(
        level=config.logging.level.value,
        log_format=config.logging.format.value,
        log_file=config.logging.file,
        repo_dir=get_repo_dir(worktree, dir_name) if worktree is not None else None,
    )
    if config_error is not None:
        logger.warning("config_fallback", error=config_error)

    return CLIContext(
        config=config,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        repo_root=repo_root,
        config_error=config_error,
        logger=logger,
    )


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Build the groot application.

    Global flags belong to the meta app, so run the result as ``app.meta()``.
    The meta app sets up the CLIContext and then dispatches the remaining
    tokens to the command.

    Args:
        console: Console for help and usage output.
        error_console: Console for argument parsing errors.
        exit_on_error: Whether parsing errors exit instead of raising.
    """
    app = App(
        name="groot",
        help="A minimal content-addressed version control system.",
        help_on_error=True,
        console=console if console is not None else Console(),
        error_console=(
            error_console if error_console is not None else Console(stderr=True)
        ),
        exit_on_error=exit_on_error,
    )
    register_commands(app)

    @app.meta.default
    def _launch(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[
            bool, Parameter(help="Show extra detail and log at debug level")
        ] = False,
        quiet: Annotated[bool, Parameter(help="Print only essential output")] = False,
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None,
            Parameter(name="--config", help="Read settings from this file only"),
        ] = None,
        repo_root: Annotated[
            Path | None,
            Parameter(name="--repo-root", help="Worktree containing the repository"),
        ] = None,
    ) -> None:
        CLIContext.set_current(
            _build_context(
                verbose=verbose,
                quiet=quiet,
                no_color=no_color,
                config_path=config,
                repo_root=repo_root,
            )
        )
        try:
            app(tokens)
        finally:
            CLIContext.reset()

    return app


app = create_app()


def main() -> None:
    """Entry point for the ``groot`` console script."""
    create_app().meta()
