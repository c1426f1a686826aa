"""Per-invocation CLI state.

The meta app parses the global flags, loads configuration and stores the
result in a context variable. Commands read it back with
:meth:`CLIContext.get_current` instead of taking the flags as parameters.
"""

import contextvars
from dataclasses import dataclass, field
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from groot.config import Config

_current: contextvars.ContextVar["CLIContext | None"] = contextvars.ContextVar(
    "groot_cli_context", default=None
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and configuration for the running command.

    Attributes:
        config: Configuration loaded for this invocation.
        verbose: Print extra detail and log at debug level.
        quiet: Print only what scripts need.
        no_color: Disable Rich styling.
        repo_root: Worktree given with ``--repo-root``.
        config_error: Why configuration fell back to defaults, if it did.
        logger: File logger for this invocation.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    no_color: bool = False
    repo_root: Path | None = None
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Return the active context, or one built from default settings."""
        ctx = _current.get()
        return ctx if ctx is not None else cls(config=Config())

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        """Make ``ctx`` the active context."""
        _ = _current.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Clear the active context."""
        _ = _current.set(None)
