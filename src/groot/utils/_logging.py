"""Structured logging for groot.

Loggers are assembled with ``structlog.wrap_logger`` and never touch
structlog's global configuration. A CLI run appends one event per line to its
log file. Library objects constructed without a logger get a null logger.
"""

import logging
from os import getenv
from pathlib import Path
from typing import Literal, cast

import orjson
import structlog
from structlog.typing import FilteringBoundLogger, Processor

from ._paths import get_cli_log_file

LogFormatType = Literal["json", "text"]


def resolve_log_level(level: str | None = None) -> int:
    """Turn a level name into a :mod:`logging` level number.

    ``GROOT_DEBUG`` forces DEBUG whatever is configured. When no level is
    given, ``GROOT_LOG_LEVEL`` is read instead. Unknown names mean INFO.

    Args:
        level: Level name such as ``"warning"``, in any case.

    Returns:
        The numeric level.
    """
    if getenv("GROOT_DEBUG"):
        return logging.DEBUG
    if level is None:
        level = getenv("GROOT_LOG_LEVEL", "info")
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _dumps(obj: object, **kwargs: object) -> str:
    return orjson.dumps(obj, **kwargs).decode()  # pyright: ignore[reportArgumentType]


def _processors(log_format: LogFormatType) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(serializer=_dumps),
        ]
    else:
        # timestamp [level] event key=value ...
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def create_cli_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    log_file: str = "",
    repo_dir: Path | None = None,
    command: str = "",
) -> FilteringBoundLogger:
    """Create the logger for one CLI invocation.

    Events go to ``log_file`` when set. Otherwise they go to
    ``<repo_dir>/logs/cli.log`` inside a repository, or to the user log
    directory outside one, so logging never creates a ``.groot/`` directory.

    Args:
        level: Threshold level name. See :func:`resolve_log_level`.
        log_format: ``"json"`` for JSON lines, ``"text"`` for key=value lines.
        log_file: Explicit log file path.
        repo_dir: The current repository directory, if any.
        command: Command name bound to every event.

    Returns:
        A filtering logger that appends to the log file.
    """
    path = Path(log_file) if log_file else get_cli_log_file(repo_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLoggerFactory(file=path.open("a", encoding="utf-8"))(),
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(
                resolve_log_level(level)
            ),
            context_class=dict,
        ),
    )
    return logger.bind(command=command) if command else logger


def create_null_logger() -> FilteringBoundLogger:
    """Create a logger that drops every event."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )
