"""Shared utilities for groot."""

from ._logging import (
    LogFormatType,
    create_cli_logger,
    create_null_logger,
    resolve_log_level,
)
from ._paths import (
    DEFAULT_REPO_DIR_NAME,
    get_cli_log_file,
    get_head_file,
    get_index_file,
    get_log_dir,
    get_objects_dir,
    get_repo_config_file,
    get_repo_dir,
)

__all__ = [
    "DEFAULT_REPO_DIR_NAME",
    "LogFormatType",
    "create_cli_logger",
    "create_null_logger",
    "get_cli_log_file",
    "get_head_file",
    "get_index_file",
    "get_log_dir",
    "get_objects_dir",
    "get_repo_config_file",
    "get_repo_dir",
    "resolve_log_level",
]
