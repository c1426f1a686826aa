# pyright: reportAny=false, reportExplicitAny=false
"""Loading the merged configuration."""

import os
import sys
from pathlib import Path
from typing import Any

from groot.exceptions import ConfigError

from ._models import Config, ConfigSource, ConfigSourceName
from ._sources import deep_merge, discover_sources, read_toml_file


def load_config(
    *,
    repo_root: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> Config:
    """Merge every configuration layer and validate the result.

    Args:
        repo_root: Worktree root. Searched for upward when None.
        include_env: Whether ``GROOT_*`` variables take part.
        cli_overrides: Values set by command-line flags.

    Returns:
        The merged configuration, remembering its sources.

    Raises:
        ConfigLoadError: If a config file is not valid TOML.
        ConfigValidationError: If the merged values are invalid.
    """
    sources = discover_sources(
        repo_root, include_env=include_env, cli_overrides=cli_overrides
    )
    merged: dict[str, Any] = {}
    for source in reversed(sources):
        merged = deep_merge(merged, source.values)
    return Config.from_dict(merged, sources=tuple(sources))


def load_config_file(path: Path) -> Config:
    """Load one config file on its own, over the built-in defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
        ConfigValidationError: If a value is invalid.
    """
    source = ConfigSource(
        name=ConfigSourceName.CLI, path=path, values=read_toml_file(path)
    )
    return Config.from_dict(source.values, sources=(source,), source=str(path))


def safe_load_config(
    *,
    config_path: Path | None = None,
    repo_root: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration for the CLI without letting a bad file stop it.

    A missing ``--config`` file always exits. Any other load failure prints a
    warning and falls back to the defaults, unless ``GROOT_STRICT_CONFIG=1``
    in which case it exits with status 1.

    Args:
        config_path: File given with ``--config``. Replaces layered loading.
        repo_root: Worktree given with ``--repo-root``.
        cli_overrides: Values set by command-line flags.

    Returns:
        Tuple of (config, error message or None).
    """
    if config_path is not None and not config_path.is_file():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    try:
        if config_path is not None:
            return load_config_file(config_path), None
        return load_config(repo_root=repo_root, cli_overrides=cli_overrides), None
    except (ConfigError, OSError) as e:
        error = f"Failed to load config: {e}"
        if os.environ.get("GROOT_STRICT_CONFIG", "0") == "1":
            print(f"Error: {error}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        print(f"Warning: {error}", file=sys.stderr)  # noqa: T201
        return Config(), error
