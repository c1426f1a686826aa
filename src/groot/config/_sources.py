# pyright: reportAny=false, reportExplicitAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration sources and how they are layered.

Every source yields a partial nested dict. Layers are merged from the built-in
defaults up to the CLI overrides, and only the merged result is validated::

    defaults < user config < .groot/config.toml < GROOT_* env < CLI flags
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import orjson
import platformdirs

from groot.exceptions import ConfigLoadError
from groot.utils import DEFAULT_REPO_DIR_NAME, get_head_file, get_repo_config_file

from ._models import Config, ConfigSource, ConfigSourceName

ENV_PREFIX = "GROOT_"


def find_repository_root(
    start: Path | None = None, *, dir_name: str = DEFAULT_REPO_DIR_NAME
) -> Path | None:
    """Search upward for the worktree holding an initialized repository.

    Only a directory whose ``<dir_name>/HEAD`` file exists counts, so a bare
    ``.groot/logs/`` left behind by logging is never mistaken for one.

    Args:
        start: Directory to start from. Defaults to the current directory.
        dir_name: Name of the repository directory.

    Returns:
        The worktree root, or None if the filesystem root is reached.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if get_head_file(candidate / dir_name).is_file():
            return candidate
    return None


def get_user_config_path() -> Path:
    """Return the per-user config file path, whether or not it exists."""
    return platformdirs.user_config_path("groot") / "config.toml"


def read_toml_file(path: Path) -> dict[str, Any]:
    """Parse a TOML config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse {path}: {e}"
        # Location attributes exist from Python 3.14
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``override``. Neither input is modified.

    Tables merge key by key. Any other value in ``override``, lists included,
    replaces the base value outright.
    """
    merged = {key: _copy(value) for key, value in base.items()}
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = _copy(value)
    return merged


def _copy(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy(item) for item in value]
    return value


def set_nested_key(data: dict[str, Any], dotted_key: str, value: Any) -> None:
    """Assign ``value`` at a dotted path, creating or replacing tables on the way.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "logging.level", "debug")
        >>> d
        {'logging': {'level': 'debug'}}
    """
    *tables, leaf = dotted_key.split(".")
    current = data
    for table in tables:
        if not isinstance(current.get(table), dict):
            current[table] = {}
        current = current[table]
    current[leaf] = value


def coerce_env_value(raw: str) -> Any:
    """Interpret an environment variable string.

    ``true``/``false`` become booleans, numbers become int or float, and
    bracketed JSON becomes a list or dict. Anything else stays a string.
    """
    if raw.lower() in {"true", "false"}:
        return raw.lower() == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    if "." in raw:
        try:
            return float(raw)
        except ValueError:
            pass
    if raw[:1] + raw[-1:] in {"[]", "{}"}:
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError:
            pass
    return raw


def parse_env_vars(
    environ: Mapping[str, str] | None = None, *, prefix: str = ENV_PREFIX
) -> dict[str, Any]:
    """Collect ``GROOT_SECTION__KEY`` variables into nested config values.

    A double underscore separates table and key, so ``GROOT_LOGGING__LEVEL``
    sets ``logging.level``. Variables without one, such as ``GROOT_DEBUG``,
    are flags read elsewhere and are skipped.

    Args:
        environ: Variables to read. Defaults to ``os.environ``.
        prefix: Variable name prefix.
    """
    values: dict[str, Any] = {}
    for name, raw in (os.environ if environ is None else environ).items():
        if not name.startswith(prefix) or "__" not in name:
            continue
        dotted = name.removeprefix(prefix).replace("__", ".").lower()
        set_nested_key(values, dotted, coerce_env_value(raw))
    return values


def _file_source(name: ConfigSourceName, path: Path) -> ConfigSource:
    try:
        exists = path.is_file()
    except OSError:
        exists = False
    values = read_toml_file(path) if exists else {}
    return ConfigSource(name=name, path=path, exists=exists, values=values)


def discover_sources(
    repo_root: Path | None = None,
    *,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> list[ConfigSource]:
    """Read every configuration layer, highest precedence first.

    The repository layer is looked up with the directory name set by the
    environment or CLI, if any, and is omitted outside a repository.

    Args:
        repo_root: Worktree root. Searched for upward from the current
            directory when None.
        include_env: Whether to read ``GROOT_*`` variables.
        cli_overrides: Values set by command-line flags.

    Returns:
        The layers, CLI first and built-in defaults last.

    Raises:
        ConfigLoadError: If a config file is not valid TOML.
    """
    env_values = parse_env_vars() if include_env else {}
    early = deep_merge(env_values, cli_overrides or {})
    dir_name = early.get("repository", {}).get("dir_name", DEFAULT_REPO_DIR_NAME)
    if not isinstance(dir_name, str) or not dir_name:
        dir_name = DEFAULT_REPO_DIR_NAME
    root = repo_root or find_repository_root(dir_name=dir_name)

    sources = [
        ConfigSource(
            name=ConfigSourceName.CLI,
            exists=bool(cli_overrides),
            values=cli_overrides or {},
        )
    ]
    if include_env:
        sources.append(ConfigSource(name=ConfigSourceName.ENV, values=env_values))
    if root is not None:
        sources.append(
            _file_source(
                ConfigSourceName.REPOSITORY, get_repo_config_file(root / dir_name)
            )
        )
    sources.append(_file_source(ConfigSourceName.USER, get_user_config_path()))
    sources.append(
        ConfigSource(name=ConfigSourceName.DEFAULT, values=Config().to_dict())
    )
    return sources
