"""groot configuration.

Settings are layered from built-in defaults, the user config file, the
repository's ``.groot/config.toml``, ``GROOT_*`` environment variables and
command-line flags, then validated with pydantic.

Example:
    >>> from groot.config import load_config
    >>> config = load_config()
    >>> config.logging.level
    <LogLevel.INFO: 'info'>
"""

from groot.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._load import load_config, load_config_file, safe_load_config
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LoggingConfig,
    LogLevel,
    RepositoryConfig,
)
from ._sources import (
    ENV_PREFIX,
    coerce_env_value,
    deep_merge,
    discover_sources,
    find_repository_root,
    get_user_config_path,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)

__all__ = [
    "ENV_PREFIX",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RepositoryConfig",
    "coerce_env_value",
    "deep_merge",
    "discover_sources",
    "find_repository_root",
    "get_user_config_path",
    "load_config",
    "load_config_file",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
