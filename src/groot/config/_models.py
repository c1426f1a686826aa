# pyright: reportExplicitAny=false, reportAny=false
"""Typed configuration sections and the merged Config container."""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    StringConstraints,
    ValidationError,
)

from groot.exceptions import ConfigValidationError


class LogLevel(StrEnum):
    """Log level threshold, most verbose first."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log line format."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Kinds of configuration source, highest precedence first."""

    CLI = "cli"
    ENV = "env"
    REPOSITORY = "repository"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One layer of configuration values.

    Attributes:
        name: Kind of source.
        path: File the layer is read from, or None for CLI, ENV and DEFAULT.
        exists: Whether the file exists or the layer carries values.
        values: Nested values the layer sets.
    """

    name: ConfigSourceName
    path: Path | None = None
    exists: bool = True
    values: dict[str, Any] = field(default_factory=dict)


class LoggingConfig(BaseModel):
    """The ``[logging]`` section.

    Attributes:
        level: Threshold for CLI log events.
        format: JSON lines or plain text.
        file: Log file path. Empty selects the default location.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class RepositoryConfig(BaseModel):
    """The ``[repository]`` section.

    Attributes:
        dir_name: Name of the metadata directory inside the worktree.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    dir_name: Annotated[str, StringConstraints(min_length=1, pattern=r"^[^/\\]+$")] = (
        ".groot"
    )


class Config(BaseModel):
    """Validated configuration merged from every source.

    Unknown keys are ignored so newer config files keep working with older
    releases.

    Example:
        >>> config = Config.from_dict({"logging": {"level": "debug"}})
        >>> config.logging.level
        <LogLevel.DEBUG: 'debug'>
        >>> config.get("repository.dir_name")
        '.groot'
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    repository: RepositoryConfig = RepositoryConfig()

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        sources: tuple[ConfigSource, ...] = (),
        source: str | None = None,
    ) -> Self:
        """Validate a nested dict of configuration values.

        Args:
            data: Values to validate. Missing keys take their defaults.
            sources: Layers the values were merged from.
            source: Label used in error messages.

        Returns:
            The validated configuration.

        Raises:
            ConfigValidationError: For the first invalid value.
        """
        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            msg = f"Invalid configuration value for '{key}'"
            if source:
                msg += f" in {source}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=first.get("input"),
                expected=first["msg"],
                source=source,
            ) from e

        config._sources = sources
        return config

    @property
    def sources(self) -> list[ConfigSource]:
        """Layers this configuration was merged from, highest precedence first."""
        return list(self._sources)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a value by dotted key, e.g. ``"logging.level"``."""
        current: Any = self.to_dict()
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as plain nested values."""
        return self.model_dump(mode="json")
