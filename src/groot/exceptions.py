"""groot exceptions.

Everything groot raises on purpose derives from :class:`GrootError`, which is
what the CLI reports as a failed command. Lookup and decoding failures also
derive from KeyError and ValueError so callers can treat the store like a
mapping.
"""

from pathlib import Path
from typing import Any


class GrootError(Exception):
    """Base exception for groot errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(GrootError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """A config file could not be read as TOML.

    Attributes:
        path: The offending file.
        line: 1-based line of the syntax error, when known.
        column: 1-based column of the syntax error, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """A configuration value has the wrong type or shape.

    Attributes:
        key: Dotted key of the value, e.g. ``logging.level``.
        value: The rejected value.
        expected: What the value should have been.
        source: Where the value came from, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Repository
# =============================================================================


class RepositoryError(GrootError):
    """Base exception for repository errors."""


class RepositoryNotInitializedError(RepositoryError):
    """No initialized ``.groot/`` directory was found.

    Attributes:
        path: The directory the search started from.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path


class PathOutsideRepositoryError(RepositoryError):
    """A file to add lies outside the worktree or inside ``.groot/``.

    Attributes:
        path: The resolved file path.
        root: The worktree root.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        root: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.root: Path | None = root


class ObjectNotFoundError(RepositoryError, KeyError):
    """A digest does not name a stored object.

    Attributes:
        digest: The digest that was looked up.
    """

    def __init__(self, message: str, *, digest: str | None = None) -> None:
        super().__init__(message)
        self.digest: str | None = digest

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class CommitNotFoundError(ObjectNotFoundError):
    """A digest does not name a stored commit."""


class InvalidObjectError(RepositoryError, ValueError):
    """Stored data cannot be decoded as the expected object.

    Attributes:
        digest: Digest of the offending object, when there is one.
    """

    def __init__(self, message: str, *, digest: str | None = None) -> None:
        super().__init__(message)
        self.digest: str | None = digest


class IndexCorruptError(InvalidObjectError):
    """The staging index file is not a valid list of entries.

    Attributes:
        path: The index file.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path


class InvalidLimitError(RepositoryError, ValueError):
    """A history limit is negative.

    Attributes:
        limit: The rejected limit.
    """

    def __init__(self, message: str, *, limit: int) -> None:
        super().__init__(message)
        self.limit: int = limit
