"""Persisted head reference."""

from pathlib import Path
from typing import Final

from groot.exceptions import InvalidObjectError
from groot.objects import is_digest


class HeadRef:
    """Pointer to the most recent commit, stored as plain text.

    An empty or missing file means no commit exists yet. Each repository owns
    its own HeadRef, so several repositories can be open in one process.

    Attributes:
        path: Location of the HEAD file.
    """

    __slots__: Final = ("_path",)
    _path: Path

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Location of the HEAD file."""
        return self._path

    def read(self) -> str | None:
        """Read the current head digest.

        Returns:
            The head commit digest, or None if there are no commits.

        Raises:
            InvalidObjectError: If the file holds something other than a digest.
        """
        try:
            value = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None

        if not value:
            return None
        if not is_digest(value):
            msg = f"HEAD at {self._path} does not hold a commit digest: {value!r}"
            raise InvalidObjectError(msg, digest=value)
        return value

    def write(self, digest: str) -> None:
        """Point head at a commit.

        Args:
            digest: Digest of the new head commit.
        """
        _ = self._path.write_text(digest, encoding="utf-8")
