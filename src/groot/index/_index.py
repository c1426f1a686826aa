"""Persistent staging index.

The index file is the only record of staged files between invocations. Every
operation reads the whole file, mutates the list in memory and rewrites the
whole file.
"""

from pathlib import Path
from typing import Final

import orjson
from pydantic import ValidationError
from structlog.typing import FilteringBoundLogger

from groot.exceptions import IndexCorruptError, InvalidObjectError
from groot.index._models import STAGED_ENTRIES, StagedEntry
from groot.utils import create_null_logger


class StagingIndex:
    """Ordered list of (path, digest) pairs awaiting the next commit.

    Entries keep their add order and are never deduplicated by path.

    Attributes:
        path: Location of the index file.
    """

    __slots__: Final = ("_logger", "_path")
    _path: Path
    _logger: FilteringBoundLogger

    def __init__(
        self, path: Path, *, logger: FilteringBoundLogger | None = None
    ) -> None:
        self._path = path
        self._logger = logger if logger is not None else create_null_logger()

    @property
    def path(self) -> Path:
        """Location of the index file."""
        return self._path

    def _load(self) -> list[StagedEntry]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return []

        try:
            return STAGED_ENTRIES.validate_json(raw)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            msg = f"Malformed index at {self._path} ({location}): {first['msg']}"
            raise IndexCorruptError(msg, path=self._path) from e

    def _save(self, entries: list[StagedEntry]) -> None:
        self._path.write_bytes(orjson.dumps([entry.model_dump() for entry in entries]))

    def stage(self, path: str, digest: str) -> StagedEntry:
        """Append an entry to the index.

        The entry must be well formed, but neither the path nor the digest is
        checked against the worktree or the object store.

        Args:
            path: Worktree-relative path of the file.
            digest: Digest of the stored blob.

        Returns:
            The entry that was appended.

        Raises:
            IndexCorruptError: If the existing index cannot be parsed.
            InvalidObjectError: If the path is empty or the digest is not 40
                lowercase hex characters.
        """
        entries = self._load()
        try:
            entry = StagedEntry(path=path, hash=digest)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            msg = f"Invalid index entry ({field}): {first['msg']}"
            raise InvalidObjectError(msg, digest=digest) from e
        entries.append(entry)
        self._save(entries)
        self._logger.info("entry_staged", path=path, digest=digest, size=len(entries))
        return entry

    def snapshot(self) -> tuple[StagedEntry, ...]:
        """Return the staged entries in add order."""
        return tuple(self._load())

    def clear(self) -> None:
        """Empty the index.

        Only the commit operation calls this.
        """
        self._save([])
        self._logger.debug("index_cleared")

    def __len__(self) -> int:
        return len(self._load())
