"""Commit graph and history models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

import orjson
from pydantic import BaseModel, ConfigDict

from groot.diff import DiffRun
from groot.index import Digest, StagedEntry


class Commit(BaseModel):
    """An immutable snapshot of the staged files plus metadata.

    Attributes:
        timestamp: ISO-8601 UTC creation time.
        message: Commit message.
        files: The staging index contents at commit time, in add order.
        parent: Digest of the previous commit, or None for the first commit.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="forbid", strict=True
    )

    timestamp: str
    message: str
    files: tuple[StagedEntry, ...] = ()
    parent: Digest | None = None

    def canonical_bytes(self) -> bytes:
        """Serialize to the canonical form the commit digest is computed over.

        Keys are sorted and no insignificant whitespace is emitted, so equal
        commits always serialize to equal bytes.
        """
        return orjson.dumps(self.model_dump(mode="json"), option=orjson.OPT_SORT_KEYS)

    def find_file(self, path: str) -> StagedEntry | None:
        """Return the first entry recorded for a path, if any."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One commit as reported by the history walk.

    Attributes:
        digest: Commit digest.
        timestamp: ISO-8601 UTC creation time.
        message: Commit message.
        parent: Parent digest, or None for the first commit.
    """

    digest: str
    timestamp: str
    message: str
    parent: str | None


class FileStatus(StrEnum):
    """How a file in a commit relates to the parent commit."""

    FIRST_COMMIT = "first_commit"
    NEW_FILE = "new_file"
    MODIFIED = "modified"


@dataclass(frozen=True, slots=True)
class FileDiff:
    """Changes to one file in a commit.

    Attributes:
        path: Worktree-relative file path.
        digest: Blob digest of the file in this commit.
        content: Decoded file content in this commit.
        status: Relation to the parent commit.
        runs: Line diff against the parent revision. Empty unless status is
            MODIFIED.
    """

    path: str
    digest: str
    content: str
    status: FileStatus
    runs: tuple[DiffRun, ...] = ()


@dataclass(frozen=True, slots=True)
class CommitDiff:
    """Per-file changes introduced by a commit.

    Attributes:
        digest: Commit digest.
        commit: The commit record.
        files: One FileDiff per staged entry, in commit order.
    """

    digest: str
    commit: Commit
    files: tuple[FileDiff, ...]
