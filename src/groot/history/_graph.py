"""Linear commit graph."""

from collections.abc import Iterator
from typing import Final

import pendulum
from pydantic import ValidationError
from structlog.typing import FilteringBoundLogger

from groot.exceptions import (
    CommitNotFoundError,
    InvalidObjectError,
    ObjectNotFoundError,
)
from groot.history._head import HeadRef
from groot.history._models import Commit
from groot.index import StagingIndex
from groot.objects import ObjectKind, ObjectStore
from groot.utils import create_null_logger


class CommitGraph:
    """Immutable commits chained by parent pointers, plus a movable head.

    There are no branches: the commits form a single list and head always
    names its newest element.
    """

    __slots__: Final = ("_head", "_index", "_logger", "_store")
    _store: ObjectStore
    _index: StagingIndex
    _head: HeadRef
    _logger: FilteringBoundLogger

    def __init__(
        self,
        store: ObjectStore,
        index: StagingIndex,
        head: HeadRef,
        *,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        self._store = store
        self._index = index
        self._head = head
        self._logger = logger if logger is not None else create_null_logger()

    @property
    def store(self) -> ObjectStore:
        """The object store commits are persisted in."""
        return self._store

    def get_head(self) -> str | None:
        """Return the head commit digest, or None if nothing is committed."""
        return self._head.read()

    def commit(self, message: str) -> str:
        """Snapshot the staging index into a new commit.

        The commit object is written first, then head is moved, then the index
        is cleared. These writes are not atomic: a crash after the object write
        leaves an unreachable commit behind and the index untouched.

        Args:
            message: Commit message.

        Returns:
            Digest of the new commit.
        """
        files = self._index.snapshot()
        parent = self._head.read()

        record = Commit(
            timestamp=pendulum.now("UTC").to_iso8601_string(),
            message=message,
            files=files,
            parent=parent,
        )
        digest = self._store.put(record.canonical_bytes(), ObjectKind.COMMIT)

        self._head.write(digest)
        self._logger.debug("head_updated", digest=digest, previous=parent)
        self._index.clear()

        self._logger.info(
            "commit_created", digest=digest, parent=parent, files=len(files)
        )
        return digest

    def get_commit(self, digest: str) -> Commit:
        """Load a commit by digest.

        Args:
            digest: Commit digest.

        Returns:
            The decoded commit.

        Raises:
            CommitNotFoundError: If the digest does not resolve.
            InvalidObjectError: If the object is not a valid commit.
        """
        try:
            data = self._store.get(digest, kind=ObjectKind.COMMIT)
        except ObjectNotFoundError as e:
            msg = f"Commit not found: {digest}"
            raise CommitNotFoundError(msg, digest=digest) from e

        try:
            return Commit.model_validate_json(data)
        except ValidationError as e:
            msg = f"Object {digest} is not a valid commit: {e.error_count()} error(s)"
            raise InvalidObjectError(msg, digest=digest) from e

    def walk(self, start: str | None = None) -> Iterator[tuple[str, Commit]]:
        """Iterate commits from newest to oldest by following parents.

        Args:
            start: Digest to start from. Defaults to head.

        Yields:
            Tuples of (digest, commit), newest first.

        Raises:
            CommitNotFoundError: If a commit in the chain does not resolve.
            InvalidObjectError: If the parent chain loops back on itself.
        """
        current = start if start is not None else self._head.read()
        seen: set[str] = set()

        while current is not None:
            if current in seen:
                msg = f"Commit history loops back to {current}"
                raise InvalidObjectError(msg, digest=current)
            seen.add(current)

            record = self.get_commit(current)
            yield current, record
            current = record.parent
