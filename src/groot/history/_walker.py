"""History walking and per-commit diffs."""

from collections.abc import Iterator
from itertools import islice

from groot.diff import diff_lines
from groot.exceptions import InvalidLimitError
from groot.history._graph import CommitGraph
from groot.history._models import CommitDiff, FileDiff, FileStatus, LogEntry


def decode_content(data: bytes) -> str:
    """Decode stored file bytes for display and diffing."""
    return data.decode("utf-8", errors="replace")


def log(graph: CommitGraph, limit: int | None = None) -> Iterator[LogEntry]:
    """Walk history from head, newest first.

    Args:
        graph: Commit graph to walk.
        limit: Maximum number of commits to yield. None walks to the root.

    Yields:
        LogEntry per commit. Nothing is yielded when there are no commits.

    Raises:
        InvalidLimitError: If limit is negative.
    """
    if limit is not None and limit < 0:
        msg = f"Commit limit must not be negative: {limit}"
        raise InvalidLimitError(msg, limit=limit)
    for digest, record in islice(graph.walk(), limit):
        yield LogEntry(
            digest=digest,
            timestamp=record.timestamp,
            message=record.message,
            parent=record.parent,
        )


def diff_commit(graph: CommitGraph, digest: str) -> CommitDiff:
    """Describe how each file in a commit differs from the parent commit.

    Args:
        graph: Commit graph holding the commit.
        digest: Digest of the commit to describe.

    Returns:
        CommitDiff with one FileDiff per staged entry, in commit order.

    Raises:
        CommitNotFoundError: If the commit or its parent does not resolve.
        ObjectNotFoundError: If a referenced blob is missing.
    """
    store = graph.store
    record = graph.get_commit(digest)
    parent = graph.get_commit(record.parent) if record.parent is not None else None

    files: list[FileDiff] = []
    for entry in record.files:
        content = decode_content(store.get(entry.hash))

        if parent is None:
            files.append(
                FileDiff(
                    path=entry.path,
                    digest=entry.hash,
                    content=content,
                    status=FileStatus.FIRST_COMMIT,
                )
            )
            continue

        previous = parent.find_file(entry.path)
        if previous is None:
            files.append(
                FileDiff(
                    path=entry.path,
                    digest=entry.hash,
                    content=content,
                    status=FileStatus.NEW_FILE,
                )
            )
            continue

        before = decode_content(store.get(previous.hash))
        files.append(
            FileDiff(
                path=entry.path,
                digest=entry.hash,
                content=content,
                status=FileStatus.MODIFIED,
                runs=tuple(diff_lines(before, content)),
            )
        )

    return CommitDiff(digest=digest, commit=record, files=tuple(files))
