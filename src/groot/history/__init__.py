"""Commit graph and history traversal.

Classes:
    CommitGraph: Creates commits and follows parent pointers.
    HeadRef: Persisted pointer to the newest commit.

Functions:
    log: Newest-first walk from head.
    diff_commit: Per-file changes a commit introduced.
"""

from groot.history._graph import CommitGraph
from groot.history._head import HeadRef
from groot.history._models import (
    Commit,
    CommitDiff,
    FileDiff,
    FileStatus,
    LogEntry,
)
from groot.history._walker import decode_content, diff_commit, log

__all__ = [
    "Commit",
    "CommitDiff",
    "CommitGraph",
    "FileDiff",
    "FileStatus",
    "HeadRef",
    "LogEntry",
    "decode_content",
    "diff_commit",
    "log",
]
