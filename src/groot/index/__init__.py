"""Staging index for files queued for the next commit."""

from groot.index._index import StagingIndex
from groot.index._models import STAGED_ENTRIES, Digest, StagedEntry

__all__ = ["STAGED_ENTRIES", "Digest", "StagedEntry", "StagingIndex"]
