from pathlib import Path

import pytest

from groot.history import CommitGraph, HeadRef
from groot.index import StagingIndex
from groot.objects import ObjectStore


@pytest.fixture
def graph(tmp_path: Path) -> CommitGraph:
    """Create a commit graph over an empty store, index and head."""
    store = ObjectStore(tmp_path / "objects")
    index = StagingIndex(tmp_path / "index")
    head = HeadRef(tmp_path / "HEAD")
    return CommitGraph(store, index, head)


@pytest.fixture
def index(graph: CommitGraph, tmp_path: Path) -> StagingIndex:
    """The staging index the graph fixture commits from."""
    return StagingIndex(tmp_path / "index")
