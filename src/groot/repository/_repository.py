# ruff: noqa: TC003  # Path needed at runtime for method bodies
"""groot repository management.

This module provides the Repository class, which locates the ``.groot/``
directory of a worktree and wires the object store, staging index and commit
graph together.
"""

from pathlib import Path
from typing import Final, Self

from structlog.typing import FilteringBoundLogger

from groot.config import find_repository_root
from groot.exceptions import (
    PathOutsideRepositoryError,
    RepositoryNotInitializedError,
)
from groot.history import (
    Commit,
    CommitDiff,
    CommitGraph,
    HeadRef,
    LogEntry,
    diff_commit,
    log,
)
from groot.index import StagedEntry, StagingIndex
from groot.objects import ObjectStore
from groot.repository._models import InitResult
from groot.utils import (
    DEFAULT_REPO_DIR_NAME,
    create_null_logger,
    get_head_file,
    get_index_file,
    get_objects_dir,
    get_repo_dir,
)

# Contents written by init when the files do not exist yet
_EMPTY_HEAD: Final = ""
_EMPTY_INDEX: Final = "[]"


class Repository:
    """A groot repository rooted at a worktree directory.

    Layout::

        <worktree>/.groot/
            objects/<digest>   one file per blob or commit
            HEAD               digest of the newest commit, or empty
            index              JSON array of staged {path, hash} entries

    Attributes:
        worktree: The resolved worktree directory.
        repo_dir: The ``.groot/`` directory inside the worktree.

    Example:
        >>> repo = Repository.init(Path.cwd()).repository
        >>> repo.add(Path("notes.txt"))
        >>> digest = repo.commit("First notes")
        >>> [entry.message for entry in repo.log()]
        ['First notes']
    """

    __slots__: Final = (
        "_graph",
        "_head",
        "_index",
        "_logger",
        "_repo_dir",
        "_store",
        "_worktree",
    )
    _worktree: Path
    _repo_dir: Path
    _store: ObjectStore
    _index: StagingIndex
    _head: HeadRef
    _graph: CommitGraph
    _logger: FilteringBoundLogger

    def __init__(
        self,
        worktree: Path | None = None,
        *,
        dir_name: str = DEFAULT_REPO_DIR_NAME,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        """Open an existing repository.

        Args:
            worktree: Directory containing ``.groot/``. Defaults to the current
                working directory.
            dir_name: Name of the repository directory.
            logger: Structured logger for repository operations.

        Raises:
            RepositoryNotInitializedError: If ``.groot/HEAD`` does not exist.
        """
        if worktree is None:
            worktree = Path.cwd()
        self._worktree = worktree.resolve()
        self._repo_dir = get_repo_dir(self._worktree, dir_name)

        if not get_head_file(self._repo_dir).is_file():
            msg = f"groot repository not initialized: {self._repo_dir} not found"
            raise RepositoryNotInitializedError(msg, path=self._worktree)

        self._logger = logger if logger is not None else create_null_logger()
        self._store = ObjectStore(get_objects_dir(self._repo_dir), logger=self._logger)
        self._index = StagingIndex(get_index_file(self._repo_dir), logger=self._logger)
        self._head = HeadRef(get_head_file(self._repo_dir))
        self._graph = CommitGraph(
            self._store, self._index, self._head, logger=self._logger
        )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def init(
        cls,
        worktree: Path | None = None,
        *,
        dir_name: str = DEFAULT_REPO_DIR_NAME,
        logger: FilteringBoundLogger | None = None,
    ) -> InitResult:
        """Create a repository, or open it if it already exists.

        The directories are created idempotently. HEAD and index are only
        created when absent and are never overwritten.

        Args:
            worktree: Directory to create ``.groot/`` in. Defaults to the
                current working directory.
            dir_name: Name of the repository directory.
            logger: Structured logger for repository operations.

        Returns:
            InitResult with the opened repository and whether anything was
            created.
        """
        if worktree is None:
            worktree = Path.cwd()
        repo_dir = get_repo_dir(worktree.resolve(), dir_name)
        get_objects_dir(repo_dir).mkdir(parents=True, exist_ok=True)

        created = False
        for path, content in (
            (get_head_file(repo_dir), _EMPTY_HEAD),
            (get_index_file(repo_dir), _EMPTY_INDEX),
        ):
            try:
                with path.open("x", encoding="utf-8") as f:
                    _ = f.write(content)
            except FileExistsError:
                continue
            created = True

        repository = cls(worktree, dir_name=dir_name, logger=logger)
        repository._logger.info(
            "repository_initialized", path=str(repo_dir), created=created
        )
        return InitResult(repository=repository, created=created)

    @classmethod
    def discover(
        cls,
        start: Path | None = None,
        *,
        dir_name: str = DEFAULT_REPO_DIR_NAME,
        logger: FilteringBoundLogger | None = None,
    ) -> Self:
        """Open the repository containing a directory.

        Args:
            start: Directory to search upward from. Defaults to the current
                working directory.
            dir_name: Name of the repository directory.
            logger: Structured logger for repository operations.

        Returns:
            The repository whose worktree contains ``start``.

        Raises:
            RepositoryNotInitializedError: If no repository is found.
        """
        search_from = (start or Path.cwd()).resolve()
        root = find_repository_root(search_from, dir_name=dir_name)
        if root is None:
            msg = (
                f"Not a groot repository (or any parent up to /): {search_from}. "
                "Run 'groot init' first."
            )
            raise RepositoryNotInitializedError(msg, path=search_from)
        return cls(root, dir_name=dir_name, logger=logger)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def worktree(self) -> Path:
        """The resolved worktree directory."""
        return self._worktree

    @property
    def repo_dir(self) -> Path:
        """The repository metadata directory."""
        return self._repo_dir

    @property
    def store(self) -> ObjectStore:
        """The object store."""
        return self._store

    @property
    def index(self) -> StagingIndex:
        """The staging index."""
        return self._index

    @property
    def graph(self) -> CommitGraph:
        """The commit graph."""
        return self._graph

    @property
    def head(self) -> str | None:
        """Digest of the newest commit, or None before the first commit."""
        return self._graph.get_head()

    # =========================================================================
    # Operations
    # =========================================================================

    def relative_path(self, path: Path) -> str:
        """Convert a file path into the form recorded in the index.

        Args:
            path: Absolute path, or a path relative to the current directory.

        Returns:
            POSIX path relative to the worktree.

        Raises:
            PathOutsideRepositoryError: If the path is outside the worktree or
                inside the repository directory.
        """
        resolved = path.resolve()
        if not resolved.is_relative_to(self._worktree):
            msg = f"{path} is outside repository at {self._worktree}"
            raise PathOutsideRepositoryError(msg, path=resolved, root=self._worktree)
        if resolved.is_relative_to(self._repo_dir):
            msg = f"{path} is inside the repository directory {self._repo_dir}"
            raise PathOutsideRepositoryError(msg, path=resolved, root=self._worktree)
        return resolved.relative_to(self._worktree).as_posix()

    def add(self, path: Path) -> StagedEntry:
        """Store a file's content and stage it for the next commit.

        Args:
            path: File to add.

        Returns:
            The staged entry.

        Raises:
            PathOutsideRepositoryError: If the file is outside the worktree.
            OSError: If the file cannot be read.
        """
        relative = self.relative_path(path)
        digest = self._store.put(path.resolve().read_bytes())
        return self._index.stage(relative, digest)

    def staged(self) -> tuple[StagedEntry, ...]:
        """Return the staged entries in add order."""
        return self._index.snapshot()

    def commit(self, message: str) -> str:
        """Commit the staged files.

        Args:
            message: Commit message.

        Returns:
            Digest of the new commit.
        """
        return self._graph.commit(message)

    def get_commit(self, digest: str) -> Commit:
        """Load a commit by digest.

        Raises:
            CommitNotFoundError: If the digest does not resolve.
            InvalidObjectError: If the object is not a valid commit.
        """
        return self._graph.get_commit(digest)

    def log(self, limit: int | None = None) -> list[LogEntry]:
        """Return commits from newest to oldest.

        Args:
            limit: Maximum number of commits. None returns the whole history.

        Raises:
            InvalidLimitError: If limit is negative.
        """
        return list(log(self._graph, limit))

    def show(self, digest: str) -> CommitDiff:
        """Describe the changes a commit made to each of its files.

        Raises:
            CommitNotFoundError: If the commit does not resolve.
        """
        return diff_commit(self._graph, digest)
