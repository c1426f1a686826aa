"""Tests for the Repository facade."""

from collections.abc import Callable
from pathlib import Path

import orjson
import pytest
from pytest_mock import MockerFixture

from groot import InitResult, Repository
from groot.exceptions import (
    CommitNotFoundError,
    PathOutsideRepositoryError,
    RepositoryNotInitializedError,
)
from groot.history import FileStatus
from groot.objects import compute_digest

WriteFile = Callable[[str, str | bytes], Path]


class TestInit:
    def test_creates_layout(self, worktree: Path) -> None:
        result = Repository.init(worktree)

        repo_dir = worktree / ".groot"
        assert isinstance(result, InitResult)
        assert result.created is True
        assert (repo_dir / "objects").is_dir()
        assert (repo_dir / "HEAD").read_text() == ""
        assert orjson.loads((repo_dir / "index").read_bytes()) == []

    def test_defaults_to_current_directory(self, worktree: Path) -> None:
        result = Repository.init()

        assert result.repository.worktree == worktree.resolve()

    def test_is_idempotent(self, worktree: Path) -> None:
        _ = Repository.init(worktree)

        result = Repository.init(worktree)

        assert result.created is False

    def test_preserves_existing_state(
        self, repo: Repository, write_file: WriteFile
    ) -> None:
        _ = repo.add(write_file("a.txt", "one\n"))
        digest = repo.commit("first")
        _ = repo.add(write_file("a.txt", "two\n"))

        reopened = Repository.init(repo.worktree).repository

        assert reopened.head == digest
        assert len(reopened.staged()) == 1

    def test_repairs_missing_index(self, repo: Repository) -> None:
        repo.index.path.unlink()

        result = Repository.init(repo.worktree)

        assert result.created is True
        assert repo.index.path.read_text() == "[]"

    def test_custom_dir_name(self, worktree: Path) -> None:
        repo = Repository.init(worktree, dir_name=".vcs").repository

        assert repo.repo_dir == worktree.resolve() / ".vcs"
        assert not (worktree / ".groot").exists()


class TestOpen:
    def test_uninitialized_raises(self, worktree: Path) -> None:
        with pytest.raises(RepositoryNotInitializedError) as exc_info:
            _ = Repository(worktree)

        assert exc_info.value.path == worktree.resolve()

    def test_directory_without_head_is_not_a_repository(self, worktree: Path) -> None:
        (worktree / ".groot" / "logs").mkdir(parents=True)

        with pytest.raises(RepositoryNotInitializedError):
            _ = Repository(worktree)

    def test_discover_from_subdirectory(self, repo: Repository) -> None:
        nested = repo.worktree / "src" / "pkg"
        nested.mkdir(parents=True)

        found = Repository.discover(nested)

        assert found.worktree == repo.worktree

    def test_discover_without_repository_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RepositoryNotInitializedError, match="groot init"):
            _ = Repository.discover(tmp_path)

    def test_repositories_are_independent(self, tmp_path: Path) -> None:
        first = Repository.init(tmp_path / "one").repository
        second = Repository.init(tmp_path / "two").repository
        path = tmp_path / "one" / "a.txt"
        _ = path.write_text("a\n")
        _ = first.add(path)

        _ = first.commit("only in one")

        assert first.head is not None
        assert second.head is None


class TestRelativePath:
    def test_relative_to_worktree(self, repo: Repository) -> None:
        assert repo.relative_path(repo.worktree / "docs" / "a.txt") == "docs/a.txt"

    def test_resolves_relative_to_cwd(
        self, repo: Repository, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        sub = repo.worktree / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)

        assert repo.relative_path(Path("x.txt")) == "sub/x.txt"

    def test_outside_worktree_raises(self, repo: Repository, tmp_path: Path) -> None:
        with pytest.raises(PathOutsideRepositoryError) as exc_info:
            _ = repo.relative_path(tmp_path / "elsewhere.txt")

        assert exc_info.value.root == repo.worktree

    def test_inside_repo_dir_raises(self, repo: Repository) -> None:
        with pytest.raises(PathOutsideRepositoryError):
            _ = repo.relative_path(repo.repo_dir / "HEAD")


class TestAdd:
    def test_stores_blob_and_stages(
        self, repo: Repository, write_file: WriteFile
    ) -> None:
        entry = repo.add(write_file("a.txt", "hello\n"))

        assert entry.path == "a.txt"
        assert entry.hash == compute_digest(b"hello\n")
        assert repo.store.get(entry.hash) == b"hello\n"
        assert repo.staged() == (entry,)

    def test_binary_content(self, repo: Repository, write_file: WriteFile) -> None:
        data = b"\x00\xff\x10binary"

        entry = repo.add(write_file("img.bin", data))

        assert repo.store.get(entry.hash) == data

    def test_same_content_shares_blob(
        self, repo: Repository, write_file: WriteFile
    ) -> None:
        a = repo.add(write_file("a.txt", "same"))
        b = repo.add(write_file("b.txt", "same"))

        assert a.hash == b.hash
        assert len(repo.store) == 1
        assert len(repo.staged()) == 2

    def test_missing_file_raises_without_staging(self, repo: Repository) -> None:
        with pytest.raises(FileNotFoundError):
            _ = repo.add(repo.worktree / "missing.txt")

        assert repo.staged() == ()
        assert len(repo.store) == 0

    def test_outside_file_raises(self, repo: Repository, tmp_path: Path) -> None:
        outside = tmp_path / "outside.txt"
        _ = outside.write_text("x")

        with pytest.raises(PathOutsideRepositoryError):
            _ = repo.add(outside)

        assert repo.staged() == ()


class TestCommitAndHistory:
    def test_commit_clears_staging(
        self, repo: Repository, write_file: WriteFile
    ) -> None:
        _ = repo.add(write_file("a.txt", "x"))

        digest = repo.commit("first")

        assert repo.head == digest
        assert repo.staged() == ()
        assert repo.get_commit(digest).files[0].path == "a.txt"

    def test_log(self, repo: Repository, write_file: WriteFile) -> None:
        _ = repo.add(write_file("a.txt", "1"))
        first = repo.commit("first")
        _ = repo.add(write_file("a.txt", "2"))
        second = repo.commit("second")

        assert [e.digest for e in repo.log()] == [second, first]
        assert [e.digest for e in repo.log(1)] == [second]

    def test_show(self, repo: Repository, write_file: WriteFile) -> None:
        _ = repo.add(write_file("a.txt", "hello\nworld\n"))
        _ = repo.commit("first")
        _ = repo.add(write_file("a.txt", "hello\nmoon\n"))
        digest = repo.commit("second")

        (file,) = repo.show(digest).files

        assert file.status is FileStatus.MODIFIED

    def test_show_unknown_commit(self, repo: Repository) -> None:
        with pytest.raises(CommitNotFoundError):
            _ = repo.show("0" * 40)

    def test_logs_operations(self, worktree: Path, mocker: MockerFixture) -> None:
        logger = mocker.MagicMock()
        repo = Repository.init(worktree, logger=logger).repository
        path = worktree / "a.txt"
        _ = path.write_text("x")

        _ = repo.add(path)
        digest = repo.commit("first")

        events = [c.args[0] for c in logger.info.call_args_list]
        assert events == ["repository_initialized", "entry_staged", "commit_created"]
        logger.info.assert_any_call(
            "commit_created", digest=digest, parent=None, files=1
        )
