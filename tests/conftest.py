"""Shared test fixtures for groot tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from groot.repository import Repository


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the user's config and log directories.

    Returns:
        Path of the log file CLI loggers write to.
    """
    for name in ("GROOT_DEBUG", "GROOT_LOG_LEVEL", "GROOT_STRICT_CONFIG"):
        monkeypatch.delenv(name, raising=False)

    log_file = tmp_path / "logs" / "cli.log"
    monkeypatch.setenv("GROOT_LOGGING__FILE", str(log_file))
    monkeypatch.setattr(
        "groot.config._sources.get_user_config_path",
        lambda: tmp_path / "user-config" / "config.toml",
    )
    return log_file


@pytest.fixture
def worktree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an empty project directory and make it the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def repo(worktree: Path) -> Repository:
    """Create an initialized repository in the worktree."""
    return Repository.init(worktree).repository


WriteFile = Callable[[str, str | bytes], Path]


@pytest.fixture
def write_file(worktree: Path) -> WriteFile:
    """Return a function that writes a file below the worktree.

    Parent directories are created as needed. Bytes are written verbatim.
    """

    def _write(name: str, content: str | bytes) -> Path:
        path = worktree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return _write


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
