from pathlib import Path

import platformdirs

DEFAULT_REPO_DIR_NAME = ".groot"


def get_repo_dir(worktree: Path, dir_name: str = DEFAULT_REPO_DIR_NAME) -> Path:
    """Get the path to the repository directory inside a worktree."""
    return worktree / dir_name


def get_objects_dir(repo_dir: Path) -> Path:
    """Get the path to the objects/ directory inside the repository directory."""
    return repo_dir / "objects"


def get_head_file(repo_dir: Path) -> Path:
    """Get the path to the HEAD file inside the repository directory."""
    return repo_dir / "HEAD"


def get_index_file(repo_dir: Path) -> Path:
    """Get the path to the staging index file inside the repository directory."""
    return repo_dir / "index"


def get_repo_config_file(repo_dir: Path) -> Path:
    """Get the path to the repository-local config file."""
    return repo_dir / "config.toml"


def get_log_dir(repo_dir: Path | None = None) -> Path:
    """Get the directory CLI logs are written to.

    Args:
        repo_dir: The repository directory, if running inside a repository.

    Returns:
        ``<repo_dir>/logs`` inside a repository, otherwise the user log
        directory for groot.
    """
    if repo_dir is not None:
        return repo_dir / "logs"
    return platformdirs.user_log_path("groot")


def get_cli_log_file(repo_dir: Path | None = None) -> Path:
    """Get the path to the CLI log file."""
    return get_log_dir(repo_dir) / "cli.log"
