"""
hookman - Git Repository Locator
Finds the repository root and its hook directory.
"""

from pathlib import Path
from typing import Optional

from ..config import GIT_DIR_NAME, HOOKS_DIR_NAME
from ..core.errors import RepositoryNotFoundError


def current_directory() -> Optional[Path]:
    """The working directory, or None if it no longer exists."""
    try:
        return Path.cwd()
    except OSError:
        return None


def find_repository_root(start: Optional[Path] = None) -> Optional[Path]:
    """
    Climbs from `start` (default: current directory) until a directory
    with a `.git` subdirectory is found.

    Returns:
        The repository root, or None once the filesystem root is passed
    """
    directory = Path(start).resolve() if start is not None else current_directory()
    if directory is None:
        return None

    while True:
        if (directory / GIT_DIR_NAME).is_dir():
            return directory
        if directory.parent == directory:
            return None
        directory = directory.parent


def require_repository_root(start: Optional[Path] = None) -> Path:
    """Like find_repository_root, but raises RepositoryNotFoundError."""
    root = find_repository_root(start)
    if root is None:
        if start is None:
            start = current_directory() or Path(".")
        raise RepositoryNotFoundError(start)
    return root


def hooks_dir_for(repo_root: Path) -> Path:
    """Path of `.git/hooks` for a repository root (may not exist yet)."""
    return repo_root / GIT_DIR_NAME / HOOKS_DIR_NAME


__all__ = [
    "current_directory",
    "find_repository_root",
    "require_repository_root",
    "hooks_dir_for",
]
