"""
hookman - Stale Hook Scanner
Reports installed hooks that are no longer declared in the config.
"""

from pathlib import Path
from typing import List, Optional

from ..config import SAMPLE_SUFFIX
from ..core.models import HookConfig, is_valid_hook
from .git_repo import find_repository_root, hooks_dir_for


def is_stale(file_name: str, config: HookConfig) -> bool:
    """
    A hook file is stale when it is named after a git hook event,
    is not one of git's `.sample` files and is not declared.
    """
    return (
        not file_name.endswith(SAMPLE_SUFFIX)
        and is_valid_hook(file_name)
        and file_name not in config
    )


def find_stale_hooks(config: HookConfig, hooks_dir: Path) -> List[str]:
    """
    Lists stale hooks in `hooks_dir`, sorted by name.

    Advisory only: a missing or unreadable directory yields no results.
    """
    try:
        entries = [entry.name for entry in hooks_dir.iterdir()]
    except OSError:
        return []

    return sorted(name for name in entries if is_stale(name, config))


def scan_stale_hooks(config: HookConfig, start: Optional[Path] = None) -> List[str]:
    """Locates the repository from `start` and lists its stale hooks."""
    repo_root = find_repository_root(start)
    if repo_root is None:
        return []
    return find_stale_hooks(config, hooks_dir_for(repo_root))


__all__ = [
    "is_stale",
    "find_stale_hooks",
    "scan_stale_hooks",
]
