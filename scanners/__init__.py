"""Read-only scanners: repository location and stale hook detection."""

from .git_repo import find_repository_root, hooks_dir_for, require_repository_root
from .stale_hooks import find_stale_hooks, is_stale, scan_stale_hooks

__all__ = [
    "find_repository_root",
    "hooks_dir_for",
    "require_repository_root",
    "find_stale_hooks",
    "is_stale",
    "scan_stale_hooks",
]
