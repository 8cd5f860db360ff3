"""Git hook synchronization: build, clean and list."""

from .install import (
    HookSynchronizer,
    build_hooks,
    clean_hooks,
    print_hook_list,
    render_hook,
    render_inline_hook,
)
from .shell import resolve_shell

__all__ = [
    "HookSynchronizer",
    "build_hooks",
    "clean_hooks",
    "print_hook_list",
    "render_hook",
    "render_inline_hook",
    "resolve_shell",
]
