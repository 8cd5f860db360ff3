"""
hookman - Hook Synchronizer
Writes, removes and reports the hooks declared in hookman.toml.
"""

import os
import shutil
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ..config import DEFAULT_SHELL, STRICT_MODE_LINE
from ..core.errors import FilesystemError, ScriptNotFoundError
from ..core.models import ContentSource, HookConfig, InlineCommand
from ..core.validator import validate
from ..scanners.git_repo import hooks_dir_for, require_repository_root
from ..scanners.stale_hooks import scan_stale_hooks
from .shell import resolve_shell

# Windows has no permission bits to set
SUPPORTS_EXECUTABLE_BITS = os.name == "posix"
EXECUTABLE_MODE = 0o755


# =============================================================================
# Hook Rendering
# =============================================================================

def render_inline_hook(command: str, shell: str = DEFAULT_SHELL) -> str:
    """Shebang + `set -e` + the user's command."""
    return f"#!{shell}\n{STRICT_MODE_LINE}\n{command}\n"


def render_hook(
    hook_name: str,
    source: ContentSource,
    base_dir: Path,
    shell: str = DEFAULT_SHELL,
) -> bytes:
    """
    Produces the bytes written to `.git/hooks/<hook_name>`.

    Scripts are copied verbatim, relative paths being resolved against
    `base_dir` (the directory holding the config file).

    Raises:
        ScriptNotFoundError: the script does not exist
        FilesystemError: the script exists but cannot be read
    """
    if isinstance(source, InlineCommand):
        return render_inline_hook(source.command, shell).encode("utf-8")

    script_path = source.resolve(base_dir)
    if not script_path.exists():
        raise ScriptNotFoundError(hook_name, script_path)

    try:
        return script_path.read_bytes()
    except OSError as e:
        raise FilesystemError("reading script", script_path, e) from e


# =============================================================================
# Hook Synchronizer
# =============================================================================

class HookSynchronizer:
    """Reconciles `.git/hooks` with a HookConfig."""

    def __init__(self, repo_root: Path, console: Optional[Console] = None):
        """
        Args:
            repo_root: Directory containing `.git`
            console: Where progress is reported (default: stdout)
        """
        self.repo_root = Path(repo_root)
        self.hooks_dir = hooks_dir_for(self.repo_root)
        self.console = console or Console(soft_wrap=True, highlight=False, emoji=False)

    @classmethod
    def from_cwd(cls, console: Optional[Console] = None) -> "HookSynchronizer":
        """Synchronizer for the repository enclosing the current directory."""
        return cls(require_repository_root(), console=console)

    @staticmethod
    def is_hook_file_name(hook_name: str) -> bool:
        """True if `hook_name` names a file directly inside the hook directory."""
        return hook_name not in ("", ".", "..") and Path(hook_name).name == hook_name

    def hook_path(self, hook_name: str) -> Path:
        return self.hooks_dir / hook_name

    def build(self, config: HookConfig, shell: str = DEFAULT_SHELL) -> List[str]:
        """
        Installs every declared hook.

        Stops at the first invalid hook; hooks written before it are kept.

        Returns:
            Names of the installed hooks, in config order
        """
        try:
            self.hooks_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError("creating hook directory", self.hooks_dir, e) from e

        installed = []
        for hook_name, declaration in config.hooks.items():
            source = validate(hook_name, declaration)

            dest = self.hook_path(hook_name)
            if dest.exists():
                self.console.print(f"overwriting hook `{escape(hook_name)}`")

            content = render_hook(hook_name, source, config.base_dir, shell)
            self._write_hook(dest, content)

            installed.append(hook_name)
            self.console.print(f"installed hook `{escape(hook_name)}`", style="green")

        return installed

    def _write_hook(self, dest: Path, content: bytes) -> None:
        try:
            dest.write_bytes(content)
        except OSError as e:
            raise FilesystemError("creating hook file", dest, e) from e

        if SUPPORTS_EXECUTABLE_BITS:
            try:
                dest.chmod(EXECUTABLE_MODE)
            except OSError as e:
                raise FilesystemError("setting permissions on", dest, e) from e

    def clean(self, config: HookConfig) -> List[str]:
        """
        Removes the hook files of declared hooks. Undeclared files in
        the hook directory are left alone.

        Returns:
            Names of the removed hooks
        """
        removed = []
        for hook_name in config.hook_names():
            if not self.is_hook_file_name(hook_name):
                self.console.print(
                    f"hook `{escape(hook_name)}` is not a file name in the hook directory, skipping",
                    style="yellow",
                )
                continue

            hook_path = self.hook_path(hook_name)

            if not (hook_path.exists() or hook_path.is_symlink()):
                self.console.print(
                    f"no hook `{escape(hook_name)}` to remove, skipping", style="dim"
                )
                continue

            try:
                hook_path.unlink()
            except OSError as e:
                raise FilesystemError("removing hook file", hook_path, e) from e

            removed.append(hook_name)
            self.console.print(f"removed hook `{escape(hook_name)}`", style="green")

        return removed

    def clean_all(self) -> bool:
        """
        Deletes the whole hook directory, declared or not.

        Returns:
            False if there was no hook directory to delete
        """
        if not self.hooks_dir.exists():
            self.console.print(
                f"no hook directory `{escape(str(self.hooks_dir))}` to remove, skipping",
                style="dim",
            )
            return False

        try:
            shutil.rmtree(self.hooks_dir)
        except OSError as e:
            raise FilesystemError("removing hook directory", self.hooks_dir, e) from e

        self.console.print(
            f"removed hook directory `{escape(str(self.hooks_dir))}`", style="green"
        )
        return True


# =============================================================================
# Helper Functions
# =============================================================================

def build_hooks(
    config: HookConfig,
    use_current_shell: bool = False,
    console: Optional[Console] = None,
) -> List[str]:
    """Installs all hooks of `config` into the enclosing repository."""
    synchronizer = HookSynchronizer.from_cwd(console=console)
    return synchronizer.build(config, shell=resolve_shell(use_current_shell))


def clean_hooks(
    config: HookConfig,
    remove_all: bool = False,
    console: Optional[Console] = None,
) -> List[str]:
    """
    Removes the declared hooks, or the whole hook directory when
    `remove_all` is set (the config is not consulted then).
    """
    synchronizer = HookSynchronizer.from_cwd(console=console)
    if remove_all:
        synchronizer.clean_all()
        return []
    return synchronizer.clean(config)


def print_hook_list(
    config: HookConfig,
    console: Optional[Console] = None,
    warn_console: Optional[Console] = None,
) -> None:
    """Prints declared hooks (sorted), then any stale hook in the repository."""
    console = console or Console(soft_wrap=True, highlight=False, emoji=False)
    warn_console = warn_console or console
    source = escape(str(config.source_file))

    if config.is_empty:
        console.print(f"no hooks defined in {source}")
    else:
        console.print(f"hooks defined in {source}:")
        for hook_name in config.hook_names():
            console.print(f"- {escape(hook_name)}")

    for hook_name in scan_stale_hooks(config):
        warn_console.print(f"warning: stale hook: {escape(hook_name)}", style="yellow")
