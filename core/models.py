"""
hookman - Core Data Models
Typed representation of the hooks declared in hookman.toml.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .errors import ConflictingContentSourceError, MissingContentSourceError


# =============================================================================
# Enums
# =============================================================================

class HookEvent(str, Enum):
    """Git hook events that hookman can install."""
    APPLYPATCH_MSG = "applypatch-msg"
    PRE_APPLYPATCH = "pre-applypatch"
    POST_APPLYPATCH = "post-applypatch"
    PRE_COMMIT = "pre-commit"
    PRE_MERGE_COMMIT = "pre-merge-commit"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"
    COMMIT_MSG = "commit-msg"
    POST_COMMIT = "post-commit"
    PRE_REBASE = "pre-rebase"
    POST_CHECKOUT = "post-checkout"
    POST_MERGE = "post-merge"
    PRE_PUSH = "pre-push"
    PRE_RECEIVE = "pre-receive"
    UPDATE = "update"
    POST_RECEIVE = "post-receive"
    POST_UPDATE = "post-update"
    PUSH_TO_CHECKOUT = "push-to-checkout"
    PRE_AUTO_GC = "pre-auto-gc"
    POST_REWRITE = "post-rewrite"
    SENDEMAIL_VALIDATE = "sendemail-validate"
    FSMONITOR_WATCHMAN = "fsmonitor-watchman"
    PROC_RECEIVE = "proc-receive"


VALID_HOOKS: Tuple[str, ...] = tuple(event.value for event in HookEvent)


def is_valid_hook(name: str) -> bool:
    """True if `name` is a recognized git hook event."""
    return name in VALID_HOOKS


# =============================================================================
# Content Sources
# =============================================================================

@dataclass(frozen=True)
class InlineCommand:
    """Hook body given inline through `run`."""
    command: str


@dataclass(frozen=True)
class ScriptFile:
    """Hook body copied from the file given through `script`."""
    path: str

    def resolve(self, base_dir: Path) -> Path:
        """Resolve a relative script path against the config file's directory."""
        script_path = Path(self.path)
        if not script_path.is_absolute():
            script_path = base_dir / script_path
        return script_path


ContentSource = Union[InlineCommand, ScriptFile]


# =============================================================================
# Declarations
# =============================================================================

@dataclass(frozen=True)
class HookDeclaration:
    """
    One `[hook.<name>]` table as written in the config file.

    `run` and `script` are kept as parsed; `content_source()` turns them
    into the variant the synchronizer works with.
    """
    name: str
    run: Optional[str] = None
    script: Optional[str] = None

    def content_source(self) -> ContentSource:
        """
        Returns the single content source of this hook.

        Raises:
            ConflictingContentSourceError: both `run` and `script` are set
            MissingContentSourceError: neither is set
        """
        if self.run is not None and self.script is not None:
            raise ConflictingContentSourceError(self.name)
        if self.run is not None:
            return InlineCommand(self.run)
        if self.script is not None:
            return ScriptFile(self.script)
        raise MissingContentSourceError(self.name)


@dataclass
class HookConfig:
    """All hooks declared in one config file."""
    source_file: Path
    hooks: Dict[str, HookDeclaration] = field(default_factory=dict)

    @property
    def base_dir(self) -> Path:
        """Directory relative script paths are resolved against."""
        return self.source_file.parent

    @property
    def is_empty(self) -> bool:
        return not self.hooks

    def hook_names(self) -> List[str]:
        """Declared hook names in lexicographic order."""
        return sorted(self.hooks)

    def __contains__(self, hook_name: object) -> bool:
        return hook_name in self.hooks

    def __iter__(self) -> Iterator[HookDeclaration]:
        return iter(self.hooks.values())

    def __len__(self) -> int:
        return len(self.hooks)


__all__ = [
    "HookEvent",
    "VALID_HOOKS",
    "is_valid_hook",
    "InlineCommand",
    "ScriptFile",
    "ContentSource",
    "HookDeclaration",
    "HookConfig",
]
