"""
hookman - Errors
Every failure the tool reports to the operator.
"""

from pathlib import Path
from typing import Union


class HookmanError(Exception):
    """Base class for all hookman errors."""
    pass


# =============================================================================
# Configuration
# =============================================================================

class ConfigNotFoundError(HookmanError):
    """Config file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"config file not found: {self.path}")


class ConfigParseError(HookmanError):
    """Config file is not valid TOML or does not have the expected shape."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"parsing `{self.path}`: {reason}")


# =============================================================================
# Repository
# =============================================================================

class RepositoryNotFoundError(HookmanError):
    """No .git directory in the current directory or any parent."""

    def __init__(self, start: Union[str, Path]):
        self.start = Path(start)
        super().__init__(f"not inside a git repository (searched from {self.start})")


# =============================================================================
# Validation
# =============================================================================

class HookValidationError(HookmanError):
    """A single hook declaration is invalid."""

    def __init__(self, hook_name: str, message: str):
        self.hook_name = hook_name
        super().__init__(message)


class UnsupportedHookTypeError(HookValidationError):
    def __init__(self, hook_name: str):
        super().__init__(hook_name, f"unsupported hook type `{hook_name}`")


class ConflictingContentSourceError(HookValidationError):
    def __init__(self, hook_name: str):
        super().__init__(
            hook_name,
            f"hook {hook_name}: either `run` or `script` can be assigned at a time",
        )


class MissingContentSourceError(HookValidationError):
    def __init__(self, hook_name: str):
        super().__init__(
            hook_name,
            f"hook {hook_name}: you must use either `run` or `script` in the definition",
        )


# =============================================================================
# Synchronization
# =============================================================================

class ScriptNotFoundError(HookmanError):
    """Script referenced by a hook does not exist."""

    def __init__(self, hook_name: str, path: Path):
        self.hook_name = hook_name
        self.path = path
        super().__init__(f"hook {hook_name}: script path doesn't exist: {path}")


class FilesystemError(HookmanError):
    """Filesystem operation on the hook directory failed."""

    def __init__(self, operation: str, path: Path, cause: OSError):
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"{operation} `{path}`: {detail}")


__all__ = [
    "HookmanError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "RepositoryNotFoundError",
    "HookValidationError",
    "UnsupportedHookTypeError",
    "ConflictingContentSourceError",
    "MissingContentSourceError",
    "ScriptNotFoundError",
    "FilesystemError",
]
