"""Core modules for hookman: config model, loader and validation."""

from .config_loader import ConfigLoader, load_config
from .errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConflictingContentSourceError,
    FilesystemError,
    HookmanError,
    HookValidationError,
    MissingContentSourceError,
    RepositoryNotFoundError,
    ScriptNotFoundError,
    UnsupportedHookTypeError,
)
from .models import (
    VALID_HOOKS,
    ContentSource,
    HookConfig,
    HookDeclaration,
    HookEvent,
    InlineCommand,
    ScriptFile,
    is_valid_hook,
)
from .validator import validate

__all__ = [
    # Models
    "VALID_HOOKS",
    "ContentSource",
    "HookConfig",
    "HookDeclaration",
    "HookEvent",
    "InlineCommand",
    "ScriptFile",
    "is_valid_hook",
    # Loaders
    "ConfigLoader",
    "load_config",
    # Validation
    "validate",
    # Errors
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
