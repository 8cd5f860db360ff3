"""
hookman - Config Loader
Reads hookman.toml and converts it into a HookConfig.

Expected shape:

    [hook.pre-commit]
    run = "cargo fmt --check"

    [hook.commit-msg]
    script = "./scripts/commit-msg.sh"
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Union

from .errors import ConfigNotFoundError, ConfigParseError, FilesystemError
from .models import HookConfig, HookDeclaration


# =============================================================================
# Loader
# =============================================================================

class ConfigLoader:
    """
    Loads hook declarations from TOML.

    Only the table shape is checked here. Hook names and the
    `run`/`script` exclusivity are left to the validator, so that
    `list` and `clean` still work on a config that `build` would reject.
    """

    HOOK_TABLE = "hook"
    ENTRY_FIELDS = ("run", "script")

    def load_from_file(self, filepath: Union[str, Path]) -> HookConfig:
        """
        Loads a config file.

        Raises:
            ConfigNotFoundError: path does not exist or is not a file
            ConfigParseError: invalid TOML or unexpected shape
            FilesystemError: the file exists but cannot be read
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            raise ConfigNotFoundError(filepath)

        try:
            with open(filepath, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(filepath, str(e)) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(filepath, f"file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise FilesystemError("reading config", filepath, e) from e

        return self.load_from_dict(data, source_file=filepath)

    def load_from_dict(self, data: Dict[str, Any], source_file: Path) -> HookConfig:
        """Builds a HookConfig from an already parsed TOML document."""
        if self.HOOK_TABLE not in data:
            raise ConfigParseError(source_file, f"missing field `{self.HOOK_TABLE}`")

        table = data[self.HOOK_TABLE]
        if not isinstance(table, dict):
            raise ConfigParseError(
                source_file, f"`{self.HOOK_TABLE}` must be a table of hook definitions"
            )

        hooks: Dict[str, HookDeclaration] = {}
        for hook_name, entry in table.items():
            hooks[hook_name] = self._load_entry(source_file, hook_name, entry)

        return HookConfig(source_file=source_file, hooks=hooks)

    def _load_entry(self, source_file: Path, hook_name: str, entry: Any) -> HookDeclaration:
        if not isinstance(entry, dict):
            raise ConfigParseError(source_file, f"hook `{hook_name}` must be a table")

        values: Dict[str, Any] = {}
        for field_name in self.ENTRY_FIELDS:
            value = entry.get(field_name)
            if value is not None and not isinstance(value, str):
                raise ConfigParseError(
                    source_file,
                    f"hook `{hook_name}`: `{field_name}` must be a string, "
                    f"found {type(value).__name__}",
                )
            values[field_name] = value

        return HookDeclaration(name=hook_name, **values)


# =============================================================================
# Helper Functions
# =============================================================================

def load_config(filepath: Union[str, Path]) -> HookConfig:
    """Loads hookman.toml (or any config path) into a HookConfig."""
    return ConfigLoader().load_from_file(filepath)


__all__ = [
    "ConfigLoader",
    "load_config",
]
