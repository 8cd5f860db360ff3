"""Static settings for hookman."""

from pathlib import Path

DEFAULT_CONFIG_FILE = Path("hookman.toml")

# Hook directory, relative to the repository root
GIT_DIR_NAME = ".git"
HOOKS_DIR_NAME = "hooks"

DEFAULT_SHELL = "/usr/bin/env bash"
SHELL_ENV_VAR = "SHELL"
STRICT_MODE_LINE = "set -e"

SAMPLE_SUFFIX = ".sample"

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "GIT_DIR_NAME",
    "HOOKS_DIR_NAME",
    "DEFAULT_SHELL",
    "SHELL_ENV_VAR",
    "STRICT_MODE_LINE",
    "SAMPLE_SUFFIX",
]
