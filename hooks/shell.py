"""
hookman - Shell Resolution
Chooses the interpreter written into the shebang of inline hooks.
"""

import os
from typing import Mapping, Optional

from ..config import DEFAULT_SHELL, SHELL_ENV_VAR


def resolve_shell(use_current_shell: bool = False, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Returns the interpreter for generated hooks.

    `/usr/bin/env bash` unless `use_current_shell` is set, in which case
    $SHELL is used. An unset or empty $SHELL falls back to the default.
    """
    if not use_current_shell:
        return DEFAULT_SHELL

    env = os.environ if environ is None else environ
    return env.get(SHELL_ENV_VAR) or DEFAULT_SHELL


__all__ = ["resolve_shell"]
