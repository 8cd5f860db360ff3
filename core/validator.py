"""
hookman - Hook Validator
Checks a hook declaration before it is written to disk.
"""

from .errors import UnsupportedHookTypeError
from .models import ContentSource, HookDeclaration, is_valid_hook


def validate(hook_name: str, declaration: HookDeclaration) -> ContentSource:
    """
    Validates one hook and returns its content source.

    Rules, in order:
    1. `hook_name` must be a recognized git hook event
    2. exactly one of `run` / `script` must be set

    Raises:
        UnsupportedHookTypeError
        ConflictingContentSourceError
        MissingContentSourceError
    """
    if not is_valid_hook(hook_name):
        raise UnsupportedHookTypeError(hook_name)

    return declaration.content_source()


__all__ = ["validate"]
