"""
hookman - Declarative Git Hooks

Installs, lists and removes git hooks declared in a hookman.toml file.
"""

from .__version__ import __version__

__all__ = ["__version__"]
