"""
hookman - Command Line Interface
Entry point for every hookman command.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from hookman.__version__ import __version__
from hookman.config import DEFAULT_CONFIG_FILE
from hookman.core.config_loader import load_config
from hookman.core.errors import FilesystemError, HookmanError
from hookman.core.models import VALID_HOOKS, HookConfig
from hookman.hooks.install import build_hooks, clean_hooks, print_hook_list
from hookman.scanners.git_repo import find_repository_root, hooks_dir_for
from hookman.scanners.stale_hooks import scan_stale_hooks


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="hookman",
    help="Install or list git hooks from a TOML config",
    add_completion=True,
    no_args_is_help=True,
)

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


@dataclass
class AppState:
    """Options shared by all subcommands."""
    config_path: Path
    ignore_stale: bool = False
    verbose: bool = False


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback for --version."""
    if value:
        console.print(f"hookman {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        DEFAULT_CONFIG_FILE,
        "--config",
        "-c",
        help="Path to the config file",
    ),
    ignore_stale: bool = typer.Option(
        False,
        "--ignore-stale",
        help="Don't warn about installed hooks missing from the config",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show the repository and hook directory being used",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the hookman version",
    ),
):
    """
    Install or list git hooks from a TOML config.

    Hooks are declared in hookman.toml:

    \b
    [hook.pre-commit]
    run = "make lint"
    """
    ctx.obj = AppState(config_path=config, ignore_stale=ignore_stale, verbose=verbose)


# =============================================================================
# Shared helpers
# =============================================================================

def fail(error: HookmanError) -> NoReturn:
    """Prints the error on stderr and exits with status 1."""
    err_console.print(f"error: {escape(str(error))}", style="bold red")
    raise typer.Exit(1)


def load_state_config(state: AppState, warn_stale: bool = True) -> HookConfig:
    """Loads the config and, unless suppressed, warns about stale hooks."""
    config = load_config(state.config_path)

    if state.verbose:
        console.print(f"config: {escape(str(state.config_path))}", style="dim")
        repo_root = find_repository_root()
        if repo_root is not None:
            console.print(f"repository: {escape(str(repo_root))}", style="dim")
            console.print(f"hooks directory: {escape(str(hooks_dir_for(repo_root)))}", style="dim")
        else:
            console.print("repository: not found", style="dim")

    if warn_stale and not state.ignore_stale:
        for hook_name in scan_stale_hooks(config):
            err_console.print(f"Warning: stale hook: {escape(hook_name)}", style="yellow")

    return config


# =============================================================================
# Command: build
# =============================================================================

@app.command()
def build(
    ctx: typer.Context,
    use_current_shell: bool = typer.Option(
        False,
        "--use-current-shell",
        "-u",
        help="Use the shell from the current session ($SHELL) instead of /usr/bin/env bash",
    ),
):
    """
    Generate all hooks into .git/hooks

    Example:

    \b
    hookman build --use-current-shell
    """
    state: AppState = ctx.obj

    try:
        config = load_state_config(state)
        build_hooks(config, use_current_shell=use_current_shell, console=console)
    except HookmanError as e:
        fail(e)


# =============================================================================
# Command: list
# =============================================================================

@app.command("list")
def list_hooks(ctx: typer.Context):
    """
    List all hooks defined in the config

    Installed hooks that are no longer declared are flagged as stale.
    """
    state: AppState = ctx.obj

    try:
        # list reports stale hooks itself
        config = load_state_config(state, warn_stale=False)
    except HookmanError as e:
        fail(e)

    print_hook_list(config, console=console, warn_console=err_console)


# =============================================================================
# Command: clean
# =============================================================================

@app.command()
def clean(
    ctx: typer.Context,
    remove_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Delete the whole .git/hooks directory, declared or not",
    ),
):
    """
    Delete all hooks defined in the config

    Examples:

    \b
    # Only the hooks in hookman.toml
    hookman clean

    \b
    # Everything in .git/hooks
    hookman clean --all
    """
    state: AppState = ctx.obj

    try:
        config = load_state_config(state)
        clean_hooks(config, remove_all=remove_all, console=console)
    except HookmanError as e:
        fail(e)


# =============================================================================
# Command: list-events
# =============================================================================

@app.command("list-events")
def list_events():
    """List all possible events for running hooks"""
    for event in VALID_HOOKS:
        console.print(event)


# =============================================================================
# Command: manpage
# =============================================================================

@app.command("manpage", hidden=True)
def manpage(
    directory: Path = typer.Option(
        Path("man") / "man1",
        "--dir",
        "-d",
        help="Output directory for the manpages",
    ),
):
    """Generate manpages for hookman (hookman.1 plus one page per subcommand)"""
    from click_man.core import write_man_pages

    try:
        directory.mkdir(parents=True, exist_ok=True)
        write_man_pages(
            "hookman",
            typer.main.get_command(app),
            version=__version__,
            target_dir=str(directory),
        )
    except OSError as e:
        fail(FilesystemError("writing manpages to", directory, e))

    console.print(f"Manpage generated at: {escape(str(directory / 'hookman.1'))}")


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
