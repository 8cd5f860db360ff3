"""Tests for shebang interpreter resolution."""

from hookman.hooks.shell import resolve_shell


def test_default_shell():
    assert resolve_shell() == "/usr/bin/env bash"


def test_current_shell_ignored_without_flag():
    assert resolve_shell(False, {"SHELL": "/bin/zsh"}) == "/usr/bin/env bash"


def test_current_shell():
    assert resolve_shell(True, {"SHELL": "/bin/zsh"}) == "/bin/zsh"


def test_current_shell_fallback():
    assert resolve_shell(True, {}) == "/usr/bin/env bash"
    assert resolve_shell(True, {"SHELL": ""}) == "/usr/bin/env bash"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SHELL", "/usr/local/bin/fish")
    assert resolve_shell(True) == "/usr/local/bin/fish"
