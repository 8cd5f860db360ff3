"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from hookman.core.config_loader import load_config


@pytest.fixture
def temp_git_repo(tmp_path, monkeypatch):
    """Temporary repository (a bare `.git/hooks` layout), used as cwd."""
    repo_dir = tmp_path / "test_repo"
    (repo_dir / ".git" / "hooks").mkdir(parents=True)

    monkeypatch.chdir(repo_dir)
    return repo_dir


@pytest.fixture
def hooks_dir(temp_git_repo):
    """The `.git/hooks` directory of temp_git_repo."""
    return temp_git_repo / ".git" / "hooks"


@pytest.fixture
def write_config(temp_git_repo):
    """Writes a hookman.toml into the repository and returns its path."""

    def _write(content: str, name: str = "hookman.toml") -> Path:
        path = temp_git_repo / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def make_config(write_config):
    """Writes a config and loads it."""

    def _make(content: str, name: str = "hookman.toml"):
        return load_config(write_config(content, name))

    return _make
