"""Shared fixtures for git-ship tests."""

import pytest

from gitship import git


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run every test in an empty directory with no GIT_SHIP_* overrides."""
    for var in ("GIT_SHIP_CONFIG", "GIT_SHIP_DEBUG", "GIT_SHIP_PLUGIN"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_conf(tmp_path):
    def write(text, name=".git-ship.conf"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return write


@pytest.fixture
def remotes(monkeypatch):
    """Replace ``git remote -v`` output with the given lines."""
    def set_remotes(*lines):
        monkeypatch.setattr(git, "remote_lines", lambda: list(lines))
    return set_remotes


class BrokenEntryPoint:
    name = "broken"
    value = "nosuchmod:Plugin"

    def load(self):
        raise ImportError("No module named 'nosuchmod'")


@pytest.fixture
def broken_entry_point(monkeypatch):
    """Install a ``gitship.plugins`` entry point whose module cannot import."""
    from gitship import loader

    monkeypatch.setattr(loader, "entry_points", lambda group: [BrokenEntryPoint()])
    return BrokenEntryPoint.name
