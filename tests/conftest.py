"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from gitscm.events import EventEmitter
from gitscm.status import RawStatusRecord


class FakeModel:
    """In-memory repository model that records update() calls."""

    def __init__(self, repository_root, status=(), error=None):
        self.repository_root = Path(repository_root)
        self.error = error
        self.status = list(status)
        self.update_calls = []
        self._emitter = EventEmitter()

    def on_did_change(self, listener):
        return self._emitter.event(listener)

    def update(self, force_refresh=False):
        self.update_calls.append(force_refresh)
        if self.error is not None:
            raise self.error
        self._emitter.fire(None)

    def set_status(self, status):
        self.status = list(status)
        self._emitter.fire(None)

    @property
    def listener_count(self):
        return self._emitter.listener_count


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def sample_records():
    """Status records covering a conflict, staged, modified and untracked file."""
    return [
        RawStatusRecord(path="a.txt", x="M", y=" "),
        RawStatusRecord(path="b.txt", x=" ", y="M"),
        RawStatusRecord(path="c.txt", x="U", y="U"),
        RawStatusRecord(path="d.txt", x="?", y="?"),
    ]


@pytest.fixture
def fake_model(sample_records):
    """A FakeModel rooted at /repo holding sample_records."""
    return FakeModel("/repo", sample_records)


@pytest.fixture
def sample_porcelain_output():
    """Sample `git status --porcelain=v1 -z` output."""
    return (
        "M  staged.py\0"
        " M unstaged.py\0"
        "MM both.py\0"
        "R  new_name.py\0old_name.py\0"
        "UU conflict.py\0"
        "?? notes.txt\0"
    )


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def make_model():
    """Factory for FakeModel instances."""
    return FakeModel
