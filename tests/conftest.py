"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from porcelain.ignore import IgnoreRules
from porcelain.status.models import RawStatus


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
def raw_status_factory():
    """Build RawStatus snapshots with any_differences derived from the sets."""

    def _make(index_size: int = 1, any_differences=None, **sets) -> RawStatus:
        if any_differences is None:
            any_differences = any(
                paths for name, paths in sets.items() if name != "untracked"
            )
        return RawStatus(index_size=index_size, any_differences=any_differences, **sets)

    return _make


@pytest.fixture
def empty_rules():
    """Ignore rules that match nothing."""
    return IgnoreRules()


@pytest.fixture
def sample_porcelain_output():
    """Sample `git status --porcelain=v1 -z --untracked-files=all` output."""
    records = [
        "A  new_file.py",
        "M  staged_change.py",
        " M worktree_change.py",
        "D  staged_delete.py",
        " D missing.py",
        "R  renamed.py",
        "original.py",
        "UU conflicted.py",
        "?? notes.txt",
        "?? build/output.bin",
    ]
    return "\0".join(records) + "\0"


@pytest.fixture
def git_result():
    """Build fake CompletedProcess objects for git commands."""

    def _make(stdout: str) -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.returncode = 0
        return result

    return _make
