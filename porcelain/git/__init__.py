"""Git collaborators for porcelain.

This package provides the repository-facing side of the status report:
- exceptions: GitError, NotARepositoryError
- runner: _run_git_command, get_repo_root
- branch: get_branch, DETACHED_HEAD
- status: get_porcelain_status, parse_porcelain_status, get_index_size,
          get_raw_status
"""

# Exceptions
from porcelain.git.exceptions import (
    GitError,
    NotARepositoryError,
)

# Runner utilities
from porcelain.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Branch utilities
from porcelain.git.branch import (
    DETACHED_HEAD,
    get_branch,
)

# Status utilities
from porcelain.git.status import (
    get_index_size,
    get_porcelain_status,
    get_raw_status,
    parse_porcelain_status,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Branch
    "DETACHED_HEAD",
    "get_branch",
    # Status
    "get_index_size",
    "get_porcelain_status",
    "get_raw_status",
    "parse_porcelain_status",
]
