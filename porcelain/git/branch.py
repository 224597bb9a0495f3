"""Git branch utilities.

Contains:
- get_branch: Get the current branch name
"""

from pathlib import Path

from porcelain.git.runner import _run_git_command

DETACHED_HEAD = "HEAD (detached)"


def get_branch(repo_root: Path | None = None) -> str:
    """Get the current branch name.

    ``git branch --show-current`` also reports the unborn branch of a
    repository without commits, so a fresh ``git init`` yields e.g. ``main``.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        The current branch name, or 'HEAD (detached)' if in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"], cwd=repo_root)
    if not branch:
        return DETACHED_HEAD
    return branch
