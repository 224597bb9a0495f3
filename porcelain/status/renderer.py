"""Long-format status rendering.

Turns classified status buckets into the lines of a ``git status`` style
report. The header and hint lines are fixed literals; scripts parse them, so
their wording must not change.
"""

from typing import Iterable, Mapping

from porcelain.status.models import Category

ENTRY_INDENT = "#       "
LABEL_WIDTH = 12

BRANCH_HEADER = "# On branch {branch}"
COMMENT_LINE = "#"
NEEDS_MERGE = "{path}: needs merge"

STAGED_HEADER = [
    "# Changes to be committed:",
    '#   (use "git reset HEAD (file)..." to unstage)',
    "#",
]
UNSTAGED_HEADER = [
    "# Changed but not updated:",
    '#   (use "git add (file)..." to update what will be committed)',
    '#   (use "git checkout -- (file)..." to discard changes in working directory)',
    "#",
]
UNTRACKED_HEADER = [
    "# Untracked files:",
    '#   (use "git add (file)..." to include in what will be committed)',
    "#",
]

NOTHING_STAGED = 'no changes added to commit (use "git add" and/or "git commit -a")'
INITIAL_COMMIT = [
    "# Initial commit",
    "#",
    '# nothing to commit (create/copy files and use "git add" to track)',
]
WORKING_DIRECTORY_CLEAN = "# nothing to commit (working directory clean)"


def format_entry(path: str, category: Category) -> str:
    """Format one classified path, e.g. ``#       modified:   a.txt``."""
    label = f"{category.label}:".ljust(LABEL_WIDTH)
    return f"{ENTRY_INDENT}{label}{path}"


def _render_bucket(header: list[str], bucket: Mapping[str, Category]) -> list[str]:
    lines = list(header)
    lines.extend(format_entry(path, category) for path, category in bucket.items())
    lines.append(COMMENT_LINE)
    return lines


def render_status(
    branch_name: str,
    index_size: int,
    any_differences: bool,
    merge_conflicts: Iterable[str],
    staged: Mapping[str, Category],
    unstaged: Mapping[str, Category],
    untracked: Iterable[str],
) -> list[str]:
    """Render a long-format status report.

    Three mutually exclusive cases:
    - changes exist (differences or untracked files): full report
    - nothing changed and the index is empty: initial commit notice
    - nothing changed otherwise: working directory clean

    Entries are emitted in the order the buckets provide them; the
    classifier and untracked resolver already sort by path.

    Args:
        branch_name: Name of the current branch.
        index_size: Number of entries in the index.
        any_differences: Whether the raw status reported any change.
        merge_conflicts: Conflicted paths.
        staged: Staged bucket (path -> category).
        unstaged: Unstaged bucket (path -> category).
        untracked: Untracked paths to display.

    Returns:
        The report lines, without trailing newlines.
    """
    untracked = list(untracked)
    lines: list[str] = []

    if any_differences or untracked:
        for path in merge_conflicts:
            lines.append(NEEDS_MERGE.format(path=path))
        lines.append(BRANCH_HEADER.format(branch=branch_name))
        lines.append(COMMENT_LINE)

        if staged:
            lines.extend(_render_bucket(STAGED_HEADER, staged))
        if unstaged:
            lines.extend(_render_bucket(UNSTAGED_HEADER, unstaged))
        if untracked:
            lines.extend(UNTRACKED_HEADER)
            lines.extend(f"{ENTRY_INDENT}{path}" for path in untracked)
        if not staged:
            lines.append(NOTHING_STAGED)
    elif index_size <= 0:
        lines.append(BRANCH_HEADER.format(branch=branch_name))
        lines.append(COMMENT_LINE)
        lines.extend(INITIAL_COMMIT)
    else:
        lines.append(WORKING_DIRECTORY_CLEAN)

    return lines
