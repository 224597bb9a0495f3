"""Git status utilities.

Contains:
- get_porcelain_status: Get NUL-separated porcelain v1 status output
- parse_porcelain_status: Split porcelain output into the raw status sets
- get_index_size: Count the entries in the index
- get_raw_status: Build a RawStatus snapshot for a repository
"""

from pathlib import Path

import structlog

from porcelain.git.runner import _run_git_command
from porcelain.status.models import RawStatus

logger = structlog.get_logger()

# XY pairs git uses for unmerged paths
UNMERGED_CODES = {"DD", "AU", "UD", "UA", "DU", "AA", "UU"}

# Index (first column) codes and the set each one files the path under
STAGED_CODES = {
    "A": "added",
    "R": "added",
    "C": "added",
    "M": "modified",
    "T": "modified",
    "D": "removed",
}

# Working tree (second column) codes for paths with nothing staged;
# R/C show up for renames of intent-to-add paths (`git add -N`)
WORKTREE_CODES = {
    "M": "modified",
    "T": "modified",
    "D": "missing",
    "A": "added",
    "R": "added",
    "C": "added",
}

RAW_SET_NAMES = (
    "added",
    "removed",
    "modified",
    "missing",
    "staged",
    "merge_conflict",
    "untracked",
)


def get_porcelain_status(repo_root: Path | None = None) -> str:
    """Get git status output in NUL-separated porcelain v1 format.

    Untracked directories are expanded to individual files so that ignore
    rules are applied per file.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        The raw status output.
    """
    return _run_git_command(
        ["status", "--porcelain=v1", "-z", "--untracked-files=all"],
        cwd=repo_root,
        strip=False,
    )


def parse_porcelain_status(output: str) -> dict[str, set[str]]:
    """Parse porcelain v1 ``-z`` output into raw status sets.

    Each record is ``XY <path>``; rename and copy records are followed by an
    extra field holding the source path. A renamed source is reported as a
    staged removal (index rename) or as missing (working tree rename); a
    copy source is left alone. Paths with a staged change are filed by their
    index code and added to ``staged``; the working tree code is used only
    when nothing is staged, so each path lands in exactly one change set.

    Args:
        output: Raw ``git status --porcelain=v1 -z`` output.

    Returns:
        Mapping of set name (see RAW_SET_NAMES) to paths.
    """
    sets: dict[str, set[str]] = {name: set() for name in RAW_SET_NAMES}
    records = iter(output.split("\0"))

    for record in records:
        if len(record) < 4:
            continue
        xy, path = record[:2], record[3:]
        index_code, worktree_code = xy[0], xy[1]

        if index_code in "RC" or worktree_code in "RC":
            source = next(records, "")
            if source and index_code == "R":
                sets["removed"].add(source)
                sets["staged"].add(source)
            elif source and worktree_code == "R":
                # Still in the index, gone from the working tree
                sets["missing"].add(source)

        if xy in UNMERGED_CODES:
            sets["merge_conflict"].add(path)
        elif xy == "??":
            sets["untracked"].add(path)
        elif xy == "!!":
            continue
        elif index_code in STAGED_CODES:
            sets[STAGED_CODES[index_code]].add(path)
            sets["staged"].add(path)
        elif worktree_code in WORKTREE_CODES:
            sets[WORKTREE_CODES[worktree_code]].add(path)
        else:
            logger.debug("unknown_status_code", code=xy, path=path)

    return sets


def get_index_size(repo_root: Path | None = None) -> int:
    """Count the entries in the index.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        Number of index entries (0 for a fresh repository).
    """
    output = _run_git_command(["ls-files", "-z"], cwd=repo_root, strip=False)
    return len([entry for entry in output.split("\0") if entry])


def get_raw_status(repo_root: Path | None = None) -> RawStatus:
    """Build a raw status snapshot for a repository.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        The RawStatus snapshot.
    """
    sets = parse_porcelain_status(get_porcelain_status(repo_root))
    any_differences = any(sets[name] for name in RAW_SET_NAMES if name != "untracked")
    raw = RawStatus(
        **sets,
        index_size=get_index_size(repo_root),
        any_differences=any_differences,
    )
    logger.debug(
        "raw_status_collected",
        index_size=raw.index_size,
        **{name: len(paths) for name, paths in sets.items()},
    )
    return raw
