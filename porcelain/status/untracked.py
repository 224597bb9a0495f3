"""Untracked file resolution.

Filters the raw untracked candidates through the ignore rules.
"""

from pathlib import Path
from typing import Iterable

from porcelain.ignore import IgnoreRules


def resolve_untracked(candidates: Iterable[str], root: Path, rules: IgnoreRules) -> list[str]:
    """Return the untracked paths that are not ignored.

    A candidate is kept only when neither a file rule nor a directory rule
    excludes it. The result is de-duplicated and sorted by path.

    Args:
        candidates: Untracked paths relative to ``root``.
        root: The repository working directory.
        rules: Ignore rules to apply.

    Returns:
        Sorted list of untracked paths to display.
    """
    if not rules:
        return sorted(set(candidates))

    resolved = set()
    for candidate in candidates:
        full_path = root / candidate
        if rules.ignore_file(root, full_path) or rules.ignore_dir(root, full_path):
            continue
        resolved.add(candidate)
    return sorted(resolved)
