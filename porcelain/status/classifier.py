"""Status classification.

Resolves the overlapping raw status sets into two disjoint buckets:
- staged: changes to be committed
- unstaged: changes in the working tree that are not staged

Merge conflicts take precedence over everything else and are reported in
their own list only.
"""

import structlog

from porcelain.status.exceptions import DuplicateClassificationError
from porcelain.status.models import Category, ClassifiedStatus, RawStatus

logger = structlog.get_logger()

# Visiting order of the change sets; the first category a path lands in wins.
PRIORITY_ORDER = (
    Category.MISSING,
    Category.REMOVED,
    Category.MODIFIED,
    Category.ADDED,
)


def _category_sets(raw: RawStatus, conflicts: set[str]) -> list[tuple[Category, set[str]]]:
    """Pair each change category with its path set, conflicted paths removed."""
    sets = {
        Category.MISSING: raw.missing,
        Category.REMOVED: raw.removed,
        Category.MODIFIED: raw.modified,
        Category.ADDED: raw.added,
    }
    return [(category, set(sets[category]) - conflicts) for category in PRIORITY_ORDER]


def _insert(bucket: dict[str, Category], path: str, category: Category, staged: bool) -> None:
    existing = bucket.get(path)
    if existing is not None:
        raise DuplicateClassificationError(path, existing, category, staged)
    bucket[path] = category


def _sorted_bucket(bucket: dict[str, Category]) -> dict[str, Category]:
    return {path: bucket[path] for path in sorted(bucket)}


def classify(raw: RawStatus) -> ClassifiedStatus:
    """Classify a raw status snapshot into display buckets.

    Steps, in order:
    1. Every merge-conflicted path is removed from the staged set and from
       each change set (working copies; the snapshot is left untouched).
    2. Unstaged bucket: each change set minus the staged set, visited as
       missing, removed, modified, added.
    3. Staged bucket: the staged set intersected with each change set, in
       the same order.

    All buckets are ordered by path.

    Args:
        raw: The raw status snapshot.

    Returns:
        The classified status.

    Raises:
        DuplicateClassificationError: If a path lands in two categories of
            the same bucket.
    """
    conflicts = set(raw.merge_conflict)
    staged_paths = set(raw.staged) - conflicts

    unstaged: dict[str, Category] = {}
    staged: dict[str, Category] = {}

    category_sets = _category_sets(raw, conflicts)

    for category, paths in category_sets:
        for path in sorted(paths - staged_paths):
            _insert(unstaged, path, category, staged=False)

    for category, paths in category_sets:
        for path in sorted(staged_paths & paths):
            _insert(staged, path, category, staged=True)

    result = ClassifiedStatus(
        merge_conflicts=sorted(conflicts),
        staged=_sorted_bucket(staged),
        unstaged=_sorted_bucket(unstaged),
    )
    logger.debug(
        "status_classified",
        merge_conflicts=len(result.merge_conflicts),
        staged=len(result.staged),
        unstaged=len(result.unstaged),
    )
    return result
