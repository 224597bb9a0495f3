"""Data models for the status engine.

Contains:
- Category: Change category codes, ordered by precedence
- RawStatus: Immutable snapshot of the raw path sets reported for a repository
- ClassifiedEntry: A single classified path
- ClassifiedStatus: Result of classification (merge conflicts + staged/unstaged buckets)
"""

from enum import IntEnum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, field_validator


class Category(IntEnum):
    """Change category of a path.

    The integer value is the precedence used by the classifier; lower values
    win when a path is a candidate for several categories.
    """

    MISSING = 1
    REMOVED = 2
    MODIFIED = 3
    ADDED = 4
    UNMERGED = 5

    @property
    def label(self) -> str:
        """Label shown in front of a path in the long status format."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.MISSING: "missing",
    Category.REMOVED: "deleted",
    Category.MODIFIED: "modified",
    Category.ADDED: "new file",
    Category.UNMERGED: "unmerged",
}


class RawStatus(BaseModel):
    """Raw status sets for one snapshot of a repository.

    Sets may overlap arbitrarily (a path can be both missing and staged).
    The snapshot is frozen so the classifier can never mutate it.

    Attributes:
        added: Paths present in the index but not in HEAD.
        removed: Paths present in HEAD but removed from the index.
        modified: Paths whose content differs.
        missing: Tracked paths absent from the working tree.
        staged: Paths with changes recorded in the index.
        merge_conflict: Paths with unresolved merge conflicts.
        untracked: Working tree paths not present in the index.
        index_size: Number of entries in the index.
        any_differences: Whether any change (other than untracked) exists.
    """

    model_config = ConfigDict(frozen=True)

    added: frozenset[str] = frozenset()
    removed: frozenset[str] = frozenset()
    modified: frozenset[str] = frozenset()
    missing: frozenset[str] = frozenset()
    staged: frozenset[str] = frozenset()
    merge_conflict: frozenset[str] = frozenset()
    untracked: frozenset[str] = frozenset()
    index_size: int = 0
    any_differences: bool = False

    @field_validator(
        "added", "removed", "modified", "missing", "staged", "merge_conflict", "untracked",
        mode="before",
    )
    @classmethod
    def ensure_frozenset(cls, v):
        """Accept any iterable of paths (None means empty)."""
        if v is None:
            return frozenset()
        return frozenset(v)


class ClassifiedEntry(BaseModel):
    """A path together with its category and bucket."""

    model_config = ConfigDict(frozen=True)

    path: str
    category: Category
    staged: bool


class ClassifiedStatus(BaseModel):
    """Disjoint, path-ordered buckets produced by the classifier."""

    model_config = ConfigDict(frozen=True)

    merge_conflicts: list[str] = []
    staged: dict[str, Category] = {}
    unstaged: dict[str, Category] = {}

    def entries(self) -> Iterator[ClassifiedEntry]:
        """Yield every classified entry, staged bucket first."""
        for path, category in self.staged.items():
            yield ClassifiedEntry(path=path, category=category, staged=True)
        for path, category in self.unstaged.items():
            yield ClassifiedEntry(path=path, category=category, staged=False)
