"""Status engine exception classes.

Contains:
- StatusError: Base exception for status classification errors
- DuplicateClassificationError: Raised when a path lands in two categories
"""

from porcelain.status.models import Category


class StatusError(Exception):
    """Base exception for status classification errors."""

    pass


class DuplicateClassificationError(StatusError):
    """Raised when a path classifies into more than one category of a bucket.

    This signals that the raw status snapshot broke its contract: after the
    staged set is subtracted a path must belong to at most one change set.
    """

    def __init__(self, path: str, first: Category, second: Category, staged: bool):
        self.path = path
        self.first = first
        self.second = second
        self.staged = staged
        bucket = "staged" if staged else "unstaged"
        super().__init__(
            f"Path {path!r} classified as both {first.label!r} and "
            f"{second.label!r} in the {bucket} bucket"
        )
