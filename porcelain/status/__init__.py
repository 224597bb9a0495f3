"""Status classification and rendering engine.

Re-exports the pure parts of the status pipeline. The report builder, which
talks to git, lives in porcelain.status.report.
"""

from porcelain.status.classifier import PRIORITY_ORDER, classify
from porcelain.status.exceptions import DuplicateClassificationError, StatusError
from porcelain.status.models import (
    CATEGORY_LABELS,
    Category,
    ClassifiedEntry,
    ClassifiedStatus,
    RawStatus,
)
from porcelain.status.renderer import format_entry, render_status
from porcelain.status.untracked import resolve_untracked

__all__ = [
    "PRIORITY_ORDER",
    "classify",
    "DuplicateClassificationError",
    "StatusError",
    "CATEGORY_LABELS",
    "Category",
    "ClassifiedEntry",
    "ClassifiedStatus",
    "RawStatus",
    "format_entry",
    "render_status",
    "resolve_untracked",
]
