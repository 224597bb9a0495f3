"""Status report pipeline.

Ties the git collaborators to the pure status engine:
raw snapshot -> untracked resolution -> classification -> rendering.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import structlog

from porcelain.git.branch import get_branch
from porcelain.git.status import get_raw_status
from porcelain.ignore import IgnoreRules, load_ignore_rules
from porcelain.status.classifier import classify
from porcelain.status.models import ClassifiedStatus, RawStatus
from porcelain.status.renderer import render_status
from porcelain.status.untracked import resolve_untracked
from porcelain.user_config import load_config

logger = structlog.get_logger()


@dataclass
class StatusReport:
    """Everything computed for one status invocation."""

    branch: str
    raw: RawStatus
    classified: ClassifiedStatus
    untracked: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)


def compose_report(
    branch: str,
    raw: RawStatus,
    root: Path,
    rules: IgnoreRules,
    show_untracked: bool = True,
) -> StatusReport:
    """Build a report from an already collected snapshot.

    Classification runs before any line is rendered, so a classification
    error leaves nothing half-written.

    Args:
        branch: Current branch name.
        raw: The raw status snapshot.
        root: The repository working directory.
        rules: Ignore rules for untracked candidates.
        show_untracked: Whether untracked files take part in the report.

    Returns:
        The status report.

    Raises:
        DuplicateClassificationError: If the snapshot breaks the
            one-category-per-path contract.
    """
    untracked = resolve_untracked(raw.untracked, root, rules) if show_untracked else []
    classified = classify(raw)
    for entry in classified.entries():
        logger.debug(
            "status_entry",
            path=entry.path,
            category=entry.category.label,
            staged=entry.staged,
        )
    lines = render_status(
        branch_name=branch,
        index_size=raw.index_size,
        any_differences=raw.any_differences,
        merge_conflicts=classified.merge_conflicts,
        staged=classified.staged,
        unstaged=classified.unstaged,
        untracked=untracked,
    )
    return StatusReport(
        branch=branch,
        raw=raw,
        classified=classified,
        untracked=untracked,
        lines=lines,
    )


def build_status_report(
    repo_root: Path,
    config: Optional[dict] = None,
    show_untracked: Optional[bool] = None,
) -> StatusReport:
    """Collect the repository state and build the status report.

    Args:
        repo_root: The root directory of the git repository.
        config: Repository configuration (loaded from .porcelain/config.yaml
            when omitted).
        show_untracked: Override for the ``show_untracked`` config key.

    Returns:
        The status report.

    Raises:
        GitError: If git fails.
        DuplicateClassificationError: If the snapshot is inconsistent.
    """
    if config is None:
        config = load_config(repo_root)
    if show_untracked is None:
        show_untracked = bool(config.get("show_untracked", True))

    raw = get_raw_status(repo_root)
    branch = get_branch(repo_root)
    rules = load_ignore_rules(
        repo_root,
        ignore_file=config.get("ignore_file") or ".gitignore",
        extra_patterns=config.get("ignore") or [],
    )
    logger.debug("status_report_started", repo_root=str(repo_root), branch=branch)
    return compose_report(branch, raw, repo_root, rules, show_untracked=show_untracked)
