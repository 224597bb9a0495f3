"""Ignore rules for untracked files.

Wraps gitignore-style pattern matching:
- IgnoreRules: A compiled set of patterns with file and directory checks
- load_ignore_rules: Build rules for a repository from its ignore file and config
"""

from pathlib import Path
from typing import Iterable

import pathspec
import structlog

logger = structlog.get_logger()


class IgnoreRules:
    """A set of gitignore-style rules rooted at a working directory.

    An empty rule set matches nothing.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns = [
            line.rstrip("\n") for line in patterns
            if line.strip() and not line.lstrip().startswith("#")
        ]
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"IgnoreRules({self.patterns!r})"

    @classmethod
    def from_file(cls, path: Path, extra_patterns: Iterable[str] = ()) -> "IgnoreRules":
        """Load rules from an ignore file.

        A missing file is not an error: it contributes no rules.

        Args:
            path: Path to the ignore file (e.g. ``.gitignore``).
            extra_patterns: Additional patterns appended after the file's own.

        Returns:
            The loaded rules.
        """
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            logger.debug("ignore_source_missing", path=str(path))
            lines = []
        return cls([*lines, *extra_patterns])

    @staticmethod
    def _relative(root: Path, path: Path) -> str | None:
        try:
            return Path(path).relative_to(root).as_posix()
        except ValueError:
            # Outside the working directory; nothing here applies to it.
            return None

    def ignore_file(self, root: Path, path: Path) -> bool:
        """Check whether a file is excluded by the rules.

        Args:
            root: The working directory the rules are relative to.
            path: Full path of the candidate.

        Returns:
            True if the file is ignored.
        """
        relative = self._relative(root, path)
        if not relative or not self.patterns:
            return False
        return self._spec.match_file(relative)

    def ignore_dir(self, root: Path, path: Path) -> bool:
        """Check whether a path lies in (or is) an ignored directory.

        Args:
            root: The working directory the rules are relative to.
            path: Full path of the candidate.

        Returns:
            True if the path or one of its parent directories is ignored.
        """
        relative = self._relative(root, path)
        if not relative or not self.patterns:
            return False

        parts = relative.split("/")
        directories = ["/".join(parts[:i]) for i in range(1, len(parts))]
        if Path(path).is_dir():
            directories.append(relative)
        return any(self._spec.match_file(f"{directory}/") for directory in directories)


def load_ignore_rules(repo_root: Path, ignore_file: str = ".gitignore",
                      extra_patterns: Iterable[str] = ()) -> IgnoreRules:
    """Load the ignore rules for a repository.

    Args:
        repo_root: The root directory of the git repository.
        ignore_file: Ignore file name, relative to the repository root.
        extra_patterns: Additional patterns from the repository config.

    Returns:
        The combined rules.
    """
    return IgnoreRules.from_file(repo_root / ignore_file, extra_patterns)
