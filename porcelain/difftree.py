"""Structural tree-to-tree diff surface.

``diff-tree`` is declared but not implemented: requests are recorded as-is
and running one always fails. None of the accepted options has an effect.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class CommandNotImplementedError(NotImplementedError):
    """Raised by commands that exist only as a surface."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"{command} is not implemented")


class DiffTreeRequest(BaseModel):
    """An unsupported diff-tree invocation.

    Attributes:
        kind: Tag marking the request as unsupported.
        tree_ish: Positional tree/commit arguments, as given.
        options: Raw option strings, as given (never interpreted).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["unsupported"] = "unsupported"
    tree_ish: tuple[str, ...] = ()
    options: tuple[str, ...] = ()

    @classmethod
    def from_args(cls, args: list[str]) -> "DiffTreeRequest":
        """Split command line arguments into options and tree-ish values."""
        options = tuple(arg for arg in args if arg.startswith("-"))
        tree_ish = tuple(arg for arg in args if not arg.startswith("-"))
        return cls(tree_ish=tree_ish, options=options)


def run_diff_tree(request: DiffTreeRequest) -> list[str]:
    """Run a diff-tree request.

    Raises:
        CommandNotImplementedError: Always.
    """
    raise CommandNotImplementedError("diff-tree")
