"""CLI entry point for porcelain.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from porcelain.cli.difftree import diff_tree_command
from porcelain.cli.ignore import ignore_app
from porcelain.cli.main import main_command
from porcelain.cli.status import status_command

# Main application
app = typer.Typer(
    name="porcelain",
    help="porcelain: git-style working tree status",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(ignore_app, name="ignore")

# Add individual commands
app.command("status")(status_command)
app.command(
    "diff-tree",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(diff_tree_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "ignore_app",
    "diff_tree_command",
    "main_command",
    "status_command",
]
