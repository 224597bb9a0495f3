"""CLI command for the long-format status report."""

from typing import Optional

import typer

from porcelain.git import GitError, get_repo_root
from porcelain.status import StatusError
from porcelain.status.report import build_status_report


def status_command(
    untracked: Optional[bool] = typer.Option(
        None,
        "--untracked/--no-untracked",
        help="Show or hide untracked files (overrides show_untracked in .porcelain/config.yaml)",
    ),
) -> None:
    """Show the working tree status."""
    try:
        repo_root = get_repo_root()
        report = build_status_report(repo_root, show_untracked=untracked)
    except (GitError, StatusError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for line in report.lines:
        typer.echo(line)
