"""CLI commands for the ignore rules applied to untracked files."""

from typing import List

import typer

from porcelain.git import GitError, get_repo_root
from porcelain.ignore import load_ignore_rules
from porcelain.user_config import (
    add_ignore_pattern,
    get_ignore_patterns,
    load_config,
    remove_ignore_pattern,
)

# Subcommand group for the untracked-file ignore rules
ignore_app = typer.Typer(
    name="ignore",
    help="Manage which untracked files the status report hides",
    add_completion=False,
)


def _ignore_file_name(config: dict) -> str:
    return config.get("ignore_file") or ".gitignore"


@ignore_app.command("list")
def ignore_list() -> None:
    """Show the ignore file and the extra patterns hiding untracked files."""
    try:
        repo_root = get_repo_root()
        config = load_config(repo_root)
        ignore_file = _ignore_file_name(config)
        patterns = get_ignore_patterns(repo_root)

        source = "" if (repo_root / ignore_file).is_file() else " (not found, no rules)"
        typer.echo(f"Ignore file: {ignore_file}{source}")
        typer.echo()
        typer.echo("Extra patterns (.porcelain/config.yaml):")
        if patterns:
            for pattern in patterns:
                typer.echo(f"  - {pattern}")
            typer.echo()
            typer.echo(f"Total: {len(patterns)} pattern(s)")
        else:
            typer.echo("  (none)")
        if not config.get("show_untracked", True):
            typer.echo()
            typer.echo("Untracked files are hidden entirely (show_untracked: false).")

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@ignore_app.command("check")
def ignore_check(
    paths: List[str] = typer.Argument(
        ...,
        help="Paths relative to the repository root",
    ),
) -> None:
    """Tell whether each path would be hidden from the Untracked files section."""
    try:
        repo_root = get_repo_root()
        config = load_config(repo_root)
        rules = load_ignore_rules(
            repo_root,
            ignore_file=_ignore_file_name(config),
            extra_patterns=config.get("ignore") or [],
        )

        for path in paths:
            full_path = repo_root / path
            if rules.ignore_dir(repo_root, full_path):
                typer.echo(f"hidden (ignored directory): {path}")
            elif rules.ignore_file(repo_root, full_path):
                typer.echo(f"hidden: {path}")
            else:
                typer.echo(f"shown: {path}")

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@ignore_app.command("add")
def ignore_add(
    pattern: str = typer.Argument(
        ...,
        help="Gitignore-style pattern to hide (e.g., *.log, build/)",
    ),
) -> None:
    """Hide untracked files matching a pattern from the status report."""
    if not pattern.strip() or pattern.lstrip().startswith("#"):
        typer.echo(f"Error: '{pattern}' is blank or a comment and matches nothing", err=True)
        raise typer.Exit(1)

    try:
        repo_root = get_repo_root()

        patterns = get_ignore_patterns(repo_root)
        if pattern in patterns:
            typer.echo(f"Untracked files matching '{pattern}' are already hidden")
            raise typer.Exit(0)

        add_ignore_pattern(repo_root, pattern)
        typer.echo(f"Untracked files matching '{pattern}' are now hidden from status")

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@ignore_app.command("remove")
def ignore_remove(
    pattern: str = typer.Argument(
        ...,
        help="Pattern to stop hiding",
    ),
) -> None:
    """Stop hiding untracked files matching a configured pattern."""
    try:
        repo_root = get_repo_root()
        ignore_file = _ignore_file_name(load_config(repo_root))

        if remove_ignore_pattern(repo_root, pattern):
            typer.echo(
                f"Untracked files matching '{pattern}' are shown again "
                f"unless {ignore_file} hides them"
            )
        else:
            typer.echo(f"No configured pattern '{pattern}'", err=True)
            raise typer.Exit(1)

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
