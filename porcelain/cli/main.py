"""Top-level CLI callback for porcelain."""

import typer

from porcelain import __version__
from porcelain.cli.status import status_command
from porcelain.log import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"porcelain {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug information to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Show the working tree status of a git repository."""
    configure_logging(verbose)

    # Bare `porcelain` behaves like `porcelain status`
    if ctx.invoked_subcommand is None:
        ctx.invoke(status_command, untracked=None)
