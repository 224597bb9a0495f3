"""CLI command for the (unimplemented) diff-tree surface."""

import typer

from porcelain.difftree import CommandNotImplementedError, DiffTreeRequest, run_diff_tree


def diff_tree_command(ctx: typer.Context) -> None:
    """Compare the content and mode of blobs found via two tree objects (not implemented)."""
    request = DiffTreeRequest.from_args(list(ctx.args))
    try:
        for line in run_diff_tree(request):
            typer.echo(line)
    except CommandNotImplementedError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
