"""Top-level CLI callback: global flags shared by every command."""

import typer

from gitscm import __version__


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the gitscm version and exit",
    ),
) -> None:
    """Classify git status into merge, staged and unstaged changes."""
    if version:
        typer.echo(f"gitscm {__version__}")
        raise typer.Exit(0)

    ctx.obj = {"verbose": verbose}

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
