"""CLI commands for showing resource groups and original resources."""

import json

import typer

from gitscm.cli.utils import setup_logging
from gitscm.formatters import groups_to_dict, render_groups
from gitscm.git import GitError, Model, get_repo_root
from gitscm.provider import DEFAULT_ORIGINAL_SCHEME, GitSCMProvider, resolve_original_resource
from gitscm.uri import Uri
from gitscm.user_config import load_config


def status_command(
    ctx: typer.Context,
    show_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the groups as JSON",
    ),
) -> None:
    """Show merge, staged and unstaged changes of the current repository."""
    try:
        repo_root = get_repo_root()
        config = load_config(repo_root)
        setup_logging(ctx, config)

        model = Model(repo_root, config)
        try:
            provider = GitSCMProvider(model, original_scheme=config.original_scheme)
            groups = provider.groups
            provider.dispose()
        finally:
            model.dispose()

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if show_json:
        typer.echo(json.dumps(groups_to_dict(groups), indent=2))
    else:
        typer.echo(render_groups(groups, repo_root))


def original_command(
    uri: str = typer.Argument(
        ...,
        help="Working copy URI (e.g. file:///repo/a.txt)",
    ),
) -> None:
    """Show the URI of the original (staged) version of a file."""
    try:
        location = Uri.parse(uri)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # Outside a repository the default scheme applies
    try:
        scheme = load_config(get_repo_root()).original_scheme
    except GitError:
        scheme = DEFAULT_ORIGINAL_SCHEME

    original = resolve_original_resource(location, scheme)
    if original is None:
        typer.echo(f"No original resource for {uri}", err=True)
        raise typer.Exit(1)

    typer.echo(str(original))
