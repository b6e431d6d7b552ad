"""CLI commands for repository configuration management."""

import typer

from gitscm.git import GitError, get_repo_root
from gitscm.user_config import (
    ConfigError,
    ScmConfig,
    get_config_file,
    load_config,
    save_config,
    set_config_value,
)

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage repository configuration in .gitscm/config.yaml",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration of the current repository."""
    try:
        repo_root = get_repo_root()
        config = load_config(repo_root)
        config_file = get_config_file(repo_root)

        source = str(config_file) if config_file.exists() else "defaults"
        typer.echo(f"Current gitscm configuration ({source}):")
        typer.echo()
        for key, value in config.model_dump().items():
            typer.echo(f"  {key}: {value}")
        typer.echo()

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        ...,
        help="Config key (untracked_files, show_ignored, original_scheme, log_level)",
    ),
    value: str = typer.Argument(
        ...,
        help="New value",
    ),
) -> None:
    """Set a configuration value in .gitscm/config.yaml."""
    try:
        repo_root = get_repo_root()
        updated = set_config_value(repo_root, key, value)
        typer.echo(f"✓ {key} = {getattr(updated, key)}")

    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def init_config(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a default .gitscm/config.yaml for the current repository."""
    try:
        repo_root = get_repo_root()
        config_file = get_config_file(repo_root)

        if config_file.exists() and not force:
            typer.echo(f"Config already exists at {config_file}. Use --force to overwrite.")
            raise typer.Exit(0)

        save_config(repo_root, ScmConfig())
        typer.echo(f"✓ Wrote default configuration to {config_file}")

    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
