"""CLI entry point for gitscm.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from gitscm.cli.config import config_app, init_config
from gitscm.cli.main import main_command
from gitscm.cli.status import original_command, status_command

# Main application
app = typer.Typer(
    name="gitscm",
    help="gitscm: git status grouped into merge, staged and unstaged changes",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("init")(init_config)
app.command("status")(status_command)
app.command("original")(original_command)

# Global flags (--verbose, --version)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "init_config",
    "main_command",
    "status_command",
    "original_command",
]
