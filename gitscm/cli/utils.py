"""Shared utility functions for CLI commands."""

import logging

import typer

from gitscm.logging import configure_logging
from gitscm.user_config import ScmConfig


def is_verbose(ctx: typer.Context) -> bool:
    """Return whether --verbose was passed to the top-level command."""
    return bool(ctx.obj and ctx.obj.get("verbose"))


def setup_logging(ctx: typer.Context, config: ScmConfig) -> None:
    """Configure logging from --verbose, falling back to the repo config level."""
    level = logging.DEBUG if is_verbose(ctx) else config.log_level
    configure_logging(level=level, force=True)
