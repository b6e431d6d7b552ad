"""Shared logging helpers for gitscm."""

import logging


def configure_logging(*, level: int | str = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger with a terse format for CLI output.

    Pass ``force=True`` to reconfigure an already configured root logger.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
