"""Logging configuration for pockettrack.

Log records go through rich's RichHandler so they share the console styling
of the commands. User-facing output is printed on a Console, not logged.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pockettrack"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the pockettrack logger.

    Args:
        verbose: Log DEBUG and above instead of WARNING and above.

    Returns:
        Configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger inside the pockettrack hierarchy.
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
