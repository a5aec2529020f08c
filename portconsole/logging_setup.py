"""Logging configuration."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "PORTCONSOLE_LOG_LEVEL"
LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Route log records through rich on stderr."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def setup_logging_from_env(verbose: bool = False) -> None:
    """Configure logging from PORTCONSOLE_LOG_LEVEL, or DEBUG when verbose."""
    if verbose:
        setup_logging(logging.DEBUG)
        return
    setup_logging(os.environ.get(LOG_LEVEL_ENV, "WARNING"))
