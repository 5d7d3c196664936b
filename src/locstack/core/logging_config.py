"""Logging setup shared by the standard library loggers and loguru."""
import logging
import sys

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """
    Route stdlib logging through rich and point loguru at stderr, both at ``level``.

    Safe to call repeatedly; the previous handlers are replaced.
    """
    level = level.upper()
    numeric = getattr(logging, level, logging.WARNING)

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    logger.remove()
    logger.add(
        sys.stderr,
        level=logging.getLevelName(numeric),
        format="<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> "
               "{extra[repository]} - {message}",
    )
    logger.configure(extra={"repository": "-"})
