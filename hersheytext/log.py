"""Logging setup for hersheytext."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hersheytext"


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: Level name or number.
        console: Console to log to, stderr when omitted.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
