"""Logging configuration for the command-line tool.

Log records go to stderr; stdout carries the head markup.
"""

import logging
import sys
from typing import TextIO

from ..presenters.protocol import VerbosityLevel

LOG_LEVELS = {
    VerbosityLevel.QUIET: logging.ERROR,
    VerbosityLevel.NORMAL: logging.WARNING,
    VerbosityLevel.VERBOSE: logging.INFO,
    VerbosityLevel.DEBUG: logging.DEBUG,
}

DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def setup_logger(
    name: str = "seo_head",
    level: VerbosityLevel = VerbosityLevel.NORMAL,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the package logger for a verbosity level.

    Calling it again replaces the handler installed by the previous call.

    Args:
        name: Logger name
        level: Verbosity level
        stream: Log destination (stderr when omitted)

    Returns:
        Configured logger
    """
    log_level = LOG_LEVELS[level]
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(log_level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    if level == VerbosityLevel.DEBUG:
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)

    return logger
