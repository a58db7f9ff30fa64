"""Logging configuration for the command-line tool."""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> None:
    """
    Configure the root logger with a single stderr handler.

    stdout is left to command output so it stays scriptable.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug("Logging configured (level=%s)", logging.getLevelName(level))
