"""Logging setup for command-line entry points."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send ``catalog.*`` log records to stderr at *level*.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger("catalog")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
