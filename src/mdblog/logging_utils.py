"""Logging setup for the command-line entrypoint"""

import logging
import sys


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger("mdblog")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers = []
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
