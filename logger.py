"""
Logging setup shared by the command line and the simulations.

Modules log through logging.getLogger(__name__); get_logger() installs
a single console handler on the root logger the first time it is called.
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "MATCHING_LOG_LEVEL"

_handler: Optional[logging.Handler] = None


def get_logger(
    name: str = "matching",
    level: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """
    Get a logger, configuring the console handler on the first call.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to $MATCHING_LOG_LEVEL or WARNING
        stream: Output stream of the console handler (default: stderr)

    Returns:
        logging.Logger instance
    """
    global _handler

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        _handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(_handler)
    root.setLevel(level)

    return logging.getLogger(name)


def reset_logger():
    """Remove the console handler (useful for testing)."""
    global _handler
    if _handler is not None:
        logging.getLogger().removeHandler(_handler)
    _handler = None
