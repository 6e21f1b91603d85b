"""
Logging setup for MotoMinder.

The library only ever logs through loggers under the ``motominder``
namespace. Importing it attaches a NullHandler and nothing else; the
CLI calls configure_logging() to route those records to stderr so
that JSON on stdout stays parseable.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "motominder"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class _MotominderHandler(logging.StreamHandler):
    """Marker type so repeated configuration replaces our own handler only."""


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """Send motominder log records to a stream.

    Calling it again swaps the previous handler instead of stacking a
    second one. Handlers installed by the host application are kept.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Destination, stderr by default.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, _MotominderHandler):
            logger.removeHandler(handler)

    handler = _MotominderHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
