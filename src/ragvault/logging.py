"""Logging helpers shared by all ragvault modules.

Modules obtain a logger with:

    from ragvault.logging import get_logger
    logger = get_logger(__name__)

The library never installs handlers on its own. Applications that want
console output call configure_logging() once at startup.
"""

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO = sys.stderr,
) -> None:
    """Configure the root logger with a single stream handler.

    Safe to call more than once; a handler is only added if the root
    logger has none.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module. Does not configure anything."""
    return logging.getLogger(name)
