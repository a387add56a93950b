"""Minimal logging utilities for texdsl.

Provides a get_logger function that wraps the standard library logging.
The package logger carries a NullHandler, so applications that never
configure logging see no output from texdsl.

Example:
    >>> from texdsl.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging

logging.getLogger("texdsl").addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "texdsl." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'texdsl.mymodule'
    """
    if not (name == "texdsl" or name.startswith("texdsl.")):
        name = f"texdsl.{name}"
    return logging.getLogger(name)
