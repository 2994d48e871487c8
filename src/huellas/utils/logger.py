"""Minimal logging utilities for Huellas.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from huellas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Classified %d lines", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "huellas." prefix. The library
    never installs handlers; applications configure logging themselves.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("walker")
        >>> logger.name
        'huellas.walker'
    """
    if not (name == "huellas" or name.startswith("huellas.")):
        name = f"huellas.{name}"
    return logging.getLogger(name)
