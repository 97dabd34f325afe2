"""Minimal logging utilities for xmlbuilder.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from xmlbuilder.utils.logger import get_logger
    >>> logger = get_logger("builder")
    >>> logger.name
    'xmlbuilder.builder'
    >>> logger.debug("attr(%r) ignored: no pending element", "id")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "xmlbuilder." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("xmlbuilder.sinks").name
        'xmlbuilder.sinks'
    """
    if not (name == "xmlbuilder" or name.startswith("xmlbuilder.")):
        name = f"xmlbuilder.{name}"
    return logging.getLogger(name)
