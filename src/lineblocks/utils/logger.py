"""Minimal logging utilities for lineblocks.

Example:
    >>> from lineblocks.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``lineblocks``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("scanner").name
        'lineblocks.scanner'
    """
    if not (name == "lineblocks" or name.startswith("lineblocks.")):
        name = f"lineblocks.{name}"
    return logging.getLogger(name)
