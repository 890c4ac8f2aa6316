"""Utility modules for lineblocks.

Provides:
- logger: get_logger for logging
- text: escape_code for code block content
"""

from lineblocks.utils.logger import get_logger
from lineblocks.utils.text import escape_code

__all__ = [
    "escape_code",
    "get_logger",
]
