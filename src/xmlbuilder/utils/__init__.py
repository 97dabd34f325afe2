"""Utility modules for xmlbuilder.

Provides:
- logger: get_logger for logging
"""

from xmlbuilder.utils.logger import get_logger

__all__ = [
    "get_logger",
]
