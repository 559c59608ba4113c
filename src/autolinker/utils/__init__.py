"""Utility modules for autolinker.

Provides:
- logger: get_logger for namespaced logging
"""

from autolinker.utils.logger import get_logger

__all__ = [
    "get_logger",
]
