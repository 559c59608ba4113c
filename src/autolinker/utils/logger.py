"""Namespaced loggers for autolinker.

Detection and link-dispatch failures are reported through loggers under the
"autolinker" namespace and never raised. Configure that logger to see them:

    >>> import logging
    >>> logging.getLogger("autolinker").setLevel(logging.WARNING)

The library installs no handlers of its own.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, forced under "autolinker.".

    Example:
        >>> get_logger("adapter").name
        'autolinker.adapter'
        >>> get_logger("autolinker.navigation").name
        'autolinker.navigation'
    """
    if not (name == "autolinker" or name.startswith("autolinker.")):
        name = f"autolinker.{name}"
    return logging.getLogger(name)
