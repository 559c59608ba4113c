"""Link dispatch: normalize a pressed link's URL and hand it to an opener.

Opening URLs is platform work and lives outside this library. Callers plug
in a ``UrlOpener``; ``handle_link`` normalizes the URL, checks the opener
supports it and opens it, reporting the outcome as a bool.

Example:
    >>> normalize_url("HTTPS://example.com/docs")
    'https://example.com/docs'

"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import mdurl

from autolinker.errors import UrlNormalizationError
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class UrlOpener(Protocol):
    """Platform hook that opens URLs.

    Thread Safety:
        handle_link may call an opener from any thread that dispatches a
        press.

    """

    def can_open(self, url: str) -> bool:
        """Whether the platform has something that can open url."""
        ...

    def open(self, url: str) -> None:
        """Open url. Raises on failure."""
        ...


def normalize_url(url: str) -> str:
    """Lower-case the URL's scheme and re-serialize it.

    Raises:
        UrlNormalizationError: If url has neither a scheme nor a path

    """
    parsed = mdurl.parse(url)
    if not parsed.protocol and not parsed.pathname:
        raise UrlNormalizationError(url)
    if parsed.protocol:
        parsed = parsed._replace(protocol=parsed.protocol.lower())
    return mdurl.format(parsed)


def handle_link(url: str, opener: UrlOpener) -> bool:
    """Open url with opener, logging instead of raising on failure.

    Returns:
        True if the opener accepted and opened the URL

    """
    try:
        normalized = normalize_url(url)
    except UrlNormalizationError:
        logger.warning("Not opening link: %s", url, exc_info=True)
        return False

    try:
        supported = opener.can_open(normalized)
    except Exception:
        logger.error("Error checking URL support: %s", normalized, exc_info=True)
        return False
    if not supported:
        logger.warning("URL is not supported: %s", normalized)
        return False

    try:
        opener.open(normalized)
    except Exception:
        logger.error("Error opening URL: %s", normalized, exc_info=True)
        return False
    return True


__all__ = [
    "UrlOpener",
    "handle_link",
    "normalize_url",
]
