"""Detection capabilities for autolinker.

A detector finds URL-like substrings in text. The engine only depends on
the two-operation contract below, so any detector can be swapped in:

- pre_test: cheap "could this string contain a link?" check. May return
  True for text without links, must never return False for text with one.
- scan: every match, as MatchSpans ordered by start and non-overlapping.

Built-in detectors:
- linkify: linkify-it based detector for schemes, fuzzy domains and emails
  (the default)
- regex: small regex detector for http(s):// and www. links

Usage:
    >>> from autolinker.detectors import get_detector
    >>> detector = get_detector("regex")
    >>> detector.pre_test("see www.example.com")
    True

Thread Safety:
Detectors are shared by reference across calls and threads. Implementations
must be safe for concurrent read-only use.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from autolinker.errors import DetectorError

if TYPE_CHECKING:
    from autolinker.spans import MatchSpan

__all__ = [
    "BUILTIN_DETECTORS",
    "DEFAULT_DETECTOR",
    "DetectionCapability",
    "get_detector",
    "register_detector",
]


@runtime_checkable
class DetectionCapability(Protocol):
    """Protocol for URL detectors.

    Thread Safety:
        Implementations must be stateless per call. The same instance is
        used concurrently from any number of threads.

    """

    def pre_test(self, source: str) -> bool:
        """Return False only if scan(source) is guaranteed to be empty."""
        ...

    def scan(self, source: str) -> Sequence[MatchSpan]:
        """Return all matches ordered by start, non-overlapping, in bounds."""
        ...


# Registry of built-in detectors
BUILTIN_DETECTORS: dict[str, Callable[..., DetectionCapability]] = {}

DEFAULT_DETECTOR = "linkify"


def register_detector(
    name: str,
) -> Callable[[type[DetectionCapability]], type[DetectionCapability]]:
    """Decorator to register a detector class under a name.

    Usage:
        @register_detector("regex")
        class RegexDetector:
                ...

    """

    def decorator(cls: type[DetectionCapability]) -> type[DetectionCapability]:
        BUILTIN_DETECTORS[name] = cls
        return cls

    return decorator


def get_detector(name: str = DEFAULT_DETECTOR, **options: Any) -> DetectionCapability:
    """Build a detector instance by name.

    Args:
        name: Detector name (e.g., "linkify", "regex")
        **options: Keyword arguments for the detector's constructor

    Returns:
        A fresh detector instance

    Raises:
        DetectorError: If the name is not registered or construction fails

    """
    if name not in BUILTIN_DETECTORS:
        available = ", ".join(sorted(BUILTIN_DETECTORS.keys()))
        raise DetectorError(f"Unknown detector: {name!r}. Available: {available}")
    try:
        return BUILTIN_DETECTORS[name](**options)
    except TypeError as e:
        raise DetectorError(f"Detector {name!r} rejected options {sorted(options)}: {e}") from e


# Import built-in detectors to register them
from autolinker.detectors.linkify import LinkifyItDetector  # noqa: E402
from autolinker.detectors.regex import RegexDetector  # noqa: E402

__all__ += [
    "LinkifyItDetector",
    "RegexDetector",
]
