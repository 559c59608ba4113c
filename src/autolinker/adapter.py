"""Failure containment around a detection capability.

The adapter is the only place where detector exceptions are caught. A
detector that raises or returns garbage degrades to "no links found", so
plain text always still displays.

Example:
    >>> from autolinker.detectors import get_detector
    >>> adapter = DetectorAdapter(get_detector("regex"))
    >>> adapter.scan("no links here")
    ()

Thread Safety:
The adapter holds one reference to a capability and no other state. Swapping
the capability is a single attribute assignment; in-flight calls keep using
the capability they started with.

"""

from __future__ import annotations

from collections.abc import Sequence

from autolinker.detectors import DetectionCapability
from autolinker.errors import DetectionFailure
from autolinker.spans import MatchSpan
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)


class DetectorAdapter:
    """Wraps a DetectionCapability so that it can never raise.

    Attributes:
        capability: The wrapped detector. May be replaced at any time.

    """

    __slots__ = ("capability",)

    def __init__(self, capability: DetectionCapability) -> None:
        self.capability = capability

    def __repr__(self) -> str:
        return f"DetectorAdapter({self.capability!r})"

    def pre_test(self, source: str) -> bool:
        """Cheap check whether scanning source could find anything.

        A pre-test that raises counts as "maybe": the worst outcome is
        a wasted scan, never a missed link.
        """
        capability = self.capability
        try:
            return bool(capability.pre_test(source))
        except Exception as e:
            _log_failure(DetectionFailure("pre_test", capability, e))
            return True

    def scan(self, source: str) -> tuple[MatchSpan, ...]:
        """Return the capability's spans, or () if it fails."""
        capability = self.capability
        try:
            result = capability.scan(source)
        except Exception as e:
            _log_failure(DetectionFailure("scan", capability, e))
            return ()

        if not result:
            return ()
        if isinstance(result, str | bytes) or not isinstance(result, Sequence):
            _log_failure(DetectionFailure("scan", capability))
            return ()
        spans = tuple(result)
        if not all(isinstance(span, MatchSpan) for span in spans):
            _log_failure(DetectionFailure("scan", capability))
            return ()
        return spans


def _log_failure(failure: DetectionFailure) -> None:
    logger.warning(
        "Link detection failed, treating text as plain: %s",
        failure,
        exc_info=failure.cause,
    )
