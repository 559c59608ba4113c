"""Exception classes for autolinker.

Only a few of these ever leave the library: detection problems are
absorbed by the adapter, and URL problems by ``handle_link``.
"""

from __future__ import annotations


class AutolinkerError(Exception):
    """Base exception for all autolinker errors.

    Subclass this for specific error categories.
    """

    pass


class DetectorError(AutolinkerError):
    """Error looking up or constructing a detector."""

    pass


class DetectionFailure(AutolinkerError):
    """A detection capability raised or returned malformed results.

    Created by the adapter for its diagnostic log entry and never
    propagated to callers.
    """

    def __init__(self, operation: str, detector: object, cause: BaseException | None = None) -> None:
        """Initialize detection failure.

        Args:
            operation: Capability operation that failed ("pre_test" or "scan")
            detector: The capability instance
            cause: Underlying exception, if any
        """
        self.operation = operation
        self.detector = detector
        self.cause = cause

        reason = f": {cause!r}" if cause is not None else ""
        super().__init__(f"{type(detector).__name__}.{operation} failed{reason}")


class ContractViolation(AutolinkerError):
    """Match spans break the ordering, overlap, or bounds contract.

    Only raised by the debug check in ``autolinker.segmenter.check_spans``.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize contract violation.

        Args:
            message: Description of the violation
            index: Position of the offending span in the span sequence
        """
        self.index = index

        location = f"span {index}: " if index is not None else ""
        super().__init__(f"{location}{message}")


class UrlNormalizationError(AutolinkerError):
    """A URL could not be parsed into something openable."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Failed to parse URL: {url}")
