"""
autolinker: find links in text and split it into literal and link segments.

Given a string, autolinker asks a pluggable detector where the links are
and cuts the string into an ordered, gap-free sequence of literal text and
link segments. Joining the segments back (matched text for links) always
gives the original string.

Quick Start:
    >>> from autolinker import Linkifier
    >>> linkifier = Linkifier()
    >>> segments = linkifier.linkify("Visit https://example.com for more info")
    >>> [type(s).__name__ for s in segments]
    ['Literal', 'LinkSegment', 'Literal']

    >>> # Custom link text
    >>> linkifier.linkify("Visit https://example.com", label_policy="Click here")[1].display_text
    'Click here'

Custom Detectors:
    >>> from autolinker import Linkifier, LinkifyConfig
    >>>
    >>> class MyDetector:
    ...     def pre_test(self, source): ...
    ...     def scan(self, source): ...
    >>>
    >>> linkifier = Linkifier(LinkifyConfig(detector=MyDetector()))

Installation:
    pip install autolinker
"""

from autolinker.adapter import DetectorAdapter
from autolinker.config import LinkifyConfig
from autolinker.detectors import (
    BUILTIN_DETECTORS,
    DetectionCapability,
    LinkifyItDetector,
    RegexDetector,
    get_detector,
    register_detector,
)
from autolinker.errors import (
    AutolinkerError,
    ContractViolation,
    DetectionFailure,
    DetectorError,
    UrlNormalizationError,
)
from autolinker.labels import (
    DerivedLabel,
    FixedLabel,
    LabelPolicy,
    as_label_policy,
    resolve_label,
)
from autolinker.linkifier import Linkifier, linkify
from autolinker.navigation import UrlOpener, handle_link, normalize_url
from autolinker.segmenter import check_spans, segment
from autolinker.segments import LinkSegment, Literal, Segment, links, reconstruct
from autolinker.spans import MatchSpan
from autolinker.tree import Element, LinkRenderer, linkify_children, linkify_tree

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Linkifier",
    "LinkifyConfig",
    "linkify",
    "segment",
    "check_spans",
    # Values
    "MatchSpan",
    "Literal",
    "LinkSegment",
    "Segment",
    "links",
    "reconstruct",
    # Labels
    "DerivedLabel",
    "FixedLabel",
    "LabelPolicy",
    "as_label_policy",
    "resolve_label",
    # Detection
    "BUILTIN_DETECTORS",
    "DetectionCapability",
    "DetectorAdapter",
    "LinkifyItDetector",
    "RegexDetector",
    "get_detector",
    "register_detector",
    # View trees
    "Element",
    "LinkRenderer",
    "linkify_children",
    "linkify_tree",
    # Navigation
    "UrlOpener",
    "handle_link",
    "normalize_url",
    # Errors
    "AutolinkerError",
    "ContractViolation",
    "DetectionFailure",
    "DetectorError",
    "UrlNormalizationError",
]
