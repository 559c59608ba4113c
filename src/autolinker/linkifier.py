"""The linkify pipeline: pre-test, scan, segment.

    >>> linkifier = Linkifier()
    >>> [type(s).__name__ for s in linkifier.linkify("Visit https://example.com now")]
    ['Literal', 'LinkSegment', 'Literal']

Text the detector rejects in its pre-test is never scanned. A scan that
finds nothing, or fails, yields the whole text as one literal.

Thread Safety:
A Linkifier holds only its config and adapter. linkify() keeps all
per-call state in locals and can be called from any number of threads.

"""

from __future__ import annotations

from collections.abc import Callable

from autolinker.adapter import DetectorAdapter
from autolinker.config import LinkifyConfig
from autolinker.detectors import DetectionCapability
from autolinker.labels import LabelPolicy, as_label_policy
from autolinker.segmenter import check_spans, segment
from autolinker.segments import Literal, Segment
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)

# Per-call marker for "use the configured label policy"
_CONFIGURED = object()


class Linkifier:
    """Turns text into literal and link segments.

    Args:
        config: Configuration; a default LinkifyConfig if omitted

    """

    __slots__ = ("_adapter", "_config")

    def __init__(self, config: LinkifyConfig | None = None) -> None:
        self._config = config if config is not None else LinkifyConfig()
        self._adapter = DetectorAdapter(self._config.detector)

    def __repr__(self) -> str:
        return f"Linkifier(detector={self.detector!r})"

    @property
    def config(self) -> LinkifyConfig:
        return self._config

    @property
    def detector(self) -> DetectionCapability:
        return self._adapter.capability

    def with_detector(self, detector: DetectionCapability | str) -> Linkifier:
        """Return a Linkifier using another detector and the same settings."""
        return Linkifier(
            LinkifyConfig(
                detector=detector,
                label_policy=self._config.label_policy,
                strict_contracts=self._config.strict_contracts,
            )
        )

    def pre_test(self, text: str) -> bool:
        """Cheap check whether text might contain a link."""
        return self._adapter.pre_test(text)

    def has_links(self, text: str) -> bool:
        """Whether text contains at least one detected link."""
        return bool(text) and self._adapter.pre_test(text) and bool(self._adapter.scan(text))

    def linkify(
        self,
        text: str,
        *,
        label_policy: LabelPolicy | str | Callable[[str], str] | None | object = _CONFIGURED,
    ) -> tuple[Segment, ...]:
        """Split text into literal and link segments.

        A label policy that raises leaves the text unlinked: the failure is
        logged and the whole text comes back as one literal.

        Args:
            text: Text to scan
            label_policy: Per-call display text rule. Omit it to use the
                configured policy; pass None to show matched text.

        Returns:
            Segments covering text exactly; () for empty text

        """
        if not text:
            return ()
        if not self._adapter.pre_test(text):
            return (Literal(text),)

        spans = self._adapter.scan(text)
        if not spans:
            return (Literal(text),)

        if label_policy is _CONFIGURED:
            policy = self._config.label_policy
        else:
            policy = as_label_policy(label_policy)
        if self._config.strict_contracts:
            check_spans(text, spans)

        try:
            return segment(text, spans, policy)
        except Exception:
            logger.warning(
                "Link label failed, treating text as plain: %r", policy, exc_info=True
            )
            return (Literal(text),)


def linkify(
    text: str,
    label_policy: LabelPolicy | str | Callable[[str], str] | None = None,
    *,
    detector: DetectionCapability | str | None = None,
) -> tuple[Segment, ...]:
    """Linkify text with a throwaway Linkifier.

    Builds its detector on every call. Keep a Linkifier around when
    linkifying more than a handful of strings.

    """
    return Linkifier(LinkifyConfig(detector=detector, label_policy=label_policy)).linkify(text)


__all__ = [
    "Linkifier",
    "linkify",
]
