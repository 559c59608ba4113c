"""Segmenter: cut a string into literal and link segments.

Given a source string and the spans a detector found in it, ``segment``
produces an ordered tuple of segments that covers the source exactly:

    >>> from autolinker.spans import MatchSpan
    >>> segment(
    ...     "Visit https://example.com for more info",
    ...     [MatchSpan(6, 25, "https://example.com", "https://example.com")],
    ... )[1]
    LinkSegment(display_text='https://example.com', matched_text='https://example.com', url='https://example.com')

Spans must be ordered by start, non-overlapping, non-empty and within the
source. ``segment`` does not check this; ``check_spans`` does, for debug
builds and tests.

Complexity: O(n + k) for a source of length n with k spans.

Thread Safety:
Pure function over immutable inputs. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Sequence

from autolinker.errors import ContractViolation
from autolinker.labels import LabelPolicy, resolve_label
from autolinker.segments import LinkSegment, Literal, Segment
from autolinker.spans import MatchSpan


def segment(
    source: str,
    spans: Sequence[MatchSpan],
    label_policy: LabelPolicy | None = None,
    *,
    check_contract: bool = False,
) -> tuple[Segment, ...]:
    """Split source into literal and link segments.

    Args:
        source: Text the spans were detected in
        spans: Detected matches, ordered and non-overlapping
        label_policy: Display text rule for links (None = matched text)
        check_contract: Validate spans with check_spans first

    Returns:
        Segments in source order. An empty source gives ().

    Raises:
        ContractViolation: Only when check_contract is set and spans
            break the contract

    """
    if check_contract:
        check_spans(source, spans)
    if not spans:
        return (Literal(source),) if source else ()

    result: list[Segment] = []
    cursor = 0
    for span in spans:
        if span.start > cursor:
            result.append(Literal(source[cursor : span.start]))
        result.append(
            LinkSegment(
                display_text=resolve_label(label_policy, span.url, span.matched_text),
                matched_text=span.matched_text,
                url=span.url,
            )
        )
        cursor = span.end
    if cursor < len(source):
        result.append(Literal(source[cursor:]))
    return tuple(result)


def check_spans(source: str, spans: Sequence[MatchSpan]) -> None:
    """Verify spans satisfy the segmenter's preconditions.

    Raises:
        ContractViolation: On the first span that is empty, out of bounds,
            out of order, overlapping its predecessor, or whose matched
            text differs from the source slice

    """
    previous_end = 0
    for index, span in enumerate(spans):
        if not 0 <= span.start < span.end <= len(source):
            raise ContractViolation(
                f"[{span.start}, {span.end}) is empty or outside a source of "
                f"length {len(source)}",
                index,
            )
        if span.start < previous_end:
            raise ContractViolation(
                f"starts at {span.start}, before the previous span ends at {previous_end}",
                index,
            )
        if source[span.start : span.end] != span.matched_text:
            raise ContractViolation(
                f"matched text {span.matched_text!r} differs from source "
                f"{source[span.start : span.end]!r}",
                index,
            )
        previous_end = span.end


__all__ = [
    "check_spans",
    "segment",
]
