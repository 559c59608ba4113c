"""Match spans produced by URL detectors.

A span is a half-open ``[start, end)`` range into the scanned string plus
what the detector saw there and where it points.

Thread Safety:
MatchSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """A single detected link inside a source string.

    Spans from one scan are ordered by ``start`` and never overlap. The
    segmenter relies on that without checking it.

    Attributes:
        start: Offset of the first matched character
        end: Offset one past the last matched character
        matched_text: The source text in ``[start, end)``, exactly as written
        url: Normalized link target (may differ from matched_text,
            e.g. "www.x.com" -> "http://www.x.com")
        schema: Scheme the detector recognized ("https:", "mailto:", ...),
            or "" for fuzzy matches

    Examples:
            >>> span = MatchSpan(6, 25, "https://example.com", "https://example.com")
            >>> len(span)
            19

    """

    start: int
    end: int
    matched_text: str
    url: str
    schema: str = ""

    def __len__(self) -> int:
        return self.end - self.start
