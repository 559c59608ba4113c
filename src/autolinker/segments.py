"""Segment variants produced by the segmenter.

A segmentation is a tuple of ``Literal`` and ``LinkSegment`` values that
covers the source string with no gaps and no overlaps. Concatenating each
segment's ``source_text`` gives back the source exactly.

Thread Safety:
All segments are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Literal:
    """Passthrough text between links, rendered as-is."""

    text: str

    @property
    def source_text(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class LinkSegment:
    """A detected link.

    ``display_text`` is what gets shown. ``matched_text`` and ``url`` are
    what press handlers receive.

    """

    display_text: str
    matched_text: str
    url: str

    @property
    def source_text(self) -> str:
        return self.matched_text


Segment: TypeAlias = Literal | LinkSegment


def reconstruct(segments: Iterable[Segment]) -> str:
    """Join segments back into the string they were cut from.

    Links contribute their matched text, not their display text.

    Example:
        >>> reconstruct((Literal("a "), LinkSegment("here", "x.com", "http://x.com")))
        'a x.com'
    """
    return "".join(seg.source_text for seg in segments)


def links(segments: Iterable[Segment]) -> list[LinkSegment]:
    """Return only the link segments, in source order."""
    return [seg for seg in segments if isinstance(seg, LinkSegment)]


__all__ = [
    "Literal",
    "LinkSegment",
    "Segment",
    "links",
    "reconstruct",
]
