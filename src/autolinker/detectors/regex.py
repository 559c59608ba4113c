"""Regex detector for explicit web links.

Recognizes:
- http://... and https://...
- www....

Trailing sentence punctuation is not part of the match, so
"see https://example.com." links "https://example.com". A match left with
nothing after "http://" or "www." once trimmed is dropped. Bare domains and
emails are not detected; use the linkify detector for those.

Thread Safety:
Compiled patterns are immutable. This detector holds no per-call state.

"""

from __future__ import annotations

import re

from autolinker.detectors import register_detector
from autolinker.spans import MatchSpan

_URL_RE = re.compile(
    r"""
    \bhttps?://[^\s<>"']+
    |
    \bwww\.[^\s<>"']+
    """,
    re.IGNORECASE | re.VERBOSE,
)

_TRAILING = ".,;:!?)]}\"'"


@register_detector("regex")
class RegexDetector:
    """Detector for http(s):// and www. links.

    Args:
        pattern: Alternative compiled pattern. Each match is trimmed of
            trailing punctuation; matches that start with "www." get an
            "http://" target.

    """

    def __init__(self, pattern: re.Pattern[str] | None = None) -> None:
        self.pattern = pattern or _URL_RE

    def pre_test(self, source: str) -> bool:
        if self.pattern is not _URL_RE:
            # No cheap check is known for a caller-supplied pattern
            return True
        lowered = source.lower()
        return "://" in lowered or "www." in lowered

    def scan(self, source: str) -> tuple[MatchSpan, ...]:
        spans = []
        for m in self.pattern.finditer(source):
            start, end = m.start(), m.end()
            while end > start and source[end - 1] in _TRAILING:
                end -= 1
            if end <= start:
                continue

            text = source[start:end]
            scheme, sep, rest = text.partition("://")
            if sep and not rest:
                continue
            if not sep and text.lower() in ("www", "www."):
                continue
            if sep:
                url, schema = text, f"{scheme.lower()}:"
            else:
                url, schema = f"http://{text}", ""
            spans.append(MatchSpan(start, end, text, url, schema))
        return tuple(spans)
