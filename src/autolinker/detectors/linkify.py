"""linkify-it backed detector.

Detects links with a scheme (http:, https:, ftp:, mailto:, //), fuzzy
domains such as "example.com" or "www.example.com", and bare emails.
Targets are normalized by linkify-it: "www.example.com" is reported with
url "http://www.example.com", "user@example.com" with "mailto:user@example.com".

Usage:
    >>> detector = LinkifyItDetector()
    >>> [s.url for s in detector.scan("mail me at user@example.com")]
    ['mailto:user@example.com']

Thread Safety:
LinkifyIt.match keeps scan state on the instance, so scans are serialized
with a lock. pretest is a single regex search and runs unlocked.

"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from linkify_it import LinkifyIt

from autolinker.detectors import register_detector
from autolinker.spans import MatchSpan


@register_detector("linkify")
class LinkifyItDetector:
    """Detector backed by ``linkify_it.LinkifyIt``.

    Args:
        linkify: Pre-configured LinkifyIt instance to use instead of
            building one from the options below
        fuzzy_link: Detect links without a scheme ("example.com")
        fuzzy_email: Detect emails without "mailto:"
        fuzzy_ip: Detect bare IPv4 addresses
        tlds: Extra top-level domains to accept in fuzzy links

    """

    def __init__(
        self,
        linkify: LinkifyIt | None = None,
        *,
        fuzzy_link: bool = True,
        fuzzy_email: bool = True,
        fuzzy_ip: bool = False,
        tlds: Iterable[str] | None = None,
    ) -> None:
        if linkify is None:
            linkify = LinkifyIt(
                options={
                    "fuzzy_link": fuzzy_link,
                    "fuzzy_email": fuzzy_email,
                    "fuzzy_ip": fuzzy_ip,
                }
            )
        if tlds:
            linkify.tlds(list(tlds), True)
        self.linkify = linkify
        self._lock = threading.Lock()

    def pre_test(self, source: str) -> bool:
        return self.linkify.pretest(source)

    def scan(self, source: str) -> tuple[MatchSpan, ...]:
        with self._lock:
            matches = self.linkify.match(source)
        if not matches:
            return ()
        return tuple(
            MatchSpan(
                start=m.index,
                end=m.last_index,
                matched_text=source[m.index : m.last_index],
                url=m.url,
                schema=m.schema,
            )
            for m in matches
        )
