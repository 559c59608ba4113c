"""Shared fixtures for autolinker tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from autolinker.spans import MatchSpan


class StubDetector:
    """Detector returning fixed spans and recording how it was called."""

    def __init__(
        self,
        spans: Sequence[MatchSpan] = (),
        *,
        pre_test: bool | Callable[[str], bool] = True,
    ) -> None:
        self.spans = tuple(spans)
        self._pre_test = pre_test
        self.pre_test_calls: list[str] = []
        self.scan_calls: list[str] = []

    def pre_test(self, source: str) -> bool:
        self.pre_test_calls.append(source)
        if callable(self._pre_test):
            return self._pre_test(source)
        return self._pre_test

    def scan(self, source: str) -> Sequence[MatchSpan]:
        self.scan_calls.append(source)
        return self.spans


class ExplodingDetector:
    """Detector whose operations raise."""

    def __init__(self, *, on_pre_test: bool = False, on_scan: bool = True) -> None:
        self.on_pre_test = on_pre_test
        self.on_scan = on_scan

    def pre_test(self, source: str) -> bool:
        if self.on_pre_test:
            raise RuntimeError("pre_test exploded")
        return True

    def scan(self, source: str) -> Sequence[MatchSpan]:
        if self.on_scan:
            raise RuntimeError("scan exploded")
        return ()


def span_of(source: str, matched: str, url: str | None = None, *, start: int = 0) -> MatchSpan:
    """Build the span for the first occurrence of matched at or after start."""
    index = source.index(matched, start)
    return MatchSpan(index, index + len(matched), matched, url if url is not None else matched)


@pytest.fixture
def example_source() -> str:
    return "Visit https://example.com for more info"


@pytest.fixture
def example_span(example_source: str) -> MatchSpan:
    return span_of(example_source, "https://example.com")
