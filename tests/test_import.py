"""Verify the public API imports and basic values work."""

from __future__ import annotations


def test_public_api() -> None:
    import autolinker

    for name in autolinker.__all__:
        assert hasattr(autolinker, name), name


def test_version() -> None:
    from autolinker import __version__

    assert __version__.count(".") == 2


def test_match_span() -> None:
    from autolinker.spans import MatchSpan

    span = MatchSpan(6, 25, "https://example.com", "https://example.com")
    assert len(span) == 19
    assert span.schema == ""


def test_segments_source_text() -> None:
    from autolinker.segments import LinkSegment, Literal, links, reconstruct

    segs = (Literal("a "), LinkSegment("here", "x.com", "http://x.com"), Literal("!"))
    assert reconstruct(segs) == "a x.com!"
    assert links(segs) == [segs[1]]


def test_logger_namespace() -> None:
    from autolinker.utils import get_logger

    assert get_logger("adapter").name == "autolinker.adapter"
    assert get_logger("autolinker.tree").name == "autolinker.tree"
    assert get_logger("autolinker").name == "autolinker"
