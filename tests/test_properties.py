"""Property-based tests for segmentation using Hypothesis.

These tests verify invariants that hold for any source string and any
valid span sequence:
1. Joining the segments gives back the source (round trip)
2. Segment lengths add up to the source length (no gaps, no overlap)
3. Links come out in span order
4. No spans means a single literal
5. The label policy only changes display text
6. A failing detector behaves like a detector that finds nothing
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from autolinker import Linkifier, LinkifyConfig
from autolinker.labels import DerivedLabel, FixedLabel
from autolinker.segmenter import check_spans, segment
from autolinker.segments import LinkSegment, Literal, links, reconstruct
from autolinker.spans import MatchSpan
from conftest import ExplodingDetector, StubDetector


@st.composite
def sources_with_spans(draw: st.DrawFn) -> tuple[str, list[MatchSpan]]:
    """A source string and ordered, non-overlapping, non-empty spans in it."""
    source = draw(st.text(max_size=60))
    cuts = sorted(draw(st.sets(st.integers(0, len(source)), max_size=10)))
    spans = []
    for start, end in zip(cuts[::2], cuts[1::2]):
        text = source[start:end]
        spans.append(MatchSpan(start, end, text, f"https://{len(spans)}.example/{text}"))
    return source, spans


label_policies = st.one_of(
    st.none(),
    st.builds(FixedLabel, st.text(max_size=10)),
    st.sampled_from([DerivedLabel(str.upper), DerivedLabel(lambda url: ""), DerivedLabel(str.lower)]),
)


class TestSegmentationProperties:
    """Invariants of segment()."""

    @given(case=sources_with_spans(), policy=label_policies)
    @settings(max_examples=200)
    def test_round_trip(self, case: tuple[str, list[MatchSpan]], policy) -> None:
        source, spans = case
        assert reconstruct(segment(source, spans, policy)) == source

    @given(case=sources_with_spans())
    def test_generated_spans_satisfy_contract(self, case: tuple[str, list[MatchSpan]]) -> None:
        source, spans = case
        check_spans(source, spans)

    @given(case=sources_with_spans())
    def test_lengths_cover_source(self, case: tuple[str, list[MatchSpan]]) -> None:
        source, spans = case
        result = segment(source, spans)
        assert sum(len(s.source_text) for s in result) == len(source)

    @given(case=sources_with_spans())
    def test_no_empty_literals(self, case: tuple[str, list[MatchSpan]]) -> None:
        source, spans = case
        for seg in segment(source, spans):
            if isinstance(seg, Literal):
                assert seg.text

    @given(case=sources_with_spans())
    def test_links_in_span_order(self, case: tuple[str, list[MatchSpan]]) -> None:
        source, spans = case
        result = links(segment(source, spans))
        assert [link.url for link in result] == [span.url for span in spans]
        assert [link.matched_text for link in result] == [span.matched_text for span in spans]

    @given(source=st.text(max_size=60), policy=label_policies)
    def test_no_spans_single_literal(self, source: str, policy) -> None:
        result = segment(source, [], policy)
        if source:
            assert result == (Literal(source),)
        else:
            assert result == ()

    @given(case=sources_with_spans(), first=label_policies, second=label_policies)
    def test_label_policy_only_changes_display_text(
        self, case: tuple[str, list[MatchSpan]], first, second
    ) -> None:
        source, spans = case
        a = segment(source, spans, first)
        b = segment(source, spans, second)

        assert len(a) == len(b)
        for x, y in zip(a, b, strict=True):
            assert type(x) is type(y)
            if isinstance(x, LinkSegment):
                assert (x.matched_text, x.url) == (y.matched_text, y.url)
            else:
                assert x == y


class TestFailureContainmentProperties:
    """A raising detector is indistinguishable from one that finds nothing."""

    @given(source=st.text(max_size=60))
    @settings(max_examples=50)
    def test_failing_scan_equals_no_match(self, source: str) -> None:
        failing = Linkifier(LinkifyConfig(detector=ExplodingDetector()))
        empty = Linkifier(LinkifyConfig(detector=StubDetector([])))
        assert failing.linkify(source) == empty.linkify(source)

    @given(source=st.text(max_size=60))
    @settings(max_examples=50)
    def test_failing_pre_test_never_raises(self, source: str) -> None:
        linkifier = Linkifier(LinkifyConfig(detector=ExplodingDetector(on_pre_test=True)))
        assert reconstruct(linkifier.linkify(source)) == source


class TestDetectorProperties:
    """Built-in detectors keep their side of the contract."""

    @given(source=st.text(alphabet=st.sampled_from("abc .:/@wx-com"), max_size=80))
    @settings(max_examples=100)
    def test_regex_spans_satisfy_contract(self, source: str) -> None:
        linkifier = Linkifier(LinkifyConfig(detector="regex", strict_contracts=True))
        assert reconstruct(linkifier.linkify(source)) == source

    @given(source=st.text(alphabet=st.sampled_from("abc .:/@wx-com"), max_size=80))
    @settings(max_examples=100, deadline=None)
    def test_linkify_spans_satisfy_contract(self, source: str) -> None:
        linkifier = Linkifier(LinkifyConfig(detector="linkify", strict_contracts=True))
        assert reconstruct(linkifier.linkify(source)) == source
