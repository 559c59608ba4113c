"""Find the links in a sentence with the default detector, no config."""

from autolinker import LinkSegment, linkify

for segment in linkify("Visit https://example.com or mail user@example.com"):
    if isinstance(segment, LinkSegment):
        print(f"link {segment.display_text!r} -> {segment.url}")
    else:
        print(f"text {segment.text!r}")
