"""Linkify text inside an abstract element tree.

The tree is a minimal stand-in for a UI view hierarchy: an ``Element`` has
a tag, a props mapping and children, where each child is a string, another
Element or None. Only text elements whose sole child is a string, and bare
strings, are scanned. Everything else is walked and rebuilt.

Example:
    >>> tree = Element("view", children=(
    ...     Element("text", {"style": "body"}, ("Visit https://example.com",)),
    ... ))
    >>> out = linkify_tree(tree, Linkifier())
    >>> out.children[0].children[1].tag
    'link'

Walking never mutates the input tree; unchanged subtrees are returned as
the same objects.

Thread Safety:
Pure functions over frozen nodes. A LinkRenderer is frozen and its
callbacks are only called when a materialized link is pressed.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from autolinker.linkifier import Linkifier
from autolinker.navigation import UrlOpener, handle_link
from autolinker.segments import LinkSegment, Segment
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)

TEXT_TAG = "text"
LINK_TAG = "link"


@dataclass(frozen=True, slots=True)
class Element:
    """A node in an abstract view tree.

    Attributes:
        tag: Element kind ("text" elements are eligible for scanning)
        props: Element properties, copied onto generated link elements
        children: Strings, nested elements or None

    """

    tag: str
    props: Mapping[str, Any] = field(default_factory=dict, hash=False)
    children: tuple[Child, ...] = ()


Child: TypeAlias = str | Element | None

PressHandler = Callable[[str, str], Any]


@dataclass(frozen=True, slots=True)
class LinkRenderer:
    """Turns link segments into link elements.

    Attributes:
        on_press: Called with ``(url, display_text)`` when a link is pressed
        on_long_press: Same, for long presses
        link_props: Props applied to every link on top of the text props.
            A "style" present on both becomes ``(text_style, link_style)``.
        inject_props: ``url -> props`` hook for per-link props. A "key"
            entry is dropped; keys are always generated.

    """

    on_press: PressHandler | None = None
    on_long_press: PressHandler | None = None
    link_props: Mapping[str, Any] = field(default_factory=dict, hash=False)
    inject_props: Callable[[str], Mapping[str, Any]] | None = None

    @classmethod
    def opening_with(cls, opener: UrlOpener, **kwargs: Any) -> LinkRenderer:
        """Renderer whose links open their URL with opener when pressed."""
        return cls(on_press=lambda url, _label: handle_link(url, opener), **kwargs)

    def render(self, link: LinkSegment, offset: int, text_props: Mapping[str, Any]) -> Element:
        """Build the element for one link found at offset in its text."""
        url, label = link.url, link.display_text

        props: dict[str, Any] = {k: v for k, v in text_props.items() if k != "key"}
        props["key"] = f"{url}-{offset}"
        props["url"] = url
        props["matched_text"] = link.matched_text
        if self.on_long_press is not None:
            props["on_long_press"] = _bind(self.on_long_press, url, label)
        if self.on_press is not None:
            props["on_press"] = _bind(self.on_press, url, label)
        for key, value in self.link_props.items():
            if key == "style" and "style" in props:
                props["style"] = (props["style"], value)
            else:
                props[key] = value
        if self.inject_props is not None:
            props.update((k, v) for k, v in self.inject_props(url).items() if k != "key")

        return Element(LINK_TAG, props, (label,))

    def materialize(
        self, segments: Iterable[Segment], text_props: Mapping[str, Any]
    ) -> tuple[Child, ...]:
        """Turn segments into children: literals as strings, links as elements."""
        children: list[Child] = []
        offset = 0
        for seg in segments:
            if isinstance(seg, LinkSegment):
                children.append(self.render(seg, offset, text_props))
            else:
                children.append(seg.text)
            offset += len(seg.source_text)
        return tuple(children)


def _bind(handler: PressHandler, url: str, label: str) -> Callable[[], Any]:
    return lambda: handler(url, label)


def linkify_tree(
    node: Child,
    linkifier: Linkifier,
    renderer: LinkRenderer | None = None,
    *,
    text_props: Mapping[str, Any] | None = None,
) -> Child:
    """Return node with every detected link turned into a link element.

    Args:
        node: Root of the tree (a string, Element or None)
        linkifier: Linkifier used for detection and segmentation
        renderer: Link element factory; a handler-less LinkRenderer if omitted
        text_props: Props for the text element wrapped around bare strings
            that contain links

    """
    if renderer is None:
        renderer = LinkRenderer()
    return _walk(node, linkifier, renderer, text_props or {})


def linkify_children(
    children: Iterable[Child],
    linkifier: Linkifier,
    renderer: LinkRenderer | None = None,
    *,
    text_props: Mapping[str, Any] | None = None,
) -> tuple[Child, ...]:
    """linkify_tree over a sequence of sibling nodes."""
    if renderer is None:
        renderer = LinkRenderer()
    props = text_props or {}
    return tuple(_walk(child, linkifier, renderer, props) for child in children)


def _walk(
    node: Child, linkifier: Linkifier, renderer: LinkRenderer, text_props: Mapping[str, Any]
) -> Child:
    match node:
        case None:
            return None
        case str():
            if not linkifier.pre_test(node):
                return node
            wrapped = Element(TEXT_TAG, text_props, (node,))
            result = _linkify_text(wrapped, node, linkifier, renderer)
            return node if result is wrapped else result
        case Element(tag=tag, children=(str() as text,)) if tag == TEXT_TAG:
            return _linkify_text(node, text, linkifier, renderer)
        case Element(children=children) if children:
            new_children = tuple(_walk(c, linkifier, renderer, text_props) for c in children)
            if all(new is old for new, old in zip(new_children, children, strict=True)):
                return node
            return dataclasses.replace(node, children=new_children)
        case _:
            return node


def _linkify_text(
    element: Element, text: str, linkifier: Linkifier, renderer: LinkRenderer
) -> Element:
    segments = linkifier.linkify(text)
    if not any(isinstance(seg, LinkSegment) for seg in segments):
        return element
    try:
        children = renderer.materialize(segments, element.props)
    except Exception:
        logger.warning("Rendering links failed, leaving text as is: %r", text, exc_info=True)
        return element
    return dataclasses.replace(element, children=children)


__all__ = [
    "Child",
    "Element",
    "LINK_TAG",
    "LinkRenderer",
    "TEXT_TAG",
    "linkify_children",
    "linkify_tree",
]
