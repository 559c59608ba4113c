"""Turn links inside a view tree into pressable link elements."""

import webbrowser

from autolinker import Element, Linkifier, LinkifyConfig, LinkRenderer, linkify_tree


class BrowserOpener:
    def can_open(self, url: str) -> bool:
        return url.startswith(("http://", "https://"))

    def open(self, url: str) -> None:
        webbrowser.open(url)


tree = Element(
    "view",
    children=(
        Element("text", {"style": "title"}, ("Release notes",)),
        Element("text", {"style": "body"}, ("Changelog at https://example.com/changes",)),
    ),
)

linkifier = Linkifier(LinkifyConfig(label_policy="changelog"))
renderer = LinkRenderer.opening_with(BrowserOpener(), link_props={"style": "link"})
out = linkify_tree(tree, linkifier, renderer)

for child in out.children[1].children:
    print(child if isinstance(child, str) else (child.tag, child.children, child.props["url"]))
