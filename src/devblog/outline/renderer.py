"""Render an outline forest as nested navigation markup."""

from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from devblog.models.outline import OutlineNode


def render_outline(
    forest: Sequence[OutlineNode], *, soup: BeautifulSoup | None = None
) -> Tag | None:
    """Render the forest as an ordered list of anchor links.

    Each node becomes `<li><a href="#id">text</a></li>`, followed by a nested `<ol>` when the node
    has children. An empty forest renders nothing.

    Args:
        forest: Root nodes in document order.
        soup: Document that will own the new tags. A fresh one is created when omitted.

    Returns:
        The `<ol>` element, or None for an empty forest.
    """

    if not forest:
        return None

    factory = soup if soup is not None else BeautifulSoup("", "lxml")
    ol = factory.new_tag("ol")
    for node in forest:
        li = factory.new_tag("li")
        link = factory.new_tag("a", href=f"#{node.id}")
        link.string = node.text
        li.append(link)

        nested = render_outline(node.children, soup=factory)
        if nested is not None:
            li.append(nested)
        ol.append(li)
    return ol


def render_outline_html(forest: Sequence[OutlineNode]) -> str:
    """Serialize `render_outline` output; empty string for an empty forest."""

    ol = render_outline(forest)
    return "" if ol is None else str(ol)
