"""Table-of-contents construction.

Turns the flat, document-ordered heading list of a page into a forest of `OutlineNode`s.
A heading's parent is the nearest preceding heading with a strictly smaller level; headings of
equal or greater level in between are skipped. Level gaps are kept as they are, so an `h3`
directly after an `h1` becomes a child of that `h1`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from devblog.models.heading import HeadingRecord
from devblog.models.outline import OutlineNode


def _rank(level: int) -> int:
    # Non-positive levels sort as the shallowest possible rank and never nest
    return level if level > 0 else 0


@dataclass
class _Draft:
    """Mutable node used only while a forest is being assembled."""

    heading: HeadingRecord
    children: list[_Draft] = field(default_factory=list)

    @property
    def rank(self) -> int:
        return _rank(self.heading.level)

    def freeze(self) -> OutlineNode:
        return OutlineNode(
            id=self.heading.id,
            level=self.heading.level,
            text=self.heading.text,
            children=tuple(child.freeze() for child in self.children),
        )


def build_outline(headings: Iterable[HeadingRecord]) -> list[OutlineNode]:
    """Build the outline forest in a single forward pass.

    Keeps a stack of currently open ancestors: entries with a level greater than or equal to the
    incoming heading are closed, and the heading attaches to whatever remains on top.

    Args:
        headings: Headings in document order. May be empty.

    Returns:
        Root nodes in document order.
    """

    roots: list[_Draft] = []
    open_ancestors: list[_Draft] = []

    for heading in headings:
        draft = _Draft(heading)
        while open_ancestors and open_ancestors[-1].rank >= draft.rank:
            open_ancestors.pop()

        if open_ancestors:
            open_ancestors[-1].children.append(draft)
        else:
            roots.append(draft)
        open_ancestors.append(draft)

    return [root.freeze() for root in roots]


def build_outline_by_scan(headings: Sequence[HeadingRecord]) -> list[OutlineNode]:
    """Build the outline forest by scanning backward for each heading's parent.

    Reference formulation of `build_outline`: nodes are visited last to first and each one is
    prepended to its parent's children, which restores document order. Quadratic in the worst case
    (long non-decreasing runs), so pages use `build_outline`.
    """

    drafts = [_Draft(heading) for heading in headings]
    roots: list[_Draft] = []

    for i in range(len(drafts) - 1, -1, -1):
        current = drafts[i]
        parent: _Draft | None = None
        for j in range(i - 1, -1, -1):
            if drafts[j].rank < current.rank:
                parent = drafts[j]
                break

        if parent is not None:
            parent.children.insert(0, current)
        else:
            roots.insert(0, current)

    return [root.freeze() for root in roots]


def iter_outline(forest: Iterable[OutlineNode]) -> Iterator[OutlineNode]:
    """Yield every node of the forest in pre-order (document order)."""

    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def outline_to_headings(forest: Iterable[OutlineNode]) -> list[HeadingRecord]:
    """Flatten a forest back into the heading list it was built from."""

    return [node.to_heading() for node in iter_outline(forest)]


def outline_depth(forest: Iterable[OutlineNode]) -> int:
    """Return the number of nesting levels in the forest (0 for an empty forest)."""

    depth = 0
    stack = [(node, 1) for node in forest]
    while stack:
        node, d = stack.pop()
        depth = max(depth, d)
        stack.extend((child, d + 1) for child in node.children)
    return depth
