"""HTML tree model: Element, TextNode, and CommentNode dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Element:
    """An element with its folded attribute mapping and owned children.

    The tree is built once by the parser; callers should treat ``attributes``
    and ``children`` as read-only.
    """

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute *name*, or *default*."""
        return self.attributes.get(name, default)

    def element_children(self) -> list[Element]:
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def classes(self) -> list[str]:
        """Whitespace-separated names of the ``class`` attribute."""
        return self.attributes.get("class", "").split()


@dataclass(frozen=True)
class TextNode:
    """Character data, trimmed and never empty."""

    data: str


@dataclass(frozen=True)
class CommentNode:
    data: str


Node = Union[Element, TextNode, CommentNode]


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants in document order."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Element):
            stack.extend(reversed(current.children))


def iter_elements(node: Node) -> Iterator[Element]:
    """Yield every Element in the subtree rooted at *node*, in document order."""
    for current in walk(node):
        if isinstance(current, Element):
            yield current
