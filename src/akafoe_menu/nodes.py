"""Document tree nodes and their read-only queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class TextNode:
    """Character data directly inside an element."""

    content: str


@dataclass
class Element:
    """A named element owning its children in document order."""

    name: str
    children: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return f"<{self.name}>"


Node = Union[Element, TextNode]


def element_children(node: Element) -> list[Element]:
    """Return the element children of ``node``, skipping text."""
    return [child for child in node.children if isinstance(child, Element)]


def text(node: Element) -> str:
    """Join the direct text children of ``node`` with single spaces.

    Text inside nested elements is not included.
    """
    parts = [child.content for child in node.children if isinstance(child, TextNode)]
    return " ".join(parts).strip()


def iter_children(node: Element, name: str) -> Iterator[Element]:
    for child in node.children:
        if isinstance(child, Element) and child.name == name:
            yield child


def find_child(node: Element, name: str) -> Element | None:
    """Return the first element child called ``name``, if any."""
    return next(iter_children(node, name), None)
