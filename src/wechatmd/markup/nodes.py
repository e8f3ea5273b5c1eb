#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/markup/nodes.py
"""Renderable markup tree.

The lowering stage turns the structural document into this HTML-shaped tree.
Later passes (highlighting, math, theme styling, image grouping) rewrite it in
place, and the serializer turns it into an HTML string.

Node kinds
----------
- MarkupRoot: top of the tree
- MarkupElement: an HTML element with a tag, attributes and children
- MarkupText: a text run, escaped on output
- MarkupRaw: a pre-serialized HTML fragment, emitted verbatim

The ``class`` attribute is held as a list of class names; every other
attribute value is a string, a number, or a boolean flag.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

AttributeValue = Union[str, int, float, bool, list, None]


@dataclass
class MarkupText:
    """Text run."""

    value: str


@dataclass
class MarkupRaw:
    """Pre-serialized HTML fragment (sanitized embeds, rendered MathML)."""

    value: str


@dataclass
class MarkupElement:
    """HTML element.

    Parameters
    ----------
    tag : str
        Lower-case tag name
    attributes : dict, default = empty dict
        Attribute mapping in output order
    children : list, default = empty list
        Child nodes in document order
    styled : bool, default = False
        Set once the theme styler has processed this element

    """

    tag: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list[MarkupNode] = field(default_factory=list)
    styled: bool = field(default=False, compare=False, repr=False)

    @property
    def classes(self) -> list[str]:
        """Return the element's class names."""
        value = self.attributes.get("class")
        if isinstance(value, list):
            return [str(name) for name in value]
        if isinstance(value, str):
            return value.split()
        return []

    def has_class(self, name: str) -> bool:
        """Return True when ``name`` is one of the element's classes."""
        return name in self.classes

    def get_text(self) -> str:
        """Return the concatenated text of all descendant text nodes."""
        parts = []
        for child in self.children:
            if isinstance(child, MarkupText):
                parts.append(child.value)
            elif isinstance(child, MarkupElement):
                parts.append(child.get_text())
        return "".join(parts)


@dataclass
class MarkupRoot:
    """Top of a markup tree."""

    children: list[MarkupNode] = field(default_factory=list)


MarkupNode = Union[MarkupElement, MarkupText, MarkupRaw]
MarkupParent = Union[MarkupRoot, MarkupElement]


def is_element(node: object, tag: str | None = None) -> bool:
    """Return True when ``node`` is an element, optionally with tag ``tag``."""
    return isinstance(node, MarkupElement) and (tag is None or node.tag == tag)


def is_whitespace_text(node: object) -> bool:
    """Return True for a text node holding only whitespace."""
    return isinstance(node, MarkupText) and not node.value.strip()


def iter_elements(parent: MarkupParent) -> Iterator[tuple[MarkupElement, MarkupParent]]:
    """Yield ``(element, parent)`` pairs in document (pre-)order.

    The child list of each parent is read when it is reached, so callers may
    mutate an element's own attributes while iterating but must not
    restructure child lists.
    """
    for child in parent.children:
        if isinstance(child, MarkupElement):
            yield child, parent
            yield from iter_elements(child)
