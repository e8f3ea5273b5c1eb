#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/markup/serializer.py
"""HTML serialization of the markup tree."""

from __future__ import annotations

import html

from wechatmd.constants import VOID_ELEMENTS
from wechatmd.markup.nodes import AttributeValue, MarkupElement, MarkupNode, MarkupRaw, MarkupRoot, MarkupText


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def serialize_attributes(attributes: dict[str, AttributeValue]) -> str:
    """Serialize an attribute mapping, leading space included.

    ``None`` and ``False`` values are omitted, ``True`` yields a bare
    attribute, lists are joined with spaces, and every value is escaped.
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, list):
            if not value:
                continue
            text = " ".join(str(item) for item in value)
        elif isinstance(value, (int, float)):
            text = _format_number(value)
        else:
            text = str(value)
        parts.append(f' {name}="{html.escape(text, quote=True)}"')
    return "".join(parts)


def _serialize_node(node: MarkupNode, parts: list[str]) -> None:
    if isinstance(node, MarkupText):
        parts.append(html.escape(node.value, quote=False))
    elif isinstance(node, MarkupRaw):
        parts.append(node.value)
    elif isinstance(node, MarkupElement):
        parts.append(f"<{node.tag}{serialize_attributes(node.attributes)}>")
        if node.tag in VOID_ELEMENTS:
            return
        for child in node.children:
            _serialize_node(child, parts)
        parts.append(f"</{node.tag}>")


def serialize(root: MarkupRoot | MarkupNode) -> str:
    """Serialize a markup tree to an HTML5 string.

    Parameters
    ----------
    root : MarkupRoot or markup node
        Tree (or subtree) to serialize

    Returns
    -------
    str
        HTML string; void elements have no closing tag and raw fragments are
        emitted verbatim

    Examples
    --------
    >>> serialize(MarkupRoot(children=[MarkupElement("p", children=[MarkupText("a < b")])]))
    '<p>a &lt; b</p>'

    """
    parts: list[str] = []
    if isinstance(root, MarkupRoot):
        for child in root.children:
            _serialize_node(child, parts)
    else:
        _serialize_node(root, parts)
    return "".join(parts)
