#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes

Examples
--------
    >>> from wechatmd.ast import Heading, Text, Emphasis
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from wechatmd.ast.nodes import Code, Image, LineBreak, MathInline, Text, get_node_children

if TYPE_CHECKING:
    from wechatmd.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    The tree is traversed recursively. Text, inline code and inline math
    contribute their content, images contribute their alternative text and
    line breaks contribute a single space.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String used between the text of sibling nodes. The default keeps the
        text exactly as written, which is what length measurements need.

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        parts = [extract_text(node, joiner=joiner) for node in node_or_nodes]
        return joiner.join(part for part in parts if part)

    node = node_or_nodes
    if isinstance(node, (Text, Code, MathInline)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text
    if isinstance(node, LineBreak):
        return " "

    parts = [extract_text(child, joiner=joiner) for child in get_node_children(node)]
    return joiner.join(part for part in parts if part)


__all__ = [
    "extract_text",
]
