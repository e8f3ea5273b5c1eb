#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML-shaped markup tree, its lowering from the AST, and serialization."""

from wechatmd.markup.lowering import MarkupLowering, lower_document
from wechatmd.markup.nodes import (
    MarkupElement,
    MarkupNode,
    MarkupRaw,
    MarkupRoot,
    MarkupText,
    is_element,
    is_whitespace_text,
    iter_elements,
)
from wechatmd.markup.serializer import serialize

__all__ = [
    "MarkupElement",
    "MarkupLowering",
    "MarkupNode",
    "MarkupRaw",
    "MarkupRoot",
    "MarkupText",
    "is_element",
    "is_whitespace_text",
    "iter_elements",
    "lower_document",
    "serialize",
]
