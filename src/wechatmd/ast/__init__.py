#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The structural tree is what the Markdown parser produces and what the
quality checker and the lowering stage consume. The module consists of:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- transforms: AST transformation utilities (rebuilding, filtering, collecting)
- utils: Plain-text extraction

Examples
--------
Basic usage:

    >>> from wechatmd.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])

"""

from __future__ import annotations

from wechatmd.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Emphasis,
    FrontMatter,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Node,
    Paragraph,
    SourceLocation,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
    replace_node_children,
)
from wechatmd.ast.transforms import NodeTransformer
from wechatmd.ast.utils import extract_text
from wechatmd.ast.visitors import NodeVisitor, NodeWalker

__all__ = [
    # Base
    "Node",
    "SourceLocation",
    "Alignment",
    # Block nodes
    "Document",
    "FrontMatter",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "DefinitionList",
    "DefinitionTerm",
    "DefinitionDescription",
    "MathBlock",
    # Inline nodes
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Superscript",
    "Subscript",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
    "MathInline",
    # Traversal
    "get_node_children",
    "replace_node_children",
    "NodeVisitor",
    "NodeWalker",
    "NodeTransformer",
    "extract_text",
]
