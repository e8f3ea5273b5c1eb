#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown parsing for wechatmd.

The parser turns Markdown source text into the structural document tree
defined in :mod:`wechatmd.ast`.
"""

from wechatmd.parsers.markdown import MarkdownParser, create_markdown_it, markdown_to_ast

__all__ = [
    "MarkdownParser",
    "create_markdown_it",
    "markdown_to_ast",
]
