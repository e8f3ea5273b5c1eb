#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/emoji.py
"""Emoji shortcode expansion for Text nodes."""

from __future__ import annotations

from rich.emoji import Emoji

from wechatmd.ast.nodes import Text
from wechatmd.ast.transforms import NodeTransformer


class EmojiShortcodeTransform(NodeTransformer):
    """Replace ``:shortcode:`` sequences with emoji characters.

    Only Text nodes are rewritten, so inline code and code blocks keep their
    literal colons. Unknown shortcodes are left as written.

    Examples
    --------
        >>> doc = markdown_to_ast("Ship it :rocket:")
        >>> EmojiShortcodeTransform().transform(doc)

    """

    def visit_text(self, node: Text) -> Text:
        """Expand shortcodes in the node content."""
        content = node.content
        if ":" in content:
            content = Emoji.replace(content)
        return Text(content=content, metadata=node.metadata.copy(), source_location=node.source_location)
