#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/parsers/extensions.py
"""Syntax extensions registered on the markdown-it parser.

The stock CommonMark preset and the ``mdit_py_plugins`` collection cover
tables, strikethrough, autolinks, definition lists, dollar math and
super/subscript. Their front-matter plugin only knows ``---`` fences, so this
module provides a block rule accepting ``---`` (YAML) and ``+++`` (TOML)
fences at the very first line.

The plugin follows the markdown-it plugin protocol: a callable taking the
``MarkdownIt`` instance and registering its rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wechatmd.constants import FRONTMATTER_FENCES

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.rules_block import StateBlock


def _front_matter_rule(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
    if start_line != 0 or state.tShift[start_line] != 0:
        return False

    first = state.src[state.bMarks[start_line] : state.eMarks[start_line]].rstrip()
    fmt = FRONTMATTER_FENCES.get(first)
    if fmt is None:
        return False

    # An opening fence without a matching close is ordinary Markdown
    closing_line = start_line + 1
    while closing_line < end_line:
        line = state.src[state.bMarks[closing_line] : state.eMarks[closing_line]]
        if state.tShift[closing_line] == 0 and line.rstrip() == first:
            break
        closing_line += 1
    else:
        return False

    if silent:
        return True

    content = state.getLines(start_line + 1, closing_line, 0, False)
    token = state.push("front_matter", "", 0)
    token.hidden = True
    token.block = True
    token.info = fmt
    token.markup = first
    token.content = content
    token.map = [start_line, closing_line + 1]

    state.line = closing_line + 1
    return True


def front_matter_plugin(md: MarkdownIt) -> None:
    """Recognise a fenced YAML or TOML block at the start of the document.

    The block produces a hidden ``front_matter`` token whose ``info`` is the
    format (``"yaml"`` or ``"toml"``) and whose ``content`` is the text
    between the fences.
    """
    md.block.ruler.before("table", "front_matter", _front_matter_rule)


__all__ = ["front_matter_plugin"]
