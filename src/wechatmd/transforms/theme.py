#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/theme.py
"""Theme styling pass.

Walks the markup tree in document order and appends the theme's inline style
declarations to every element whose tag has a style function. Each element is
styled at most once, so applying the pass twice leaves the tree unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable

from wechatmd.markup.nodes import MarkupElement, MarkupParent, MarkupRoot, iter_elements
from wechatmd.theme import styles
from wechatmd.theme.schema import ThemeDefinition

logger = logging.getLogger(__name__)

StyleFunction = Callable[[ThemeDefinition], styles.InlineStyle]

_TAG_STYLES: dict[str, StyleFunction] = {
    "p": styles.get_paragraph_style,
    "blockquote": styles.get_blockquote_style,
    "ul": styles.get_list_style,
    "ol": styles.get_list_style,
    "li": styles.get_list_item_style,
    "table": styles.get_table_style,
    "th": styles.get_table_header_style,
    "td": styles.get_table_cell_style,
    "pre": styles.get_code_block_style,
    "a": styles.get_link_style,
    "img": styles.get_image_style,
    "dl": styles.get_definition_list_style,
    "dt": styles.get_definition_term_style,
    "dd": styles.get_definition_description_style,
    "mark": styles.get_mark_style,
    "sup": styles.get_script_style,
    "sub": styles.get_script_style,
}

_HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}

# Attributes added only when the element does not already carry them
_DEFAULT_ATTRIBUTES: dict[str, dict[str, str]] = {
    "a": {"target": "_blank", "rel": "noopener noreferrer"},
    "img": {"loading": "lazy"},
}


def apply_inline_style(element: MarkupElement, style: styles.InlineStyle) -> None:
    """Merge ``style`` into the element's ``style`` attribute."""
    existing = element.attributes.get("style")
    merged = styles.merge_inline_style_string(existing if isinstance(existing, str) else None, style)
    if merged:
        element.attributes["style"] = merged


class ThemeStyler:
    """Apply a theme's inline styles to a markup tree.

    Parameters
    ----------
    theme : ThemeDefinition
        Validated theme; it is only read

    """

    def __init__(self, theme: ThemeDefinition):
        self.theme = theme
        self.styled_count = 0

    def style_for(self, element: MarkupElement, parent: MarkupParent) -> styles.InlineStyle | None:
        """Return the style for ``element`` or None when its tag is not themed."""
        tag = element.tag
        if tag in _HEADING_TAGS:
            return styles.get_heading_style(self.theme, _HEADING_TAGS[tag])
        if tag == "code":
            inside_pre = isinstance(parent, MarkupElement) and parent.tag == "pre"
            return styles.get_code_style(self.theme, inside_pre)
        style_function = _TAG_STYLES.get(tag)
        if style_function is None:
            return None
        return style_function(self.theme)

    def apply(self, root: MarkupRoot) -> MarkupRoot:
        """Style every themed element of ``root`` in place and return it."""
        self.styled_count = 0
        for element, parent in iter_elements(root):
            if element.styled:
                continue
            style = self.style_for(element, parent)
            if style is None:
                continue

            apply_inline_style(element, style)
            for name, value in _DEFAULT_ATTRIBUTES.get(element.tag, {}).items():
                element.attributes.setdefault(name, value)
            element.styled = True
            self.styled_count += 1

        logger.debug(f"Applied theme '{self.theme.id}' to {self.styled_count} elements")
        return root
