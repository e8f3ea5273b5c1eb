#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/math.py
"""Math rendering.

Replaces the ``code.language-math`` placeholders produced by lowering with
MathML generated by latex2mathml. Inline math becomes
``span.math.math-inline`` and display math ``div.math.math-display``.
"""

from __future__ import annotations

import html
import logging

from latex2mathml.converter import convert as latex_to_mathml

from wechatmd.constants import (
    MATH_DISPLAY_CLASS,
    MATH_ERROR_CLASS,
    MATH_INLINE_CLASS,
    MATH_PLACEHOLDER_CLASS,
    SOURCE_LINE_ATTRIBUTE,
)
from wechatmd.markup.nodes import MarkupElement, MarkupNode, MarkupParent, MarkupRaw, MarkupRoot, is_element

logger = logging.getLogger(__name__)


def render_latex(latex: str, display: bool = False) -> tuple[str, bool]:
    """Convert LaTeX to MathML.

    Parameters
    ----------
    latex : str
        LaTeX source without delimiters
    display : bool, default = False
        Render as a display (block) formula

    Returns
    -------
    tuple of (str, bool)
        The MathML markup and True, or the escaped source and False when the
        conversion failed

    """
    try:
        return latex_to_mathml(latex, display="block" if display else "inline"), True
    except Exception as e:
        # latex2mathml raises a wide range of exception types on bad input
        logger.warning(f"Could not convert LaTeX to MathML ({type(e).__name__}): {latex!r}")
        return html.escape(latex), False


def _display_placeholder(node: MarkupNode) -> MarkupElement | None:
    """Return the inner code element when ``node`` is a display placeholder."""
    if not is_element(node, "pre"):
        return None
    for child in node.children:  # type: ignore[union-attr]
        if is_element(child, "code") and child.has_class(MATH_PLACEHOLDER_CLASS):  # type: ignore[union-attr]
            return child  # type: ignore[return-value]
    return None


def _is_inline_placeholder(node: MarkupNode) -> bool:
    return is_element(node, "code") and node.has_class(MATH_PLACEHOLDER_CLASS)  # type: ignore[union-attr]


def _math_wrapper(tag: str, mode_class: str, latex: str, display: bool) -> MarkupElement:
    markup, ok = render_latex(latex, display=display)
    classes = ["math", mode_class]
    if not ok:
        classes.append(MATH_ERROR_CLASS)
    return MarkupElement(tag=tag, attributes={"class": classes}, children=[MarkupRaw(markup)])


class MathRenderer:
    """Replace math placeholders with rendered MathML."""

    def __init__(self) -> None:
        self.rendered = 0

    def apply(self, root: MarkupRoot) -> MarkupRoot:
        """Render every math placeholder in ``root`` in place and return it."""
        self.rendered = 0
        self._process(root)
        if self.rendered:
            logger.debug(f"Rendered {self.rendered} math expressions")
        return root

    def _process(self, parent: MarkupParent) -> None:
        for index, child in enumerate(parent.children):
            if not isinstance(child, MarkupElement):
                continue

            code = _display_placeholder(child)
            if code is not None:
                wrapper = _math_wrapper("div", MATH_DISPLAY_CLASS, code.get_text().strip(), display=True)
                source_line = child.attributes.get(SOURCE_LINE_ATTRIBUTE)
                if source_line is not None:
                    wrapper.attributes[SOURCE_LINE_ATTRIBUTE] = source_line
                parent.children[index] = wrapper
                self.rendered += 1
            elif _is_inline_placeholder(child):
                parent.children[index] = _math_wrapper("span", MATH_INLINE_CLASS, child.get_text(), display=False)
                self.rendered += 1
            else:
                self._process(child)
