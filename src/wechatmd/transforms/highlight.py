#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/highlight.py
"""``==highlight==`` segmentation on the markup tree.

Text nodes containing ``==...==`` are split into plain text and ``mark``
elements in place. The match is non-greedy, does not nest, and may span
newlines. Code, preformatted, script and style subtrees are never touched.
"""

from __future__ import annotations

import logging
import re

from wechatmd.constants import HIGHLIGHT_PATTERN, HIGHLIGHT_SKIP_TAGS, HIGHLIGHT_TAG
from wechatmd.markup.nodes import MarkupElement, MarkupNode, MarkupParent, MarkupRoot, MarkupText

logger = logging.getLogger(__name__)

_HIGHLIGHT_RE = re.compile(HIGHLIGHT_PATTERN, re.DOTALL)


def split_highlight_segments(value: str) -> list[MarkupNode] | None:
    """Split a text value into text and ``mark`` segments.

    Parameters
    ----------
    value : str
        Text to scan

    Returns
    -------
    list of markup nodes or None
        Replacement nodes in original character order, or None when the
        value holds no highlight

    Examples
    --------
    >>> split_highlight_segments("这是 ==重点== 提醒")
    [MarkupText(value='这是 '), MarkupElement(tag='mark', ...), MarkupText(value=' 提醒')]

    """
    segments: list[MarkupNode] = []
    last_index = 0
    matched = False

    for match in _HIGHLIGHT_RE.finditer(value):
        matched = True
        if match.start() > last_index:
            segments.append(MarkupText(value[last_index : match.start()]))
        content = match.group(1)
        if content:
            segments.append(MarkupElement(tag=HIGHLIGHT_TAG, children=[MarkupText(content)]))
        last_index = match.end()

    if not matched:
        return None

    if last_index < len(value):
        segments.append(MarkupText(value[last_index:]))
    return segments


class HighlightSegmenter:
    """Replace ``==text==`` runs with ``mark`` elements throughout a tree."""

    def __init__(self) -> None:
        self.marks_created = 0

    def apply(self, root: MarkupRoot) -> MarkupRoot:
        """Segment highlights in ``root`` in place and return it."""
        self.marks_created = 0
        self._process(root)
        if self.marks_created:
            logger.debug(f"Created {self.marks_created} highlight marks")
        return root

    def _process(self, parent: MarkupParent) -> None:
        new_children: list[MarkupNode] = []
        for child in parent.children:
            if isinstance(child, MarkupText):
                segments = split_highlight_segments(child.value)
                if segments is None:
                    new_children.append(child)
                else:
                    self.marks_created += sum(1 for s in segments if isinstance(s, MarkupElement))
                    new_children.extend(segments)
                continue

            if isinstance(child, MarkupElement) and child.tag not in HIGHLIGHT_SKIP_TAGS:
                self._process(child)
            new_children.append(child)

        parent.children = new_children
