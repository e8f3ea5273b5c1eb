#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/source_lines.py
"""Source-line annotation.

The editor preview keeps its scroll position in sync with the Markdown source
by reading ``data-source-line`` attributes. This pass records the starting
line of selected structural nodes in their metadata; the lowering stage turns
that into the attribute.
"""

from __future__ import annotations

import logging

from wechatmd.ast.nodes import Document, Node
from wechatmd.ast.visitors import NodeWalker
from wechatmd.constants import SOURCE_LINE_METADATA_KEY, SOURCE_LINE_NODE_TYPES

logger = logging.getLogger(__name__)


class SourceLineAnnotator(NodeWalker):
    """Attach ``source_line`` metadata to block-like and link/image nodes.

    The annotation is written in place. A node that already carries a
    source line keeps it, so running the annotator twice changes nothing.
    """

    def __init__(self) -> None:
        self.annotated = 0

    def annotate(self, document: Document) -> Document:
        """Annotate every eligible node of ``document`` and return it.

        Parameters
        ----------
        document : Document
            Structural tree, modified in place

        Returns
        -------
        Document
            The same document

        """
        self.annotated = 0
        document.accept(self)
        logger.debug(f"Annotated {self.annotated} nodes with source lines")
        return document

    def generic_visit(self, node: Node) -> None:
        """Annotate ``node`` when eligible, then descend."""
        if (
            type(node).__name__ in SOURCE_LINE_NODE_TYPES
            and node.source_location is not None
            and SOURCE_LINE_METADATA_KEY not in node.metadata
        ):
            node.metadata[SOURCE_LINE_METADATA_KEY] = node.source_location.line
            self.annotated += 1
        super().generic_visit(node)
