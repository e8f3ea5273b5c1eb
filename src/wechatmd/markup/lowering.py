#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/markup/lowering.py
"""Lowering of the structural document tree to the markup tree.

:class:`MarkupLowering` is a visitor that maps each structural node to the
HTML elements it renders as. Block siblings are separated by newline text
nodes the way mdast-to-hast separates them, so the serialized HTML keeps one
block per line. Recorded source lines become ``data-source-line`` attributes.

Math is not rendered here: inline and display math become placeholder
``code.language-math`` elements that the math renderer replaces later.
Embedded HTML is run through the sanitizer selected by
:attr:`RenderOptions.html_mode`.
"""

from __future__ import annotations

import logging
from typing import Optional

from wechatmd.ast.nodes import (
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
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from wechatmd.ast.visitors import NodeVisitor
from wechatmd.constants import (
    MATH_DISPLAY_CLASS,
    MATH_INLINE_CLASS,
    MATH_PLACEHOLDER_CLASS,
    SOURCE_LINE_ATTRIBUTE,
    SOURCE_LINE_METADATA_KEY,
)
from wechatmd.markup.nodes import MarkupElement, MarkupNode, MarkupRaw, MarkupRoot, MarkupText, is_element
from wechatmd.options.render import RenderOptions
from wechatmd.utils.html_sanitizer import sanitize_html_content

logger = logging.getLogger(__name__)


def wrap(nodes: list[MarkupNode], loose: bool = False) -> list[MarkupNode]:
    """Interleave newline text nodes between ``nodes``.

    Parameters
    ----------
    nodes : list
        Sibling nodes
    loose : bool, default = False
        Also add a newline before the first and after the last node

    """
    result: list[MarkupNode] = []
    if loose:
        result.append(MarkupText("\n"))
    for index, node in enumerate(nodes):
        if index:
            result.append(MarkupText("\n"))
        result.append(node)
    if loose and nodes:
        result.append(MarkupText("\n"))
    return result


def append_text(children: list[MarkupNode], value: str) -> None:
    """Append ``value`` to ``children``, merging with a trailing text node."""
    if not value:
        return
    if children and isinstance(children[-1], MarkupText):
        children[-1] = MarkupText(children[-1].value + value)
    else:
        children.append(MarkupText(value))


class MarkupLowering(NodeVisitor):
    """Convert a structural Document into a :class:`MarkupRoot`.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Render options; ``html_mode`` and ``annotate_source_lines`` apply here

    Examples
    --------
        >>> doc = markdown_to_ast("# Title\\n\\nBody")
        >>> root = MarkupLowering().lower(doc)
        >>> serialize(root)
        '<h1>Title</h1>\\n<p>Body</p>'

    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or RenderOptions()

    def lower(self, document: Document) -> MarkupRoot:
        """Lower ``document`` to a new markup tree."""
        return self.visit_document(document)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _element(
        self, tag: str, node: Node, children: Optional[list[MarkupNode]] = None, **attributes
    ) -> MarkupElement:
        """Create an element carrying the node's source line when recorded."""
        attrs = {name: value for name, value in attributes.items() if value is not None}
        if self.options.annotate_source_lines:
            line = node.metadata.get(SOURCE_LINE_METADATA_KEY)
            if line is not None:
                attrs[SOURCE_LINE_ATTRIBUTE] = str(line)
        return MarkupElement(tag=tag, attributes=attrs, children=children or [])

    def _blocks(self, nodes: list[Node]) -> list[MarkupNode]:
        result: list[MarkupNode] = []
        for node in nodes:
            result.extend(node.accept(self))
        return result

    def _inlines(self, nodes: list[Node]) -> list[MarkupNode]:
        result: list[MarkupNode] = []
        for node in nodes:
            for lowered in node.accept(self):
                if isinstance(lowered, MarkupText):
                    append_text(result, lowered.value)
                else:
                    result.append(lowered)
        return result

    def _raw_html(self, content: str) -> list[MarkupNode]:
        sanitized = sanitize_html_content(content, self.options.html_mode)
        if not sanitized:
            return []
        return [MarkupRaw(sanitized)]

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> MarkupRoot:
        """Lower the document; top-level blocks are joined by newlines."""
        return MarkupRoot(children=wrap(self._blocks(node.children)))

    def visit_front_matter(self, node: FrontMatter) -> list[MarkupNode]:
        """Front matter never renders."""
        return []

    def visit_heading(self, node: Heading) -> list[MarkupNode]:
        """Lower a heading to ``h1``-``h6``."""
        return [self._element(f"h{node.level}", node, self._inlines(node.content))]

    def visit_paragraph(self, node: Paragraph) -> list[MarkupNode]:
        """Lower a paragraph to ``p``."""
        return [self._element("p", node, self._inlines(node.content))]

    def visit_code_block(self, node: CodeBlock) -> list[MarkupNode]:
        """Lower a code block to ``pre > code``."""
        classes = [f"language-{node.language}"] if node.language else None
        code = MarkupElement(
            tag="code",
            attributes={"class": classes} if classes else {},
            children=[MarkupText(node.content + "\n")],
        )
        return [self._element("pre", node, [code])]

    def visit_block_quote(self, node: BlockQuote) -> list[MarkupNode]:
        """Lower a block quote; children are wrapped loosely."""
        return [self._element("blockquote", node, wrap(self._blocks(node.children), loose=True))]

    def visit_list(self, node: List) -> list[MarkupNode]:
        """Lower a list to ``ul`` or ``ol``."""
        items: list[MarkupNode] = []
        for item in node.items:
            if isinstance(item, ListItem):
                items.append(self._list_item(item, loose=not node.tight))
            else:
                items.extend(item.accept(self))

        if node.ordered:
            start = node.start if node.start != 1 else None
            return [self._element("ol", node, wrap(items, loose=True), start=start)]
        return [self._element("ul", node, wrap(items, loose=True))]

    def _list_item(self, node: ListItem, loose: bool) -> MarkupElement:
        results = self._blocks(node.children)
        children: list[MarkupNode] = []

        for index, child in enumerate(results):
            is_paragraph = is_element(child, "p")
            if loose or index != 0 or not is_paragraph:
                children.append(MarkupText("\n"))
            if is_paragraph and not loose:
                children.extend(child.children)  # type: ignore[union-attr]
            else:
                children.append(child)

        if results:
            tail = results[-1]
            if loose or not is_element(tail, "p"):
                children.append(MarkupText("\n"))

        return self._element("li", node, children)

    def visit_list_item(self, node: ListItem) -> list[MarkupNode]:
        """Lower a list item outside of a list context (treated as tight)."""
        return [self._list_item(node, loose=False)]

    def visit_table(self, node: Table) -> list[MarkupNode]:
        """Lower a table to ``table > thead/tbody > tr > th/td``."""
        sections: list[MarkupNode] = []
        if node.header is not None:
            header_row = self._table_row(node.header, "th", node.alignments)
            sections.append(MarkupElement(tag="thead", children=wrap([header_row], loose=True)))
        if node.rows:
            body_rows: list[MarkupNode] = [self._table_row(row, "td", node.alignments) for row in node.rows]
            sections.append(MarkupElement(tag="tbody", children=wrap(body_rows, loose=True)))
        return [self._element("table", node, wrap(sections, loose=True))]

    def _table_row(self, row: TableRow, cell_tag: str, alignments: list) -> MarkupElement:
        cells: list[MarkupNode] = []
        for index, cell in enumerate(row.cells):
            alignment = cell.alignment
            if alignment is None and index < len(alignments):
                alignment = alignments[index]
            cells.append(self._element(cell_tag, cell, self._inlines(cell.content), align=alignment))
        return self._element("tr", row, wrap(cells, loose=True))

    def visit_table_row(self, node: TableRow) -> list[MarkupNode]:
        """Lower a detached table row."""
        return [self._table_row(node, "th" if node.is_header else "td", [])]

    def visit_table_cell(self, node: TableCell) -> list[MarkupNode]:
        """Lower a detached table cell."""
        return [self._element("td", node, self._inlines(node.content), align=node.alignment)]

    def visit_thematic_break(self, node: ThematicBreak) -> list[MarkupNode]:
        """Lower a thematic break to ``hr``."""
        return [self._element("hr", node)]

    def visit_html_block(self, node: HTMLBlock) -> list[MarkupNode]:
        """Pass embedded HTML through the configured sanitizer."""
        return self._raw_html(node.content)

    def visit_definition_list(self, node: DefinitionList) -> list[MarkupNode]:
        """Lower a definition list to ``dl`` with ``dt``/``dd`` children."""
        children: list[MarkupNode] = []
        for term, descriptions in node.items:
            children.extend(term.accept(self))
            for description in descriptions:
                children.extend(description.accept(self))
        return [self._element("dl", node, wrap(children, loose=True))]

    def visit_definition_term(self, node: DefinitionTerm) -> list[MarkupNode]:
        """Lower a definition term to ``dt``."""
        return [self._element("dt", node, self._inlines(node.content))]

    def visit_definition_description(self, node: DefinitionDescription) -> list[MarkupNode]:
        """Lower a definition description to ``dd``."""
        if node.tight and len(node.content) == 1 and isinstance(node.content[0], Paragraph):
            return [self._element("dd", node, self._inlines(node.content[0].content))]
        return [self._element("dd", node, wrap(self._blocks(node.content), loose=True))]

    def visit_math_block(self, node: MathBlock) -> list[MarkupNode]:
        """Lower display math to a ``pre > code`` placeholder."""
        code = MarkupElement(
            tag="code",
            attributes={"class": [MATH_PLACEHOLDER_CLASS, MATH_DISPLAY_CLASS]},
            children=[MarkupText(node.content)],
        )
        return [self._element("pre", node, [code])]

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> list[MarkupNode]:
        """Lower a text node."""
        return [MarkupText(node.content)] if node.content else []

    def visit_emphasis(self, node: Emphasis) -> list[MarkupNode]:
        """Lower emphasis to ``em``."""
        return [self._element("em", node, self._inlines(node.content))]

    def visit_strong(self, node: Strong) -> list[MarkupNode]:
        """Lower strong emphasis to ``strong``."""
        return [self._element("strong", node, self._inlines(node.content))]

    def visit_strikethrough(self, node: Strikethrough) -> list[MarkupNode]:
        """Lower strikethrough to ``del``."""
        return [self._element("del", node, self._inlines(node.content))]

    def visit_superscript(self, node: Superscript) -> list[MarkupNode]:
        """Lower superscript to ``sup``."""
        return [self._element("sup", node, self._inlines(node.content))]

    def visit_subscript(self, node: Subscript) -> list[MarkupNode]:
        """Lower subscript to ``sub``."""
        return [self._element("sub", node, self._inlines(node.content))]

    def visit_code(self, node: Code) -> list[MarkupNode]:
        """Lower inline code to ``code``."""
        return [self._element("code", node, [MarkupText(node.content)])]

    def visit_link(self, node: Link) -> list[MarkupNode]:
        """Lower a link to ``a``."""
        return [self._element("a", node, self._inlines(node.content), href=node.url, title=node.title)]

    def visit_image(self, node: Image) -> list[MarkupNode]:
        """Lower an image to ``img``."""
        return [self._element("img", node, src=node.url, alt=node.alt_text, title=node.title)]

    def visit_line_break(self, node: LineBreak) -> list[MarkupNode]:
        """Soft breaks stay newlines; hard breaks become ``br``."""
        if node.soft:
            return [MarkupText("\n")]
        return [MarkupElement(tag="br"), MarkupText("\n")]

    def visit_html_inline(self, node: HTMLInline) -> list[MarkupNode]:
        """Pass inline HTML through the configured sanitizer."""
        return self._raw_html(node.content)

    def visit_math_inline(self, node: MathInline) -> list[MarkupNode]:
        """Lower inline math to a ``code`` placeholder."""
        return [
            MarkupElement(
                tag="code",
                attributes={"class": [MATH_PLACEHOLDER_CLASS, MATH_INLINE_CLASS]},
                children=[MarkupText(node.content)],
            )
        ]


def lower_document(document: Document, options: RenderOptions | None = None) -> MarkupRoot:
    """Lower ``document`` to a markup tree with ``options``."""
    root = MarkupLowering(options).lower(document)
    logger.debug(f"Lowered document to {len(root.children)} top-level markup nodes")
    return root
