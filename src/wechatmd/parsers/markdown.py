#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown source text into the structural document tree
using markdown-it-py. The token stream is folded into a
:class:`markdown_it.tree.SyntaxTreeNode` and each syntax node is mapped to the
corresponding AST node, recording where it starts in the source.

Parsing never fails: markdown-it degrades malformed syntax to literal text.

"""

from __future__ import annotations

import logging
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.subscript import sub_plugin
from mdit_py_plugins.superscript import superscript_plugin

from wechatmd.ast import (
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
)
from wechatmd.options.markdown import MarkdownParserOptions
from wechatmd.parsers.extensions import front_matter_plugin

logger = logging.getLogger(__name__)

_ALIGNMENTS = {"text-align:left": "left", "text-align:center": "center", "text-align:right": "right"}


def create_markdown_it(options: MarkdownParserOptions | None = None) -> MarkdownIt:
    """Build a configured markdown-it instance.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Extension switches

    Returns
    -------
    MarkdownIt
        Parser with the CommonMark preset plus the enabled extensions

    """
    options = options or MarkdownParserOptions()

    md = MarkdownIt("commonmark", {"linkify": options.linkify})
    enabled = []
    if options.parse_tables:
        enabled.append("table")
    if options.parse_strikethrough:
        enabled.append("strikethrough")
    if options.linkify:
        enabled.append("linkify")
    if enabled:
        md.enable(enabled)

    if options.parse_frontmatter:
        md.use(front_matter_plugin)
    if options.parse_definition_lists:
        md.use(deflist_plugin)
    if options.parse_math:
        # "$5 and $10" stays plain text
        md.use(dollarmath_plugin, allow_digits=False)
    if options.parse_super_subscript:
        md.use(superscript_plugin)
        md.use(sub_plugin)

    return md


class _InlineCursor:
    """Track the source line and column while walking inline tokens.

    Inline tokens carry no position of their own, so the cursor starts at the
    first line of the enclosing block and advances on every line break. Link
    and image columns are found by searching the current source line forward
    from the last match.
    """

    def __init__(self, lines: list[str], line_index: int):
        self.lines = lines
        self.line_index = line_index
        self.offset = 0

    def _current(self) -> str:
        if 0 <= self.line_index < len(self.lines):
            return self.lines[self.line_index]
        return ""

    def newline(self, count: int = 1) -> None:
        self.line_index += count
        self.offset = 0

    def advance(self, text: str) -> None:
        if not text:
            return
        index = self._current().find(text, self.offset)
        if index >= 0:
            self.offset = index + len(text)

    def locate(self, marker: str) -> SourceLocation:
        line = self._current()
        index = line.find(marker, self.offset) if marker else -1
        if index < 0:
            return SourceLocation(line=self.line_index + 1)
        self.offset = index + len(marker)
        return SourceLocation(line=self.line_index + 1, column=index + 1)


class MarkdownParser:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\\n\\nThis is **bold**.")

    With options:

        >>> options = MarkdownParserOptions(parse_math=False)
        >>> doc = MarkdownParser(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise TypeError(f"Expected MarkdownParserOptions, got {type(options).__name__}")
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()
        self._md = create_markdown_it(self.options)
        self._lines: list[str] = []

    def parse(self, text: str) -> Document:
        """Parse Markdown text into an AST Document.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        Document
            AST document node with source locations recorded

        """
        source = text.replace("\r\n", "\n").replace("\r", "\n")
        self._lines = source.split("\n")

        tokens = self._md.parse(source)
        tree = SyntaxTreeNode(tokens)
        logger.debug(f"Parsed {len(tokens)} markdown-it tokens")

        return Document(children=self._process_blocks(tree.children))

    # ------------------------------------------------------------------
    # Block level
    # ------------------------------------------------------------------

    @staticmethod
    def _block_location(node: SyntaxTreeNode) -> Optional[SourceLocation]:
        if node.map:
            return SourceLocation(line=node.map[0] + 1)
        return None

    def _process_blocks(self, nodes: list[SyntaxTreeNode]) -> list[Node]:
        result: list[Node] = []
        for node in nodes:
            converted = self._process_block(node)
            if converted is None:
                continue
            if isinstance(converted, list):
                result.extend(converted)
            else:
                result.append(converted)
        return result

    def _process_block(self, node: SyntaxTreeNode) -> Node | list[Node] | None:
        node_type = node.type
        location = self._block_location(node)

        if node_type == "paragraph":
            return Paragraph(content=self._paragraph_inlines(node), source_location=location)
        elif node_type == "heading":
            return Heading(level=int(node.tag[1:]), content=self._paragraph_inlines(node), source_location=location)
        elif node_type == "blockquote":
            return BlockQuote(children=self._process_blocks(node.children), source_location=location)
        elif node_type in ("bullet_list", "ordered_list"):
            return self._process_list(node, location)
        elif node_type in ("fence", "code_block"):
            return self._process_code_block(node, location)
        elif node_type == "hr":
            return ThematicBreak(source_location=location)
        elif node_type == "html_block":
            return HTMLBlock(content=node.content, source_location=location)
        elif node_type == "table":
            return self._process_table(node, location)
        elif node_type == "dl":
            return self._process_definition_list(node, location)
        elif node_type in ("math_block", "math_block_label"):
            label = (node.info or None) if node_type == "math_block_label" else None
            return MathBlock(content=node.content.strip("\n"), label=label, source_location=location)
        elif node_type == "front_matter":
            return FrontMatter(content=node.content, format=node.info or "yaml", source_location=location)
        elif node_type == "inline":
            return self._process_inline(node)

        logger.debug(f"Skipping unsupported block token: {node_type}")
        return None

    def _paragraph_inlines(self, node: SyntaxTreeNode) -> list[Node]:
        inlines: list[Node] = []
        for child in node.children:
            if child.type == "inline":
                inlines.extend(self._process_inline(child))
        return inlines

    def _process_list(self, node: SyntaxTreeNode, location: Optional[SourceLocation]) -> List:
        ordered = node.type == "ordered_list"
        start = node.attrs.get("start", 1) if ordered else 1
        try:
            start = int(start)
        except (TypeError, ValueError):
            start = 1

        # markdown-it marks paragraphs of tight lists as hidden
        tight = True
        items: list[Node] = []
        for item in node.children:
            for child in item.children:
                if child.type == "paragraph" and not child.hidden:
                    tight = False
            items.append(
                ListItem(children=self._process_blocks(item.children), source_location=self._block_location(item))
            )

        return List(ordered=ordered, items=items, start=start, tight=tight, source_location=location)

    @staticmethod
    def _process_code_block(node: SyntaxTreeNode, location: Optional[SourceLocation]) -> CodeBlock:
        content = node.content
        if content.endswith("\n"):
            content = content[:-1]

        language = None
        if node.type == "fence" and node.info.strip():
            language = node.info.strip().split()[0]

        return CodeBlock(content=content, language=language, source_location=location)

    def _process_table(self, node: SyntaxTreeNode, location: Optional[SourceLocation]) -> Table:
        header: Optional[TableRow] = None
        rows: list[TableRow] = []
        alignments: list = []

        for section in node.children:
            for row_node in section.children:
                is_header = section.type == "thead"
                cells = []
                for cell_node in row_node.children:
                    style = str(cell_node.attrs.get("style", ""))
                    alignment = _ALIGNMENTS.get(style)
                    content = self._paragraph_inlines(cell_node)
                    cells.append(
                        TableCell(content=content, alignment=alignment, source_location=self._block_location(cell_node))
                    )
                    if is_header:
                        alignments.append(alignment)
                row = TableRow(cells=cells, is_header=is_header, source_location=self._block_location(row_node))
                if is_header and header is None:
                    header = row
                else:
                    rows.append(row)

        return Table(rows=rows, header=header, alignments=alignments, source_location=location)

    def _process_definition_list(self, node: SyntaxTreeNode, location: Optional[SourceLocation]) -> DefinitionList:
        items: list[tuple[DefinitionTerm, list[DefinitionDescription]]] = []
        for child in node.children:
            child_location = self._block_location(child)
            if child.type == "dt":
                term = DefinitionTerm(content=self._paragraph_inlines(child), source_location=child_location)
                items.append((term, []))
            elif child.type == "dd" and items:
                tight = all(c.hidden for c in child.children if c.type == "paragraph")
                description = DefinitionDescription(
                    content=self._process_blocks(child.children), tight=tight, source_location=child_location
                )
                items[-1][1].append(description)

        return DefinitionList(items=items, source_location=location)

    # ------------------------------------------------------------------
    # Inline level
    # ------------------------------------------------------------------

    def _process_inline(self, node: SyntaxTreeNode) -> list[Node]:
        start_line = node.map[0] if node.map else 0
        cursor = _InlineCursor(self._lines, start_line)
        return self._process_inline_children(node.children, cursor)

    def _process_inline_children(self, nodes: list[SyntaxTreeNode], cursor: _InlineCursor) -> list[Node]:
        result: list[Node] = []
        for node in nodes:
            converted = self._process_inline_node(node, cursor)
            if converted is None:
                continue
            # Merge adjacent text runs produced by escapes and entities
            if isinstance(converted, Text) and result and isinstance(result[-1], Text):
                previous = result[-1]
                merged = previous.content + converted.content
                result[-1] = Text(content=merged, source_location=previous.source_location)
            else:
                result.append(converted)
        return result

    def _process_inline_node(self, node: SyntaxTreeNode, cursor: _InlineCursor) -> Node | None:
        node_type = node.type

        if node_type in ("text", "text_special"):
            cursor.advance(node.content)
            return Text(content=node.content)
        elif node_type == "softbreak":
            cursor.newline()
            return LineBreak(soft=True)
        elif node_type == "hardbreak":
            cursor.newline()
            return LineBreak(soft=False)
        elif node_type == "code_inline":
            cursor.advance(node.content)
            return Code(content=node.content)
        elif node_type == "em":
            return Emphasis(content=self._process_inline_children(node.children, cursor))
        elif node_type == "strong":
            return Strong(content=self._process_inline_children(node.children, cursor))
        elif node_type == "s":
            return Strikethrough(content=self._process_inline_children(node.children, cursor))
        elif node_type == "sup":
            return Superscript(content=self._process_inline_children(node.children, cursor))
        elif node_type == "sub":
            return Subscript(content=self._process_inline_children(node.children, cursor))
        elif node_type == "link":
            return self._process_link(node, cursor)
        elif node_type == "image":
            location = cursor.locate("![")
            alt_text = self._plain_text(node.children)
            cursor.advance(str(node.attrs.get("src", "")))
            return Image(
                url=str(node.attrs.get("src", "")),
                alt_text=alt_text,
                title=node.attrs.get("title") or None,  # type: ignore[arg-type]
                source_location=location,
            )
        elif node_type == "html_inline":
            location = cursor.locate(node.content.split("\n", 1)[0])
            line_count = node.content.count("\n")
            if line_count:
                cursor.newline(line_count)
            return HTMLInline(content=node.content, source_location=location)
        elif node_type in ("math_inline", "math_inline_double"):
            cursor.advance(node.content)
            return MathInline(content=node.content)

        logger.debug(f"Skipping unsupported inline token: {node_type}")
        return None

    def _process_link(self, node: SyntaxTreeNode, cursor: _InlineCursor) -> Link:
        href = str(node.attrs.get("href", ""))
        if node.markup == "autolink":
            location = cursor.locate("<")
        elif node.markup == "linkify":
            location = cursor.locate(self._plain_text(node.children))
        else:
            location = cursor.locate("[")

        content = self._process_inline_children(node.children, cursor)
        return Link(
            url=href,
            content=content,
            title=node.attrs.get("title") or None,  # type: ignore[arg-type]
            source_location=location,
        )

    def _plain_text(self, nodes: list[SyntaxTreeNode]) -> str:
        parts = []
        for node in nodes:
            if node.type in ("text", "text_special", "code_inline", "math_inline", "math_inline_double"):
                parts.append(node.content)
            elif node.type in ("softbreak", "hardbreak"):
                parts.append("\n")
            else:
                parts.append(self._plain_text(node.children))
        return "".join(parts)


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from wechatmd.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)
