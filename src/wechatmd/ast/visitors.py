#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base classes used to process the structural
document tree. :class:`NodeVisitor` declares one ``visit_*`` method per node
type; :class:`NodeWalker` is a concrete visitor whose default behaviour is a
depth-first, document-order walk, so subclasses only override the node types
they care about.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    get_node_children,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node type. The visitor
    pattern keeps algorithms (lowering, validation, transformation) separate
    from the node structure.

    Examples
    --------
    Simple visitor that counts nodes:

        >>> class NodeCounter(NodeWalker):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def generic_visit(self, node):
        ...         self.count += 1
        ...         super().generic_visit(node)
        ...
        >>> counter = NodeCounter()
        >>> document.accept(counter)
        >>> print(counter.count)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_front_matter(self, node: FrontMatter) -> Any:
        """Visit a FrontMatter node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""
        pass

    @abstractmethod
    def visit_math_inline(self, node: MathInline) -> Any:
        """Visit a MathInline node."""
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""
        pass

    @abstractmethod
    def visit_definition_term(self, node: DefinitionTerm) -> Any:
        """Visit a DefinitionTerm node."""
        pass

    @abstractmethod
    def visit_definition_description(self, node: DefinitionDescription) -> Any:
        """Visit a DefinitionDescription node."""
        pass

    @abstractmethod
    def visit_math_block(self, node: MathBlock) -> Any:
        """Visit a MathBlock node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Visit a node generically when no specific handler applies.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass


class NodeWalker(NodeVisitor):
    """Concrete visitor that walks the whole tree in document order.

    Every ``visit_*`` method delegates to :meth:`generic_visit`, which visits
    the node's children. Subclasses override the handlers they need and call
    ``self.generic_visit(node)`` to keep descending.

    """

    def generic_visit(self, node: Node) -> None:
        """Visit all children of ``node`` in order."""
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Walk a Document node."""
        self.generic_visit(node)

    def visit_front_matter(self, node: FrontMatter) -> None:
        """Walk a FrontMatter node."""
        self.generic_visit(node)

    def visit_heading(self, node: Heading) -> None:
        """Walk a Heading node."""
        self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Walk a Paragraph node."""
        self.generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Walk a CodeBlock node."""
        self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Walk a BlockQuote node."""
        self.generic_visit(node)

    def visit_list(self, node: List) -> None:
        """Walk a List node."""
        self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> None:
        """Walk a ListItem node."""
        self.generic_visit(node)

    def visit_table(self, node: Table) -> None:
        """Walk a Table node."""
        self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> None:
        """Walk a TableRow node."""
        self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Walk a TableCell node."""
        self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Walk a ThematicBreak node."""
        self.generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Walk an HTMLBlock node."""
        self.generic_visit(node)

    def visit_text(self, node: Text) -> None:
        """Walk a Text node."""
        self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Walk an Emphasis node."""
        self.generic_visit(node)

    def visit_strong(self, node: Strong) -> None:
        """Walk a Strong node."""
        self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Walk a Strikethrough node."""
        self.generic_visit(node)

    def visit_superscript(self, node: Superscript) -> None:
        """Walk a Superscript node."""
        self.generic_visit(node)

    def visit_subscript(self, node: Subscript) -> None:
        """Walk a Subscript node."""
        self.generic_visit(node)

    def visit_code(self, node: Code) -> None:
        """Walk a Code node."""
        self.generic_visit(node)

    def visit_link(self, node: Link) -> None:
        """Walk a Link node."""
        self.generic_visit(node)

    def visit_image(self, node: Image) -> None:
        """Walk an Image node."""
        self.generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> None:
        """Walk a LineBreak node."""
        self.generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Walk an HTMLInline node."""
        self.generic_visit(node)

    def visit_math_inline(self, node: MathInline) -> None:
        """Walk a MathInline node."""
        self.generic_visit(node)

    def visit_definition_list(self, node: DefinitionList) -> None:
        """Walk a DefinitionList node."""
        self.generic_visit(node)

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        """Walk a DefinitionTerm node."""
        self.generic_visit(node)

    def visit_definition_description(self, node: DefinitionDescription) -> None:
        """Walk a DefinitionDescription node."""
        self.generic_visit(node)

    def visit_math_block(self, node: MathBlock) -> None:
        """Walk a MathBlock node."""
        self.generic_visit(node)
