#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/ast/transforms.py
"""AST transformation utilities.

This module provides the transformer visitor used by the structural passes of
the pipeline. A :class:`NodeTransformer` builds a new tree; returning ``None``
from a handler removes the node.

Examples
--------
Remove all images from a document:

    >>> class DropImages(NodeTransformer):
    ...     def visit_image(self, node):
    ...         return None
    >>> new_doc = DropImages().transform(doc)

"""

from __future__ import annotations

import copy
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
    replace_node_children,
)
from wechatmd.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses override visit_* methods to return modified nodes, or None to
    remove nodes. The transformer creates a new tree; the input tree is left
    untouched apart from shared leaf values.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> new_doc = UppercaseTransformer().transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, dropping removed ones."""
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform nodes generically using traversal helpers.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Copy of the node with transformed children and its own metadata
            dictionary

        """
        children = get_node_children(node)
        if not children:
            leaf = copy.copy(node)
            leaf.metadata = dict(node.metadata)
            return leaf

        rebuilt = replace_node_children(node, self._transform_children(children))
        rebuilt.metadata = dict(node.metadata)
        return rebuilt

    def generic_visit(self, node: Node) -> Any:
        """Fall back to the generic copy-and-recurse transformation."""
        return self._generic_transform(node)

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(
            children=self._transform_children(node.children),
            metadata=node.metadata.copy(),
            source_location=node.source_location,
        )

    def visit_front_matter(self, node: FrontMatter) -> FrontMatter | None:
        """Transform a FrontMatter node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_heading(self, node: Heading) -> Heading | None:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> Paragraph | None:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock | None:
        """Transform a CodeBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote | None:
        """Transform a BlockQuote node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list(self, node: List) -> List | None:
        """Transform a List node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list_item(self, node: ListItem) -> ListItem | None:
        """Transform a ListItem node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_table(self, node: Table) -> Table | None:
        """Transform a Table node."""
        return Table(
            rows=self._transform_children(node.rows),  # type: ignore[arg-type]
            header=self.transform(node.header) if node.header else None,  # type: ignore[arg-type]
            alignments=list(node.alignments),
            metadata=node.metadata.copy(),
            source_location=node.source_location,
        )

    def visit_table_row(self, node: TableRow) -> TableRow | None:
        """Transform a TableRow node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_table_cell(self, node: TableCell) -> TableCell | None:
        """Transform a TableCell node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak | None:
        """Transform a ThematicBreak node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_html_block(self, node: HTMLBlock) -> HTMLBlock | None:
        """Transform an HTMLBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> Text | None:
        """Transform a Text node."""
        return Text(content=node.content, metadata=node.metadata.copy(), source_location=node.source_location)

    def visit_emphasis(self, node: Emphasis) -> Emphasis | None:
        """Transform an Emphasis node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong | None:
        """Transform a Strong node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strikethrough(self, node: Strikethrough) -> Strikethrough | None:
        """Transform a Strikethrough node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_superscript(self, node: Superscript) -> Superscript | None:
        """Transform a Superscript node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_subscript(self, node: Subscript) -> Subscript | None:
        """Transform a Subscript node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code | None:
        """Transform a Code node."""
        return Code(content=node.content, metadata=node.metadata.copy(), source_location=node.source_location)

    def visit_link(self, node: Link) -> Link | None:
        """Transform a Link node."""
        return Link(
            url=node.url,
            content=self._transform_children(node.content),
            title=node.title,
            metadata=node.metadata.copy(),
            source_location=node.source_location,
        )

    def visit_image(self, node: Image) -> Image | None:
        """Transform an Image node."""
        return Image(
            url=node.url,
            alt_text=node.alt_text,
            title=node.title,
            metadata=node.metadata.copy(),
            source_location=node.source_location,
        )

    def visit_line_break(self, node: LineBreak) -> LineBreak | None:
        """Transform a LineBreak node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_html_inline(self, node: HTMLInline) -> HTMLInline | None:
        """Transform an HTMLInline node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_math_inline(self, node: MathInline) -> MathInline | None:
        """Transform a MathInline node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_definition_list(self, node: DefinitionList) -> DefinitionList | None:
        """Transform a DefinitionList node, dropping terms that are removed."""
        new_items: list[tuple[DefinitionTerm, list[DefinitionDescription]]] = []
        for term, descriptions in node.items:
            new_term = self.transform(term)
            if new_term is None:
                continue
            new_descriptions = self._transform_children(descriptions)  # type: ignore[arg-type]
            new_items.append((new_term, new_descriptions))  # type: ignore[arg-type]
        return DefinitionList(items=new_items, metadata=node.metadata.copy(), source_location=node.source_location)

    def visit_definition_term(self, node: DefinitionTerm) -> DefinitionTerm | None:
        """Transform a DefinitionTerm node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_definition_description(self, node: DefinitionDescription) -> DefinitionDescription | None:
        """Transform a DefinitionDescription node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_math_block(self, node: MathBlock) -> MathBlock | None:
        """Transform a MathBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

