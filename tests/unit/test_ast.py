#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast.py
"""Tests for the structural document tree, visitors and transforms."""

import pytest

from wechatmd.ast import (
    Code,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    SourceLocation,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    NodeTransformer,
    NodeWalker,
    extract_text,
    get_node_children,
    replace_node_children,
)

from utils import collect_nodes


@pytest.mark.unit
class TestNodes:
    """Tests for node construction."""

    def test_heading_level_validated(self):
        """Test that heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError, match="Heading level must be 1-6"):
            Heading(level=7)

    def test_source_location_to_dict(self):
        """Test that the column is omitted when unknown."""
        assert SourceLocation(line=3).to_dict() == {"line": 3}
        assert SourceLocation(line=3, column=5).to_dict() == {"line": 3, "column": 5}

    def test_metadata_not_shared(self):
        """Test that each node gets its own metadata dictionary."""
        first = Paragraph()
        second = Paragraph()
        first.metadata["source_line"] = 1
        assert second.metadata == {}


@pytest.mark.unit
class TestNodeChildren:
    """Tests for get_node_children and replace_node_children."""

    def test_content_children(self):
        heading = Heading(level=1, content=[Text(content="Hello"), Strong(content=[Text(content="world")])])
        assert len(get_node_children(heading)) == 2

    def test_table_children_include_header(self):
        header = TableRow(cells=[TableCell(content=[Text(content="H")])], is_header=True)
        body = TableRow(cells=[TableCell(content=[Text(content="B")])])
        table = Table(header=header, rows=[body])
        assert get_node_children(table) == [header, body]

    def test_definition_list_flattened_and_regrouped(self):
        term = DefinitionTerm(content=[Text(content="Term")])
        first = DefinitionDescription(content=[Paragraph(content=[Text(content="one")])])
        second = DefinitionDescription(content=[Paragraph(content=[Text(content="two")])])
        dl = DefinitionList(items=[(term, [first, second])])

        flat = get_node_children(dl)
        assert flat == [term, first, second]

        rebuilt = replace_node_children(dl, flat)
        assert rebuilt.items == [(term, [first, second])]

    def test_table_rejects_non_row_children(self):
        with pytest.raises(ValueError, match="TableRow"):
            replace_node_children(Table(), [Paragraph()])

    def test_leaf_has_no_children(self):
        assert get_node_children(Text(content="x")) == []
        assert get_node_children(Image(url="a.png")) == []


@pytest.mark.unit
class TestNodeWalker:
    """Tests for document-order traversal."""

    def test_walks_in_document_order(self):
        visited = []

        class Recorder(NodeWalker):
            def visit_text(self, node):
                visited.append(node.content)

        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="a")]),
                List(
                    ordered=False,
                    items=[ListItem(children=[Paragraph(content=[Emphasis(content=[Text(content="b")])])])],
                ),
                Paragraph(content=[Link(url="https://x", content=[Text(content="c")])]),
            ]
        )
        doc.accept(Recorder())
        assert visited == ["a", "b", "c"]

    def test_collect_nodes(self):
        doc = Document(
            children=[
                Paragraph(content=[Image(url="1.png"), Text(content=" "), Image(url="2.png")]),
                Paragraph(content=[Link(url="x", content=[Image(url="3.png")])]),
            ]
        )
        assert [image.url for image in collect_nodes(doc, Image)] == ["1.png", "2.png", "3.png"]


@pytest.mark.unit
class TestNodeTransformer:
    """Tests for tree rebuilding."""

    def test_transform_creates_new_tree(self):
        class Upper(NodeTransformer):
            def visit_text(self, node):
                return Text(content=node.content.upper())

        original = Document(children=[Paragraph(content=[Text(content="hi")])])
        transformed = Upper().transform(original)

        assert transformed.children[0].content[0].content == "HI"
        assert original.children[0].content[0].content == "hi"

    def test_returning_none_removes_node(self):
        class DropImages(NodeTransformer):
            def visit_image(self, node):
                return None

        doc = Document(children=[Paragraph(content=[Text(content="a"), Image(url="x.png")])])
        result = DropImages().transform(doc)
        assert result.children[0].content == [Text(content="a")]

    def test_metadata_copied(self):
        paragraph = Paragraph(content=[Text(content="a")], metadata={"source_line": 4})
        result = NodeTransformer().transform(Document(children=[paragraph]))

        copied = result.children[0]
        assert copied.metadata == {"source_line": 4}
        copied.metadata["source_line"] = 9
        assert paragraph.metadata["source_line"] == 4


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_recursive_text(self):
        heading = Heading(
            level=2,
            content=[Text(content="Hello "), Strong(content=[Text(content="big")]), Code(content=" world")],
        )
        assert extract_text(heading) == "Hello big world"

    def test_image_alt_and_line_break(self):
        nodes = [Text(content="a"), LineBreak(soft=True), Image(url="x.png", alt_text="pic")]
        assert extract_text(nodes) == "a pic"

    def test_custom_joiner(self):
        assert extract_text([Text(content="a"), Text(content="b")], joiner=", ") == "a, b"
