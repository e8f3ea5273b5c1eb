#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_image_grid.py
"""Tests for multi-image grid grouping."""

import pytest

from wechatmd.markup import MarkupElement, MarkupRoot, MarkupText
from wechatmd.transforms import ImageGridGrouper, create_image_grid, extract_images, resolve_grid_columns
from wechatmd.transforms.image_grid import parse_source_line


def _img(src, **attributes):
    return MarkupElement("img", {"src": src, **attributes})


def _p(*children, **attributes):
    return MarkupElement("p", dict(attributes), list(children))


@pytest.mark.unit
class TestResolveGridColumns:
    """Tests for the column count rule."""

    @pytest.mark.parametrize(
        "count,columns",
        [(0, 1), (1, 1), (2, 2), (3, 3), (4, 2), (5, 3), (6, 3), (9, 3)],
    )
    def test_columns(self, count, columns):
        assert resolve_grid_columns(count) == columns


@pytest.mark.unit
class TestExtractImages:
    """Tests for image-run membership."""

    def test_bare_image(self):
        image = _img("a.png")
        assert extract_images(image) == [image]

    def test_image_only_paragraph(self):
        first, second = _img("a.png"), _img("b.png")
        assert extract_images(_p(first, MarkupText("\n"), second)) == [first, second]

    def test_paragraph_with_text(self):
        assert extract_images(_p(_img("a.png"), MarkupText(" caption"))) == []

    def test_other_elements(self):
        assert extract_images(MarkupElement("h1", children=[_img("a.png")])) == []
        assert extract_images(MarkupText("x")) == []

    def test_parse_source_line(self):
        assert parse_source_line("12") == 12
        assert parse_source_line(7) == 7
        assert parse_source_line("x") is None
        assert parse_source_line(None) is None
        assert parse_source_line(True) is None


@pytest.mark.unit
class TestCreateImageGrid:
    """Tests for grid container construction."""

    def test_container_attributes(self):
        grid = create_image_grid([_img("a.png"), _img("b.png"), _img("c.png")], source_line=5)
        assert grid.tag == "div"
        assert grid.classes == ["wechat-multi-image-grid"]
        assert grid.attributes["data-image-count"] == "3"
        assert grid.attributes["data-columns"] == "3"
        assert grid.attributes["data-source-line"] == "5"
        assert "grid-template-columns:repeat(3,1fr)" in grid.attributes["style"]

    def test_items_wrap_styled_images(self):
        grid = create_image_grid([_img("a.png", style="max-width:100%"), _img("b.png")])
        item = grid.children[0]
        assert item.classes == ["wechat-multi-image-item"]
        image = item.children[0]
        assert image.attributes["src"] == "a.png"
        assert image.attributes["style"].startswith("max-width:100%;width:100%")
        assert image.attributes["loading"] == "lazy"
        assert "data-source-line" not in grid.attributes


@pytest.mark.unit
class TestImageGridGrouper:
    """Tests for grouping runs at the top level."""

    def test_groups_consecutive_paragraphs(self):
        root = MarkupRoot(
            children=[
                _p(MarkupText("intro")),
                MarkupText("\n"),
                _p(_img("a.png"), **{"data-source-line": "3"}),
                MarkupText("\n"),
                _p(_img("b.png"), **{"data-source-line": "5"}),
                MarkupText("\n"),
                _p(MarkupText("outro")),
            ]
        )
        grouper = ImageGridGrouper()
        grouper.apply(root)

        assert grouper.groups_created == 1
        tags = [child.tag if isinstance(child, MarkupElement) else "#text" for child in root.children]
        assert tags == ["p", "div", "p"]
        grid = root.children[1]
        assert grid.attributes["data-image-count"] == "2"
        assert grid.attributes["data-source-line"] == "3"

    def test_single_image_untouched(self):
        paragraph = _p(_img("a.png"))
        root = MarkupRoot(children=[paragraph])
        ImageGridGrouper().apply(root)
        assert root.children == [paragraph]

    def test_one_paragraph_with_many_images(self):
        root = MarkupRoot(children=[_p(*[_img(f"{i}.png") for i in range(4)])])
        ImageGridGrouper().apply(root)
        grid = root.children[0]
        assert grid.attributes["data-columns"] == "2"
        assert len(grid.children) == 4

    def test_runs_split_by_other_content(self):
        root = MarkupRoot(
            children=[
                _p(_img("a.png"), _img("b.png")),
                _p(MarkupText("break")),
                _p(_img("c.png"), _img("d.png")),
            ]
        )
        grouper = ImageGridGrouper()
        grouper.apply(root)
        assert grouper.groups_created == 2
        assert [child.tag for child in root.children] == ["div", "p", "div"]

    def test_nested_images_not_grouped(self):
        quote = MarkupElement("blockquote", children=[_p(_img("a.png")), _p(_img("b.png"))])
        root = MarkupRoot(children=[quote])
        ImageGridGrouper().apply(root)
        assert root.children == [quote]
