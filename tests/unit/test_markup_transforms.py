#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markup_transforms.py
"""Tests for the markup passes: highlight segmentation and math rendering."""

import pytest

from wechatmd.markup import MarkupElement, MarkupRaw, MarkupRoot, MarkupText, serialize
from wechatmd.transforms import HighlightSegmenter, MathRenderer, render_latex, split_highlight_segments
from wechatmd.transforms import math as math_module


def _paragraph_root(*children):
    return MarkupRoot(children=[MarkupElement("p", children=list(children))])


@pytest.mark.unit
class TestSplitHighlightSegments:
    """Tests for splitting text around ==highlight== runs."""

    def test_no_highlight(self):
        assert split_highlight_segments("plain text") is None

    def test_single_highlight(self):
        segments = split_highlight_segments("这是 ==重点== 提醒")
        assert segments == [
            MarkupText("这是 "),
            MarkupElement("mark", children=[MarkupText("重点")]),
            MarkupText(" 提醒"),
        ]

    def test_multiple_highlights_non_greedy(self):
        segments = split_highlight_segments("==a== and ==b==")
        assert [s.tag if isinstance(s, MarkupElement) else s.value for s in segments] == ["mark", " and ", "mark"]

    def test_spans_newlines(self):
        segments = split_highlight_segments("==line one\nline two==")
        assert segments == [MarkupElement("mark", children=[MarkupText("line one\nline two")])]

    def test_unterminated_left_alone(self):
        assert split_highlight_segments("==open only") is None


@pytest.mark.unit
class TestHighlightSegmenter:
    """Tests for the tree pass."""

    def test_rewrites_nested_text(self):
        root = _paragraph_root(MarkupElement("strong", children=[MarkupText("x ==y== z")]))
        segmenter = HighlightSegmenter()
        segmenter.apply(root)
        assert serialize(root) == "<p><strong>x <mark>y</mark> z</strong></p>"
        assert segmenter.marks_created == 1

    def test_code_untouched(self):
        root = MarkupRoot(
            children=[
                MarkupElement("pre", children=[MarkupElement("code", children=[MarkupText("a ==b== c")])]),
                MarkupElement("p", children=[MarkupElement("code", children=[MarkupText("==x==")])]),
            ]
        )
        HighlightSegmenter().apply(root)
        assert "<mark>" not in serialize(root)

    def test_no_highlight_leaves_tree(self):
        root = _paragraph_root(MarkupText("nothing"))
        HighlightSegmenter().apply(root)
        assert serialize(root) == "<p>nothing</p>"


@pytest.mark.unit
class TestMathRenderer:
    """Tests for math placeholder rendering."""

    def test_render_latex(self):
        markup, ok = render_latex("x^2")
        assert ok
        assert markup.startswith("<math")
        assert "<msup>" in markup

    def test_inline_placeholder(self):
        placeholder = MarkupElement("code", {"class": ["language-math", "math-inline"]}, [MarkupText("x")])
        root = _paragraph_root(MarkupText("a "), placeholder)
        renderer = MathRenderer()
        renderer.apply(root)

        span = root.children[0].children[1]
        assert span.tag == "span"
        assert span.classes == ["math", "math-inline"]
        assert isinstance(span.children[0], MarkupRaw)
        assert "<mi>x</mi>" in span.children[0].value
        assert renderer.rendered == 1

    def test_display_placeholder_keeps_source_line(self):
        code = MarkupElement("code", {"class": ["language-math", "math-display"]}, [MarkupText("\ny\n")])
        root = MarkupRoot(children=[MarkupElement("pre", {"data-source-line": "4"}, [code])])
        MathRenderer().apply(root)

        div = root.children[0]
        assert div.tag == "div"
        assert div.classes == ["math", "math-display"]
        assert div.attributes["data-source-line"] == "4"
        assert 'display="block"' in div.children[0].value

    def test_ordinary_code_block_untouched(self):
        code = MarkupElement("code", {"class": ["language-python"]}, [MarkupText("x = 1\n")])
        root = MarkupRoot(children=[MarkupElement("pre", children=[code])])
        MathRenderer().apply(root)
        assert root.children[0].tag == "pre"

    def test_conversion_failure_falls_back_to_source(self, monkeypatch):
        def broken(latex, display="inline"):
            raise RuntimeError("bad latex")

        monkeypatch.setattr(math_module, "latex_to_mathml", broken)
        placeholder = MarkupElement("code", {"class": ["language-math", "math-inline"]}, [MarkupText("a<b")])
        root = _paragraph_root(placeholder)
        MathRenderer().apply(root)

        span = root.children[0].children[0]
        assert span.classes == ["math", "math-inline", "math-error"]
        assert span.children[0].value == "a&lt;b"
