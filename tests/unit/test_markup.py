#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markup.py
"""Tests for the markup tree, its lowering from the AST and serialization."""

import pytest

from wechatmd.markup import (
    MarkupElement,
    MarkupLowering,
    MarkupRaw,
    MarkupRoot,
    MarkupText,
    is_whitespace_text,
    iter_elements,
    lower_document,
    serialize,
)
from wechatmd.markup.serializer import serialize_attributes
from wechatmd.options import RenderOptions
from wechatmd.parsers import markdown_to_ast
from wechatmd.transforms.source_lines import SourceLineAnnotator


def lower(markdown, **options):
    """Lower Markdown without source lines unless requested."""
    options.setdefault("annotate_source_lines", False)
    render_options = RenderOptions(**options)
    document = markdown_to_ast(markdown)
    if render_options.annotate_source_lines:
        SourceLineAnnotator().annotate(document)
    return MarkupLowering(render_options).lower(document)


def render(markdown, **options):
    return serialize(lower(markdown, **options))


@pytest.mark.unit
class TestMarkupNodes:
    """Tests for markup node helpers."""

    def test_classes_from_list_and_string(self):
        assert MarkupElement("div", {"class": ["a", "b"]}).classes == ["a", "b"]
        assert MarkupElement("div", {"class": "a b"}).has_class("b")
        assert MarkupElement("div").classes == []

    def test_get_text(self):
        element = MarkupElement("p", children=[MarkupText("a"), MarkupElement("em", children=[MarkupText("b")])])
        assert element.get_text() == "ab"

    def test_iter_elements_preorder(self):
        inner = MarkupElement("em")
        outer = MarkupElement("p", children=[MarkupText("x"), inner])
        root = MarkupRoot(children=[outer])
        assert [(el.tag, parent) for el, parent in iter_elements(root)] == [("p", root), ("em", outer)]

    def test_is_whitespace_text(self):
        assert is_whitespace_text(MarkupText("\n  "))
        assert not is_whitespace_text(MarkupText(" a "))
        assert not is_whitespace_text(MarkupElement("br"))


@pytest.mark.unit
class TestSerializer:
    """Tests for HTML serialization."""

    def test_text_escaped(self):
        root = MarkupRoot(children=[MarkupElement("p", children=[MarkupText("a < b & c")])])
        assert serialize(root) == "<p>a &lt; b &amp; c</p>"

    def test_raw_emitted_verbatim(self):
        assert serialize(MarkupRoot(children=[MarkupRaw("<b>x</b>")])) == "<b>x</b>"

    def test_void_elements(self):
        root = MarkupRoot(children=[MarkupElement("img", {"src": "a.png"}), MarkupElement("br")])
        assert serialize(root) == '<img src="a.png"><br>'

    def test_attribute_rules(self):
        attributes = {"class": ["a", "b"], "hidden": True, "title": None, "open": False, "data-n": 2.0, "alt": '"q"'}
        assert serialize_attributes(attributes) == ' class="a b" hidden data-n="2" alt="&quot;q&quot;"'

    def test_empty_class_list_omitted(self):
        assert serialize_attributes({"class": []}) == ""


@pytest.mark.unit
class TestLowering:
    """Tests for AST to markup lowering."""

    def test_blocks_joined_by_newlines(self):
        assert render("# Title\n\nBody") == "<h1>Title</h1>\n<p>Body</p>"

    def test_tight_list_unwraps_paragraphs(self):
        assert render("- a\n- b") == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>"

    def test_loose_list_keeps_paragraphs(self):
        assert render("- a\n\n- b") == "<ul>\n<li>\n<p>a</p>\n</li>\n<li>\n<p>b</p>\n</li>\n</ul>"

    def test_ordered_list_start(self):
        assert render("1. a").startswith("<ol>")
        assert render("3. a").startswith('<ol start="3">')

    def test_code_block(self):
        assert render("```js\nlet x = 1 < 2;\n```") == '<pre><code class="language-js">let x = 1 &lt; 2;\n</code></pre>'

    def test_block_quote(self):
        assert render("> quote") == "<blockquote>\n<p>quote</p>\n</blockquote>"

    def test_inline_formatting(self):
        html = render("*a* **b** ~~c~~ `d` x^2^ H~2~O")
        assert html == "<p><em>a</em> <strong>b</strong> <del>c</del> <code>d</code> x<sup>2</sup> H<sub>2</sub>O</p>"

    def test_link_and_image(self):
        html = render('[site](https://example.com "Title") ![alt](https://x/a.png)')
        assert '<a href="https://example.com" title="Title">site</a>' in html
        assert '<img src="https://x/a.png" alt="alt">' in html

    def test_breaks(self):
        assert render("one\ntwo  \nthree") == "<p>one\ntwo<br>\nthree</p>"

    def test_table(self):
        html = render("| a | b |\n| :-- | --: |\n| 1 | 2 |")
        assert html.startswith("<table>\n<thead>\n<tr>\n")
        assert '<th align="left">a</th>' in html
        assert '<td align="right">2</td>' in html

    def test_definition_list(self):
        assert render("Term\n: Definition") == "<dl>\n<dt>Term</dt>\n<dd>Definition</dd>\n</dl>"

    def test_front_matter_not_rendered(self):
        assert render("---\ntitle: x\n---\n\nBody") == "<p>Body</p>"

    def test_math_placeholders(self):
        root = lower("inline $x$\n\n$$\ny\n$$")
        paragraph = root.children[0]
        placeholder = paragraph.children[1]
        assert placeholder.tag == "code"
        assert placeholder.classes == ["language-math", "math-inline"]
        display = root.children[2]
        assert display.tag == "pre"
        assert display.children[0].classes == ["language-math", "math-display"]

    def test_source_lines(self):
        html = render("# A\n\n![x](https://x/a.png)", annotate_source_lines=True)
        assert html.startswith('<h1 data-source-line="1">A</h1>')
        assert '<p data-source-line="3"><img src="https://x/a.png" alt="x" data-source-line="3"></p>' in html

    def test_source_lines_disabled(self):
        assert "data-source-line" not in render("# A\n\nB", annotate_source_lines=False)

    def test_lower_document_default_options(self):
        root = lower_document(markdown_to_ast("x"))
        assert isinstance(root, MarkupRoot)


@pytest.mark.unit
class TestEmbeddedHtml:
    """Tests for raw HTML handling during lowering."""

    def test_sanitize_removes_script(self):
        html = render("<div>ok</div>\n\n<script>alert(1)</script>")
        assert "<div>ok</div>" in html
        assert "script" not in html

    def test_sanitize_removes_event_handlers(self):
        html = render('text <span onclick="x()" class="c">hi</span>')
        assert '<span class="c">hi</span>' in html
        assert "onclick" not in html

    def test_escape_mode(self):
        html = render("<b>bold</b> text", html_mode="escape")
        assert "&lt;b&gt;" in html

    def test_drop_mode(self):
        assert render("a <b>bold</b> c", html_mode="drop") == "<p>a bold c</p>"

    def test_pass_through_mode(self):
        html = render("<script>x</script>", html_mode="pass-through")
        assert "<script>x</script>" in html
