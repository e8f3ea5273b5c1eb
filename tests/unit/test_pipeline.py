#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_pipeline.py
"""Tests for the render pipeline and the public API functions."""

import asyncio
import logging

import pytest

from wechatmd import (
    RenderOptions,
    RenderPipeline,
    ThemeNotFoundError,
    ThemeValidationError,
    TransformError,
    render_markdown_to_html,
    render_markdown_to_html_async,
)
from wechatmd.ast import Document
from wechatmd.markup import MarkupRoot
from wechatmd.options import MarkdownParserOptions
from wechatmd.transforms import highlight as highlight_module


@pytest.mark.unit
class TestRenderPipeline:
    """Tests for pipeline construction and stage selection."""

    def test_default_stages(self):
        assert RenderPipeline().get_stage_names() == [
            "parse",
            "strip-front-matter",
            "emoji",
            "source-lines",
            "lower",
            "highlight",
            "math",
            "theme",
            "image-grid",
            "serialize",
        ]

    def test_optional_stages_disabled(self):
        options = RenderOptions(
            inline_styles=False,
            annotate_source_lines=False,
            highlight=False,
            render_math=False,
            group_images=False,
            parser_options=MarkdownParserOptions(expand_emoji=False),
        )
        assert RenderPipeline(options=options).get_stage_names() == [
            "parse",
            "strip-front-matter",
            "lower",
            "serialize",
        ]

    def test_theme_resolution(self, theme_data):
        assert RenderPipeline().theme.id == "tech-minimal"
        assert RenderPipeline(theme="warm-note").theme.id == "warm-note"
        assert RenderPipeline(theme=theme_data).theme.id == "tech-minimal"

    def test_invalid_theme_rejected_before_render(self, theme_data):
        del theme_data["tokens"]["color"]
        with pytest.raises(ThemeValidationError):
            RenderPipeline(theme=theme_data)

    def test_unknown_theme(self):
        with pytest.raises(ThemeNotFoundError):
            RenderPipeline(theme="missing-theme")

    def test_rejects_wrong_options_type(self):
        with pytest.raises(TypeError, match="RenderOptions"):
            RenderPipeline(options={"inline_styles": False})

    def test_build_document_and_markup(self):
        pipeline = RenderPipeline()
        document = pipeline.build_document("---\na: 1\n---\n\n# Hi :rocket:")
        assert isinstance(document, Document)
        assert document.metadata["front_matter"] == {"a": 1}
        assert isinstance(pipeline.build_markup("# Hi"), MarkupRoot)

    def test_stage_failure_wrapped(self, monkeypatch):
        def broken(self, root):
            raise RuntimeError("boom")

        monkeypatch.setattr(highlight_module.HighlightSegmenter, "apply", broken)
        with pytest.raises(TransformError) as exc_info:
            RenderPipeline().execute("text")
        assert exc_info.value.transform_name == "highlight"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_stage_timing_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="wechatmd.pipeline")
        RenderPipeline().execute("# Hi")
        assert any("lower completed in" in record.getMessage() for record in caplog.records)

    def test_stage_order_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="wechatmd.pipeline")
        RenderPipeline(options=RenderOptions(group_images=False)).execute("x")
        messages = [record.getMessage() for record in caplog.records]
        assert any(message.endswith("theme -> serialize") for message in messages)


@pytest.mark.unit
class TestRenderApi:
    """Tests for render_markdown_to_html."""

    def test_unstyled_output(self):
        html = render_markdown_to_html("# Title\n\nBody", inline_styles=False, annotate_source_lines=False)
        assert html == "<h1>Title</h1>\n<p>Body</p>"

    def test_styled_output(self):
        html = render_markdown_to_html("# Title\n\nBody")
        assert '<h1 data-source-line="1" style="color:#2B2B2B;' in html
        assert "font-size:34px" in html

    def test_inline_styles_argument_overrides_options(self):
        html = render_markdown_to_html("Body", inline_styles=False, options=RenderOptions(inline_styles=True))
        assert "style=" not in html

    def test_keyword_overrides(self):
        html = render_markdown_to_html("a <b>x</b>", inline_styles=False, html_mode="escape")
        assert "&lt;b&gt;" in html

    def test_unknown_keyword_rejected(self):
        with pytest.raises(TypeError):
            render_markdown_to_html("x", not_an_option=True)

    def test_emoji_expanded(self):
        assert "\U0001f680" in render_markdown_to_html("Ship :rocket:", inline_styles=False)

    def test_math_rendered(self):
        html = render_markdown_to_html("Area $a^2$", inline_styles=False)
        assert '<span class="math math-inline"><math' in html

    def test_async_matches_sync(self):
        markdown = "# Title\n\n这是 ==重点== 提醒"
        result = asyncio.run(render_markdown_to_html_async(markdown, theme="warm-note"))
        assert result == render_markdown_to_html(markdown, theme="warm-note")
