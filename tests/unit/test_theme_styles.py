#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_theme_styles.py
"""Tests for theme style functions and the styling pass."""

import pytest

from wechatmd.markup import MarkupElement, MarkupRoot, MarkupText, serialize
from wechatmd.theme import merge_inline_style_string, style_to_string, validate_theme
from wechatmd.theme import styles
from wechatmd.transforms import ThemeStyler, apply_inline_style


@pytest.mark.unit
class TestStyleSerialization:
    """Tests for style mapping serialization."""

    def test_style_to_string(self):
        style = {"color": "#000", "line-height": 1.7, "font-weight": 600, "margin": 0, "padding": None, "x": ""}
        assert style_to_string(style) == "color:#000;line-height:1.7;font-weight:600;margin:0"

    def test_camel_case_hyphenated(self):
        assert style_to_string({"fontSize": "12px", "border_radius": "4px"}) == "font-size:12px;border-radius:4px"

    def test_integral_floats(self):
        assert style_to_string({"line-height": 2.0}) == "line-height:2"

    def test_merge_appends(self):
        assert merge_inline_style_string("color:red", {"margin": "0"}) == "color:red;margin:0"
        assert merge_inline_style_string(None, {"margin": "0"}) == "margin:0"
        assert merge_inline_style_string("color:red", {}) == "color:red"


@pytest.mark.unit
class TestTokenResolution:
    """Tests for spacing, size and accent fallbacks."""

    def test_tech_minimal_values(self, tech_minimal):
        assert styles.resolve_paragraph_spacing(tech_minimal) == 16
        assert styles.resolve_section_spacing(tech_minimal) == 32
        assert styles.resolve_heading_font_size(tech_minimal, 1) == 34
        assert styles.resolve_blockquote_accent(tech_minimal) == "#1A73E8"

    def test_spacing_falls_back_to_components(self, theme_data):
        theme_data["tokens"]["spacing"] = {}
        theme_data["components"]["paragraph"]["spacing"] = 20
        theme_data["components"]["heading"]["spacing"] = 40
        theme = validate_theme(theme_data)
        assert styles.resolve_paragraph_spacing(theme) == 20
        assert styles.resolve_section_spacing(theme) == 40

    def test_spacing_defaults(self, theme_data):
        theme_data["tokens"]["spacing"] = {}
        theme_data["components"] = {}
        theme = validate_theme(theme_data)
        assert styles.resolve_paragraph_spacing(theme) == 16
        assert styles.resolve_section_spacing(theme) == 24

    def test_derived_heading_sizes(self, theme_data):
        theme_data["components"] = {}
        theme = validate_theme(theme_data)
        assert [styles.resolve_heading_font_size(theme, level) for level in range(1, 7)] == [36, 32, 28, 24, 20, 16]

    def test_literal_accent_color(self, theme_data):
        theme_data["components"]["blockquote"]["accentColor"] = "#123456"
        assert styles.resolve_blockquote_accent(validate_theme(theme_data)) == "#123456"

    def test_missing_accent_uses_primary(self, theme_data):
        theme_data["components"] = {}
        assert styles.resolve_blockquote_accent(validate_theme(theme_data)) == "#1A73E8"


@pytest.mark.unit
class TestStyleFunctions:
    """Tests for individual style functions."""

    def test_paragraph(self, tech_minimal):
        style = styles.get_paragraph_style(tech_minimal)
        assert style["color"] == "#2B2B2B"
        assert style["line-height"] == 1.7
        assert style["margin-bottom"] == "16px"
        assert style["max-width"] == "680px"

    def test_paragraph_without_max_width(self, theme_data):
        theme_data["components"] = {}
        assert "max-width" not in style_to_string(styles.get_paragraph_style(validate_theme(theme_data)))

    def test_heading(self, tech_minimal):
        h1 = styles.get_heading_style(tech_minimal, 1)
        h2 = styles.get_heading_style(tech_minimal, 2)
        assert h1["font-size"] == "34px"
        assert h1["margin-top"] == "0"
        assert h1["font-weight"] == 600
        assert h2["margin-top"] == "32px"

    def test_heading_level_clamped(self, tech_minimal):
        assert styles.get_heading_style(tech_minimal, 9) == styles.get_heading_style(tech_minimal, 6)

    def test_heading_weight_override(self):
        theme = validate_theme(
            {**_minimal_theme(), "components": {"heading": {"h1": {"fontSize": 30, "fontWeight": 800}}}}
        )
        assert styles.get_heading_style(theme, 1)["font-weight"] == 800
        assert styles.get_heading_style(theme, 2)["font-weight"] == 700

    def test_blockquote(self, tech_minimal):
        style = styles.get_blockquote_style(tech_minimal)
        assert style["border-left"] == "3px solid #1A73E8"
        assert style["background"] == "#F1F6FF"

    def test_code_inside_and_outside_pre(self, tech_minimal):
        assert styles.get_code_style(tech_minimal, inside_pre=True)["display"] == "block"
        assert styles.get_code_style(tech_minimal, inside_pre=False)["color"] == "#1A73E8"

    def test_list_item_half_spacing(self, tech_minimal):
        assert styles.get_list_item_style(tech_minimal) == {"margin-bottom": "8px"}

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_component_spacing_ignored(self, value):
        data = _minimal_theme()
        data["components"] = {"list": {"spacing": value}, "paragraph": {"maxWidth": value}}
        theme = validate_theme(data)
        assert styles.get_list_item_style(theme) == {"margin-bottom": "8px"}
        assert "max-width" not in style_to_string(styles.get_paragraph_style(theme))


def _minimal_theme():
    return {
        "id": "minimal",
        "version": "1",
        "metadata": {"name": "Minimal"},
        "tokens": {
            "color": {"primary": "#000", "text": "#111", "background": "#fff"},
            "typography": {
                "fontFamily": "serif",
                "heading": {"lineHeight": 1.2, "weight": 700},
                "body": {"lineHeight": 1.5, "weight": 400},
            },
            "spacing": {},
        },
    }


@pytest.mark.unit
class TestThemeStyler:
    """Tests for the styling pass over the markup tree."""

    def test_styles_elements(self, tech_minimal):
        root = MarkupRoot(children=[MarkupElement("p", children=[MarkupText("x")])])
        styler = ThemeStyler(tech_minimal)
        styler.apply(root)

        paragraph = root.children[0]
        assert paragraph.attributes["style"] == style_to_string(styles.get_paragraph_style(tech_minimal))
        assert paragraph.styled
        assert styler.styled_count == 1

    def test_existing_style_preserved_first(self, tech_minimal):
        element = MarkupElement("p", {"style": "color:red"})
        ThemeStyler(tech_minimal).apply(MarkupRoot(children=[element]))
        assert element.attributes["style"].startswith("color:red;color:#2B2B2B")

    def test_code_styled_by_parent(self, tech_minimal):
        block = MarkupElement("code", children=[MarkupText("x")])
        inline = MarkupElement("code", children=[MarkupText("y")])
        root = MarkupRoot(children=[MarkupElement("pre", children=[block]), MarkupElement("p", children=[inline])])
        ThemeStyler(tech_minimal).apply(root)
        assert "display:block" in block.attributes["style"]
        assert "display:block" not in inline.attributes["style"]

    def test_default_attributes(self, tech_minimal):
        link = MarkupElement("a", {"href": "https://x", "target": "_self"})
        image = MarkupElement("img", {"src": "a.png"})
        ThemeStyler(tech_minimal).apply(MarkupRoot(children=[link, image]))
        assert link.attributes["target"] == "_self"
        assert link.attributes["rel"] == "noopener noreferrer"
        assert image.attributes["loading"] == "lazy"

    def test_unthemed_tags_untouched(self, tech_minimal):
        element = MarkupElement("span", {"class": ["x"]})
        ThemeStyler(tech_minimal).apply(MarkupRoot(children=[element]))
        assert "style" not in element.attributes

    def test_idempotent(self, tech_minimal):
        root = MarkupRoot(children=[MarkupElement("h2", children=[MarkupText("t")]), MarkupElement("hr")])
        styler = ThemeStyler(tech_minimal)
        styler.apply(root)
        first = serialize(root)
        styler.apply(root)
        assert serialize(root) == first
        assert styler.styled_count == 0

    def test_apply_inline_style_skips_empty(self):
        element = MarkupElement("p")
        apply_inline_style(element, {"color": None})
        assert "style" not in element.attributes
