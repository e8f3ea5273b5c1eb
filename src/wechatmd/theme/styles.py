#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/theme/styles.py
"""Theme styling functions.

Each ``get_*_style`` function maps a validated theme to the inline style
declarations of one element role. Functions are pure: they return a new
dictionary on every call and never modify the theme. Values missing from the
theme fall back to fixed defaults, so every schema-valid theme produces a
complete, non-empty style.

Examples
--------
    >>> style = get_heading_style(theme, 2)
    >>> style_to_string(style)
    'color:#2B2B2B;font-family:...;font-size:28px;margin-top:32px;margin-bottom:16px'

"""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from wechatmd.constants import (
    DEFAULT_BLOCKQUOTE_BACKGROUND,
    DEFAULT_BLOCKQUOTE_BORDER_WIDTH,
    DEFAULT_PARAGRAPH_SPACING,
    DEFAULT_SECTION_SPACING,
    HEADING_BASE_FONT_SIZE,
    HEADING_FONT_SIZE_STEP,
    HEADING_MIN_FONT_SIZE,
    MONOSPACE_FONT_FAMILY,
)
from wechatmd.theme.components import (
    BlockquoteOverrides,
    HeadingOverrides,
    ParagraphOverrides,
    as_number,
    component_spacing,
)
from wechatmd.theme.schema import ThemeDefinition

InlineStyle = dict[str, Any]
Number = Union[int, float]

_CAMEL_RE = re.compile(r"[A-Z]")


# =============================================================================
# Serialization helpers
# =============================================================================


def format_number(value: Number) -> str:
    """Format a number without an implicit unit; ``2.0`` prints as ``2``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def px(value: Number) -> str:
    """Return ``value`` as a pixel length."""
    return f"{format_number(value)}px"


def hyphenate(name: str) -> str:
    """Convert a camelCase or snake_case property name to CSS kebab-case."""
    return _CAMEL_RE.sub(lambda match: f"-{match.group(0).lower()}", name).replace("_", "-")


def style_to_string(style: InlineStyle) -> str:
    """Serialize a style mapping to ``property:value`` pairs joined by ``;``.

    ``None`` and empty-string values are skipped. Numbers are written without
    units.
    """
    declarations = []
    for name, value in style.items():
        if value is None or value == "":
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            text = format_number(value)
        else:
            text = str(value)
        declarations.append(f"{hyphenate(name)}:{text}")
    return ";".join(declarations)


def merge_inline_style_string(base: Optional[str], next_style: InlineStyle) -> str:
    """Append ``next_style`` to an existing style string.

    Declarations are only ever appended; a later declaration of the same
    property wins in the browser.
    """
    next_string = style_to_string(next_style)
    if not base:
        return next_string
    if not next_string:
        return base
    return f"{base};{next_string}"


# =============================================================================
# Token resolution
# =============================================================================


def _heading_font_family(theme: ThemeDefinition) -> str:
    typography = theme.tokens.typography
    return typography.heading.font_family or typography.font_family


def _body_font_family(theme: ThemeDefinition) -> str:
    typography = theme.tokens.typography
    return typography.body.font_family or typography.font_family


def resolve_paragraph_spacing(theme: ThemeDefinition, role: str = "paragraph") -> Number:
    """Return the paragraph spacing in pixels.

    Order: ``tokens.spacing.paragraph``, then ``components[role].spacing``,
    then 16.
    """
    spacing = as_number(theme.tokens.spacing.get("paragraph"))
    if spacing is not None:
        return spacing
    spacing = component_spacing(theme.components, role)
    if spacing is not None:
        return spacing
    return DEFAULT_PARAGRAPH_SPACING


def resolve_section_spacing(theme: ThemeDefinition) -> Number:
    """Return the section spacing above headings.

    Order: ``tokens.spacing.section``, then ``components.heading.spacing``,
    then 24.
    """
    spacing = as_number(theme.tokens.spacing.get("section"))
    if spacing is not None:
        return spacing
    spacing = HeadingOverrides.from_components(theme.components).spacing
    if spacing is not None:
        return spacing
    return DEFAULT_SECTION_SPACING


def resolve_heading_font_size(theme: ThemeDefinition, level: int) -> Number:
    """Return the configured font size of ``h{level}`` or the derived default."""
    size = HeadingOverrides.from_components(theme.components).level(level).font_size
    if size is not None:
        return size
    return max(HEADING_MIN_FONT_SIZE, HEADING_BASE_FONT_SIZE - (level - 1) * HEADING_FONT_SIZE_STEP)


def resolve_blockquote_accent(theme: ThemeDefinition) -> str:
    """Resolve the blockquote border color.

    A palette key is looked up in ``tokens.color``; any other value is used
    as a literal color; without a value the primary color is used.
    """
    accent = BlockquoteOverrides.from_components(theme.components).accent_color
    palette = theme.tokens.color
    if accent:
        return palette.get(accent) or accent
    return palette.primary


# =============================================================================
# Style functions
# =============================================================================


def get_paragraph_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``p`` elements."""
    body = theme.tokens.typography.body
    max_width = ParagraphOverrides.from_components(theme.components).max_width
    return {
        "color": theme.tokens.color.text,
        "font-family": _body_font_family(theme),
        "font-weight": body.weight,
        "line-height": body.line_height,
        "font-size": "16px",
        "margin-bottom": px(resolve_paragraph_spacing(theme)),
        "max-width": px(max_width) if max_width else None,
    }


def get_heading_style(theme: ThemeDefinition, level: int) -> InlineStyle:
    """Return the style for ``h{level}`` elements.

    Parameters
    ----------
    theme : ThemeDefinition
        Validated theme
    level : int
        Heading level, clamped to 1-6

    Returns
    -------
    InlineStyle
        Style declarations

    """
    level = min(6, max(1, level))
    heading = theme.tokens.typography.heading
    overrides = HeadingOverrides.from_components(theme.components).level(level)
    font_weight = overrides.font_weight if overrides.font_weight is not None else heading.weight
    return {
        "color": theme.tokens.color.text,
        "font-family": _heading_font_family(theme),
        "font-weight": font_weight,
        "line-height": heading.line_height,
        "font-size": px(resolve_heading_font_size(theme, level)),
        "margin-top": "0" if level == 1 else px(resolve_section_spacing(theme)),
        "margin-bottom": px(resolve_paragraph_spacing(theme, "heading")),
    }


def get_blockquote_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``blockquote`` elements."""
    overrides = BlockquoteOverrides.from_components(theme.components)
    spacing = resolve_paragraph_spacing(theme, "blockquote")
    border_width = overrides.border_width if overrides.border_width is not None else DEFAULT_BLOCKQUOTE_BORDER_WIDTH
    background = overrides.background or theme.tokens.color.get("muted") or DEFAULT_BLOCKQUOTE_BACKGROUND
    return {
        "color": theme.tokens.color.text,
        "font-family": _body_font_family(theme),
        "line-height": theme.tokens.typography.body.line_height,
        "padding": px(spacing),
        "margin": f"{px(spacing)} 0",
        "border-left": f"{px(border_width)} solid {resolve_blockquote_accent(theme)}",
        "background": background,
    }


def get_list_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``ul`` and ``ol`` elements."""
    return {
        "color": theme.tokens.color.text,
        "font-family": _body_font_family(theme),
        "line-height": theme.tokens.typography.body.line_height,
        "margin-bottom": px(resolve_paragraph_spacing(theme, "list")),
        "padding-left": "24px",
    }


def get_list_item_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``li`` elements (half the paragraph spacing)."""
    return {"margin-bottom": px(round(resolve_paragraph_spacing(theme, "list") / 2))}


def get_link_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``a`` elements."""
    return {
        "color": theme.tokens.color.primary,
        "text-decoration": "none",
        "font-family": _body_font_family(theme),
    }


def get_table_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``table`` elements."""
    return {
        "width": "100%",
        "border-collapse": "collapse",
        "margin": f"{px(resolve_paragraph_spacing(theme, 'table'))} 0",
        "font-family": _body_font_family(theme),
        "background": "#ffffff",
        "border-radius": "16px",
        "box-shadow": "0 18px 40px rgba(15, 23, 42, 0.12)",
        "border-spacing": 0,
        "overflow": "hidden",
        "border": "1px solid rgba(15, 23, 42, 0.08)",
    }


def get_table_header_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``th`` elements."""
    return {
        "background": theme.tokens.color.primary,
        "color": "#ffffff",
        "text-align": "left",
        "padding": "14px 18px",
        "font-weight": 600,
        "font-size": "14px",
        "border-bottom": "1px solid rgba(255,255,255,0.2)",
    }


def get_table_cell_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``td`` elements."""
    return {
        "padding": "14px 18px",
        "border-bottom": "1px solid rgba(15, 23, 42, 0.06)",
        "font-size": "13px",
        "color": theme.tokens.color.text,
        "background": "#ffffff",
    }


def get_code_block_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``pre`` elements (dark code panel)."""
    return {
        "font-family": MONOSPACE_FONT_FAMILY,
        "background": "#121826",
        "color": "#f8fafc",
        "padding": "32px 24px 24px",
        "border-radius": "18px",
        "margin": f"{px(resolve_paragraph_spacing(theme, 'code'))} 0",
        "overflow-x": "auto",
        "box-shadow": "0 24px 48px rgba(15, 23, 42, 0.32)",
        "border": "1px solid rgba(255,255,255,0.08)",
        "position": "relative",
    }


def get_inline_code_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``code`` outside of ``pre``."""
    return {
        "font-family": MONOSPACE_FONT_FAMILY,
        "background": "rgba(37, 99, 235, 0.08)",
        "color": theme.tokens.color.primary,
        "padding": "2px 6px",
        "border-radius": "6px",
        "font-size": "12px",
    }


def get_block_code_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``code`` inside ``pre``."""
    return {
        "font-family": MONOSPACE_FONT_FAMILY,
        "font-size": "13px",
        "display": "block",
        "margin": 0,
    }


def get_code_style(theme: ThemeDefinition, inside_pre: bool) -> InlineStyle:
    """Return the block or inline code style depending on the parent."""
    return get_block_code_style(theme) if inside_pre else get_inline_code_style(theme)


def get_image_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``img`` elements."""
    return {"max-width": "100%", "height": "auto", "border-radius": "4px"}


def get_definition_list_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``dl`` elements."""
    return {"margin": f"{px(resolve_paragraph_spacing(theme, 'definitionList'))} 0", "padding-left": "0"}


def get_definition_term_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``dt`` elements."""
    return {"font-weight": 600, "margin-top": "12px", "color": theme.tokens.color.text}


def get_definition_description_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``dd`` elements."""
    return {
        "margin-left": "16px",
        "color": theme.tokens.color.text,
        "line-height": theme.tokens.typography.body.line_height,
    }


def get_mark_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``mark`` elements."""
    return {"background": "#fef08a", "padding": "0 4px", "border-radius": "4px"}


def get_script_style(theme: ThemeDefinition) -> InlineStyle:
    """Return the style for ``sup`` and ``sub`` elements."""
    return {"font-size": "0.85em"}
