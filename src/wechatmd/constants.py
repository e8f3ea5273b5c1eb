#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the wechatmd library.

This module centralizes the hardcoded values used across the rendering
pipeline: node allow-lists, grid layout styles, theme fallbacks and the
security tables used to sanitize embedded HTML.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type aliases
# =============================================================================

HtmlPassthroughMode = Literal["pass-through", "escape", "drop", "sanitize"]
FrontMatterFormat = Literal["yaml", "toml"]
QualityIssueKind = Literal["link-protocol", "structure", "accessibility", "image-reference", "html-embed"]

HTML_PASSTHROUGH_MODES = ["pass-through", "escape", "drop", "sanitize"]
DEFAULT_HTML_PASSTHROUGH_MODE: HtmlPassthroughMode = "sanitize"

# =============================================================================
# Parser defaults
# =============================================================================

DEFAULT_LINKIFY = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_DEFINITION_LISTS = True
DEFAULT_PARSE_MATH = True
DEFAULT_PARSE_SUPER_SUBSCRIPT = True
DEFAULT_PARSE_FRONTMATTER = True
DEFAULT_EXPAND_EMOJI = True

FRONTMATTER_FENCES: dict[str, FrontMatterFormat] = {"---": "yaml", "+++": "toml"}

# =============================================================================
# Source-line annotation
# =============================================================================

SOURCE_LINE_METADATA_KEY = "source_line"
SOURCE_LINE_ATTRIBUTE = "data-source-line"

# Structural node type names that receive a source-line annotation
SOURCE_LINE_NODE_TYPES = frozenset(
    {
        "Paragraph",
        "Heading",
        "List",
        "ListItem",
        "BlockQuote",
        "CodeBlock",
        "Image",
        "Link",
        "Table",
        "HTMLBlock",
        "HTMLInline",
        "ThematicBreak",
    }
)

# =============================================================================
# Highlight segmentation
# =============================================================================

HIGHLIGHT_PATTERN = r"==(.+?)=="
HIGHLIGHT_TAG = "mark"
HIGHLIGHT_SKIP_TAGS = frozenset({"code", "pre", "script", "style"})

# =============================================================================
# Math placeholders
# =============================================================================

MATH_PLACEHOLDER_CLASS = "language-math"
MATH_INLINE_CLASS = "math-inline"
MATH_DISPLAY_CLASS = "math-display"
MATH_ERROR_CLASS = "math-error"

# =============================================================================
# Theme defaults
# =============================================================================

DEFAULT_THEME_ID = "tech-minimal"
DEFAULT_PARAGRAPH_SPACING = 16
DEFAULT_SECTION_SPACING = 24
DEFAULT_BLOCKQUOTE_BORDER_WIDTH = 3
DEFAULT_BLOCKQUOTE_BACKGROUND = "#F5F8FF"
HEADING_BASE_FONT_SIZE = 36
HEADING_FONT_SIZE_STEP = 4
HEADING_MIN_FONT_SIZE = 16
MONOSPACE_FONT_FAMILY = '"JetBrains Mono", Consolas, "Liberation Mono", Menlo, Courier, monospace'
REQUIRED_THEME_COLORS = ("primary", "text", "background")

# =============================================================================
# Multi-image grid
# =============================================================================

IMAGE_GRID_CLASS = "wechat-multi-image-grid"
IMAGE_GRID_ITEM_CLASS = "wechat-multi-image-item"
IMAGE_GRID_MIN_IMAGES = 2

IMAGE_GRID_CONTAINER_STYLE = (
    "display:grid",
    "grid-template-columns:repeat({columns},1fr)",
    "gap:12px",
    "margin:24px auto",
    "width:100%",
    "max-width:760px",
    "align-items:stretch",
)
IMAGE_GRID_ITEM_STYLE = (
    "width:100%;overflow:hidden;border-radius:10px;background-color:#f5f7fb;"
    "display:flex;align-items:center;justify-content:center;padding:4px;"
)
IMAGE_GRID_IMAGE_STYLE = {
    "width": "100%",
    "height": "auto",
    "display": "block",
    "border-radius": "8px",
    "object-fit": "cover",
}

# =============================================================================
# Clipboard export (grid -> table)
# =============================================================================

EXPORT_TABLE_STYLE = (
    "width:100% !important",
    "border-collapse:collapse !important",
    "margin:20px auto !important",
    "table-layout:fixed !important",
    "border:none !important",
    "background:transparent !important",
)
EXPORT_CELL_STYLE = (
    "padding:6px !important",
    "vertical-align:top !important",
    "width:{width}% !important",
    "border:none !important",
    "background:transparent !important",
)
EXPORT_OUTER_STYLE = (
    "width:100% !important",
    "height:100% !important",
    "background-color:#f5f7fb !important",
    "border-radius:12px !important",
    "padding:10px !important",
    "box-sizing:border-box !important",
    "display:table !important",
)
EXPORT_INNER_STYLE = (
    "display:table-cell !important",
    "vertical-align:middle !important",
    "text-align:center !important",
)
EXPORT_IMAGE_STYLE = (
    "max-width:100% !important",
    "height:auto !important",
    "width:auto !important",
    "margin:0 auto !important",
    "display:inline-block !important",
)

# =============================================================================
# Quality checks
# =============================================================================

MAX_HEADING_LENGTH = 48
HEADING_PREVIEW_LENGTH = 20
INSECURE_SCHEME_PREFIX = "http://"

# =============================================================================
# HTML serialization and security
# =============================================================================

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

DANGEROUS_HTML_ELEMENTS = {
    "script",
    "style",
    "link",
    "meta",
    "base",
    "object",
    "embed",
    "form",
    "input",
    "iframe",
    "frame",
    "frameset",
}

DANGEROUS_HTML_ATTRIBUTES = frozenset({"formaction", "srcdoc", "xmlns:xlink"})

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

URL_ATTRIBUTES = frozenset({"href", "src", "action", "formaction", "poster", "background"})

# Environment variables read by the CLI
ENV_THEME = "WECHATMD_THEME"
ENV_LOG_LEVEL = "WECHATMD_LOG_LEVEL"
