#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Transformation passes of the rendering pipeline.

Passes over the structural tree (front matter, emoji, source lines) are
:class:`~wechatmd.ast.NodeTransformer` or :class:`~wechatmd.ast.NodeWalker`
subclasses. Passes over the markup tree (highlight, math, theme, image grid)
expose an ``apply(root)`` method that rewrites the tree in place.
"""

from wechatmd.transforms.emoji import EmojiShortcodeTransform
from wechatmd.transforms.frontmatter import (
    FRONT_MATTER_METADATA_KEY,
    StripFrontMatterTransform,
    decode_front_matter,
    strip_front_matter,
)
from wechatmd.transforms.highlight import HighlightSegmenter, split_highlight_segments
from wechatmd.transforms.image_grid import ImageGridGrouper, create_image_grid, extract_images, resolve_grid_columns
from wechatmd.transforms.math import MathRenderer, render_latex
from wechatmd.transforms.source_lines import SourceLineAnnotator
from wechatmd.transforms.theme import ThemeStyler, apply_inline_style

__all__ = [
    "FRONT_MATTER_METADATA_KEY",
    "EmojiShortcodeTransform",
    "HighlightSegmenter",
    "ImageGridGrouper",
    "MathRenderer",
    "SourceLineAnnotator",
    "StripFrontMatterTransform",
    "ThemeStyler",
    "apply_inline_style",
    "create_image_grid",
    "decode_front_matter",
    "extract_images",
    "render_latex",
    "resolve_grid_columns",
    "split_highlight_segments",
    "strip_front_matter",
]
