#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Theme definitions, built-in presets and the inline styling functions.

A theme is validated once into an immutable :class:`ThemeDefinition` and then
read by the pure ``get_*_style`` functions in :mod:`wechatmd.theme.styles`.
"""

from wechatmd.theme.components import BlockquoteOverrides, HeadingLevelOverrides, HeadingOverrides, ParagraphOverrides
from wechatmd.theme.presets import (
    BUILTIN_THEMES,
    get_builtin_theme,
    get_default_theme,
    list_builtin_themes,
    resolve_theme,
)
from wechatmd.theme.schema import (
    ColorPalette,
    ThemeDefinition,
    ThemeMetadata,
    ThemeTokens,
    Typography,
    TypographyRole,
    load_theme_file,
    validate_theme,
)
from wechatmd.theme.styles import InlineStyle, merge_inline_style_string, style_to_string

__all__ = [
    "BUILTIN_THEMES",
    "BlockquoteOverrides",
    "ColorPalette",
    "HeadingLevelOverrides",
    "HeadingOverrides",
    "InlineStyle",
    "ParagraphOverrides",
    "ThemeDefinition",
    "ThemeMetadata",
    "ThemeTokens",
    "Typography",
    "TypographyRole",
    "get_builtin_theme",
    "get_default_theme",
    "list_builtin_themes",
    "load_theme_file",
    "merge_inline_style_string",
    "resolve_theme",
    "style_to_string",
    "validate_theme",
]
