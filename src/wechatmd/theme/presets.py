#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/theme/presets.py
"""Built-in theme presets.

The presets are declared as plain mappings in the same shape a theme file
uses and validated once at import time. ``tech-minimal`` is the default theme
used when a render call does not name one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wechatmd.constants import DEFAULT_THEME_ID
from wechatmd.exceptions import ThemeNotFoundError
from wechatmd.theme.schema import ThemeDefinition, validate_theme

_PINGFANG_STACK = 'PingFang SC, "Helvetica Neue", Helvetica, Arial, sans-serif'
_INTER_STACK = 'Inter, -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif'
_SYSTEM_STACK = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
_MINCHO_STACK = 'Hiragino Mincho ProN, "Songti SC", "PingFang SC", "Microsoft YaHei", serif'
_SERIF_STACK = '"Source Serif Pro", "Songti SC", Georgia, serif'

TECH_MINIMAL: dict[str, Any] = {
    "id": "tech-minimal",
    "version": "0.1.0",
    "metadata": {
        "name": "Tech Minimal",
        "author": "Core Team",
        "description": "简洁科技风配色，适合科技/效率类文章。",
        "tags": ["tech", "minimal"],
    },
    "tokens": {
        "color": {"primary": "#1A73E8", "text": "#2B2B2B", "background": "#FFFFFF", "muted": "#F5F8FF"},
        "typography": {
            "fontFamily": _PINGFANG_STACK,
            "heading": {"lineHeight": 1.4, "weight": 600, "fontFamily": _PINGFANG_STACK},
            "body": {"lineHeight": 1.7, "weight": 400, "fontFamily": _PINGFANG_STACK},
        },
        "spacing": {"paragraph": 16, "section": 32, "blockquote": 20},
        "border": {"radius": 8, "width": 1},
    },
    "components": {
        "paragraph": {"maxWidth": 680},
        "heading": {"h1": {"fontSize": 34}, "h2": {"fontSize": 28}, "h3": {"fontSize": 22}},
        "blockquote": {"accentColor": "primary", "borderWidth": 3, "background": "#F1F6FF"},
        "callout": {"background": "#F5F8FF", "icon": "info", "padding": {"x": 16, "y": 12}},
    },
}

WARM_NOTE: dict[str, Any] = {
    "id": "warm-note",
    "version": "0.1.0",
    "metadata": {
        "name": "暖意手帐",
        "author": "Core Team",
        "description": "手帐风格，暖色调配合柔性标题，适合生活方式/品牌软文。",
        "tags": ["lifestyle", "brand"],
    },
    "tokens": {
        "color": {"primary": "#F97316", "text": "#2D2A26", "background": "#FFFDF8", "muted": "#FFF6EB"},
        "typography": {
            "fontFamily": _MINCHO_STACK,
            "heading": {"lineHeight": 1.5, "weight": 500, "fontFamily": _MINCHO_STACK},
            "body": {
                "lineHeight": 1.8,
                "weight": 400,
                "fontFamily": 'Hiragino Sans, "PingFang SC", "Microsoft YaHei", sans-serif',
            },
        },
        "spacing": {"paragraph": 18, "section": 36, "blockquote": 24},
        "border": {"radius": 12, "width": 1},
    },
    "components": {
        "paragraph": {"maxWidth": 640},
        "heading": {
            "h1": {"fontSize": 32, "fontWeight": 600},
            "h2": {"fontSize": 26, "fontWeight": 500},
            "h3": {"fontSize": 22, "fontWeight": 500},
        },
        "blockquote": {"accentColor": "#F97316", "borderWidth": 2, "background": "#FFF0E0"},
        "callout": {"background": "#FFF6EB", "icon": "sparkle", "padding": {"x": 18, "y": 14}},
    },
}

TECH_SPECTRUM: dict[str, Any] = {
    "id": "tech-spectrum",
    "version": "0.1.0",
    "metadata": {
        "name": "技术蓝谱",
        "author": "Studio Preset",
        "description": "高对比科技主题，适合技术教程与产品发布。",
        "tags": ["tech", "product"],
    },
    "tokens": {
        "color": {"primary": "#0B5FFF", "text": "#1C2333", "background": "#FFFFFF", "muted": "#F1F5FF"},
        "typography": {
            "fontFamily": _INTER_STACK,
            "heading": {"lineHeight": 1.35, "weight": 700, "fontFamily": _INTER_STACK},
            "body": {"lineHeight": 1.8, "weight": 400, "fontFamily": _INTER_STACK},
        },
        "spacing": {"paragraph": 18, "section": 36, "blockquote": 22},
        "border": {"radius": 14, "width": 1},
    },
    "components": {
        "paragraph": {"maxWidth": 720},
        "heading": {
            "h1": {"fontSize": 30, "fontWeight": 700},
            "h2": {"fontSize": 26, "fontWeight": 700},
            "h3": {"fontSize": 22, "fontWeight": 600},
        },
        "blockquote": {"accentColor": "#0B5FFF", "borderWidth": 4, "background": "#EEF4FF"},
        "callout": {"background": "#EEF4FF", "icon": "sparkle", "padding": {"x": 18, "y": 14}},
    },
}

ELEGANT_MEDIA: dict[str, Any] = {
    "id": "elegant-media",
    "version": "0.1.0",
    "metadata": {
        "name": "媒体雅致",
        "author": "Studio Preset",
        "description": "温润杂志风排版，适合媒体报道、生活方式内容。",
        "tags": ["media", "lifestyle"],
    },
    "tokens": {
        "color": {"primary": "#FFA000", "text": "#33302E", "background": "#FFFDF8", "muted": "#FFF4E0"},
        "typography": {
            "fontFamily": _SERIF_STACK,
            "heading": {"lineHeight": 1.45, "weight": 600, "fontFamily": _SERIF_STACK},
            "body": {
                "lineHeight": 1.85,
                "weight": 400,
                "fontFamily": '"Source Sans Pro", "PingFang SC", "Microsoft YaHei", sans-serif',
            },
        },
        "spacing": {"paragraph": 20, "section": 42, "blockquote": 28},
        "border": {"radius": 16, "width": 1},
    },
    "components": {
        "paragraph": {"maxWidth": 680},
        "heading": {
            "h1": {"fontSize": 32, "fontWeight": 600},
            "h2": {"fontSize": 28, "fontWeight": 600},
            "h3": {"fontSize": 22, "fontWeight": 500},
        },
        "blockquote": {"accentColor": "#FFA000", "borderWidth": 4, "background": "#FFF4E0"},
        "callout": {"background": "#FFF4E0", "icon": "info", "padding": {"x": 20, "y": 16}},
    },
}

WECHAT_DEFAULT: dict[str, Any] = {
    "id": "wechat-default",
    "version": "0.1.0",
    "metadata": {
        "name": "默认公众号",
        "author": "Studio Preset",
        "description": "复刻公众号常用的官方排版，适合公告、宣发与活动资讯。",
        "tags": ["wechat", "general"],
    },
    "tokens": {
        "color": {"primary": "#3498db", "text": "#3f3f3f", "background": "#ffffff", "muted": "#fafafa"},
        "typography": {
            "fontFamily": _SYSTEM_STACK,
            "heading": {"lineHeight": 1.4, "weight": 600, "fontFamily": _SYSTEM_STACK},
            "body": {"lineHeight": 1.8, "weight": 400, "fontFamily": _SYSTEM_STACK},
        },
        "spacing": {"paragraph": 16, "section": 32, "blockquote": 20},
        "border": {"radius": 12, "width": 1},
    },
    "components": {
        "paragraph": {"maxWidth": 740},
        "heading": {
            "h1": {"fontSize": 24, "fontWeight": 600},
            "h2": {"fontSize": 22, "fontWeight": 600},
            "h3": {"fontSize": 20, "fontWeight": 600},
        },
        "blockquote": {"accentColor": "#3498db", "borderWidth": 3, "background": "#fafafa"},
        "callout": {"background": "#f5f8ff", "icon": "info", "padding": {"x": 16, "y": 12}},
    },
}

BUILTIN_THEMES: dict[str, ThemeDefinition] = {
    data["id"]: validate_theme(data) for data in (TECH_MINIMAL, WARM_NOTE, TECH_SPECTRUM, ELEGANT_MEDIA, WECHAT_DEFAULT)
}


def list_builtin_themes() -> list[ThemeDefinition]:
    """Return the built-in themes in declaration order."""
    return list(BUILTIN_THEMES.values())


def get_builtin_theme(theme_id: str = DEFAULT_THEME_ID) -> ThemeDefinition:
    """Return a built-in theme by id.

    Parameters
    ----------
    theme_id : str, default = "tech-minimal"
        Preset identifier

    Returns
    -------
    ThemeDefinition
        The shared, immutable preset

    Raises
    ------
    ThemeNotFoundError
        If no preset has the given id

    """
    try:
        return BUILTIN_THEMES[theme_id]
    except KeyError:
        raise ThemeNotFoundError(theme_id, available=list(BUILTIN_THEMES)) from None


def get_default_theme() -> ThemeDefinition:
    """Return the default theme (``tech-minimal``)."""
    return BUILTIN_THEMES[DEFAULT_THEME_ID]


def resolve_theme(theme: ThemeDefinition | Mapping[str, Any] | str | None = None) -> ThemeDefinition:
    """Resolve a theme argument to a validated theme.

    Parameters
    ----------
    theme : ThemeDefinition, mapping, str or None
        A validated theme is returned as is, a mapping is validated, a string
        names a built-in preset and None selects the default theme

    Raises
    ------
    ThemeValidationError
        If a mapping does not satisfy the schema
    ThemeNotFoundError
        If a string does not name a built-in preset

    """
    if theme is None:
        return get_default_theme()
    if isinstance(theme, ThemeDefinition):
        return theme
    if isinstance(theme, str):
        return get_builtin_theme(theme)
    return validate_theme(theme)
