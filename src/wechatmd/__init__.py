"""wechatmd - Markdown to WeChat Official Account HTML.

wechatmd converts Markdown into HTML that survives being pasted into the
WeChat Official Account editor: every visual property is an inline ``style``
attribute, embedded HTML is sanitized, and multi-image grids are rewritten
into table layout for the clipboard.

Key Features
------------
- CommonMark parsing with GFM tables, strikethrough, autolinks, definition
  lists, ``$math$``, ``^sup^``, ``~sub~`` and front matter
- ``==highlight==`` marks and emoji shortcodes
- Theme-driven inline styles with five built-in presets and JSON, YAML or TOML
  theme files
- Pre-publication quality checks (insecure links, heading jumps, missing alt
  text, local images, embedded HTML)
- Source-line annotations for editor scroll sync

Requirements
------------
- Python 3.10+

Examples
--------
Render with the default theme:

    >>> from wechatmd import render_markdown_to_html
    >>> html = render_markdown_to_html("# 标题\\n\\n这是 ==重点== 提醒")

Check content before publishing:

    >>> from wechatmd import run_quality_checks
    >>> [issue.to_dict() for issue in run_quality_checks("[site](http://example.com)")]
    [{'type': 'link-protocol', ...}]

See Also
--------
wechatmd.theme : Theme schema, presets and styling functions
wechatmd.pipeline : The render pipeline

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "wechatmd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from wechatmd.api import (
    prepare_wechat_export_html,
    render_markdown_to_html,
    render_markdown_to_html_async,
    run_quality_checks,
    validate_theme,
)
from wechatmd.exceptions import (
    FileError,
    ThemeNotFoundError,
    ThemeValidationError,
    ThemeViolation,
    TransformError,
    ValidationError,
    WechatMdError,
)
from wechatmd.options import MarkdownParserOptions, RenderOptions
from wechatmd.pipeline import RenderPipeline
from wechatmd.quality import IssueLocation, QualityIssue
from wechatmd.theme import ThemeDefinition, get_builtin_theme, list_builtin_themes, load_theme_file

__all__ = [
    "__version__",
    "FileError",
    "IssueLocation",
    "MarkdownParserOptions",
    "QualityIssue",
    "RenderOptions",
    "RenderPipeline",
    "ThemeDefinition",
    "ThemeNotFoundError",
    "ThemeValidationError",
    "ThemeViolation",
    "TransformError",
    "ValidationError",
    "WechatMdError",
    "get_builtin_theme",
    "list_builtin_themes",
    "load_theme_file",
    "prepare_wechat_export_html",
    "render_markdown_to_html",
    "render_markdown_to_html_async",
    "run_quality_checks",
    "validate_theme",
]
