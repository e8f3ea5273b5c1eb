#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the switches for each syntax extension understood by
the structural parser.
"""
# src/wechatmd/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from wechatmd.constants import (
    DEFAULT_EXPAND_EMOJI,
    DEFAULT_LINKIFY,
    DEFAULT_PARSE_DEFINITION_LISTS,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_MATH,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_SUPER_SUBSCRIPT,
    DEFAULT_PARSE_TABLES,
)
from wechatmd.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    linkify : bool, default True
        Whether bare URLs (``https://example.com``) become links.
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_definition_lists : bool, default True
        Whether to parse definition lists (term followed by ``: definition``).
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_super_subscript : bool, default True
        Whether to parse ``^superscript^`` and ``~subscript~``.
    parse_frontmatter : bool, default True
        Whether to recognise a fenced YAML (``---``) or TOML (``+++``) block at
        the start of the document.
    expand_emoji : bool, default True
        Whether ``:shortcode:`` sequences in text become emoji characters.

    """

    linkify: bool = field(
        default=DEFAULT_LINKIFY,
        metadata={"help": "Turn bare URLs into links", "cli_name": "no-linkify", "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-parse-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-parse-strikethrough",
            "importance": "core",
        },
    )
    parse_definition_lists: bool = field(
        default=DEFAULT_PARSE_DEFINITION_LISTS,
        metadata={
            "help": "Parse definition lists (term : definition)",
            "cli_name": "no-parse-definition-lists",
            "importance": "core",
        },
    )
    parse_math: bool = field(
        default=DEFAULT_PARSE_MATH,
        metadata={
            "help": "Parse inline and block math ($...$ and $$...$$)",
            "cli_name": "no-parse-math",
            "importance": "core",
        },
    )
    parse_super_subscript: bool = field(
        default=DEFAULT_PARSE_SUPER_SUBSCRIPT,
        metadata={
            "help": "Parse ^superscript^ and ~subscript~",
            "cli_name": "no-parse-super-subscript",
            "importance": "advanced",
        },
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={
            "help": "Parse YAML/TOML front matter at document start",
            "cli_name": "no-parse-frontmatter",
            "importance": "core",
        },
    )
    expand_emoji: bool = field(
        default=DEFAULT_EXPAND_EMOJI,
        metadata={
            "help": "Replace :shortcode: sequences with emoji characters",
            "cli_name": "no-expand-emoji",
            "importance": "advanced",
        },
    )
