#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the render pipeline."""
# src/wechatmd/options/render.py

from __future__ import annotations

from dataclasses import dataclass, field

from wechatmd.constants import DEFAULT_HTML_PASSTHROUGH_MODE, HTML_PASSTHROUGH_MODES, HtmlPassthroughMode
from wechatmd.options.base import CloneFrozenMixin
from wechatmd.options.markdown import MarkdownParserOptions


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Options controlling one Markdown-to-HTML render call.

    Parameters
    ----------
    inline_styles : bool, default True
        Apply theme-driven inline styles. When False the markup is emitted
        without any theme styling.
    html_mode : {"sanitize", "escape", "drop", "pass-through"}, default "sanitize"
        How raw HTML embedded in the Markdown source is handled.
    annotate_source_lines : bool, default True
        Emit ``data-source-line`` attributes for editor scroll sync.
    highlight : bool, default True
        Turn ``==text==`` into ``<mark>`` elements.
    render_math : bool, default True
        Convert math placeholders into MathML.
    group_images : bool, default True
        Group runs of consecutive images into grid containers.
    parser_options : MarkdownParserOptions
        Options forwarded to the structural parser.

    """

    inline_styles: bool = field(
        default=True,
        metadata={"help": "Apply theme inline styles", "cli_name": "no-inline-styles", "importance": "core"},
    )
    html_mode: HtmlPassthroughMode = field(
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        metadata={
            "help": "How to handle raw HTML in the source",
            "choices": HTML_PASSTHROUGH_MODES,
            "importance": "security",
        },
    )
    annotate_source_lines: bool = field(
        default=True,
        metadata={
            "help": "Emit data-source-line attributes",
            "cli_name": "no-source-lines",
            "importance": "advanced",
        },
    )
    highlight: bool = field(
        default=True,
        metadata={"help": "Render ==text== as highlighted marks", "cli_name": "no-highlight", "importance": "advanced"},
    )
    render_math: bool = field(
        default=True,
        metadata={"help": "Render LaTeX math as MathML", "cli_name": "no-render-math", "importance": "advanced"},
    )
    group_images: bool = field(
        default=True,
        metadata={
            "help": "Group consecutive images into grid layouts",
            "cli_name": "no-group-images",
            "importance": "advanced",
        },
    )
    parser_options: MarkdownParserOptions = field(
        default_factory=MarkdownParserOptions,
        metadata={"help": "Markdown parser options", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``html_mode`` is not a known passthrough mode.

        """
        if self.html_mode not in HTML_PASSTHROUGH_MODES:
            raise ValueError(
                f"Invalid html_mode: {self.html_mode!r}. Must be one of: {', '.join(HTML_PASSTHROUGH_MODES)}"
            )
