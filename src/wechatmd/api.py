"""The public API functions for rendering Markdown to WeChat HTML."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/wechatmd/api.py
import asyncio
import logging
from typing import Any, Optional

from wechatmd.export import prepare_wechat_export_html as _prepare_export
from wechatmd.options.render import RenderOptions
from wechatmd.pipeline import RenderPipeline, ThemeArgument
from wechatmd.quality import QualityIssue
from wechatmd.quality import run_quality_checks as _run_quality_checks
from wechatmd.theme.schema import ThemeDefinition
from wechatmd.theme.schema import validate_theme as _validate_theme

logger = logging.getLogger(__name__)


def _build_options(inline_styles: bool, options: Optional[RenderOptions], **kwargs: Any) -> RenderOptions:
    """Merge the ``inline_styles`` flag and keyword overrides into options."""
    base = options or RenderOptions()
    updates = {"inline_styles": inline_styles, **kwargs}
    return base.create_updated(**updates)


def render_markdown_to_html(
    markdown: str,
    theme: ThemeArgument = None,
    inline_styles: bool = True,
    options: Optional[RenderOptions] = None,
    **kwargs: Any,
) -> str:
    """Render Markdown to HTML ready for the WeChat editor.

    Parameters
    ----------
    markdown : str
        Markdown source text. Any text is accepted; malformed syntax renders
        as literal text.
    theme : ThemeDefinition, mapping, str or None, default None
        Theme for inline styling. Mappings are validated, strings name a
        built-in preset and None selects ``tech-minimal``.
    inline_styles : bool, default True
        Apply the theme's inline styles. Overrides ``options.inline_styles``.
    options : RenderOptions, optional
        Pre-configured render options
    kwargs : Any
        Individual :class:`RenderOptions` fields overriding ``options``
        (``html_mode="escape"``)

    Returns
    -------
    str
        Serialized HTML

    Raises
    ------
    ThemeValidationError
        If ``theme`` is a mapping that fails validation
    ThemeNotFoundError
        If ``theme`` names an unknown preset
    TransformError
        If a pipeline pass fails unexpectedly

    Examples
    --------
        >>> render_markdown_to_html("# Hello")
        '<h1 data-source-line="1" style="color:#2B2B2B;...">Hello</h1>'

    """
    render_options = _build_options(inline_styles, options, **kwargs)
    return RenderPipeline(theme=theme, options=render_options).execute(markdown)


async def render_markdown_to_html_async(
    markdown: str,
    theme: ThemeArgument = None,
    inline_styles: bool = True,
    options: Optional[RenderOptions] = None,
    **kwargs: Any,
) -> str:
    """Render Markdown in a worker thread; see :func:`render_markdown_to_html`."""
    return await asyncio.to_thread(
        render_markdown_to_html, markdown, theme, inline_styles, options, **kwargs
    )


def run_quality_checks(markdown: str) -> list[QualityIssue]:
    """Return the quality issues of ``markdown`` in document order.

    Parameters
    ----------
    markdown : str
        Markdown source text

    Returns
    -------
    list of QualityIssue
        Possibly empty list of findings; this function does not raise on any
        input

    """
    return _run_quality_checks(markdown)


def prepare_wechat_export_html(html: str) -> str:
    """Rewrite rendered HTML for clipboard export (image grids become tables)."""
    return _prepare_export(html)


def validate_theme(data: Any) -> ThemeDefinition:
    """Validate a theme mapping.

    Raises
    ------
    ThemeValidationError
        Listing every offending field path

    """
    return _validate_theme(data)


__all__ = [
    "prepare_wechat_export_html",
    "render_markdown_to_html",
    "render_markdown_to_html_async",
    "run_quality_checks",
    "validate_theme",
]
