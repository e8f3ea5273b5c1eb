#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/pipeline.py
"""Render pipeline orchestration.

A render call runs its passes synchronously and in a fixed order on trees it
owns:

1. Parse Markdown into the structural tree
2. Strip front matter
3. Expand emoji shortcodes
4. Annotate source lines
5. Lower to the markup tree
6. Segment ``==highlight==`` runs
7. Render math
8. Apply theme inline styles (when enabled)
9. Group consecutive images into grids
10. Serialize to HTML

Optional passes are switched off through :class:`RenderOptions`. Any
unexpected failure inside a pass is wrapped in :class:`TransformError` naming
the pass.

Examples
--------
    >>> pipeline = RenderPipeline(theme="warm-note")
    >>> html = pipeline.execute("# Hello\\n\\n这是 ==重点== 提醒")

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, TypeVar, Union

from wechatmd.ast.nodes import Document
from wechatmd.exceptions import TransformError, WechatMdError
from wechatmd.markup.lowering import MarkupLowering
from wechatmd.markup.nodes import MarkupRoot
from wechatmd.markup.serializer import serialize
from wechatmd.options.render import RenderOptions
from wechatmd.parsers.markdown import MarkdownParser
from wechatmd.theme.presets import resolve_theme
from wechatmd.theme.schema import ThemeDefinition
from wechatmd.transforms.emoji import EmojiShortcodeTransform
from wechatmd.transforms.frontmatter import StripFrontMatterTransform
from wechatmd.transforms.highlight import HighlightSegmenter
from wechatmd.transforms.image_grid import ImageGridGrouper
from wechatmd.transforms.math import MathRenderer
from wechatmd.transforms.source_lines import SourceLineAnnotator
from wechatmd.transforms.theme import ThemeStyler
from wechatmd.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

T = TypeVar("T")

ThemeArgument = Union[ThemeDefinition, Mapping[str, Any], str, None]


class RenderPipeline:
    """Markdown-to-WeChat-HTML render pipeline.

    Parameters
    ----------
    theme : ThemeDefinition, mapping, str or None, default None
        Theme used by the styling pass. A mapping is validated, a string names
        a built-in preset and None selects ``tech-minimal``.
    options : RenderOptions, optional
        Pass switches and parser options

    Raises
    ------
    ThemeValidationError
        If ``theme`` is a mapping that fails validation
    ThemeNotFoundError
        If ``theme`` names an unknown preset

    """

    def __init__(self, theme: ThemeArgument = None, options: RenderOptions | None = None):
        if options is not None and not isinstance(options, RenderOptions):
            raise TypeError(f"Expected RenderOptions, got {type(options).__name__}")
        self.options = options or RenderOptions()
        self.theme = resolve_theme(theme)

    def _run_stage(self, name: str, func: Callable[[Any], T], value: Any) -> T:
        """Run one pass, wrapping unexpected failures in TransformError."""
        logger.debug(f"Running stage: {name}")
        try:
            with debug_timer(logger, name):
                return func(value)
        except WechatMdError:
            raise
        except Exception as e:
            logger.error(f"Stage {name} failed: {e}", exc_info=True)
            raise TransformError(f"Render stage '{name}' failed: {e}", transform_name=name, original_error=e) from e

    def _document_stages(self) -> list[tuple[str, Callable[[Any], Any]]]:
        stages: list[tuple[str, Callable[[Any], Any]]] = [
            ("parse", MarkdownParser(self.options.parser_options).parse),
            ("strip-front-matter", StripFrontMatterTransform().transform),
        ]
        if self.options.parser_options.expand_emoji:
            stages.append(("emoji", EmojiShortcodeTransform().transform))
        if self.options.annotate_source_lines:
            stages.append(("source-lines", SourceLineAnnotator().annotate))
        return stages

    def _markup_stages(self) -> list[tuple[str, Callable[[Any], Any]]]:
        stages: list[tuple[str, Callable[[Any], Any]]] = [("lower", MarkupLowering(self.options).lower)]
        if self.options.highlight:
            stages.append(("highlight", HighlightSegmenter().apply))
        if self.options.render_math:
            stages.append(("math", MathRenderer().apply))
        if self.options.inline_styles:
            stages.append(("theme", ThemeStyler(self.theme).apply))
        if self.options.group_images:
            stages.append(("image-grid", ImageGridGrouper().apply))
        return stages

    def get_stage_names(self) -> list[str]:
        """Return the names of the passes this pipeline runs, in order."""
        return [name for name, _ in self._document_stages() + self._markup_stages()] + ["serialize"]

    def build_document(self, markdown: str) -> Document:
        """Parse ``markdown`` and run the structural passes."""
        result: Any = markdown
        for name, func in self._document_stages():
            result = self._run_stage(name, func, result)
        return result

    def build_markup(self, markdown: str) -> MarkupRoot:
        """Run every pass except serialization and return the markup tree."""
        result: Any = self.build_document(markdown)
        for name, func in self._markup_stages():
            result = self._run_stage(name, func, result)
        return result

    def execute(self, markdown: str) -> str:
        """Render ``markdown`` to an HTML string.

        Parameters
        ----------
        markdown : str
            Markdown source text

        Returns
        -------
        str
            Serialized HTML; identical input and settings give identical output

        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Starting render with theme '{self.theme.id}': {' -> '.join(self.get_stage_names())}")
        root = self.build_markup(markdown)
        html = self._run_stage("serialize", serialize, root)
        logger.debug(f"Render complete: {len(html)} characters")
        return html
