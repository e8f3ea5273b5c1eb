#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/quality.py
"""Pre-publication quality checks.

The checker parses Markdown with the same parser the renderer uses and walks
the structural tree once, in document order, reporting content that is likely
to cause trouble in the WeChat editor: insecure links, skipped heading levels,
overlong headings, missing alternative text, local image paths and embedded
HTML. The checks only read the tree and never raise on any input.

Examples
--------
    >>> issues = run_quality_checks("# Title\\n\\n#### Deep\\n")
    >>> [issue.kind for issue in issues]
    ['structure']

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from wechatmd.ast.nodes import Document, Heading, HTMLBlock, HTMLInline, Image, Link, Node
from wechatmd.ast.utils import extract_text
from wechatmd.ast.visitors import NodeWalker
from wechatmd.constants import HEADING_PREVIEW_LENGTH, INSECURE_SCHEME_PREFIX, MAX_HEADING_LENGTH, QualityIssueKind
from wechatmd.options.markdown import MarkdownParserOptions
from wechatmd.parsers.markdown import MarkdownParser
from wechatmd.transforms.frontmatter import strip_front_matter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssueLocation:
    """1-based position of the node an issue refers to."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class QualityIssue:
    """A single finding of the quality checker.

    Parameters
    ----------
    kind : str
        One of ``link-protocol``, ``structure``, ``accessibility``,
        ``image-reference`` or ``html-embed``
    message : str
        Human-readable description
    location : IssueLocation, optional
        Where the offending node starts

    """

    kind: QualityIssueKind
    message: str
    location: Optional[IssueLocation] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape ``{"type", "message", "location"?}``."""
        data: dict[str, Any] = {"type": self.kind, "message": self.message}
        if self.location is not None:
            data["location"] = self.location.to_dict()
        return data


def _location(node: Node) -> Optional[IssueLocation]:
    # Block nodes record no column; they start at the first column of their line
    if node.source_location is None:
        return None
    return IssueLocation(line=node.source_location.line, column=node.source_location.column or 1)


class QualityChecker(NodeWalker):
    """Collect quality issues from a structural document.

    The heading-depth check keeps a single running value, the level of the
    most recently seen heading, so ``H1 -> H3 -> H2`` reports only the first
    jump.
    """

    def __init__(self) -> None:
        self.issues: list[QualityIssue] = []
        self._last_heading_level: Optional[int] = None

    def check(self, document: Document) -> list[QualityIssue]:
        """Walk ``document`` and return the issues found, in document order."""
        self.issues = []
        self._last_heading_level = None
        document.accept(self)
        return self.issues

    def _warn(self, kind: QualityIssueKind, message: str, node: Node) -> None:
        self.issues.append(QualityIssue(kind=kind, message=message, location=_location(node)))

    def visit_heading(self, node: Heading) -> None:
        if self._last_heading_level is not None and node.level > self._last_heading_level + 1:
            self._warn(
                "structure",
                f"Heading level jumps from H{self._last_heading_level} to H{node.level}; "
                "increase heading levels one step at a time.",
                node,
            )
        self._last_heading_level = node.level

        text = extract_text(node.content).strip()
        if len(text) > MAX_HEADING_LENGTH:
            self._warn(
                "structure",
                f'Heading "{text[:HEADING_PREVIEW_LENGTH]}..." is long; '
                f"keep headings within {MAX_HEADING_LENGTH} characters for readability.",
                node,
            )
        self.generic_visit(node)

    def visit_link(self, node: Link) -> None:
        if node.url.startswith(INSECURE_SCHEME_PREFIX):
            self._warn(
                "link-protocol",
                f'Link "{node.url}" does not use HTTPS; WeChat may block it or show a warning.',
                node,
            )
        if not node.content:
            self._warn("accessibility", f'Link "{node.url}" has no readable text.', node)
        self.generic_visit(node)

    def visit_image(self, node: Image) -> None:
        if "://" not in node.url and not node.url.startswith("data:"):
            self._warn(
                "image-reference",
                f'Image "{node.url}" looks like a local path; use a public URL or upload it to the media library.',
                node,
            )
        if node.url.startswith(INSECURE_SCHEME_PREFIX):
            self._warn(
                "link-protocol",
                f'Image URL "{node.url}" does not use HTTPS; WeChat may fail to load it.',
                node,
            )
        if not node.alt_text or not node.alt_text.strip():
            self._warn("accessibility", f'Image "{node.url}" has no alternative text (alt).', node)

    def _warn_html(self, node: Union[HTMLBlock, HTMLInline]) -> None:
        self._warn(
            "html-embed",
            "Embedded HTML detected; check compatibility and safety before publishing.",
            node,
        )

    def visit_html_block(self, node: HTMLBlock) -> None:
        self._warn_html(node)

    def visit_html_inline(self, node: HTMLInline) -> None:
        self._warn_html(node)


def run_quality_checks(markdown: str, options: MarkdownParserOptions | None = None) -> list[QualityIssue]:
    """Parse ``markdown`` and return its quality issues.

    Parameters
    ----------
    markdown : str
        Markdown source text
    options : MarkdownParserOptions, optional
        Parser options; the defaults match the renderer

    Returns
    -------
    list of QualityIssue
        Issues in document order, without deduplication

    """
    document = strip_front_matter(MarkdownParser(options).parse(markdown))
    issues = QualityChecker().check(document)
    logger.debug(f"Quality check found {len(issues)} issue(s)")
    return issues
