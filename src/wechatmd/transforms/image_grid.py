#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/image_grid.py
"""Multi-image grid grouping.

Runs of consecutive image-only blocks at the top level of the markup tree are
collected into a single grid container so that several photos posted back to
back lay out side by side. A run may contain bare ``img`` elements, paragraphs
holding nothing but images and whitespace, and whitespace-only text between
them. Only runs with at least two images are grouped.
"""

from __future__ import annotations

import logging
from typing import Optional

from wechatmd.constants import (
    IMAGE_GRID_CLASS,
    IMAGE_GRID_CONTAINER_STYLE,
    IMAGE_GRID_IMAGE_STYLE,
    IMAGE_GRID_ITEM_CLASS,
    IMAGE_GRID_ITEM_STYLE,
    IMAGE_GRID_MIN_IMAGES,
    SOURCE_LINE_ATTRIBUTE,
)
from wechatmd.markup.nodes import MarkupElement, MarkupNode, MarkupRoot, is_whitespace_text
from wechatmd.theme.styles import merge_inline_style_string

logger = logging.getLogger(__name__)


def resolve_grid_columns(count: int) -> int:
    """Return the number of grid columns for ``count`` images.

    Two or four images use two columns, three or more than four use three,
    anything else uses one.
    """
    if count in (2, 4):
        return 2
    if count == 3:
        return 3
    return 3 if count >= 5 else 1


def extract_images(node: MarkupNode) -> list[MarkupElement]:
    """Return the images a node contributes to an image run.

    A bare ``img`` contributes itself; a ``p`` contributes its images when its
    children are exclusively ``img`` elements and whitespace text. Any other
    node contributes nothing, which ends the run.
    """
    if not isinstance(node, MarkupElement):
        return []
    if node.tag == "img":
        return [node]
    if node.tag != "p":
        return []

    images = []
    for child in node.children:
        if isinstance(child, MarkupElement) and child.tag == "img":
            images.append(child)
        elif not is_whitespace_text(child):
            return []
    return images


def parse_source_line(value: object) -> Optional[int]:
    """Parse a ``data-source-line`` value, returning None when it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        digits = value.strip()
        if digits.isdigit():
            return int(digits)
    return None


def _earliest_source_line(nodes: list[MarkupNode]) -> Optional[int]:
    lines = []
    for node in nodes:
        if isinstance(node, MarkupElement):
            line = parse_source_line(node.attributes.get(SOURCE_LINE_ATTRIBUTE))
            if line is not None:
                lines.append(line)
    return min(lines, default=None)


def _wrap_image(image: MarkupElement) -> MarkupElement:
    attributes = dict(image.attributes)
    existing = attributes.get("style")
    base_style = existing if isinstance(existing, str) else None
    attributes["style"] = merge_inline_style_string(base_style, IMAGE_GRID_IMAGE_STYLE)
    attributes.setdefault("loading", "lazy")
    grid_image = MarkupElement(tag="img", attributes=attributes, styled=image.styled)
    return MarkupElement(
        tag="div",
        attributes={"class": [IMAGE_GRID_ITEM_CLASS], "style": IMAGE_GRID_ITEM_STYLE},
        children=[grid_image],
    )


def create_image_grid(images: list[MarkupElement], source_line: Optional[int] = None) -> MarkupElement:
    """Build a grid container holding one wrapper per image.

    Parameters
    ----------
    images : list of MarkupElement
        Images in document order
    source_line : int, optional
        Line recorded as ``data-source-line`` on the container

    Returns
    -------
    MarkupElement
        ``div.wechat-multi-image-grid`` element

    """
    columns = resolve_grid_columns(len(images))
    style = ";".join(IMAGE_GRID_CONTAINER_STYLE).format(columns=columns)
    attributes: dict = {
        "class": [IMAGE_GRID_CLASS],
        "style": style,
        "data-image-count": str(len(images)),
        "data-columns": str(columns),
    }
    if source_line:
        attributes[SOURCE_LINE_ATTRIBUTE] = str(source_line)
    return MarkupElement(tag="div", attributes=attributes, children=[_wrap_image(image) for image in images])


class ImageGridGrouper:
    """Group runs of top-level images into grid containers."""

    def __init__(self) -> None:
        self.groups_created = 0

    def apply(self, root: MarkupRoot) -> MarkupRoot:
        """Group image runs among the children of ``root`` in place and return it."""
        self.groups_created = 0
        children = root.children
        index = 0

        while index < len(children):
            start = index
            images: list[MarkupElement] = []

            while index < len(children):
                current = children[index]
                if is_whitespace_text(current):
                    index += 1
                    continue
                extracted = extract_images(current)
                if not extracted:
                    break
                images.extend(extracted)
                index += 1

            if len(images) >= IMAGE_GRID_MIN_IMAGES:
                consumed = children[start:index]
                children[start:index] = [create_image_grid(images, _earliest_source_line(consumed))]
                self.groups_created += 1
            index = start + 1

        if self.groups_created:
            logger.debug(f"Grouped images into {self.groups_created} grid containers")
        return root
