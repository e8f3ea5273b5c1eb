#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/export.py
"""Clipboard export normalization.

The WeChat editor drops CSS grid layout when content is pasted, so rendered
image grids are rewritten into fixed-layout tables before the HTML is copied.
Everything other than grid containers is left as it is.
"""

from __future__ import annotations

import copy
import logging
import math
import re
from typing import Optional

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Tag
from bs4.formatter import HTMLFormatter

from wechatmd.constants import (
    EXPORT_CELL_STYLE,
    EXPORT_IMAGE_STYLE,
    EXPORT_INNER_STYLE,
    EXPORT_OUTER_STYLE,
    EXPORT_TABLE_STYLE,
    IMAGE_GRID_CLASS,
    IMAGE_GRID_ITEM_CLASS,
    SOURCE_LINE_ATTRIBUTE,
)
from wechatmd.transforms.image_grid import resolve_grid_columns

logger = logging.getLogger(__name__)

_INTEGER_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")

# Minimal escaping and HTML-style void elements, matching the renderer's output
_EXPORT_FORMATTER = HTMLFormatter(entity_substitution=EntitySubstitution.substitute_xml, void_element_close_prefix=None)


def parse_columns(value: Optional[str]) -> Optional[int]:
    """Parse the integer prefix of a ``data-columns`` value.

    Returns None when the value has no integer prefix or is not positive.
    """
    if not value:
        return None
    match = _INTEGER_PREFIX_RE.match(value)
    if not match:
        return None
    columns = int(match.group(1))
    return columns if columns > 0 else None


def _image_cell(soup: BeautifulSoup, image: Tag) -> Tag:
    outer = soup.new_tag("div", attrs={"style": ";".join(EXPORT_OUTER_STYLE)})
    inner = soup.new_tag("div", attrs={"style": ";".join(EXPORT_INNER_STYLE)})

    cloned = copy.copy(image)
    existing = cloned.get("style") or ""
    cloned["style"] = ";".join(part for part in (existing, *EXPORT_IMAGE_STYLE) if part)

    inner.append(cloned)
    outer.append(inner)
    return outer


def convert_grid_to_table(soup: BeautifulSoup, grid: Tag) -> bool:
    """Replace one grid container with an equivalent table.

    Parameters
    ----------
    soup : BeautifulSoup
        Document that owns ``grid``
    grid : Tag
        ``div.wechat-multi-image-grid`` element

    Returns
    -------
    bool
        True when the grid was replaced; grids with fewer than two items are
        left alone

    """
    items = grid.find_all(class_=IMAGE_GRID_ITEM_CLASS)
    if len(items) < 2:
        return False

    columns = parse_columns(grid.get("data-columns")) or resolve_grid_columns(len(items))
    rows = math.ceil(len(items) / columns)
    cell_style = ";".join(EXPORT_CELL_STYLE).format(width=f"{100 / columns:.2f}")

    table = soup.new_tag("table", attrs={"style": ";".join(EXPORT_TABLE_STYLE)})
    source_line = grid.get(SOURCE_LINE_ATTRIBUTE)
    if source_line:
        table[SOURCE_LINE_ATTRIBUTE] = source_line

    for row_index in range(rows):
        row = soup.new_tag("tr")
        for column_index in range(columns):
            cell = soup.new_tag("td", attrs={"style": cell_style})
            item_index = row_index * columns + column_index
            if item_index < len(items):
                image = items[item_index].find("img")
                if image is not None:
                    cell.append(_image_cell(soup, image))
            row.append(cell)
        table.append(row)

    grid.replace_with(table)
    return True


def prepare_wechat_export_html(html: str) -> str:
    """Normalize rendered HTML for pasting into the WeChat editor.

    Parameters
    ----------
    html : str
        HTML produced by the renderer

    Returns
    -------
    str
        HTML with every multi-image grid rewritten as a table. Blank input and
        markup without grids are returned unchanged, and so is the input when
        the conversion fails.

    """
    if not html.strip():
        return html
    if IMAGE_GRID_CLASS not in html:
        return html

    try:
        soup = BeautifulSoup(html, "html.parser")
        grids = soup.find_all(class_=IMAGE_GRID_CLASS)
        converted = sum(1 for grid in grids if convert_grid_to_table(soup, grid))
        if not converted:
            return html
        logger.debug(f"Converted {converted} image grid(s) to tables for export")
        return soup.decode(formatter=_EXPORT_FORMATTER)
    except Exception as e:
        logger.warning(f"Export normalization failed, returning original HTML: {e}")
        return html
