#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/transforms/frontmatter.py
"""Front-matter stripping.

Front matter is editor-side metadata; it never reaches the rendered HTML.
The transform removes every top-level :class:`FrontMatter` node and keeps the
decoded mapping on the document metadata for callers that want it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from wechatmd.ast.nodes import Document, FrontMatter
from wechatmd.ast.transforms import NodeTransformer

logger = logging.getLogger(__name__)

FRONT_MATTER_METADATA_KEY = "front_matter"


def decode_front_matter(node: FrontMatter) -> dict[str, Any] | None:
    """Decode a front-matter block into a mapping.

    Parameters
    ----------
    node : FrontMatter
        Block to decode

    Returns
    -------
    dict or None
        Decoded mapping, or None when the block is empty, malformed or does
        not decode to a mapping

    """
    if not node.content.strip():
        return None

    try:
        if node.format == "toml":
            data: Any = tomllib.loads(node.content)
        else:
            data = yaml.safe_load(node.content)
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"Ignoring undecodable {node.format} front matter: {e}")
        return None

    if not isinstance(data, dict):
        logger.debug(f"Ignoring {node.format} front matter that is not a mapping")
        return None
    return data


class StripFrontMatterTransform(NodeTransformer):
    """Remove top-level front-matter blocks regardless of declared format.

    Examples
    --------
        >>> doc = markdown_to_ast("---\\ntitle: Demo\\n---\\n\\n# Body")
        >>> stripped = StripFrontMatterTransform().transform(doc)
        >>> stripped.metadata["front_matter"]
        {'title': 'Demo'}

    """

    def visit_document(self, node: Document) -> Document:
        """Drop FrontMatter children and record their decoded data."""
        metadata = node.metadata.copy()
        children = []
        for child in node.children:
            if isinstance(child, FrontMatter):
                decoded = decode_front_matter(child)
                if decoded is not None:
                    metadata.setdefault(FRONT_MATTER_METADATA_KEY, {}).update(decoded)
                continue
            transformed = self.transform(child)
            if transformed is not None:
                children.append(transformed)

        return Document(children=children, metadata=metadata, source_location=node.source_location)


def strip_front_matter(document: Document) -> Document:
    """Return a copy of ``document`` without its front-matter blocks."""
    return StripFrontMatterTransform().transform(document)  # type: ignore[return-value]
