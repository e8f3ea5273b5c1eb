#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the wechatmd rendering pipeline.

Using frozen dataclasses provides type safety, default values and cheap
cloning through :meth:`CloneFrozenMixin.create_updated`.
"""

from __future__ import annotations

from wechatmd.options.base import CloneFrozenMixin
from wechatmd.options.markdown import MarkdownParserOptions
from wechatmd.options.render import RenderOptions

__all__ = [
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "RenderOptions",
]
