#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/theme/components.py
"""Typed views over the open ``components`` map of a theme.

Theme files may carry any component keys. The styling functions only read a
few of them, through the views defined here. A value of the wrong type is
treated as absent instead of raising, so a theme that passed schema
validation always styles. Keys a view does not know are kept in ``extras``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def as_number(value: Any) -> Optional[Number]:
    """Return ``value`` when it is a finite real number (booleans excluded)."""
    if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
        return value
    return None


def as_string(value: Any) -> Optional[str]:
    """Return ``value`` when it is a non-empty string."""
    if isinstance(value, str) and value:
        return value
    return None


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` when it is a mapping, else an empty mapping."""
    if isinstance(value, Mapping):
        return value
    return _EMPTY


def _extras(data: Mapping[str, Any], known: tuple[str, ...]) -> Mapping[str, Any]:
    return MappingProxyType({key: value for key, value in data.items() if key not in known})


@dataclass(frozen=True)
class ParagraphOverrides:
    """Overrides under ``components.paragraph``."""

    max_width: Optional[Number] = None
    spacing: Optional[Number] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    _KNOWN = ("maxWidth", "spacing")

    @classmethod
    def from_components(cls, components: Mapping[str, Any]) -> ParagraphOverrides:
        data = as_mapping(components.get("paragraph"))
        return cls(
            max_width=as_number(data.get("maxWidth")),
            spacing=as_number(data.get("spacing")),
            extras=_extras(data, cls._KNOWN),
        )


@dataclass(frozen=True)
class HeadingLevelOverrides:
    """Overrides for one heading level (``components.heading.h2``)."""

    font_size: Optional[Number] = None
    font_weight: Optional[Number] = None


@dataclass(frozen=True)
class HeadingOverrides:
    """Overrides under ``components.heading``.

    Parameters
    ----------
    levels : mapping of int to HeadingLevelOverrides
        Per-level overrides keyed by heading level (1-6)
    spacing : number or None
        Section spacing fallback
    extras : mapping
        Keys other than ``h1``-``h6`` and ``spacing``

    """

    levels: Mapping[int, HeadingLevelOverrides] = field(default_factory=dict)
    spacing: Optional[Number] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    _KNOWN = ("h1", "h2", "h3", "h4", "h5", "h6", "spacing")

    @classmethod
    def from_components(cls, components: Mapping[str, Any]) -> HeadingOverrides:
        data = as_mapping(components.get("heading"))
        levels = {}
        for level in range(1, 7):
            level_data = as_mapping(data.get(f"h{level}"))
            levels[level] = HeadingLevelOverrides(
                font_size=as_number(level_data.get("fontSize")),
                font_weight=as_number(level_data.get("fontWeight")),
            )
        return cls(
            levels=MappingProxyType(levels),
            spacing=as_number(data.get("spacing")),
            extras=_extras(data, cls._KNOWN),
        )

    def level(self, level: int) -> HeadingLevelOverrides:
        """Return the overrides for ``level`` (empty when not configured)."""
        return self.levels.get(level, HeadingLevelOverrides())


@dataclass(frozen=True)
class BlockquoteOverrides:
    """Overrides under ``components.blockquote``.

    ``accent_color`` may be a palette key (``"primary"``) or a literal color.
    """

    accent_color: Optional[str] = None
    border_width: Optional[Number] = None
    background: Optional[str] = None
    spacing: Optional[Number] = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    _KNOWN = ("accentColor", "borderWidth", "background", "spacing")

    @classmethod
    def from_components(cls, components: Mapping[str, Any]) -> BlockquoteOverrides:
        data = as_mapping(components.get("blockquote"))
        return cls(
            accent_color=as_string(data.get("accentColor")),
            border_width=as_number(data.get("borderWidth")),
            background=as_string(data.get("background")),
            spacing=as_number(data.get("spacing")),
            extras=_extras(data, cls._KNOWN),
        )


def component_spacing(components: Mapping[str, Any], role: str) -> Optional[Number]:
    """Return the ``spacing`` number of ``components[role]`` if it is one."""
    return as_number(as_mapping(components.get(role)).get("spacing"))
