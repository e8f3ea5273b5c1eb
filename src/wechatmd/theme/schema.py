#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/theme/schema.py
"""Theme definition schema.

A theme is a JSON-shaped document: identity and descriptive metadata, design
tokens (colors, typography, spacing, border) and an open ``components`` map of
per-role overrides. The schema is expressed as frozen pydantic models, so a
validated theme can be shared read-only across render calls.

Numbers are strict: booleans, numeric strings, infinities and NaN are
rejected. Unknown keys are ignored, except inside the color palette where
every extra entry must be a string.
"""

from __future__ import annotations

import json
import math
import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from wechatmd.exceptions import FileError, ThemeValidationError, ThemeViolation

logger = logging.getLogger(__name__)


def _require_number(value: Any) -> Any:
    # Booleans and numeric strings are rejected before int/float coercion
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if not math.isfinite(value):
        raise ValueError("must be a finite number")
    return value


Number = Annotated[Union[int, float], BeforeValidator(_require_number)]


class _ThemeModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ThemeMetadata(_ThemeModel):
    """Descriptive information shown in theme pickers."""

    name: StrictStr
    author: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    tags: Optional[tuple[StrictStr, ...]] = None


class ColorPalette(BaseModel):
    """Named colors. ``primary``, ``text`` and ``background`` are required."""

    model_config = ConfigDict(frozen=True, extra="allow")

    primary: StrictStr
    text: StrictStr
    background: StrictStr

    __pydantic_extra__: dict[str, StrictStr] = Field(init=False)  # type: ignore[assignment]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the color named ``key`` or ``default``."""
        return self.as_dict().get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.as_dict()

    def as_dict(self) -> dict[str, str]:
        """Return every palette entry, required keys first."""
        colors = {"primary": self.primary, "text": self.text, "background": self.background}
        colors.update(self.__pydantic_extra__ or {})
        return colors


class TypographyRole(_ThemeModel):
    """Typography settings for headings or body text."""

    line_height: Number = Field(alias="lineHeight")
    weight: Number
    font_family: Optional[StrictStr] = Field(default=None, alias="fontFamily")


class Typography(_ThemeModel):
    """Base font family plus heading and body roles."""

    font_family: StrictStr = Field(alias="fontFamily")
    heading: TypographyRole
    body: TypographyRole


class BorderTokens(_ThemeModel):
    """Border radius and width, in pixels."""

    radius: Optional[Number] = None
    width: Optional[Number] = None


class ThemeTokens(_ThemeModel):
    """Design tokens shared by every styling function."""

    color: ColorPalette
    typography: Typography
    spacing: dict[str, Number]
    border: Optional[BorderTokens] = None


class ThemeDefinition(_ThemeModel):
    """Complete, validated theme.

    Parameters
    ----------
    id : str
        Stable identifier (``"tech-minimal"``)
    version : str
        Theme version string
    metadata : ThemeMetadata
        Display metadata
    tokens : ThemeTokens
        Colors, typography, spacing and border tokens
    components : dict
        Open map of per-role overrides, read through the typed views in
        :mod:`wechatmd.theme.components`

    """

    id: StrictStr
    version: StrictStr
    metadata: ThemeMetadata
    tokens: ThemeTokens
    components: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the theme as a JSON-compatible mapping using wire field names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def _format_location(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def validate_theme(data: Any) -> ThemeDefinition:
    """Validate a theme mapping.

    Parameters
    ----------
    data : Any
        Candidate theme, usually a mapping decoded from JSON

    Returns
    -------
    ThemeDefinition
        Immutable validated theme

    Raises
    ------
    ThemeValidationError
        When the data does not satisfy the schema. Every offending field is
        reported with its dotted path (``tokens.color.primary``).

    """
    if isinstance(data, ThemeDefinition):
        return data

    try:
        return ThemeDefinition.model_validate(data)
    except PydanticValidationError as e:
        violations = [ThemeViolation(path=_format_location(err["loc"]), message=err["msg"]) for err in e.errors()]
        raise ThemeValidationError("Invalid theme definition", violations=violations, original_error=e) from e


def load_theme_file(path: Union[str, Path]) -> ThemeDefinition:
    """Load and validate a theme from a JSON, YAML or TOML file.

    Parameters
    ----------
    path : str or Path
        Theme file; the format is chosen by extension (``.json``, ``.yaml``,
        ``.yml``, ``.toml``), defaulting to JSON

    Returns
    -------
    ThemeDefinition
        Validated theme

    Raises
    ------
    FileError
        If the file cannot be read or decoded
    ThemeValidationError
        If the decoded data is not a valid theme

    """
    theme_path = Path(path)
    try:
        text = theme_path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"Could not read theme file: {theme_path}", file_path=str(theme_path), original_error=e) from e

    suffix = theme_path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            data: Any = yaml.safe_load(text)
        elif suffix == ".toml":
            data = tomllib.loads(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise FileError(
            f"Could not decode theme file {theme_path}: {e}", file_path=str(theme_path), original_error=e
        ) from e

    logger.debug(f"Loaded theme data from {theme_path}")
    return validate_theme(data)

