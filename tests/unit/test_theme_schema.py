#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_theme_schema.py
"""Tests for theme validation, loading and the built-in presets."""

import json

import pytest
import yaml
from pydantic import ValidationError as PydanticValidationError

from wechatmd.exceptions import FileError, ThemeNotFoundError, ThemeValidationError, ValidationError
from wechatmd.theme import (
    BUILTIN_THEMES,
    ThemeDefinition,
    get_builtin_theme,
    get_default_theme,
    list_builtin_themes,
    load_theme_file,
    resolve_theme,
    validate_theme,
)
from wechatmd.theme.components import BlockquoteOverrides, HeadingOverrides, ParagraphOverrides


@pytest.mark.unit
class TestValidateTheme:
    """Tests for schema validation."""

    def test_valid_theme(self, theme_data):
        theme = validate_theme(theme_data)
        assert isinstance(theme, ThemeDefinition)
        assert theme.tokens.color.primary == "#1A73E8"
        assert theme.tokens.typography.body.line_height == 1.7

    def test_validated_theme_returned_as_is(self, tech_minimal):
        assert validate_theme(tech_minimal) is tech_minimal

    def test_missing_required_color(self, theme_data):
        del theme_data["tokens"]["color"]["primary"]
        with pytest.raises(ThemeValidationError) as exc_info:
            validate_theme(theme_data)
        assert exc_info.value.paths == ["tokens.color.primary"]

    def test_every_violation_reported(self, theme_data):
        del theme_data["version"]
        theme_data["tokens"]["typography"]["body"]["lineHeight"] = "1.7"
        theme_data["tokens"]["spacing"]["paragraph"] = True
        with pytest.raises(ThemeValidationError) as exc_info:
            validate_theme(theme_data)
        assert set(exc_info.value.paths) == {
            "version",
            "tokens.typography.body.lineHeight",
            "tokens.spacing.paragraph",
        }

    def test_extra_palette_entries_must_be_strings(self, theme_data):
        theme_data["tokens"]["color"]["accent"] = 12
        with pytest.raises(ThemeValidationError) as exc_info:
            validate_theme(theme_data)
        assert exc_info.value.paths == ["tokens.color.accent"]

    def test_unknown_keys_ignored(self, theme_data):
        theme_data["extra"] = {"anything": 1}
        theme_data["tokens"]["typography"]["body"]["letterSpacing"] = 1
        assert validate_theme(theme_data).id == "tech-minimal"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_numbers_rejected(self, theme_data, value):
        theme_data["tokens"]["spacing"]["paragraph"] = value
        with pytest.raises(ThemeValidationError) as exc_info:
            validate_theme(theme_data)
        assert exc_info.value.paths == ["tokens.spacing.paragraph"]

    def test_not_a_mapping(self):
        with pytest.raises(ThemeValidationError):
            validate_theme(["not", "a", "theme"])

    def test_error_hierarchy(self, theme_data):
        del theme_data["id"]
        with pytest.raises(ValidationError) as exc_info:
            validate_theme(theme_data)
        assert isinstance(exc_info.value.original_error, PydanticValidationError)
        assert exc_info.value.summary == "Invalid theme definition"
        assert "id: Field required" in exc_info.value.message

    def test_theme_is_immutable(self, tech_minimal):
        with pytest.raises(PydanticValidationError):
            tech_minimal.id = "changed"

    def test_palette_access(self, tech_minimal):
        palette = tech_minimal.tokens.color
        assert palette.get("muted") == "#F5F8FF"
        assert palette.get("missing") is None
        assert "muted" in palette
        assert list(palette.as_dict())[:3] == ["primary", "text", "background"]

    def test_to_dict_round_trips(self, tech_minimal):
        data = tech_minimal.to_dict()
        assert data["tokens"]["typography"]["body"]["lineHeight"] == 1.7
        assert validate_theme(data) == tech_minimal


@pytest.mark.unit
class TestLoadThemeFile:
    """Tests for loading themes from files."""

    def test_json(self, tmp_path, theme_data):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps(theme_data), encoding="utf-8")
        assert load_theme_file(path).id == "tech-minimal"

    def test_json_infinity_literal_rejected(self, tmp_path, theme_data):
        path = tmp_path / "theme.json"
        text = json.dumps(theme_data).replace('"paragraph": 16', '"paragraph": Infinity')
        assert "Infinity" in text
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ThemeValidationError) as exc_info:
            load_theme_file(path)
        assert exc_info.value.paths == ["tokens.spacing.paragraph"]

    def test_yaml(self, tmp_path, theme_data):
        path = tmp_path / "theme.yaml"
        path.write_text(yaml.safe_dump(theme_data, allow_unicode=True), encoding="utf-8")
        assert load_theme_file(str(path)).metadata.name == "Tech Minimal"

    def test_toml(self, tmp_path):
        path = tmp_path / "theme.toml"
        path.write_text(
            'id = "toml-theme"\n'
            'version = "1.0.0"\n'
            "[metadata]\n"
            'name = "Toml"\n'
            "[tokens.color]\n"
            'primary = "#000000"\n'
            'text = "#111111"\n'
            'background = "#FFFFFF"\n'
            "[tokens.typography]\n"
            'fontFamily = "serif"\n'
            "[tokens.typography.heading]\n"
            "lineHeight = 1.3\n"
            "weight = 700\n"
            "[tokens.typography.body]\n"
            "lineHeight = 1.6\n"
            "weight = 400\n"
            "[tokens.spacing]\n"
            "paragraph = 12\n",
            encoding="utf-8",
        )
        theme = load_theme_file(path)
        assert theme.id == "toml-theme"
        assert theme.tokens.spacing == {"paragraph": 12}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileError) as exc_info:
            load_theme_file(tmp_path / "missing.json")
        assert exc_info.value.file_path.endswith("missing.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(FileError, match="Could not decode theme file"):
            load_theme_file(path)

    def test_invalid_theme_in_file(self, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"id": "x"}), encoding="utf-8")
        with pytest.raises(ThemeValidationError):
            load_theme_file(path)


@pytest.mark.unit
class TestPresets:
    """Tests for the built-in themes."""

    def test_builtin_ids(self):
        assert [theme.id for theme in list_builtin_themes()] == [
            "tech-minimal",
            "warm-note",
            "tech-spectrum",
            "elegant-media",
            "wechat-default",
        ]
        assert set(BUILTIN_THEMES) == {theme.id for theme in list_builtin_themes()}

    def test_default_theme(self):
        assert get_default_theme().id == "tech-minimal"
        assert get_builtin_theme() is get_default_theme()

    def test_unknown_theme(self):
        with pytest.raises(ThemeNotFoundError) as exc_info:
            get_builtin_theme("nope")
        assert exc_info.value.theme_id == "nope"
        assert "tech-minimal" in exc_info.value.available

    def test_resolve_theme(self, tech_minimal, theme_data):
        assert resolve_theme() is tech_minimal
        assert resolve_theme("warm-note").id == "warm-note"
        assert resolve_theme(tech_minimal) is tech_minimal
        assert resolve_theme(theme_data) == tech_minimal


@pytest.mark.unit
class TestComponentViews:
    """Tests for the typed component override views."""

    def test_paragraph(self, tech_minimal):
        overrides = ParagraphOverrides.from_components(tech_minimal.components)
        assert overrides.max_width == 680
        assert overrides.spacing is None

    def test_heading_levels(self, tech_minimal):
        overrides = HeadingOverrides.from_components(tech_minimal.components)
        assert overrides.level(1).font_size == 34
        assert overrides.level(4).font_size is None

    def test_wrong_types_treated_as_absent(self):
        components = {"blockquote": {"accentColor": 5, "borderWidth": "3", "custom": True}, "heading": "big"}
        blockquote = BlockquoteOverrides.from_components(components)
        assert blockquote.accent_color is None
        assert blockquote.border_width is None
        assert dict(blockquote.extras) == {"custom": True}
        assert HeadingOverrides.from_components(components).level(1).font_size is None

    def test_booleans_are_not_numbers(self):
        overrides = ParagraphOverrides.from_components({"paragraph": {"maxWidth": True}})
        assert overrides.max_width is None

    def test_non_finite_numbers_treated_as_absent(self):
        components = {"paragraph": {"maxWidth": float("inf"), "spacing": float("nan")}}
        overrides = ParagraphOverrides.from_components(components)
        assert overrides.max_width is None
        assert overrides.spacing is None
