"""Tests for the StyleSpec value type."""

import json

import pytest

from cssdecl.model import (
    RGBA,
    Box,
    FixedFontSize,
    FontValue,
    FontWeight,
    Material,
    ScaledFontSize,
    SemanticColor,
    StyleSpec,
    TextStyle,
)


# ---------------------------------------------------------------------------
# Defaults / immutability
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_all_fields_absent(self):
        spec = StyleSpec()
        assert spec.foreground_color is None
        assert spec.padding is None
        assert spec.italic is False
        assert spec.underline is False
        assert spec.strikethrough is False
        assert spec.is_empty

    def test_is_frozen(self):
        spec = StyleSpec()
        with pytest.raises(AttributeError):
            spec.italic = True  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Derived font
# ---------------------------------------------------------------------------


class TestFont:
    def test_absent_without_font_fields(self):
        assert StyleSpec(foreground_color=RGBA(1, 0, 0)).font is None

    def test_size_only(self):
        spec = StyleSpec(font_size=FixedFontSize(18))
        assert spec.font == FontValue(size=FixedFontSize(18))

    def test_weight_defaults_to_body(self):
        spec = StyleSpec(font_weight=FontWeight.BOLD)
        assert spec.font == FontValue(size=ScaledFontSize(TextStyle.BODY), weight=FontWeight.BOLD)

    def test_italic_alone_produces_font(self):
        font = StyleSpec(italic=True).font
        assert font is not None
        assert font.italic is True
        assert font.size == ScaledFontSize(TextStyle.BODY)


# ---------------------------------------------------------------------------
# from_css / to_dict
# ---------------------------------------------------------------------------


class TestFromCss:
    def test_delegates_to_parser(self):
        spec = StyleSpec.from_css("color: red; padding: 4px")
        assert spec.foreground_color == RGBA(1.0, 0.0, 0.0)
        assert spec.padding == Box.uniform(4)


class TestToDict:
    def test_only_set_fields_and_flags(self):
        assert StyleSpec().to_dict() == {
            "italic": False,
            "underline": False,
            "strikethrough": False,
        }

    def test_encodes_values(self):
        spec = StyleSpec(
            foreground_color=RGBA(1.0, 0.0, 0.0),
            background_color=SemanticColor("systemBackground"),
            font_size=ScaledFontSize(TextStyle.TITLE2),
            font_weight=FontWeight.SEMIBOLD,
            padding=Box(top=1, start=2, end=3, bottom=4),
            background_material=Material.BAR,
        )
        data = spec.to_dict()
        assert data["foreground_color"] == {"rgba": [1.0, 0.0, 0.0, 1.0]}
        assert data["background_color"] == {"semantic": "systemBackground"}
        assert data["font_size"] == {"style": "title2"}
        assert data["font_weight"] == "semibold"
        assert data["padding"] == {"top": 1, "start": 2, "end": 3, "bottom": 4}
        assert data["background_material"] == "bar"

    def test_is_json_serializable(self):
        spec = StyleSpec.from_css("font-size: 12px; offset: 1 2; border-radius: 4px")
        json.dumps(spec.to_dict())
