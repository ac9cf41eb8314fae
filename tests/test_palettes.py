"""
Unit tests for palette generation, themes, classification and export.
"""
import json
import random

import pytest

from app.services.colors.analysis import hsl_to_hex
from app.services.colors.harmony import HarmonyType
from app.services.colors.palettes import (
    ACCESSIBLE_PAIR_CANDIDATES, MATERIAL_COLORS, PRESET_COLORS, TRENDING_PALETTES,
    analyze_palette_harmony, export_palette, generate_accessible_pairs,
    generate_gradient_palette, generate_palette, generate_random_palette, generate_theme,
)
from app.services.colors.converter import hex_to_rgb, is_valid_hex, rgb_to_hsl
from app.services.colors.policy import ColorPolicy


class TestGeneratePalette:
    """Test palette type dispatch."""

    @pytest.mark.parametrize("palette_type,size", [
        ("complementary", 2), ("triadic", 3), ("tetradic", 4),
        ("analogous", 3), ("splitComplementary", 3),
    ])
    def test_harmony_sizes_ignore_count(self, palette_type, size):
        assert len(generate_palette("#3B82F6", palette_type, count=9)) == size

    @pytest.mark.parametrize("palette_type", ["shades", "tints", "monochromatic"])
    def test_series_respect_count(self, palette_type):
        assert len(generate_palette("#3B82F6", palette_type, count=6)) == 6

    def test_accepts_enum(self):
        assert generate_palette("#FF0000", HarmonyType.COMPLEMENTARY) == ["#FF0000", "#00FFFF"]

    def test_unknown_type_returns_base(self):
        assert generate_palette("#3B82F6", "rainbow") == ["#3B82F6"]

    def test_gradient_palette(self):
        assert generate_gradient_palette("#000000", "#FFFFFF", 2) == ["#000000", "#FFFFFF"]

    def test_random_palette(self):
        colors = generate_random_palette(4, random.Random(1))
        assert len(colors) == 4
        assert all(is_valid_hex(color) for color in colors)
        assert colors == generate_random_palette(4, random.Random(1))
        assert generate_random_palette(0) == []


class TestStaticTables:
    """Test the bundled preset tables."""

    def test_tables_hold_valid_hex(self):
        colors = list(PRESET_COLORS)
        for table in (MATERIAL_COLORS, TRENDING_PALETTES):
            for palette in table.values():
                colors.extend(palette)
        assert all(is_valid_hex(color) for color in colors)

    def test_material_scales_have_ten_steps(self):
        assert all(len(scale) == 10 for scale in MATERIAL_COLORS.values())


class TestTheme:
    """Test theme and accessible pair generation."""

    def test_theme_roles(self):
        theme = generate_theme("#3b82f6")

        assert theme["primary"] == "#3B82F6"
        assert theme["onPrimary"] == "#FFFFFF"
        assert theme["background"] == "#FFFFFF"
        assert theme["error"] == "#F44336"
        for role in ("primaryLight", "primaryDark", "secondary", "accent", "onSecondary"):
            assert is_valid_hex(theme[role])

    def test_theme_light_and_dark_bracket_primary(self):
        theme = generate_theme("#3B82F6")
        lightness = {role: rgb_to_hsl(*hex_to_rgb(theme[role])).l for role in ("primaryLight", "primary", "primaryDark")}
        assert lightness["primaryDark"] < lightness["primary"] < lightness["primaryLight"]

    def test_theme_invalid(self):
        assert generate_theme("nope") is None

    def test_accessible_pairs(self):
        pairs = generate_accessible_pairs("#3B82F6")

        assert [pair["text"] for pair in pairs] == ["#000000"]
        assert pairs[0]["background"] == "#3B82F6"
        assert float(pairs[0]["contrast"]) >= 4.5
        assert len(pairs[0]["contrast"].split(".")[1]) == 2

    def test_accessible_pairs_on_white(self):
        texts = [pair["text"] for pair in generate_accessible_pairs("#FFFFFF")]
        assert set(texts) <= set(ACCESSIBLE_PAIR_CANDIDATES)
        assert "#000000" in texts and "#333333" in texts
        assert "#FFFFFF" not in texts

    def test_accessible_pairs_invalid(self):
        assert generate_accessible_pairs("nope") == []


class TestAnalyzeHarmony:
    """Test heuristic palette classification."""

    def test_single_color(self):
        assert analyze_palette_harmony(["#FF0000"]) == "Single Color"
        assert analyze_palette_harmony([]) == "Single Color"

    def test_analogous(self):
        assert analyze_palette_harmony(["#FF0000", "#FF2A00"]) == "Analogous"

    def test_triadic(self):
        assert analyze_palette_harmony(["#FF0000", "#00FF00", "#0000FF"]) == "Triadic"

    def test_complementary(self):
        assert analyze_palette_harmony(["#FF0000", "#00FFFF"]) == "Complementary"

    def test_tetradic(self):
        assert analyze_palette_harmony(generate_palette("#FF0000", "tetradic")) == "Tetradic"

    def test_custom(self):
        assert analyze_palette_harmony(["#FF0000", "#FFD500"]) == "Custom Harmony"

    def test_invalid_members_count_as_hue_zero(self):
        assert analyze_palette_harmony(["bad", "#00FFFF"]) == "Complementary"

    @pytest.mark.parametrize("second_hue,expected", [
        (30, "Custom Harmony"),
        (100, "Tetradic"),
        (105, "Triadic"),
        (140, "Custom Harmony"),
    ])
    def test_band_boundaries(self, second_hue, expected):
        second = hsl_to_hex(second_hue, 100, 50)
        assert rgb_to_hsl(*hex_to_rgb(second)).h == second_hue

        assert analyze_palette_harmony(["#FF0000", second]) == expected

    def test_band_order_is_configurable(self):
        tetradic_first = ColorPolicy(harmony_band_centers=(
            ("Tetradic", 90.0), ("Triadic", 120.0), ("Complementary", 180.0),
        ))
        second = hsl_to_hex(105, 100, 50)
        assert analyze_palette_harmony(["#FF0000", second], tetradic_first) == "Tetradic"

    def test_policy_bands(self):
        wide = ColorPolicy(analogous_max_gap=200)
        assert analyze_palette_harmony(["#FF0000", "#00FFFF"], wide) == "Analogous"


class TestExportPalette:
    """Test palette serialization formats."""

    COLORS = ["#FF0000", "#00FF00"]

    def test_json(self):
        output = export_palette(self.COLORS, "json")
        assert json.loads(output) == self.COLORS
        assert output == '[\n  "#FF0000",\n  "#00FF00"\n]'

    def test_css(self):
        assert export_palette(self.COLORS, "css") == "--color-1: #FF0000;\n--color-2: #00FF00;"

    def test_scss(self):
        assert export_palette(self.COLORS, "scss") == "$color-1: #FF0000;\n$color-2: #00FF00;"

    def test_tailwind(self):
        output = json.loads(export_palette(self.COLORS, "tailwind"))
        assert output == {"colors": {"custom-1": "#FF0000", "custom-2": "#00FF00"}}

    def test_adobe(self):
        assert export_palette(self.COLORS, "adobe") == "255,0,0\n0,255,0"

    def test_unknown_format_is_plain_lines(self):
        assert export_palette(self.COLORS, "text") == "#FF0000\n#00FF00"
        assert export_palette(self.COLORS, "whatever") == "#FF0000\n#00FF00"
