"""
Unit tests for Lab conversion, harmonies, lightness series, accessibility and blending.
"""
import numpy as np
import pytest

from app.services.colors.analysis import (
    adjust_hue, blend_colors, calculate_delta_e, delta_e_matrix, generate_color_harmony,
    generate_gradient, generate_monochromatic, generate_shades, generate_tints,
    get_best_text_color, hsl_to_hex, hsl_to_rgb, is_accessible_text, rgb_to_lab, rgb_to_xyz,
)
from app.services.colors.converter import hex_to_rgb, rgb_to_hsl
from app.services.colors.harmony import HarmonyType, rotate_hue


def _hsl(hex_color):
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def _hue_distance(h1, h2):
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


class TestLab:
    """Test XYZ / Lab conversion and Delta E."""

    def test_white_xyz_matches_reference_white(self):
        x, y, z = rgb_to_xyz(255, 255, 255)
        assert x == pytest.approx(95.047, abs=0.01)
        assert y == pytest.approx(100.0, abs=0.05)
        assert z == pytest.approx(108.883, abs=0.01)

    def test_white_and_black_lab(self):
        assert rgb_to_lab(255, 255, 255).l == pytest.approx(100.0, abs=0.05)
        assert rgb_to_lab(0, 0, 0).l == pytest.approx(0.0, abs=0.01)

    def test_red_lab(self):
        lab = rgb_to_lab(255, 0, 0)
        assert lab.l == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.05)
        assert lab.b == pytest.approx(67.20, abs=0.05)

    def test_delta_e_identity_and_symmetry(self):
        assert calculate_delta_e((10, 20, 30), (10, 20, 30)) == 0.0
        forward = calculate_delta_e((255, 0, 0), (0, 0, 255))
        backward = calculate_delta_e((0, 0, 255), (255, 0, 0))
        assert forward == pytest.approx(backward)
        assert forward > 0

    def test_delta_e_black_white(self):
        assert calculate_delta_e((0, 0, 0), (255, 255, 255)) == pytest.approx(100.0, abs=0.05)

    def test_delta_e_matrix(self):
        colors = ["#FF0000", "#00FF00", "#0000FF"]
        matrix = delta_e_matrix(colors)

        assert matrix.shape == (3, 3)
        assert np.allclose(np.diag(matrix), 0.0)
        assert np.allclose(matrix, matrix.T)
        assert matrix[0, 2] == pytest.approx(calculate_delta_e((255, 0, 0), (0, 0, 255)))

    def test_delta_e_matrix_invalid(self):
        assert delta_e_matrix(["#FF0000", "oops"]) is None


class TestHsl:
    """Test HSL to RGB and hue helpers."""

    def test_hsl_to_rgb(self):
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)
        assert hsl_to_hex(240, 100, 50) == "#0000FF"

    def test_rotate_hue_wraps(self):
        assert rotate_hue(350, 20) == 10
        assert rotate_hue(10, -30) == 340

    def test_adjust_hue(self):
        assert adjust_hue("#FF0000", 120) == "#00FF00"
        assert adjust_hue("bad", 120) == "bad"


class TestHarmony:
    """Test harmony generation."""

    @pytest.mark.parametrize("harmony_type,size", [
        ("complementary", 2), ("triadic", 3), ("tetradic", 4),
        ("analogous", 3), ("splitComplementary", 3),
    ])
    def test_sizes(self, harmony_type, size):
        assert len(generate_color_harmony("#3B82F6", harmony_type)) == size

    def test_complementary_red(self):
        assert generate_color_harmony("#FF0000", "complementary") == ["#FF0000", "#00FFFF"]

    def test_complementary_hue_is_opposite(self):
        for base in ["#3B82F6", "#A0522D", "#2E8B57", "#FFD700"]:
            second = generate_color_harmony(base, "complementary")[1]
            expected = (_hsl(base).h + 180) % 360
            assert _hue_distance(_hsl(second).h, expected) <= 2

    def test_triadic_red(self):
        assert generate_color_harmony("#FF0000", HarmonyType.TRIADIC) == ["#FF0000", "#00FF00", "#0000FF"]

    def test_analogous_base_in_middle(self):
        colors = generate_color_harmony("#FF0000", "analogous")
        assert colors[1] == "#FF0000"
        assert _hsl(colors[0]).h == 330
        assert _hsl(colors[2]).h == 30

    def test_hue_offsets_preserve_saturation_and_lightness(self):
        base = _hsl("#3B82F6")
        for color in generate_color_harmony("#3B82F6", "tetradic"):
            hsl = _hsl(color)
            assert abs(hsl.s - base.s) <= 2
            assert abs(hsl.l - base.l) <= 2

    def test_unknown_type(self):
        assert generate_color_harmony("#3B82F6", "pentadic") == ["#3B82F6"]

    def test_invalid_base(self):
        assert generate_color_harmony("xyz", "triadic") == []


class TestLightnessSeries:
    """Test shades, tints and monochromatic series."""

    def test_shades_red(self):
        lightness = [_hsl(color).l for color in generate_shades("#FF0000", 3)]
        assert lightness == [37, 25, 13]

    def test_shades_strictly_interior_and_decreasing(self):
        base_l = _hsl("#3B82F6").l
        lightness = [_hsl(color).l for color in generate_shades("#3B82F6", 5)]
        assert all(0 < value < base_l for value in lightness)
        assert lightness == sorted(lightness, reverse=True)

    def test_tints_strictly_interior_and_increasing(self):
        base_l = _hsl("#3B82F6").l
        lightness = [_hsl(color).l for color in generate_tints("#3B82F6", 5)]
        assert all(base_l < value < 100 for value in lightness)
        assert lightness == sorted(lightness)

    def test_monochromatic_spans_black_to_white(self):
        colors = generate_monochromatic("#3B82F6", 5)
        assert len(colors) == 5
        assert colors[0] == "#000000"
        assert colors[-1] == "#FFFFFF"

    def test_monochromatic_single(self):
        assert generate_monochromatic("#3b82f6", 1) == ["#3B82F6"]

    @pytest.mark.parametrize("generator", [generate_shades, generate_tints, generate_monochromatic])
    def test_degenerate_counts(self, generator):
        assert generator("#3B82F6", 0) == []
        assert generator("#3B82F6", -2) == []
        assert generator("nothex", 3) == []


class TestAccessibility:
    """Test text accessibility helpers."""

    def test_black_on_white_passes_every_level(self):
        for level in ("AAA", "AA", "A"):
            assert is_accessible_text("#FFFFFF", "#000000", level)

    def test_low_contrast_fails(self):
        assert not is_accessible_text("#FFFFFF", "#EEEEEE", "A")

    def test_unknown_level_treated_as_aa(self):
        # #767676 on white is ~4.54:1, just above AA
        assert is_accessible_text("#FFFFFF", "#767676", "bogus")
        assert not is_accessible_text("#FFFFFF", "#777777", "bogus")

    def test_invalid_input(self):
        assert not is_accessible_text("#FFFFFF", "nope")

    def test_best_text_color(self):
        assert get_best_text_color("#FFFFFF") == "#000000"
        assert get_best_text_color("#000000") == "#FFFFFF"
        assert get_best_text_color("#3B82F6") == "#FFFFFF"
        assert get_best_text_color("nope") == "#000000"


class TestBlending:
    """Test blends and gradients."""

    def test_blend_endpoints(self):
        assert blend_colors("#000000", "#FFFFFF", 0) == "#000000"
        assert blend_colors("#000000", "#FFFFFF", 1) == "#FFFFFF"

    def test_blend_midpoint_rounds_half_up(self):
        assert blend_colors("#000000", "#FFFFFF") == "#808080"

    def test_blend_invalid_returns_first(self):
        assert blend_colors("#123456", "bad", 0.5) == "#123456"
        assert blend_colors("bad", "#123456", 0.5) == "bad"

    def test_gradient_includes_endpoints(self):
        colors = generate_gradient("#000000", "#FFFFFF", 3)
        assert colors == ["#000000", "#808080", "#FFFFFF"]

    def test_gradient_degenerate_steps(self):
        assert generate_gradient("#000000", "#FFFFFF", 1) == ["#000000"]
        assert generate_gradient("#000000", "#FFFFFF", 0) == []
