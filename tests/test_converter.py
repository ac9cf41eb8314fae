"""
Unit tests for hex parsing, format conversion and contrast math.
"""
import random

import pytest

from app.services.colors.converter import (
    CMYK, HSL, HSV, RGB, calculate_brightness, calculate_luminance, convert_from_hex,
    generate_random_color, get_color_temperature, get_contrast_rating, get_contrast_ratio,
    get_nearest_named_color, get_web_safe_color, hex_to_rgb, hex_to_short_hex, invert_color,
    is_valid_hex, normalize_hex, rgb_to_cmyk, rgb_to_decimal, rgb_to_hex, rgb_to_hsl,
    rgb_to_hsv, rgb_to_percent, round_half_up,
)
from app.services.colors.policy import ColorPolicy


class TestHexValidation:
    """Test hex string validation and normalization."""

    @pytest.mark.parametrize("value", ["#FF0000", "ff0000", "#abc", "ABC", "#3b82F6"])
    def test_valid_hex(self, value):
        assert is_valid_hex(value)

    @pytest.mark.parametrize("value", [
        "", "#", "#XYZ", "#FF00", "#FF00000", "GG0000", " #FF0000", "#FF0000 ", "##FF0000", "#12345",
    ])
    def test_invalid_hex(self, value):
        assert not is_valid_hex(value)

    def test_non_string_is_invalid(self):
        assert not is_valid_hex(None)
        assert not is_valid_hex(0xFF0000)

    def test_normalize_expands_shorthand(self):
        assert normalize_hex("#abc") == "#AABBCC"
        assert normalize_hex("f00") == "#FF0000"

    def test_normalize_uppercases(self):
        assert normalize_hex("3b82f6") == "#3B82F6"

    def test_normalize_rejects_invalid(self):
        assert normalize_hex("#ggg") is None
        assert normalize_hex("red") is None


class TestHexRgb:
    """Test hex <-> RGB conversion."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#3B82F6") == RGB(59, 130, 246)
        assert hex_to_rgb("3b82f6") == (59, 130, 246)

    def test_hex_to_rgb_requires_six_digits(self):
        assert hex_to_rgb("#abc") is None
        assert hex_to_rgb("#12345G") is None
        assert hex_to_rgb("") is None

    def test_rgb_to_hex_uppercase_padded(self):
        assert rgb_to_hex(0, 10, 255) == "#000AFF"

    def test_rgb_to_hex_rounds_channels(self):
        assert rgb_to_hex(127.5, 0.4, 254.6) == "#8000FF"

    def test_roundtrip_all_valid_hex(self):
        rng = random.Random(7)
        for _ in range(200):
            hex_color = f"#{rng.randint(0, 0xFFFFFF):06X}"
            assert rgb_to_hex(*hex_to_rgb(hex_color)) == hex_color

    def test_short_hex(self):
        assert hex_to_short_hex("#AABBCC") == "#ABC"
        assert hex_to_short_hex("#aabbcc") == "#ABC"
        assert hex_to_short_hex("#AABBCD") is None
        assert hex_to_short_hex("#abc") is None


class TestRoundHalfUp:
    """Test rounding that sends halves upward."""

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (2.4999, 2)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestColorSpaces:
    """Test HSL, HSV and CMYK conversion."""

    def test_rgb_to_hsl_blue(self):
        assert rgb_to_hsl(59, 130, 246) == HSL(217, 91, 60)

    def test_rgb_to_hsl_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == HSL(0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == HSL(120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == HSL(240, 100, 50)

    def test_rgb_to_hsl_achromatic(self):
        assert rgb_to_hsl(128, 128, 128) == HSL(0, 0, 50)
        assert rgb_to_hsl(255, 255, 255) == HSL(0, 0, 100)

    def test_hue_always_below_360(self):
        # Hue just below 360 must wrap instead of rounding up to 360
        assert rgb_to_hsl(255, 0, 1).h < 360

    def test_rgb_to_hsv(self):
        assert rgb_to_hsv(255, 0, 0) == HSV(0, 100, 100)
        assert rgb_to_hsv(0, 0, 0) == HSV(0, 0, 0)

    def test_rgb_to_cmyk(self):
        assert rgb_to_cmyk(255, 0, 0) == CMYK(0, 100, 100, 0)
        assert rgb_to_cmyk(255, 255, 255) == CMYK(0, 0, 0, 0)

    def test_rgb_to_cmyk_black_has_no_division_by_zero(self):
        assert rgb_to_cmyk(0, 0, 0) == CMYK(0, 0, 0, 100)

    def test_decimal_and_percent(self):
        assert rgb_to_decimal(59, 130, 246) == "59, 130, 246"
        assert rgb_to_percent(255, 128, 0) == "100%, 50%, 0%"


class TestLuminanceAndContrast:
    """Test WCAG luminance, contrast ratio and rating."""

    def test_luminance_bounds(self):
        assert calculate_luminance(0, 0, 0) == 0.0
        assert calculate_luminance(255, 255, 255) == pytest.approx(1.0)

    def test_white_on_black_is_21(self):
        ratio = get_contrast_ratio(calculate_luminance(255, 255, 255), calculate_luminance(0, 0, 0))
        assert ratio == pytest.approx(21.0)

    def test_contrast_is_symmetric_and_at_least_one(self):
        l1 = calculate_luminance(59, 130, 246)
        l2 = calculate_luminance(200, 30, 10)
        assert get_contrast_ratio(l1, l2) == pytest.approx(get_contrast_ratio(l2, l1))
        assert get_contrast_ratio(l1, l1) == pytest.approx(1.0)

    @pytest.mark.parametrize("ratio,rating", [
        (21.0, "AAA"), (7.0, "AAA"), (6.99, "AA"), (4.5, "AA"), (3.0, "A"), (2.99, "Poor"),
    ])
    def test_rating_thresholds_inclusive(self, ratio, rating):
        assert get_contrast_rating(ratio) == rating

    def test_rating_uses_policy(self):
        strict = ColorPolicy(contrast_levels={"AAA": 10, "AA": 8, "A": 5})
        assert get_contrast_rating(7.5, strict) == "A"

    def test_brightness(self):
        assert calculate_brightness(255, 255, 255) == 100
        assert calculate_brightness(0, 0, 0) == 0


class TestDerivedColors:
    """Test inversion, web-safe snapping, temperature and naming."""

    def test_invert(self):
        assert invert_color("#3B82F6") == "#C47D09"
        assert invert_color("#000000") == "#FFFFFF"
        assert invert_color("#abc") is None

    def test_invert_is_involution(self):
        rng = random.Random(11)
        for _ in range(100):
            hex_color = f"#{rng.randint(0, 0xFFFFFF):06X}"
            assert invert_color(invert_color(hex_color)) == hex_color

    def test_web_safe(self):
        assert get_web_safe_color("#3B82F6") == "#3399FF"
        assert get_web_safe_color("#FFFFFF") == "#FFFFFF"

    def test_web_safe_snaps_around_midpoint(self):
        assert get_web_safe_color("#191919") == "#000000"
        assert get_web_safe_color("#1A1A1A") == "#333333"

    def test_temperature(self):
        assert get_color_temperature(255, 0, 0) == "Warm"
        assert get_color_temperature(0, 0, 255) == "Cool"
        assert get_color_temperature(128, 128, 128) == "Neutral"

    @pytest.mark.parametrize("r,b,expected", [
        (26, 0, "Warm"), (25, 0, "Neutral"), (0, 25, "Neutral"), (0, 26, "Cool"),
        (255, 229, "Warm"), (255, 230, "Neutral"),
    ])
    def test_temperature_thresholds_exclusive(self, r, b, expected):
        # Warmth of exactly +/-0.1 would be 25.5 channel units; 25 stays Neutral
        assert get_color_temperature(r, 100, b) == expected

    def test_nearest_named_color(self):
        assert get_nearest_named_color("#FF0000") == "red"
        assert get_nearest_named_color("#FEFEFE") == "white"

    def test_nearest_named_color_invalid(self):
        assert get_nearest_named_color("nope") == "Unknown"


class TestRandomColor:
    """Test random color generation."""

    def test_format(self):
        for _ in range(50):
            assert is_valid_hex(generate_random_color())
            assert generate_random_color().startswith("#")

    def test_seeded_rng_is_reproducible(self):
        assert generate_random_color(random.Random(42)) == generate_random_color(random.Random(42))


class TestConvertFromHex:
    """Test the full ColorData record."""

    def test_blue(self):
        data = convert_from_hex("#3B82F6")

        assert data.hex == "#3B82F6"
        assert data.rgb == RGB(59, 130, 246)
        assert data.hsl == HSL(217, 91, 60)
        assert data.inverted == "#C47D09"
        assert data.short_hex == "N/A"
        assert data.temperature == "Cool"
        assert data.contrast_black_ratio > data.contrast_white_ratio

    def test_canonicalizes_lowercase(self):
        data = convert_from_hex("aabbcc")
        assert data.hex == "#AABBCC"
        assert data.short_hex == "#ABC"

    def test_black_and_white(self):
        white = convert_from_hex("#FFFFFF")
        assert white.luminance == 1.0
        assert white.contrast_black_ratio == 21.0
        assert white.contrast_black == "AAA"
        assert white.contrast_white == "Poor"

    def test_invalid_returns_none(self):
        assert convert_from_hex("#abc") is None
        assert convert_from_hex("zzzzzz") is None

    def test_to_dict_is_json_ready(self):
        payload = convert_from_hex("#FF0000").to_dict()

        assert payload["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert payload["hsl"] == {"h": 0, "s": 100, "l": 50}
        assert payload["cmyk"] == {"c": 0, "m": 100, "y": 100, "k": 0}
        assert payload["name"] == "red"
