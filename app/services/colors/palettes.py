"""
Chromalens Palette Generator

Dispatches palette types to the harmony and lightness-series generators,
builds UI themes from a base color, classifies arbitrary palettes, and
serializes palettes for export.
"""

import json
import random
from typing import Dict, List, Optional, Sequence, Union

from loguru import logger

from .analysis import (
    adjust_hue, generate_color_harmony, generate_gradient, generate_monochromatic,
    generate_shades, generate_tints, get_best_text_color, hsl_to_hex, is_accessible_text,
)
from .converter import (
    calculate_luminance, generate_random_color, get_contrast_ratio, hex_to_rgb, rgb_to_hex,
    rgb_to_hsl,
)
from .harmony import HARMONY_OFFSETS, HarmonyType
from .policy import DEFAULT_POLICY, ColorPolicy


PRESET_COLORS: List[str] = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7",
    "#DDA0DD", "#98D8C8", "#F7DC6F", "#BB8FCE", "#85C1E9",
    "#F8C471", "#82E0AA", "#F1948A", "#85C1E9", "#D7BDE2",
    "#A3E4D7", "#F9E79F", "#D5A6BD", "#AED6F1", "#A9DFBF",
    "#FAD7A0", "#D2B4DE", "#AED6F1", "#A3E4D7", "#F7DC6F",
]

MATERIAL_COLORS: Dict[str, List[str]] = {
    "red": ["#FFEBEE", "#FFCDD2", "#EF9A9A", "#E57373", "#EF5350", "#F44336", "#E53935", "#D32F2F", "#C62828", "#B71C1C"],
    "pink": ["#FCE4EC", "#F8BBD9", "#F48FB1", "#F06292", "#EC407A", "#E91E63", "#D81B60", "#C2185B", "#AD1457", "#880E4F"],
    "purple": ["#F3E5F5", "#E1BEE7", "#CE93D8", "#BA68C8", "#AB47BC", "#9C27B0", "#8E24AA", "#7B1FA2", "#6A1B9A", "#4A148C"],
    "blue": ["#E3F2FD", "#BBDEFB", "#90CAF9", "#64B5F6", "#42A5F5", "#2196F3", "#1E88E5", "#1976D2", "#1565C0", "#0D47A1"],
    "green": ["#E8F5E8", "#C8E6C9", "#A5D6A7", "#81C784", "#66BB6A", "#4CAF50", "#43A047", "#388E3C", "#2E7D32", "#1B5E20"],
    "orange": ["#FFF3E0", "#FFE0B2", "#FFCC80", "#FFB74D", "#FFA726", "#FF9800", "#FB8C00", "#F57C00", "#EF6C00", "#E65100"],
}

TRENDING_PALETTES: Dict[str, List[str]] = {
    "Sunset Vibes": ["#FF6B6B", "#FF8E53", "#FF6B9D", "#C44569", "#F8B500"],
    "Ocean Breeze": ["#0F3460", "#16537E", "#1E90FF", "#87CEEB", "#E0F6FF"],
    "Forest Dreams": ["#2D5016", "#3E6B1F", "#4F7942", "#60A85F", "#8FBC8F"],
    "Cosmic Purple": ["#2C003E", "#512B58", "#8E44AD", "#BB8FCE", "#E8DAEF"],
    "Warm Autumn": ["#8B4513", "#CD853F", "#DEB887", "#F4A460", "#FFEFD5"],
    "Cool Winter": ["#1C1C1C", "#2F4F4F", "#4682B4", "#87CEEB", "#F0F8FF"],
    "Spring Fresh": ["#228B22", "#32CD32", "#90EE90", "#98FB98", "#F0FFF0"],
    "Retro Neon": ["#FF1493", "#00FFFF", "#FFFF00", "#FF4500", "#9400D3"],
}

# Fixed status and surface roles shared by every generated theme
THEME_FIXED_ROLES: Dict[str, str] = {
    "success": "#4CAF50",
    "warning": "#FF9800",
    "error": "#F44336",
    "info": "#2196F3",
    "background": "#FFFFFF",
    "surface": "#F5F5F5",
}

ACCESSIBLE_PAIR_CANDIDATES = ["#FFFFFF", "#000000", "#F5F5F5", "#333333", "#666666", "#999999"]

THEME_LIGHTNESS_DELTA = 20


def generate_palette(
    base_color: str,
    palette_type: Union[HarmonyType, str],
    count: int = 5
) -> List[str]:
    """
    Generate a palette of the requested type around a base color.

    Args:
        base_color: Base hex color
        palette_type: One of the HarmonyType values
        count: Size for the lightness-series types (shades, tints,
            monochromatic); harmony types have a fixed size

    Returns:
        Palette as a list of hex colors; [base_color] for an unknown type
    """
    try:
        kind = HarmonyType(palette_type)
    except ValueError:
        logger.debug(f"Unknown palette type {palette_type!r}, returning base color")
        return [base_color]

    if kind == HarmonyType.SHADES:
        return generate_shades(base_color, count)
    if kind == HarmonyType.TINTS:
        return generate_tints(base_color, count)
    if kind == HarmonyType.MONOCHROMATIC:
        return generate_monochromatic(base_color, count)
    if kind in HARMONY_OFFSETS:
        return generate_color_harmony(base_color, kind)
    return [base_color]


def generate_theme(base_color: str) -> Optional[Dict[str, str]]:
    """
    Derive a UI theme (primary/secondary/accent plus fixed roles) from one color.

    Returns:
        Mapping of role name to hex color, or None if the base cannot be parsed
    """
    rgb = hex_to_rgb(base_color)
    if rgb is None:
        return None

    primary = rgb_to_hex(*rgb)
    hsl = rgb_to_hsl(*rgb)
    secondary = adjust_hue(primary, 180)

    theme = {
        "primary": primary,
        "primaryLight": hsl_to_hex(hsl.h, hsl.s, min(100, hsl.l + THEME_LIGHTNESS_DELTA)),
        "primaryDark": hsl_to_hex(hsl.h, hsl.s, max(0, hsl.l - THEME_LIGHTNESS_DELTA)),
        "secondary": secondary,
        "accent": adjust_hue(primary, 60),
    }
    theme.update(THEME_FIXED_ROLES)
    theme.update({
        "onPrimary": get_best_text_color(primary),
        "onSecondary": get_best_text_color(secondary),
        "onBackground": "#000000",
        "onSurface": "#000000",
    })
    return theme


def generate_accessible_pairs(base_color: str) -> List[Dict[str, str]]:
    """
    List the fixed text colors that pass WCAG AA on the base color.

    Returns:
        Dicts with background, text and contrast (two-decimal string);
        [] if the base cannot be parsed
    """
    base_rgb = hex_to_rgb(base_color)
    if base_rgb is None:
        return []

    base_luminance = calculate_luminance(*base_rgb)
    pairs = []
    for text_color in ACCESSIBLE_PAIR_CANDIDATES:
        if is_accessible_text(base_color, text_color, "AA"):
            contrast = get_contrast_ratio(
                base_luminance, calculate_luminance(*hex_to_rgb(text_color))
            )
            pairs.append({
                "background": base_color,
                "text": text_color,
                "contrast": f"{contrast:.2f}",
            })
    return pairs


def generate_gradient_palette(start_color: str, end_color: str, steps: int = 10) -> List[str]:
    return generate_gradient(start_color, end_color, steps)


def generate_random_palette(count: int = 5, rng: Optional[random.Random] = None) -> List[str]:
    return [generate_random_color(rng) for _ in range(max(0, count))]


def export_palette(colors: Sequence[str], export_format: str = "json") -> str:
    """
    Serialize a palette.

    Args:
        colors: Hex colors in palette order
        export_format: json, css, scss, tailwind, adobe; anything else gives
            one color per line

    Returns:
        Export text. CSS and SCSS produce one `--color-N: #HEX;` /
        `$color-N: #HEX;` line per color with 1-based N.
    """
    if export_format == "json":
        return json.dumps(list(colors), indent=2)
    if export_format == "css":
        return "\n".join(f"--color-{index}: {color};" for index, color in enumerate(colors, start=1))
    if export_format == "scss":
        return "\n".join(f"$color-{index}: {color};" for index, color in enumerate(colors, start=1))
    if export_format == "tailwind":
        tailwind_colors = {f"custom-{index}": color for index, color in enumerate(colors, start=1)}
        return json.dumps({"colors": tailwind_colors}, indent=2)
    if export_format == "adobe":
        lines = []
        for color in colors:
            rgb = hex_to_rgb(color)
            lines.append(f"{rgb.r},{rgb.g},{rgb.b}" if rgb else "0,0,0")
        return "\n".join(lines)
    return "\n".join(colors)


def analyze_palette_harmony(colors: Sequence[str], policy: ColorPolicy = DEFAULT_POLICY) -> str:
    """
    Heuristically classify a palette by the mean gap between its sorted hues.

    This is a coarse classifier, not the inverse of generate_palette.
    Unparseable colors count as hue 0.

    Returns:
        "Single Color", "Analogous", "Triadic", "Complementary", "Tetradic"
        or "Custom Harmony"
    """
    if len(colors) < 2:
        return "Single Color"

    hues = []
    for color in colors:
        rgb = hex_to_rgb(color)
        hues.append(rgb_to_hsl(*rgb).h if rgb else 0)

    sorted_hues = sorted(hues)
    differences = [b - a for a, b in zip(sorted_hues, sorted_hues[1:])]
    avg_difference = sum(differences) / len(differences)

    if avg_difference < policy.analogous_max_gap:
        return "Analogous"
    for name, center in policy.harmony_band_centers:
        if abs(avg_difference - center) < policy.harmony_band_tolerance:
            return name
    return "Custom Harmony"
