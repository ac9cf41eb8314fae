"""
Chromalens Color Math

Adjustment operators (lightness, saturation, hue) and derived searches built
on top of the converter and analysis helpers.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

from .analysis import blend_colors, calculate_delta_e, generate_gradient, hsl_to_hex
from .converter import (
    calculate_luminance, get_contrast_ratio, hex_to_rgb, rgb_to_hsl, round_half_up,
)
from .harmony import rotate_hue
from .policy import DEFAULT_POLICY, ColorPolicy

__all__ = [
    "AccessibleVariation",
    "blend_colors",
    "calculate_color_difference",
    "darken_color",
    "desaturate_color",
    "find_most_contrasting",
    "generate_accessible_variations",
    "generate_css_keyframes",
    "generate_transition",
    "lighten_color",
    "saturate_color",
    "shift_hue",
]


@dataclass(frozen=True)
class AccessibleVariation:
    """A lighter or darker variant of a base color that meets a contrast target."""
    color: str
    contrast: float  # rounded to 2 decimals
    type: str  # "lighter" or "darker"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _clamp_percent(value: float) -> float:
    return min(100, max(0, value))


def lighten_color(hex_color: str, percentage: float) -> str:
    """
    Add `percentage` points of HSL lightness, clamped to [0, 100].

    Returns:
        Adjusted color, or the input unchanged if it cannot be parsed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    hsl = rgb_to_hsl(*rgb)
    return hsl_to_hex(hsl.h, hsl.s, _clamp_percent(hsl.l + percentage))


def darken_color(hex_color: str, percentage: float) -> str:
    return lighten_color(hex_color, -percentage)


def saturate_color(hex_color: str, percentage: float) -> str:
    """Add `percentage` points of HSL saturation, clamped to [0, 100]."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    hsl = rgb_to_hsl(*rgb)
    return hsl_to_hex(hsl.h, _clamp_percent(hsl.s + percentage), hsl.l)


def desaturate_color(hex_color: str, percentage: float) -> str:
    return saturate_color(hex_color, -percentage)


def shift_hue(hex_color: str, degrees: float) -> str:
    """Rotate hue by `degrees`, wrapping modulo 360."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    hsl = rgb_to_hsl(*rgb)
    return hsl_to_hex(rotate_hue(hsl.h, degrees), hsl.s, hsl.l)


def generate_transition(from_color: str, to_color: str, steps: int = 10) -> List[str]:
    """Blend sequence from one color to another (same step policy as gradients)."""
    return generate_gradient(from_color, to_color, steps)


def generate_css_keyframes(
    from_color: str,
    to_color: str,
    duration: float = 2,
    property: str = "background-color"
) -> str:
    """Render a CSS keyframe animation alternating between two colors."""
    return (
        "\n@keyframes colorTransition {\n"
        "    0% {\n"
        f"        {property}: {from_color};\n"
        "    }\n"
        "    100% {\n"
        f"        {property}: {to_color};\n"
        "    }\n"
        "}\n"
        "\n"
        ".color-animation {\n"
        f"    animation: colorTransition {duration}s ease-in-out infinite alternate;\n"
        "}"
    )


def calculate_color_difference(color1: str, color2: str) -> float:
    """Delta E (CIE76) between two hex colors; 0.0 if either cannot be parsed."""
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return 0.0
    return calculate_delta_e(rgb1, rgb2)


def find_most_contrasting(base_color: str, palette: Sequence[str]) -> Optional[str]:
    """
    Pick the palette member with the highest contrast ratio against the base.

    Invalid palette entries are skipped; the first member wins ties.

    Returns:
        The most contrasting color, or None for an unparseable base or when
        no palette member parses
    """
    base_rgb = hex_to_rgb(base_color)
    if base_rgb is None:
        return None

    base_luminance = calculate_luminance(*base_rgb)
    best_color = None
    best_contrast = 0.0
    for color in palette:
        rgb = hex_to_rgb(color)
        if rgb is None:
            continue
        contrast = get_contrast_ratio(base_luminance, calculate_luminance(*rgb))
        if contrast > best_contrast:
            best_contrast = contrast
            best_color = color
    return best_color


def generate_accessible_variations(
    base_color: str,
    target_contrast: float = 4.5,
    policy: ColorPolicy = DEFAULT_POLICY
) -> List[AccessibleVariation]:
    """
    Search lightness away from the base for variants meeting a contrast target.

    The search walks upward from the base lightness in fixed steps, then
    downward, and keeps the first success in each direction. Both walks are
    bounded by [0, 100].

    Args:
        base_color: Base hex color
        target_contrast: Minimum contrast ratio against the base
        policy: Search step size

    Returns:
        Up to two variations (lighter first); [] for invalid input
    """
    rgb = hex_to_rgb(base_color)
    if rgb is None:
        return []

    hsl = rgb_to_hsl(*rgb)
    base_luminance = calculate_luminance(*rgb)
    step = policy.variation_lightness_step
    variations = []

    directions = (
        ("lighter", range(hsl.l + step, 101, step)),
        ("darker", range(hsl.l - step, -1, -step)),
    )
    for direction, lightness_values in directions:
        for lightness in lightness_values:
            candidate = hsl_to_hex(hsl.h, hsl.s, lightness)
            contrast = get_contrast_ratio(
                base_luminance, calculate_luminance(*hex_to_rgb(candidate))
            )
            if contrast >= target_contrast:
                variations.append(AccessibleVariation(
                    color=candidate,
                    contrast=round_half_up(contrast * 100) / 100,
                    type=direction,
                ))
                break

    return variations
