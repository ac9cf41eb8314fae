"""
Chromalens Color Analysis

Perceptual difference (CIE Lab / Delta E), harmony generation, lightness
series (shades, tints, monochromatic), text accessibility checks and linear
blending. All functions take and return hex strings unless noted otherwise.
"""

from typing import List, NamedTuple, Optional, Sequence, Union

import numpy as np
from loguru import logger

from .converter import (
    RGB, calculate_luminance, get_contrast_ratio, hex_to_rgb, rgb_to_hex,
    rgb_to_hsl, round_half_up,
)
from .harmony import HARMONY_OFFSETS, HarmonyType, rotate_hue
from .policy import DEFAULT_POLICY, ColorPolicy


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class Lab(NamedTuple):
    l: float
    a: float
    b: float


# sRGB (D65) linear RGB -> XYZ
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# D65 reference white, XYZ scaled to 0..100
D65_WHITE = np.array([95.047, 100.000, 108.883])

LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787

BLACK = "#000000"
WHITE = "#FFFFFF"


def _srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    c = channels / 255.0
    return np.where(c > 0.04045, ((c + 0.055) / 1.055) ** 2.4, c / 12.92)


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA_SLOPE * t + 16 / 116)


def _rgb_array_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Vectorized sRGB -> Lab for an (N, 3) array of 0-255 channels."""
    xyz = _srgb_to_linear(rgb) @ SRGB_TO_XYZ.T * 100
    f = _lab_f(xyz / D65_WHITE)
    l = 116 * f[:, 1] - 16
    a = 500 * (f[:, 0] - f[:, 1])
    b = 200 * (f[:, 1] - f[:, 2])
    return np.stack([l, a, b], axis=-1)


def rgb_to_xyz(r: float, g: float, b: float) -> XYZ:
    """
    Convert sRGB to CIE XYZ (D65).

    Returns:
        XYZ with components scaled to 0..100
    """
    linear = _srgb_to_linear(np.array([r, g, b], dtype=float))
    x, y, z = SRGB_TO_XYZ @ linear * 100
    return XYZ(float(x), float(y), float(z))


def xyz_to_lab(x: float, y: float, z: float) -> Lab:
    """Convert CIE XYZ (0..100, D65) to CIE Lab."""
    fx, fy, fz = _lab_f(np.array([x, y, z], dtype=float) / D65_WHITE)
    return Lab(float(116 * fy - 16), float(500 * (fx - fy)), float(200 * (fy - fz)))


def rgb_to_lab(r: float, g: float, b: float) -> Lab:
    """Convert sRGB to CIE Lab via XYZ."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def calculate_delta_e(rgb1: Sequence[float], rgb2: Sequence[float]) -> float:
    """
    Perceptual difference between two colors (CIE76).

    Args:
        rgb1: First color as an (r, g, b) triple
        rgb2: Second color as an (r, g, b) triple

    Returns:
        Euclidean distance in Lab space; 0 for identical colors, unbounded above
    """
    lab1 = np.array(rgb_to_lab(*rgb1))
    lab2 = np.array(rgb_to_lab(*rgb2))
    return float(np.sqrt(np.sum((lab1 - lab2) ** 2)))


def delta_e_matrix(colors: Sequence[str]) -> Optional[np.ndarray]:
    """
    Pairwise CIE76 distances for a palette.

    Args:
        colors: Hex colors

    Returns:
        Symmetric (N, N) array with a zero diagonal, or None if any color
        cannot be parsed
    """
    rgbs = [hex_to_rgb(color) for color in colors]
    if any(rgb is None for rgb in rgbs):
        return None
    if not rgbs:
        return np.zeros((0, 0))

    labs = _rgb_array_to_lab(np.array(rgbs, dtype=float))
    diff = labs[:, np.newaxis, :] - labs[np.newaxis, :, :]
    return np.sqrt(np.sum(diff ** 2, axis=-1))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        RGB triple with integer channels
    """
    h, s, l = h / 360, s / 100, l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL (degrees, percent, percent) to '#RRGGBB'."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def adjust_hue(hex_color: str, degrees: float) -> str:
    """
    Rotate a color's hue, keeping its saturation and lightness.

    Returns:
        Rotated color, or the input unchanged if it cannot be parsed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    hsl = rgb_to_hsl(*rgb)
    return hsl_to_hex(rotate_hue(hsl.h, degrees), hsl.s, hsl.l)


def generate_color_harmony(hex_color: str, harmony_type: Union[HarmonyType, str]) -> List[str]:
    """
    Generate a hue-offset harmony around a base color.

    Args:
        hex_color: Base color in format #RRGGBB
        harmony_type: complementary, triadic, tetradic, analogous or
            splitComplementary

    Returns:
        Hex colors in offset order (base included), [base] for an unknown type,
        or [] if the base cannot be parsed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return []

    base = rgb_to_hex(*rgb)
    try:
        offsets = HARMONY_OFFSETS.get(HarmonyType(harmony_type))
    except ValueError:
        offsets = None
    if offsets is None:
        logger.debug(f"No hue offsets for harmony type {harmony_type!r}")
        return [base]

    return [base if offset == 0 else adjust_hue(base, offset) for offset in offsets]


def _base_hsl(hex_color: str):
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(*rgb)


def generate_shades(hex_color: str, count: int = 5) -> List[str]:
    """
    Generate darker versions of a color.

    Lightness steps are evenly spaced strictly between the base lightness
    and 0; neither endpoint is emitted.

    Returns:
        `count` hex colors, darkest last; [] for invalid input or count <= 0
    """
    hsl = _base_hsl(hex_color)
    if hsl is None or count <= 0:
        return []

    step = hsl.l / (count + 1)
    return [
        hsl_to_hex(hsl.h, hsl.s, max(0, hsl.l - (i + 1) * step))
        for i in range(count)
    ]


def generate_tints(hex_color: str, count: int = 5) -> List[str]:
    """
    Generate lighter versions of a color.

    Returns:
        `count` hex colors, lightest last; [] for invalid input or count <= 0
    """
    hsl = _base_hsl(hex_color)
    if hsl is None or count <= 0:
        return []

    step = (100 - hsl.l) / (count + 1)
    return [
        hsl_to_hex(hsl.h, hsl.s, min(100, hsl.l + (i + 1) * step))
        for i in range(count)
    ]


def generate_monochromatic(hex_color: str, count: int = 7) -> List[str]:
    """
    Generate colors sharing the base hue and saturation with lightness spread
    over the full 0-100 range (both ends included).

    A count of 1 cannot span a range, so it yields just the base color.

    Returns:
        `count` hex colors from black to white; [] for invalid input or
        count <= 0
    """
    hsl = _base_hsl(hex_color)
    if hsl is None or count <= 0:
        return []
    if count == 1:
        return [rgb_to_hex(*hex_to_rgb(hex_color))]

    return [hsl_to_hex(hsl.h, hsl.s, i / (count - 1) * 100) for i in range(count)]


def is_accessible_text(
    background_color: str,
    text_color: str,
    level: str = "AA",
    policy: ColorPolicy = DEFAULT_POLICY
) -> bool:
    """
    Check whether text is readable on a background at a WCAG level.

    Args:
        background_color: Background hex color
        text_color: Text hex color
        level: "AAA", "AA" or "A"; anything else is treated as "AA"
        policy: Contrast thresholds

    Returns:
        True if the contrast ratio meets the level; False for invalid input
    """
    bg_rgb = hex_to_rgb(background_color)
    text_rgb = hex_to_rgb(text_color)
    if bg_rgb is None or text_rgb is None:
        return False

    ratio = get_contrast_ratio(calculate_luminance(*bg_rgb), calculate_luminance(*text_rgb))
    return ratio >= policy.contrast_threshold(level)


def get_best_text_color(background_color: str, policy: ColorPolicy = DEFAULT_POLICY) -> str:
    """Black on light backgrounds, white on dark ones."""
    rgb = hex_to_rgb(background_color)
    if rgb is None:
        return BLACK
    return BLACK if calculate_luminance(*rgb) > policy.best_text_luminance else WHITE


def blend_colors(color1: str, color2: str, ratio: float = 0.5) -> str:
    """
    Linearly interpolate two colors per channel.

    Args:
        color1: Start color (ratio 0)
        color2: End color (ratio 1)
        ratio: Interpolation position, not clamped

    Returns:
        Blended color, or color1 unchanged if either input cannot be parsed
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return color1

    return rgb_to_hex(*(
        round_half_up(c1 * (1 - ratio) + c2 * ratio)
        for c1, c2 in zip(rgb1, rgb2)
    ))


def generate_gradient(start_color: str, end_color: str, steps: int = 5) -> List[str]:
    """
    Evenly spaced blend from start to end, both ends included.

    steps == 1 yields just the start color; steps <= 0 yields [].
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [blend_colors(start_color, end_color, 0.0)]
    return [blend_colors(start_color, end_color, i / (steps - 1)) for i in range(steps)]
