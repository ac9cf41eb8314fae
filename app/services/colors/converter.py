"""
Chromalens Color Converter

Pure conversion and validation helpers between HEX, RGB, HSL, HSV and CMYK,
plus the luminance/contrast math used throughout the service. Every function
here is stateless; malformed color input is reported by returning None (or a
sentinel), never by raising.
"""

import math
import random
import re
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional

from loguru import logger

from .named_colors import CSS_NAMED_COLORS
from .policy import DEFAULT_POLICY, ColorPolicy

_HEX6_RE = re.compile(r"[0-9A-Fa-f]{6}")
_HEX3_RE = re.compile(r"[0-9A-Fa-f]{3}")

MAX_COLOR_VALUE = 0xFFFFFF
SHORT_HEX_NOT_APPLICABLE = "N/A"
UNKNOWN_COLOR_NAME = "Unknown"


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: int  # degrees [0, 360)
    s: int  # percent [0, 100]
    l: int  # percent [0, 100]


class HSV(NamedTuple):
    h: int
    s: int
    v: int


class CMYK(NamedTuple):
    c: int
    m: int
    y: int
    k: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (0.5 -> 1, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def _strip_hash(hex_color: str) -> str:
    return hex_color[1:] if hex_color.startswith("#") else hex_color


def is_valid_hex(hex_color: str) -> bool:
    """
    Check whether a string is a 6- or 3-digit hex color.

    A single optional leading '#' is allowed. Whitespace is not.
    """
    if not isinstance(hex_color, str):
        return False
    cleaned = _strip_hash(hex_color)
    return bool(_HEX6_RE.fullmatch(cleaned) or _HEX3_RE.fullmatch(cleaned))


def normalize_hex(hex_color: str) -> Optional[str]:
    """
    Normalize user input to canonical '#RRGGBB'.

    Expands 3-digit shorthand by duplicating each digit and uppercases.

    Args:
        hex_color: Hex color with or without '#', 3 or 6 digits

    Returns:
        Canonical hex string, or None if the input is not a valid hex color
    """
    if not is_valid_hex(hex_color):
        return None
    cleaned = _strip_hash(hex_color)
    if len(cleaned) == 3:
        cleaned = "".join(digit * 2 for digit in cleaned)
    return f"#{cleaned.upper()}"


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Convert a 6-digit hex color to RGB.

    Args:
        hex_color: Color in format #RRGGBB or RRGGBB

    Returns:
        RGB triple with channels in [0, 255], or None for anything that is not
        exactly six hex digits (3-digit input must be expanded first)
    """
    if not isinstance(hex_color, str):
        return None
    cleaned = _strip_hash(hex_color)
    if not _HEX6_RE.fullmatch(cleaned):
        return None
    return RGB(int(cleaned[0:2], 16), int(cleaned[2:4], 16), int(cleaned[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to an uppercase '#RRGGBB' string.

    Channels are rounded but not clamped; callers must pre-clamp.
    """
    return "#" + "".join(f"{round_half_up(channel):02X}" for channel in (r, g, b))


def hex_to_short_hex(hex_color: str) -> Optional[str]:
    """
    Compact a 6-digit hex color to 3-digit shorthand.

    Returns:
        '#RGB' when every channel's two digits match, otherwise None
    """
    if hex_to_rgb(hex_color) is None:
        return None
    cleaned = _strip_hash(hex_color).upper()
    if cleaned[0] == cleaned[1] and cleaned[2] == cleaned[3] and cleaned[4] == cleaned[5]:
        return f"#{cleaned[0]}{cleaned[2]}{cleaned[4]}"
    return None


def _hue_fraction(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue in [0, 1) for normalized channels, picking the branch of the max channel."""
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert RGB to HSL.

    Returns:
        HSL with hue in [0, 360) degrees, saturation and lightness as
        rounded integer percentages
    """
    rn, gn, bn = r / 255, g / 255, b / 255
    max_c = max(rn, gn, bn)
    min_c = min(rn, gn, bn)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        hue = saturation = 0.0
    else:
        delta = max_c - min_c
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)
        hue = _hue_fraction(rn, gn, bn, max_c, delta)

    return HSL(
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """Convert RGB to HSV (hue in degrees, saturation/value in percent)."""
    rn, gn, bn = r / 255, g / 255, b / 255
    max_c = max(rn, gn, bn)
    min_c = min(rn, gn, bn)
    delta = max_c - min_c

    hue = 0.0
    saturation = 0.0 if max_c == 0 else delta / max_c
    if delta != 0:
        hue = _hue_fraction(rn, gn, bn, max_c, delta)

    return HSV(
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(max_c * 100),
    )


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    """
    Convert RGB to CMYK percentages.

    Pure black (K=100) yields C=M=Y=0 instead of dividing by zero.
    """
    rn, gn, bn = r / 255, g / 255, b / 255
    k = 1 - max(rn, gn, bn)
    if k == 1:
        c = m = y = 0.0
    else:
        c = (1 - rn - k) / (1 - k)
        m = (1 - gn - k) / (1 - k)
        y = (1 - bn - k) / (1 - k)

    return CMYK(*(round_half_up(value * 100) for value in (c, m, y, k)))


def rgb_to_decimal(r: int, g: int, b: int) -> str:
    return f"{r}, {g}, {b}"


def rgb_to_percent(r: int, g: int, b: int) -> str:
    r_pct, g_pct, b_pct = (round_half_up(channel / 255 * 100) for channel in (r, g, b))
    return f"{r_pct}%, {g_pct}%, {b_pct}%"


def _linearize(channel: float) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def calculate_luminance(r: float, g: float, b: float) -> float:
    """
    WCAG relative luminance of an sRGB color.

    Returns:
        Luminance in [0, 1]
    """
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def calculate_brightness(r: int, g: int, b: int) -> int:
    """Perceived brightness (ITU-R 601 weights) as an integer percent 0-100."""
    return round_half_up((r * 299 + g * 587 + b * 114) / 1000 / 255 * 100)


def get_contrast_ratio(luminance1: float, luminance2: float) -> float:
    """WCAG contrast ratio between two luminances; symmetric and always >= 1."""
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + 0.05) / (darker + 0.05)


def get_contrast_rating(contrast_ratio: float, policy: ColorPolicy = DEFAULT_POLICY) -> str:
    """Map a contrast ratio to AAA / AA / A / Poor (inclusive thresholds)."""
    for level in ("AAA", "AA", "A"):
        if contrast_ratio >= policy.contrast_levels[level]:
            return level
    return "Poor"


def invert_color(hex_color: str) -> Optional[str]:
    """Invert each channel (255 - c)."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(255 - rgb.r, 255 - rgb.g, 255 - rgb.b)


def _nearest_level(value: int, levels) -> int:
    nearest = levels[0]
    for level in levels[1:]:
        # Strict comparison keeps the lower candidate on ties
        if abs(level - value) < abs(nearest - value):
            nearest = level
    return nearest


def get_web_safe_color(hex_color: str, policy: ColorPolicy = DEFAULT_POLICY) -> Optional[str]:
    """Snap each channel to the nearest of the six web-safe levels."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    levels = policy.web_safe_levels
    return rgb_to_hex(*(_nearest_level(channel, levels) for channel in rgb))


def get_color_temperature(r: int, g: int, b: int, policy: ColorPolicy = DEFAULT_POLICY) -> str:
    """Classify a color as Warm, Cool or Neutral from its red/blue balance."""
    warmth = (r - b) / 255
    if warmth > policy.warm_threshold:
        return "Warm"
    if warmth < policy.cool_threshold:
        return "Cool"
    return "Neutral"


def generate_random_color(rng: Optional[random.Random] = None) -> str:
    """
    Generate a uniformly random color.

    Args:
        rng: Optional random source (seed it for reproducible output)

    Returns:
        Uppercase '#RRGGBB'
    """
    source = rng if rng is not None else random
    return f"#{source.randint(0, MAX_COLOR_VALUE):06X}"


def get_nearest_named_color(hex_color: str) -> str:
    """
    Find the CSS named color closest to the input in RGB space.

    Returns:
        Color name, or "Unknown" if the input cannot be parsed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return UNKNOWN_COLOR_NAME

    nearest_name = UNKNOWN_COLOR_NAME
    min_distance = math.inf
    for name, named_hex in CSS_NAMED_COLORS.items():
        named_rgb = hex_to_rgb(named_hex)
        distance = math.sqrt(
            (rgb.r - named_rgb.r) ** 2 +
            (rgb.g - named_rgb.g) ** 2 +
            (rgb.b - named_rgb.b) ** 2
        )
        if distance < min_distance:
            min_distance = distance
            nearest_name = name
    return nearest_name


@dataclass(frozen=True)
class ColorData:
    """Every derived representation of one color. Rebuilt wholesale per request."""
    hex: str
    short_hex: str
    rgb: RGB
    rgb_decimal: str
    rgb_percent: str
    hsl: HSL
    hsv: HSV
    cmyk: CMYK
    luminance: float
    brightness: int
    inverted: str
    web_safe: str
    temperature: str
    contrast_white: str
    contrast_black: str
    contrast_white_ratio: float
    contrast_black_ratio: float
    name: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dictionary for JSON serialization."""
        return {
            "hex": self.hex,
            "short_hex": self.short_hex,
            "rgb": self.rgb._asdict(),
            "rgb_decimal": self.rgb_decimal,
            "rgb_percent": self.rgb_percent,
            "hsl": self.hsl._asdict(),
            "hsv": self.hsv._asdict(),
            "cmyk": self.cmyk._asdict(),
            "luminance": self.luminance,
            "brightness": self.brightness,
            "inverted": self.inverted,
            "web_safe": self.web_safe,
            "temperature": self.temperature,
            "contrast_white": self.contrast_white,
            "contrast_black": self.contrast_black,
            "contrast_white_ratio": self.contrast_white_ratio,
            "contrast_black_ratio": self.contrast_black_ratio,
            "name": self.name,
        }


def convert_from_hex(hex_color: str, policy: ColorPolicy = DEFAULT_POLICY) -> Optional[ColorData]:
    """
    Build the full ColorData record for a 6-digit hex color.

    Args:
        hex_color: Color in format #RRGGBB or RRGGBB
        policy: Thresholds for the heuristic classifiers

    Returns:
        ColorData, or None if the input cannot be parsed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        logger.debug(f"convert_from_hex rejected input {hex_color!r}")
        return None

    r, g, b = rgb
    canonical = rgb_to_hex(r, g, b)
    luminance = calculate_luminance(r, g, b)
    contrast_white = get_contrast_ratio(luminance, 1.0)
    contrast_black = get_contrast_ratio(luminance, 0.0)

    return ColorData(
        hex=canonical,
        short_hex=hex_to_short_hex(canonical) or SHORT_HEX_NOT_APPLICABLE,
        rgb=rgb,
        rgb_decimal=rgb_to_decimal(r, g, b),
        rgb_percent=rgb_to_percent(r, g, b),
        hsl=rgb_to_hsl(r, g, b),
        hsv=rgb_to_hsv(r, g, b),
        cmyk=rgb_to_cmyk(r, g, b),
        luminance=round_half_up(luminance * 100) / 100,
        brightness=calculate_brightness(r, g, b),
        inverted=invert_color(canonical),
        web_safe=get_web_safe_color(canonical, policy),
        temperature=get_color_temperature(r, g, b, policy),
        contrast_white=get_contrast_rating(contrast_white, policy),
        contrast_black=get_contrast_rating(contrast_black, policy),
        contrast_white_ratio=round_half_up(contrast_white * 100) / 100,
        contrast_black_ratio=round_half_up(contrast_black * 100) / 100,
        name=get_nearest_named_color(canonical),
    )
