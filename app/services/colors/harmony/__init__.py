"""
Chromalens Color Harmony Rules

Hue-offset tables for the classic color harmony schemes and the small
amount of hue arithmetic shared by harmony generation and classification.
Hues here are in degrees.
"""

from enum import Enum
from typing import Dict, Tuple

class HarmonyType(str, Enum):
    """Palette types understood by the palette generator."""
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "splitComplementary"
    SHADES = "shades"
    TINTS = "tints"
    MONOCHROMATIC = "monochromatic"

# Degree offsets applied to the base hue, in output order.
# Offset 0 is the base color itself.
HARMONY_OFFSETS: Dict[HarmonyType, Tuple[int, ...]] = {
    HarmonyType.COMPLEMENTARY: (0, 180),
    HarmonyType.TRIADIC: (0, 120, 240),
    HarmonyType.TETRADIC: (0, 90, 180, 270),
    HarmonyType.ANALOGOUS: (-30, 0, 30),
    HarmonyType.SPLIT_COMPLEMENTARY: (0, 150, 210),
}


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360) with proper wraparound
    """
    return (h + degrees) % 360
