"""
Chromalens Color Policy

Centralizes the thresholds used by the heuristic classifiers (temperature,
contrast rating, harmony bands, best text color) so callers and tests can
probe boundary values without hunting for literals.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class ColorPolicy:
    """Policy constants for color analysis heuristics."""

    # Temperature: warmth = (R - B) / 255
    warm_threshold: float = 0.1
    cool_threshold: float = -0.1

    # WCAG contrast ratings (inclusive lower bounds)
    contrast_levels: Dict[str, float] = field(default_factory=lambda: {
        "AAA": 7.0,
        "AA": 4.5,
        "A": 3.0,
    })
    default_contrast_level: str = "AA"

    # Luminance above which black text is preferred
    best_text_luminance: float = 0.5

    # Harmony classification on the mean gap between sorted hues
    analogous_max_gap: float = 30.0
    harmony_band_tolerance: float = 20.0
    harmony_band_centers: Tuple[Tuple[str, float], ...] = (
        ("Triadic", 120.0),
        ("Complementary", 180.0),
        ("Tetradic", 90.0),
    )

    # Accessible variation search
    variation_lightness_step: int = 5

    # Legacy 6-level web-safe palette
    web_safe_levels: Tuple[int, ...] = (0, 51, 102, 153, 204, 255)

    def contrast_threshold(self, level: str) -> float:
        """Return the minimum ratio for a level; unknown levels use the default level."""
        return self.contrast_levels.get(level, self.contrast_levels[self.default_contrast_level])


DEFAULT_POLICY = ColorPolicy()
