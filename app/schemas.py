"""
Chromalens API Schemas
Pydantic models for color inspection, palette and export request/response validation.
"""
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

from app.config import config

# Accepts #RGB, RGB, #RRGGBB and RRGGBB; handlers normalize before use
HEX_INPUT_PATTERN = r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$"


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("chromalens", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# COLOR DATA SCHEMAS
# ============================================================================

class RGBModel(BaseModel):
    """8-bit RGB channels."""
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    """HSL with hue in degrees, saturation/lightness in percent."""
    h: int = Field(..., ge=0, lt=360, description="Hue [0, 360)")
    s: int = Field(..., ge=0, le=100, description="Saturation [0, 100]")
    l: int = Field(..., ge=0, le=100, description="Lightness [0, 100]")


class HSVModel(BaseModel):
    """HSV with hue in degrees, saturation/value in percent."""
    h: int = Field(..., ge=0, lt=360)
    s: int = Field(..., ge=0, le=100)
    v: int = Field(..., ge=0, le=100)


class CMYKModel(BaseModel):
    """CMYK percentages."""
    c: int = Field(..., ge=0, le=100)
    m: int = Field(..., ge=0, le=100)
    y: int = Field(..., ge=0, le=100)
    k: int = Field(..., ge=0, le=100)


class ColorDataResponse(BaseModel):
    """Every derived representation of one color."""
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$", description="Canonical #RRGGBB")
    short_hex: str = Field(..., description="#RGB shorthand or 'N/A' when not shortenable")
    rgb: RGBModel
    rgb_decimal: str = Field(..., description="'r, g, b'")
    rgb_percent: str = Field(..., description="'r%, g%, b%'")
    hsl: HSLModel
    hsv: HSVModel
    cmyk: CMYKModel
    luminance: float = Field(..., ge=0.0, le=1.0, description="WCAG relative luminance (2 decimals)")
    brightness: int = Field(..., ge=0, le=100, description="Perceived brightness percent")
    inverted: str = Field(..., description="Per-channel inverted color")
    web_safe: str = Field(..., description="Nearest web-safe color")
    temperature: str = Field(..., description="Warm, Cool or Neutral")
    contrast_white: str = Field(..., description="WCAG rating against white")
    contrast_black: str = Field(..., description="WCAG rating against black")
    contrast_white_ratio: float = Field(..., ge=1.0)
    contrast_black_ratio: float = Field(..., ge=1.0)
    name: str = Field(..., description="Nearest CSS named color")


class AdjustRequest(BaseModel):
    """Adjust a color's lightness, saturation and hue in sequence."""
    color: str = Field(..., pattern=HEX_INPUT_PATTERN)
    lighten: float = Field(0.0, ge=-100.0, le=100.0, description="Lightness delta in points")
    saturate: float = Field(0.0, ge=-100.0, le=100.0, description="Saturation delta in points")
    hue: float = Field(0.0, ge=-360.0, le=360.0, description="Hue rotation in degrees")


class AdjustResponse(BaseModel):
    original: str
    result: str


class BlendRequest(BaseModel):
    color1: str = Field(..., pattern=HEX_INPUT_PATTERN)
    color2: str = Field(..., pattern=HEX_INPUT_PATTERN)
    ratio: float = Field(0.5, ge=0.0, le=1.0, description="0 gives color1, 1 gives color2")


class BlendResponse(BaseModel):
    color1: str
    color2: str
    ratio: float
    result: str


class DifferenceRequest(BaseModel):
    color1: str = Field(..., pattern=HEX_INPUT_PATTERN)
    color2: str = Field(..., pattern=HEX_INPUT_PATTERN)


class DifferenceResponse(BaseModel):
    color1: str
    color2: str
    delta_e: float = Field(..., ge=0.0, description="CIE76 Delta E")
    contrast_ratio: float = Field(..., ge=1.0)


# ============================================================================
# PALETTE SCHEMAS
# ============================================================================

class PaletteRequest(BaseModel):
    """Generate a palette around a base color."""
    base_color: str = Field(..., pattern=HEX_INPUT_PATTERN)
    type: str = Field(..., description="complementary, triadic, tetradic, analogous, "
                                        "splitComplementary, shades, tints or monochromatic")
    count: int = Field(config.DEFAULT_PALETTE_COUNT, ge=1, le=config.MAX_PALETTE_COUNT,
                       description="Size for shades, tints and monochromatic")


class PaletteResponse(BaseModel):
    base_color: str
    type: str
    colors: List[str]
    harmony: str = Field(..., description="Heuristic classification of the generated palette")


class GradientRequest(BaseModel):
    start_color: str = Field(..., pattern=HEX_INPUT_PATTERN)
    end_color: str = Field(..., pattern=HEX_INPUT_PATTERN)
    steps: int = Field(config.DEFAULT_GRADIENT_STEPS, ge=1, le=config.MAX_PALETTE_COUNT)


class PaletteColorsRequest(BaseModel):
    """A bare palette."""
    colors: List[str] = Field(..., min_length=1, max_length=config.MAX_PALETTE_COUNT)


class HarmonyAnalysisResponse(BaseModel):
    colors: List[str]
    harmony: str
    delta_e_matrix: Optional[List[List[float]]] = Field(
        None, description="Pairwise CIE76 distances when every color parses"
    )


class PaletteExportRequest(BaseModel):
    colors: List[str] = Field(..., min_length=1, max_length=config.MAX_PALETTE_COUNT)
    format: str = Field("json", description="json, css, scss, tailwind, adobe or text")


class ExportResponse(BaseModel):
    format: str
    content: str


class PresetsResponse(BaseModel):
    presets: List[str]
    material: Dict[str, List[str]]
    trending: Dict[str, List[str]]


class AccessiblePair(BaseModel):
    background: str
    text: str
    contrast: str


class ThemeResponse(BaseModel):
    base_color: str
    theme: Dict[str, str]
    accessible_pairs: List[AccessiblePair]


# ============================================================================
# ACCESSIBILITY SCHEMAS
# ============================================================================

class AccessibilityCheckRequest(BaseModel):
    background: str = Field(..., pattern=HEX_INPUT_PATTERN)
    text: str = Field(..., pattern=HEX_INPUT_PATTERN)
    level: str = Field("AA", description="AAA, AA or A; unknown levels are checked as AA")


class AccessibilityCheckResponse(BaseModel):
    background: str
    text: str
    level: str
    contrast_ratio: float
    rating: str
    accessible: bool
    best_text_color: str


class AccessibleVariationModel(BaseModel):
    color: str
    contrast: float
    type: str


class AccessibleVariationsResponse(BaseModel):
    base_color: str
    target_contrast: float
    variations: List[AccessibleVariationModel]


# ============================================================================
# EXPORT SCHEMAS
# ============================================================================

class TailwindExportRequest(BaseModel):
    """Either a single color (expanded to a scale) or a palette."""
    color: Optional[str] = Field(None, pattern=HEX_INPUT_PATTERN)
    colors: Optional[List[str]] = Field(None, max_length=config.MAX_PALETTE_COUNT)
    theme_name: str = Field("custom", min_length=1, max_length=40, pattern=r"^[A-Za-z0-9_-]+$")


class PngExportResponse(BaseModel):
    swatch_png_b64: str = Field(..., description="Base64-encoded PNG palette strip")
    metadata: Dict[str, Any]


# ============================================================================
# PERSONALIZATION SCHEMAS
# ============================================================================

class TrackUsageRequest(BaseModel):
    color: str = Field(..., pattern=HEX_INPUT_PATTERN)


class UsageStatsResponse(BaseModel):
    today_count: int
    most_used_color: str
    streak: int
    total_colors: int


class DailyColorResponse(BaseModel):
    color: str
    name: str


class PreferencesResponse(BaseModel):
    average_hue: int
    temperature_preference: str
    diversity: float
