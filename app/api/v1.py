"""
Chromalens v1 API Routes
Exposes color conversion, analysis, palette and export operations over HTTP.
"""
import time
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse, Response

from app.config import Config
from app.schemas import (
    AccessibilityCheckRequest, AccessibilityCheckResponse, AccessibleVariationModel,
    AccessibleVariationsResponse, AdjustRequest, AdjustResponse, BlendRequest, BlendResponse,
    ColorDataResponse, DifferenceRequest, DifferenceResponse, ErrorResponse, ExportResponse, GradientRequest,
    HarmonyAnalysisResponse, PaletteColorsRequest, PaletteExportRequest, PaletteRequest,
    PaletteResponse, PngExportResponse, PresetsResponse, TailwindExportRequest, ThemeResponse,
)
from app.services.colors.analysis import (
    blend_colors, delta_e_matrix, get_best_text_color, is_accessible_text,
)
from app.services.colors.color_math import (
    calculate_color_difference, generate_accessible_variations, lighten_color, saturate_color,
    shift_hue,
)
from app.services.colors.converter import (
    calculate_luminance, convert_from_hex, generate_random_color, get_contrast_rating,
    get_contrast_ratio, hex_to_rgb, normalize_hex,
)
from app.services.colors.exporter import (
    export_tailwind_theme, generate_ase_data, generate_color_documentation, generate_svg_swatch,
)
from app.services.colors.harmony import HarmonyType
from app.services.colors.palettes import (
    MATERIAL_COLORS, PRESET_COLORS, TRENDING_PALETTES, analyze_palette_harmony,
    export_palette, generate_accessible_pairs, generate_gradient_palette, generate_palette,
    generate_theme,
)
from app.services.colors.swatches import create_swatch_metadata, render_palette_png
from app.utils.ids import generate_request_id
from app.utils.logging import get_logger
from app.utils.metrics import get_metrics

config = Config()
router = APIRouter(prefix="/v1", tags=["Colors"], responses={400: {"model": ErrorResponse}})


def _require_color(value: Optional[str], field: str, operation: str) -> str:
    """
    Normalize a hex color from a request or reject it with 400.

    Raises:
        HTTPException: If the value is not a 3- or 6-digit hex color
    """
    normalized = normalize_hex(value) if value is not None else None
    if normalized is None:
        get_metrics().increment_invalid_input_count(operation)
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {field}: expected #RGB or #RRGGBB, got {value!r}"
        )
    return normalized


def _require_palette(colors, operation: str):
    return [_require_color(color, f"colors[{index}]", operation) for index, color in enumerate(colors)]


def _record(operation: str, start_time: float):
    metrics = get_metrics()
    metrics.increment_request_count(operation)
    metrics.record_timing(operation, (time.time() - start_time) * 1000)


def _color_data_response(hex_color: str) -> ColorDataResponse:
    data = convert_from_hex(hex_color)
    if data is None:
        raise HTTPException(status_code=400, detail=f"Invalid color: {hex_color!r}")
    return ColorDataResponse(**data.to_dict())


# ============================================================================
# COLORS
# ============================================================================

@router.get("/colors/random", response_model=ColorDataResponse,
            summary="Random color",
            description="Generate a uniformly random color and return all of its representations")
def random_color() -> ColorDataResponse:
    start_time = time.time()
    response = _color_data_response(generate_random_color())
    _record("random_color", start_time)
    return response


@router.get("/colors/{hex_value}", response_model=ColorDataResponse,
            summary="Inspect color",
            description="Convert a hex color (without '#', 3 or 6 digits) to every supported format")
def inspect_color(hex_value: str) -> ColorDataResponse:
    start_time = time.time()
    request_id = generate_request_id()
    logger = get_logger()
    hex_color = _require_color(hex_value, "color", "inspect_color")

    logger.info(f"Color inspection request {request_id}", extra={
        "request_id": request_id,
        "color": hex_color
    })

    response = _color_data_response(hex_color)
    _record("inspect_color", start_time)
    return response


@router.post("/colors/adjust", response_model=AdjustResponse,
             summary="Adjust color",
             description="Apply lightness, then saturation, then hue adjustments")
def adjust_color(body: AdjustRequest) -> AdjustResponse:
    start_time = time.time()
    original = _require_color(body.color, "color", "adjust_color")

    result = original
    if body.lighten:
        result = lighten_color(result, body.lighten)
    if body.saturate:
        result = saturate_color(result, body.saturate)
    if body.hue:
        result = shift_hue(result, body.hue)

    _record("adjust_color", start_time)
    return AdjustResponse(original=original, result=result)


@router.post("/colors/blend", response_model=BlendResponse, summary="Blend two colors")
def blend(body: BlendRequest) -> BlendResponse:
    start_time = time.time()
    color1 = _require_color(body.color1, "color1", "blend")
    color2 = _require_color(body.color2, "color2", "blend")

    result = blend_colors(color1, color2, body.ratio)
    _record("blend", start_time)
    return BlendResponse(color1=color1, color2=color2, ratio=body.ratio, result=result)


@router.post("/colors/difference", response_model=DifferenceResponse,
             summary="Perceptual difference",
             description="CIE76 Delta E and WCAG contrast ratio between two colors")
def color_difference(body: DifferenceRequest) -> DifferenceResponse:
    start_time = time.time()
    color1 = _require_color(body.color1, "color1", "difference")
    color2 = _require_color(body.color2, "color2", "difference")

    contrast = get_contrast_ratio(
        calculate_luminance(*hex_to_rgb(color1)),
        calculate_luminance(*hex_to_rgb(color2))
    )
    _record("difference", start_time)
    return DifferenceResponse(
        color1=color1,
        color2=color2,
        delta_e=round(calculate_color_difference(color1, color2), 4),
        contrast_ratio=round(contrast, 2)
    )


# ============================================================================
# PALETTES
# ============================================================================

@router.post("/palettes", response_model=PaletteResponse,
             summary="Generate palette",
             description="Generate a harmony or lightness-series palette from a base color")
def create_palette(body: PaletteRequest) -> PaletteResponse:
    start_time = time.time()
    request_id = generate_request_id()
    logger = get_logger()
    base_color = _require_color(body.base_color, "base_color", "palette")

    try:
        colors = generate_palette(base_color, body.type, body.count)
        harmony = analyze_palette_harmony(colors)
    except Exception as e:
        logger.error(f"Palette request {request_id} failed", extra={
            "request_id": request_id,
            "error": str(e)
        })
        get_metrics().increment_failure_count(type(e).__name__)
        raise HTTPException(status_code=500, detail="Palette generation failed")

    known_type = body.type in {member.value for member in HarmonyType}
    get_metrics().increment_palette_count(body.type if known_type else "unknown")

    logger.info(f"Palette request {request_id} completed", extra={
        "request_id": request_id,
        "base_color": base_color,
        "type": body.type,
        "size": len(colors)
    })
    _record("palette", start_time)
    return PaletteResponse(base_color=base_color, type=body.type, colors=colors, harmony=harmony)


@router.post("/palettes/gradient", response_model=PaletteResponse, summary="Gradient palette")
def create_gradient(body: GradientRequest) -> PaletteResponse:
    start_time = time.time()
    start_color = _require_color(body.start_color, "start_color", "gradient")
    end_color = _require_color(body.end_color, "end_color", "gradient")

    colors = generate_gradient_palette(start_color, end_color, body.steps)
    _record("gradient", start_time)
    return PaletteResponse(
        base_color=start_color,
        type="gradient",
        colors=colors,
        harmony=analyze_palette_harmony(colors)
    )


@router.post("/palettes/analyze", response_model=HarmonyAnalysisResponse,
             summary="Classify palette harmony",
             description="Heuristic harmony classification plus pairwise Delta E")
def analyze_palette(body: PaletteColorsRequest) -> HarmonyAnalysisResponse:
    start_time = time.time()
    colors = _require_palette(body.colors, "analyze_palette")

    distances = delta_e_matrix(colors)
    _record("analyze_palette", start_time)
    return HarmonyAnalysisResponse(
        colors=colors,
        harmony=analyze_palette_harmony(colors),
        delta_e_matrix=distances.round(4).tolist() if distances is not None else None
    )


@router.post("/palettes/export", response_model=ExportResponse, summary="Export palette")
def export_palette_route(body: PaletteExportRequest) -> ExportResponse:
    start_time = time.time()
    colors = _require_palette(body.colors, "export_palette")

    if not config.validate_export_format(body.format):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported format {body.format!r}. Use one of: {', '.join(config.EXPORT_FORMATS)}"
        )

    content = export_palette(colors, body.format)
    _record("export_palette", start_time)
    return ExportResponse(format=body.format, content=content)


@router.get("/palettes/presets", response_model=PresetsResponse, summary="Preset palettes")
def presets() -> PresetsResponse:
    return PresetsResponse(presets=PRESET_COLORS, material=MATERIAL_COLORS, trending=TRENDING_PALETTES)


@router.get("/themes/{hex_value}", response_model=ThemeResponse,
            summary="Generate theme",
            description="UI theme roles and accessible text pairs derived from one color")
def theme(hex_value: str) -> ThemeResponse:
    start_time = time.time()
    base_color = _require_color(hex_value, "color", "theme")

    theme_roles = generate_theme(base_color)
    if theme_roles is None:
        raise HTTPException(status_code=400, detail=f"Invalid color: {hex_value!r}")

    _record("theme", start_time)
    return ThemeResponse(
        base_color=base_color,
        theme=theme_roles,
        accessible_pairs=generate_accessible_pairs(base_color)
    )


# ============================================================================
# ACCESSIBILITY
# ============================================================================

@router.post("/accessibility/check", response_model=AccessibilityCheckResponse,
             summary="Check text contrast")
def accessibility_check(body: AccessibilityCheckRequest) -> AccessibilityCheckResponse:
    start_time = time.time()
    background = _require_color(body.background, "background", "accessibility_check")
    text = _require_color(body.text, "text", "accessibility_check")

    ratio = get_contrast_ratio(
        calculate_luminance(*hex_to_rgb(background)),
        calculate_luminance(*hex_to_rgb(text))
    )
    _record("accessibility_check", start_time)
    return AccessibilityCheckResponse(
        background=background,
        text=text,
        level=body.level,
        contrast_ratio=round(ratio, 2),
        rating=get_contrast_rating(ratio),
        accessible=is_accessible_text(background, text, body.level),
        best_text_color=get_best_text_color(background)
    )


@router.get("/accessibility/variations/{hex_value}", response_model=AccessibleVariationsResponse,
            summary="Accessible variations",
            description="Nearest lighter and darker variants meeting a contrast target")
def accessible_variations(
    hex_value: str,
    target_contrast: float = Query(config.DEFAULT_TARGET_CONTRAST,
                                   description="Minimum contrast ratio against the base")
) -> AccessibleVariationsResponse:
    start_time = time.time()
    base_color = _require_color(hex_value, "color", "accessible_variations")

    if not config.validate_target_contrast(target_contrast):
        get_metrics().increment_invalid_input_count("accessible_variations")
        raise HTTPException(status_code=400, detail="target_contrast must be between 1 and 21")

    variations = generate_accessible_variations(base_color, target_contrast)
    _record("accessible_variations", start_time)
    return AccessibleVariationsResponse(
        base_color=base_color,
        target_contrast=target_contrast,
        variations=[AccessibleVariationModel(**variation.to_dict()) for variation in variations]
    )


# ============================================================================
# EXPORT
# ============================================================================

@router.get("/export/svg/{hex_value}", summary="SVG swatch",
            response_class=Response,
            responses={200: {"content": {"image/svg+xml": {}}}})
def export_svg(
    hex_value: str,
    size: int = Query(config.SWATCH_SVG_SIZE, ge=16, le=2048, description="Edge length in pixels")
) -> Response:
    start_time = time.time()
    color = _require_color(hex_value, "color", "export_svg")

    svg = generate_svg_swatch(color, size)
    _record("export_svg", start_time)
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/export/docs/{hex_value}", summary="HTML documentation", response_class=HTMLResponse)
def export_docs(hex_value: str) -> HTMLResponse:
    start_time = time.time()
    color = _require_color(hex_value, "color", "export_docs")

    html = generate_color_documentation(color)
    _record("export_docs", start_time)
    return HTMLResponse(content=html)


@router.post("/export/tailwind", response_model=ExportResponse, summary="Tailwind theme")
def export_tailwind(body: TailwindExportRequest) -> ExportResponse:
    start_time = time.time()
    if body.color is not None:
        content = export_tailwind_theme(_require_color(body.color, "color", "export_tailwind"), body.theme_name)
    elif body.colors:
        content = export_tailwind_theme(_require_palette(body.colors, "export_tailwind"), body.theme_name)
    else:
        raise HTTPException(status_code=400, detail="Provide color or colors")

    _record("export_tailwind", start_time)
    return ExportResponse(format="tailwind", content=content)


@router.post("/export/ase", response_model=ExportResponse, summary="ASE-like palette JSON")
def export_ase(body: PaletteColorsRequest) -> ExportResponse:
    start_time = time.time()
    colors = _require_palette(body.colors, "export_ase")

    content = generate_ase_data(colors)
    _record("export_ase", start_time)
    return ExportResponse(format="ase", content=content)


@router.post("/export/png", response_model=PngExportResponse, summary="PNG palette strip")
def export_png(
    body: PaletteColorsRequest,
    chip_size: int = Query(config.SWATCH_CHIP_SIZE, ge=4, le=256, description="Chip edge in pixels"),
    spacing: int = Query(2, ge=0, le=32, description="Gap between chips in pixels")
) -> PngExportResponse:
    start_time = time.time()
    colors = _require_palette(body.colors, "export_png")

    png_b64 = render_palette_png(colors, chip_size, spacing)
    _record("export_png", start_time)
    return PngExportResponse(
        swatch_png_b64=png_b64,
        metadata=create_swatch_metadata(colors, chip_size, spacing)
    )
