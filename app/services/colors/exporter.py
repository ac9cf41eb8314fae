"""
Chromalens Color Exporter

Renders color data into text artifacts: Tailwind theme configs, an HTML
documentation page, SVG swatches and an ASE-like JSON palette.
"""

import json
from typing import Dict, List, Optional, Sequence, Union

from .analysis import generate_shades, generate_tints, get_best_text_color
from .color_math import darken_color, lighten_color
from .converter import convert_from_hex, get_nearest_named_color, hex_to_rgb


def export_tailwind_theme(colors: Union[str, Sequence[str]], theme_name: str = "custom") -> str:
    """
    Render a Tailwind `theme.extend.colors` config.

    Args:
        colors: A single hex color (expanded into a 50-950 scale) or a palette
            (emitted as `<theme_name>-N` entries)
        theme_name: Color key in the generated config

    Returns:
        JavaScript module source
    """
    theme_colors: Dict[str, Union[str, Dict[str, str]]] = {}

    if isinstance(colors, str):
        base_color = colors
        shades = generate_shades(base_color, 4)
        tints = generate_tints(base_color, 4)
        if len(shades) == 4 and len(tints) == 4:
            theme_colors[theme_name] = {
                "50": tints[3],
                "100": tints[2],
                "200": tints[1],
                "300": tints[0],
                "400": lighten_color(base_color, -10),
                "500": base_color,
                "600": darken_color(base_color, 10),
                "700": shades[0],
                "800": shades[1],
                "900": shades[2],
                "950": shades[3],
            }
    else:
        for index, color in enumerate(colors, start=1):
            theme_colors[f"{theme_name}-{index}"] = color

    theme = {"extend": {"colors": theme_colors}}
    return "module.exports = {\n  theme: " + json.dumps(theme, indent=4) + "\n}"


def generate_color_documentation(color: str) -> Optional[str]:
    """
    Render a standalone HTML page documenting one color's formats.

    Returns:
        HTML text, or None if the color cannot be parsed
    """
    data = convert_from_hex(color)
    if data is None:
        return None

    accent = data.hex
    text_color = get_best_text_color(accent)
    formats = [
        ("HEX", data.hex),
        ("RGB", f"rgb({data.rgb.r}, {data.rgb.g}, {data.rgb.b})"),
        ("HSL", f"hsl({data.hsl.h}, {data.hsl.s}%, {data.hsl.l}%)"),
        ("HSV", f"hsv({data.hsv.h}, {data.hsv.s}%, {data.hsv.v}%)"),
        ("CMYK", f"cmyk({data.cmyk.c}%, {data.cmyk.m}%, {data.cmyk.y}%, {data.cmyk.k}%)"),
    ]
    format_items = "\n".join(
        f"""            <div class="format-item">
                <div class="format-label">{label}</div>
                <div class="format-value">{value}</div>
            </div>"""
        for label, value in formats
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Color Documentation - {accent}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 2rem;
            background: #f8fafc;
        }}
        .color-header {{
            background: {accent};
            color: {text_color};
            padding: 3rem 2rem;
            border-radius: 1rem;
            text-align: center;
            margin-bottom: 2rem;
        }}
        .color-title {{ font-size: 2.5rem; margin: 0 0 0.5rem 0; font-weight: 700; }}
        .color-subtitle {{ font-size: 1.25rem; opacity: 0.9; margin: 0; }}
        .section {{ background: white; padding: 2rem; border-radius: 1rem; margin-bottom: 2rem; }}
        .section h2 {{ color: #1e293b; border-bottom: 2px solid {accent}; padding-bottom: 0.5rem; }}
        .format-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1rem; }}
        .format-item {{ background: #f8fafc; padding: 1rem; border-radius: 0.5rem; border-left: 4px solid {accent}; }}
        .format-label {{ font-weight: 600; color: #64748b; font-size: 0.875rem; text-transform: uppercase; }}
        .format-value {{ font-family: 'Monaco', 'Consolas', monospace; font-size: 1.125rem; color: #1e293b; }}
    </style>
</head>
<body>
    <div class="color-header">
        <h1 class="color-title">{accent}</h1>
        <p class="color-subtitle">{data.name}</p>
    </div>

    <div class="section">
        <h2>Color Formats</h2>
        <div class="format-grid">
{format_items}
        </div>
    </div>

    <div class="section">
        <h2>Analysis</h2>
        <div class="format-grid">
            <div class="format-item">
                <div class="format-label">Luminance</div>
                <div class="format-value">{data.luminance}</div>
            </div>
            <div class="format-item">
                <div class="format-label">Temperature</div>
                <div class="format-value">{data.temperature}</div>
            </div>
            <div class="format-item">
                <div class="format-label">Contrast on white</div>
                <div class="format-value">{data.contrast_white_ratio}:1 ({data.contrast_white})</div>
            </div>
            <div class="format-item">
                <div class="format-label">Contrast on black</div>
                <div class="format-value">{data.contrast_black_ratio}:1 ({data.contrast_black})</div>
            </div>
        </div>
    </div>
</body>
</html>"""


def generate_svg_swatch(color: str, size: int = 200) -> Optional[str]:
    """
    Render a square SVG swatch labelled with the hex value and nearest name.

    Returns:
        SVG markup, or None if the color cannot be parsed
    """
    rgb = hex_to_rgb(color)
    if rgb is None:
        return None

    text_color = get_best_text_color(color)
    name = get_nearest_named_color(color)

    return f"""<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">
    <rect width="100%" height="100%" fill="{color}"/>
    <text x="50%" y="50%" text-anchor="middle" dominant-baseline="middle"
          fill="{text_color}" font-family="Arial, sans-serif" font-size="16" font-weight="bold">
        {color}
    </text>
    <text x="50%" y="70%" text-anchor="middle" dominant-baseline="middle"
          fill="{text_color}" font-family="Arial, sans-serif" font-size="12" opacity="0.8">
        {name}
    </text>
</svg>"""


def generate_ase_data(colors: Sequence[str]) -> str:
    """Render a simplified Adobe Swatch Exchange palette as JSON."""
    entries: List[Dict[str, object]] = []
    for index, color in enumerate(colors, start=1):
        rgb = hex_to_rgb(color)
        entries.append({
            "name": f"Color {index}",
            "type": "RGB",
            "values": [channel / 255 for channel in rgb] if rgb else [0, 0, 0],
        })

    return json.dumps({"version": "1.0", "colors": entries}, indent=2)
