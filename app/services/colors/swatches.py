"""
Chromalens Swatch Rendering

Renders palettes as PNG strips of solid color chips for previews and
downloads. Output is base64 so it can travel inside JSON responses.
"""

import base64
import io
from typing import Any, Dict, Sequence

from PIL import Image

from .converter import hex_to_rgb

BACKGROUND_RGB = (255, 255, 255)


def create_color_chip(color_hex: str, chip_size: int = 40) -> Image.Image:
    """
    Create a single color chip image.

    Args:
        color_hex: Hex color to render (#RRGGBB)
        chip_size: Size of the square chip in pixels

    Returns:
        PIL Image of the color chip

    Raises:
        ValueError: If the color cannot be parsed
    """
    rgb = hex_to_rgb(color_hex)
    if rgb is None:
        raise ValueError(f"Invalid hex color format: {color_hex}")
    return Image.new("RGB", (chip_size, chip_size), tuple(rgb))


def create_palette_strip(colors: Sequence[str], chip_size: int = 40, spacing: int = 2) -> Image.Image:
    """
    Create a horizontal strip of color chips.

    Args:
        colors: Hex colors in display order
        chip_size: Size of each chip in pixels
        spacing: Spacing between chips in pixels

    Returns:
        PIL Image of the strip; a single blank chip for an empty palette
    """
    if not colors:
        return Image.new("RGB", (chip_size, chip_size), BACKGROUND_RGB)

    num_chips = len(colors)
    strip_width = num_chips * chip_size + (num_chips - 1) * spacing
    strip = Image.new("RGB", (strip_width, chip_size), BACKGROUND_RGB)

    x_pos = 0
    for color in colors:
        strip.paste(create_color_chip(color, chip_size), (x_pos, 0))
        x_pos += chip_size + spacing

    return strip


def render_palette_png(colors: Sequence[str], chip_size: int = 40, spacing: int = 2) -> str:
    """
    Render a palette as a base64-encoded PNG strip.

    Raises:
        ValueError: If any color cannot be parsed
    """
    strip = create_palette_strip(colors, chip_size, spacing)

    buffer = io.BytesIO()
    strip.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def create_swatch_metadata(colors: Sequence[str], chip_size: int, spacing: int) -> Dict[str, Any]:
    """Describe a rendered strip (dimensions and color order)."""
    num_chips = max(1, len(colors))
    return {
        "chip_size_px": chip_size,
        "spacing_px": spacing,
        "width_px": num_chips * chip_size + (num_chips - 1) * spacing,
        "height_px": chip_size,
        "total_colors": len(colors),
        "colors": list(colors),
    }
