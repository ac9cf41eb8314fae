"""
Chromalens Colors Module

Provides hex parsing, format conversion, WCAG contrast analysis, CIELAB
distance, harmony and lightness-series palette generation, and exporters
for stylesheets, Tailwind configs, SVG and PNG swatches.
"""

__version__ = "1.0.0"
