"""
gradstudio Color Conversions
============================

HSL <-> RGB math (CSS Color 4 algorithm) and hex string helpers, each with a
scalar function and a vectorized numpy counterpart.

Conversion Functions
-------------------

HSL ↔ RGB:
    css_hsl_to_rgb(h, s, l) / np_css_hsl_to_rgb(h, s, l)
    css_rgb_to_hsl(r, g, b) / np_css_rgb_to_hsl(r, g, b)

Hex:
    is_hex_color(value)
    normalize_hex(value)            -> "#RRGGBB"
    hex_to_rgb / hex_to_unit_rgb / hex_to_hsl
    unit_rgb_to_hex / np_unit_rgb_to_hex / np_hex_to_unit_rgb

Examples
--------
>>> from gradstudio.conversions import css_hsl_to_rgb, unit_rgb_to_hex
>>> unit_rgb_to_hex(*css_hsl_to_rgb(0, 1.0, 0.5))
'#FF0000'
"""

from .css_to_hsl import (
    normalize_hue,
    css_hsl_to_rgb,
    np_css_hsl_to_rgb,
    css_rgb_to_hsl,
    np_css_rgb_to_hsl,
)
from .hex import (
    HEX_PATTERN,
    is_hex_color,
    normalize_hex,
    int_to_hex,
    hex_to_rgb,
    hex_to_unit_rgb,
    hex_to_hsl,
    unit_rgb_to_hex,
    np_unit_rgb_to_hex,
    np_hex_to_unit_rgb,
)

__all__ = [
    # HSL ↔ RGB
    'normalize_hue',
    'css_hsl_to_rgb',
    'np_css_hsl_to_rgb',
    'css_rgb_to_hsl',
    'np_css_rgb_to_hsl',

    # Hex
    'HEX_PATTERN',
    'is_hex_color',
    'normalize_hex',
    'int_to_hex',
    'hex_to_rgb',
    'hex_to_unit_rgb',
    'hex_to_hsl',
    'unit_rgb_to_hex',
    'np_unit_rgb_to_hex',
    'np_hex_to_unit_rgb',
]
