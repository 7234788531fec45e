from .engine import GradientEngine, harmonious_hues
from .renderers import (
    UnsupportedFormat,
    VectorMarkup,
    css_declaration,
    css_stop_list,
    render_css,
    render_svg,
)
from .stops import ColorStop, color_stops, format_offset, stop_offsets
from .raster import render_raster, save_png, to_image

__all__ = [
    "GradientEngine",
    "harmonious_hues",
    "UnsupportedFormat",
    "VectorMarkup",
    "css_declaration",
    "css_stop_list",
    "render_css",
    "render_svg",
    "ColorStop",
    "color_stops",
    "format_offset",
    "stop_offsets",
    "render_raster",
    "save_png",
    "to_image",
]
