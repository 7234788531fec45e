"""
gradstudio - Color Gradient Authoring
=====================================

Generate color sets (random or harmonious), edit them, and serialize the
result as CSS gradient expressions or SVG documents.

Key Features
------------
- Random palettes sampled uniformly from the RGB cube
- Harmonious palettes: evenly spaced hues at a shared saturation/lightness
- Linear, radial and conic gradients
- CSS and SVG output, PNG previews
- Curated preset catalog
- Editing session with pluggable host and gradient store

Quick Start
-----------
>>> from gradstudio import GradientEngine, GradientMode, find_preset
>>>
>>> engine = GradientEngine(rng=7)
>>> engine.apply_preset(find_preset("Forest Green"))
>>> engine.render_style_expression()
'linear-gradient(90deg, #56AB2F 0%, #A8E063 100%)'
>>> engine.set_mode(GradientMode.RADIAL)
>>> engine.render_style_expression()
'radial-gradient(circle, #56AB2F 0%, #A8E063 100%)'
"""

from .types.gradient_mode import GradientMode
from .types.format_type import FormatType
from .config import GradientConfig
from .gradients import (
    GradientEngine,
    UnsupportedFormat,
    render_css,
    render_svg,
    render_raster,
    save_png,
)
from .samples.presets import Preset, default_catalog, find_preset
from .session import (
    GradientSession,
    ExportBundle,
    HostChannel,
    NullHost,
    LoggingHost,
    GradientStore,
    MemoryGradientStore,
    JsonFileGradientStore,
)
from .conversions import is_hex_color, normalize_hex

__version__ = "0.1.0"

__all__ = [
    # core
    "GradientEngine",
    "GradientMode",
    "FormatType",
    "GradientConfig",
    "UnsupportedFormat",
    "render_css",
    "render_svg",
    "render_raster",
    "save_png",
    # presets
    "Preset",
    "default_catalog",
    "find_preset",
    # session
    "GradientSession",
    "ExportBundle",
    "HostChannel",
    "NullHost",
    "LoggingHost",
    "GradientStore",
    "MemoryGradientStore",
    "JsonFileGradientStore",
    # helpers
    "is_hex_color",
    "normalize_hex",
]
