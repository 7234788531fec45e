from .color_types import HexColor, ColorSequence, ColorInput, HUE_360
from .format_type import FormatType, max_non_hue
from .gradient_mode import GradientMode, GradientModeLike

__all__ = [
    "HexColor",
    "ColorSequence",
    "ColorInput",
    "HUE_360",
    "FormatType",
    "max_non_hue",
    "GradientMode",
    "GradientModeLike",
]
