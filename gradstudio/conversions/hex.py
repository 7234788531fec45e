"""Hex color strings to and from RGB / HSL, scalar and vectorized."""
from __future__ import annotations
import re
from typing import Iterable, List

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTuple, HexColor, IntRGB, UnitRGB
from ..types.format_type import FormatType, from_format, to_format
from .css_to_hsl import css_rgb_to_hsl

HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: object) -> bool:
    """True for ``#RGB`` / ``#RRGGBB`` strings, with or without the ``#``."""
    return isinstance(value, str) and HEX_PATTERN.match(value.strip()) is not None


def normalize_hex(value: str) -> HexColor:
    """
    Return ``value`` as canonical uppercase ``#RRGGBB``.

    Raises:
        ValueError: if ``value`` is not a recognised hex color.
    """
    if not is_hex_color(value):
        raise ValueError(f"Not a hex color: {value!r}")
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return "#" + digits.upper()


def int_to_hex(value: int) -> HexColor:
    """Pack a 24-bit integer into ``#RRGGBB``."""
    return f"#{int(value) & 0xFFFFFF:06X}"


def hex_to_rgb(value: str) -> IntRGB:
    digits = normalize_hex(value)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_unit_rgb(value: str) -> UnitRGB:
    r, g, b = from_format(np.array(hex_to_rgb(value)), FormatType.INT)
    return float(r), float(g), float(b)


def hex_to_hsl(value: str) -> HSLTuple:
    """Hue in degrees, saturation and lightness in [0, 1]."""
    return css_rgb_to_hsl(*hex_to_unit_rgb(value))


def unit_rgb_to_hex(r: float, g: float, b: float) -> HexColor:
    """Channels in [0, 1] are clamped and rounded to 8 bits."""
    ri, gi, bi = to_format(np.array([r, g, b]), FormatType.INT)
    return f"#{int(ri):02X}{int(gi):02X}{int(bi):02X}"


def np_unit_rgb_to_hex(rgb: NDArray) -> List[HexColor]:
    """
    Vectorized: convert an ``(N, 3)`` array of unit RGB to hex strings.

    Returns:
        List of ``N`` uppercase ``#RRGGBB`` strings.
    """
    rgb = np.asarray(rgb, dtype=float).reshape(-1, 3)
    ints = to_format(rgb, FormatType.INT).astype(np.int64)
    packed = (ints[:, 0] << 16) | (ints[:, 1] << 8) | ints[:, 2]
    return [int_to_hex(v) for v in packed]


def np_hex_to_unit_rgb(colors: Iterable[str]) -> NDArray:
    """Vectorized: hex strings to an ``(N, 3)`` float array in [0, 1]."""
    ints = np.array([hex_to_rgb(c) for c in colors], dtype=float).reshape(-1, 3)
    return from_format(ints, FormatType.INT)
