"""
Raster Gradient Previews
========================

Render a color sequence into an ``(H, W, 3)`` uint8 image, one parameter
field per mode, with per-channel linear interpolation between the stops.

- linear: u grows left to right
- radial: u is the distance from the center over the half-diagonal
- conic:  u is the angle clockwise from 12 o'clock over 360°
"""
from __future__ import annotations
from pathlib import Path
from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from ..conversions.hex import np_hex_to_unit_rgb
from ..types.color_types import HexColor
from ..types.format_type import FormatType, to_format
from ..types.gradient_mode import GradientMode, GradientModeLike
from .stops import color_stops


def _pixel_grid(width: int, height: int) -> tuple[NDArray, NDArray]:
    """Pixel-center coordinates relative to the image center."""
    xs = np.arange(width, dtype=float) + 0.5 - width / 2
    ys = np.arange(height, dtype=float) + 0.5 - height / 2
    return np.meshgrid(xs, ys)


def linear_field(width: int, height: int) -> NDArray:
    u = (np.arange(width, dtype=float) + 0.5) / width
    return np.broadcast_to(u, (height, width))


def radial_field(width: int, height: int) -> NDArray:
    x, y = _pixel_grid(width, height)
    r_max = np.hypot(width / 2, height / 2)
    return np.clip(np.hypot(x, y) / r_max, 0.0, 1.0)


def conic_field(width: int, height: int) -> NDArray:
    x, y = _pixel_grid(width, height)
    # arctan2(x, -y): 0 at the top, increasing clockwise in image coordinates
    theta = np.degrees(np.arctan2(x, -y)) % 360.0
    return theta / 360.0


FIELDS = {
    GradientMode.LINEAR: linear_field,
    GradientMode.RADIAL: radial_field,
    GradientMode.CONIC: conic_field,
}


def render_raster(
    colors: Sequence[HexColor],
    mode: GradientModeLike = GradientMode.LINEAR,
    width: int = 256,
    height: int = 64,
) -> NDArray:
    """
    Rasterize a gradient.

    Args:
        colors: Ordered stop colors (hex strings)
        mode: Gradient mode; unknown values fall back to linear
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        uint8 array of shape (height, width, 3). A single color renders solid,
        an empty sequence renders black.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive integers")
    if not colors:
        return np.zeros((height, width, 3), dtype=np.uint8)

    stops = color_stops(colors)
    positions = np.array([s.offset for s in stops]) / 100.0
    rgb = np_hex_to_unit_rgb([s.color for s in stops])

    u = FIELDS[GradientMode.coerce(mode)](width, height)
    channels = [np.interp(u, positions, rgb[:, c]) for c in range(3)]
    return to_format(np.stack(channels, axis=-1), FormatType.INT)


def to_image(pixels: NDArray) -> Image.Image:
    # (H, W, 3) uint8 is inferred as RGB
    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))


def save_png(pixels: NDArray, path: Union[str, Path]) -> Path:
    """Write an ``(H, W, 3)`` uint8 array as PNG and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_image(pixels).save(path, format="PNG")
    return path
