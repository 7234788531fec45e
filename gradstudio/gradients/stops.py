from __future__ import annotations
from typing import List, NamedTuple, Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HexColor


class ColorStop(NamedTuple):
    color: HexColor
    offset: float  # percent, 0..100


def stop_offsets(n: int) -> NDArray:
    """
    Percent offsets ``i / (n - 1) * 100`` for ``n`` evenly spaced stops.

    ``n == 1`` yields ``[0.0]`` and ``n == 0`` an empty array; callers decide
    how to render those (see :func:`color_stops`).
    """
    if n <= 0:
        return np.empty(0, dtype=float)
    if n == 1:
        return np.zeros(1, dtype=float)
    return np.arange(n, dtype=float) / (n - 1) * 100


def color_stops(colors: Sequence[HexColor]) -> List[ColorStop]:
    """
    Pair each color with its offset.

    A single color becomes a solid fill: the same color at 0% and 100%.
    """
    if len(colors) == 1:
        return [ColorStop(colors[0], 0.0), ColorStop(colors[0], 100.0)]
    return [ColorStop(c, float(o)) for c, o in zip(colors, stop_offsets(len(colors)))]


def format_offset(offset: float) -> str:
    """Shortest round-trip decimal, no trailing ``.0`` (``50``, ``33.33333333333333``)."""
    return np.format_float_positional(float(offset), trim="-")
