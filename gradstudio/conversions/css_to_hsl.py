import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTuple, UnitRGB


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360

## HSL to RGB conversions

def css_hsl_to_rgb(h: float, s: float, l: float) -> UnitRGB:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, any real value (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        return m1, m2, low
    if hue_section == 1:
        return m2, m1, low
    if hue_section == 2:
        return low, m1, m2
    if hue_section == 3:
        return low, m2, m1
    if hue_section == 4:
        return m2, low, m1
    if hue_section == 5:
        return m1, low, m2
    return low, low, low

def np_css_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Scalars broadcast against arrays, so one saturation/lightness pair can be
    applied to a whole row of hues.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    h, s, l = np.broadcast_arrays(h, s, l)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    section = np.floor(h / 60).astype(int)
    # (r, g, b) picks for sections 0..5, same table as the scalar version
    conditions = [section == k for k in range(6)]
    r = np.select(conditions, [m1, m2, low, low, m2, m1], default=low)
    g = np.select(conditions, [m2, m1, m1, m2, low, low], default=low)
    b = np.select(conditions, [low, low, m2, m1, m1, m2], default=low)

    return np.stack([r, g, b], axis=-1)

## RGB to HSL conversions

def css_rgb_to_hsl(r: float, g: float, b: float) -> HSLTuple:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = delta / (1 - abs(2 * lightness - 1))

    if max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % 360
    else:
        hue = (60 * ((r - g) / delta) + 240) % 360

    return hue, saturation, lightness

def np_css_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL using the CSS Color 4 algorithm.

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    )

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = 1 - np.abs(2 * lightness - 1)
    saturation = np.where(chromatic, delta / np.where(denom > 0, denom, 1.0), 0.0)

    hue = np.select(
        [max_c == r, max_c == g],
        [
            (60 * ((g - b) / safe_delta) + 360) % 360,
            (60 * ((b - r) / safe_delta) + 120) % 360,
        ],
        default=(60 * ((r - g) / safe_delta) + 240) % 360,
    )
    hue = np.where(chromatic, hue, 0.0)

    return np.stack([hue, saturation, lightness], axis=-1)
