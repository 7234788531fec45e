from __future__ import annotations
import logging
import time
from typing import Callable, Optional, Union

import numpy as np
from numpy import ndarray as NDArray

from ..config import GradientConfig
from ..conversions.css_to_hsl import np_css_hsl_to_rgb
from ..conversions.hex import int_to_hex, np_unit_rgb_to_hex
from ..samples.presets import Preset
from ..types.color_types import ColorSequence, HexColor, HUE_360, as_sequence
from ..types.gradient_mode import GradientMode, GradientModeLike
from .raster import render_raster
from .renderers import VectorMarkup, render_css, render_svg

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def _check_count(count: int) -> int:
    count = int(count)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return count


def harmonious_hues(count: int, base_hue: float) -> NDArray:
    """``count`` hues spaced ``360 / count`` apart, starting at ``base_hue``."""
    if count == 0:
        return np.empty(0, dtype=float)
    return (base_hue + np.arange(count) * HUE_360 / count) % HUE_360


class GradientEngine:
    """
    Owns an ordered color sequence and a gradient mode.

    Colors are populated by :meth:`generate_random` or
    :meth:`generate_harmonious`, edited with :meth:`update_color` or
    :meth:`apply_preset`, and emitted by :meth:`render_style_expression`
    (CSS) and :meth:`render_vector_markup` (SVG).

    Args:
        initial_count: Length of the random sequence created on construction
        mode: Initial gradient mode
        rng: numpy Generator or seed; ``None`` draws fresh OS entropy
        clock: Returns an integer timestamp used for SVG gradient ids
        config: Sampling ranges for harmonious palettes
    """

    def __init__(
        self,
        initial_count: Optional[int] = None,
        *,
        mode: GradientModeLike = GradientMode.LINEAR,
        rng: RandomSource = None,
        clock: Optional[Callable[[], int]] = None,
        config: Optional[GradientConfig] = None,
    ) -> None:
        self._config = config or GradientConfig()
        self._rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
        self._clock = clock or time.time_ns
        self._mode = GradientMode.coerce(mode)
        self._colors: ColorSequence = []
        count = self._config.initial_count if initial_count is None else initial_count
        self.generate_random(count)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def mode(self) -> GradientMode:
        return self._mode

    @property
    def config(self) -> GradientConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self._mode.value!r}, colors={self._colors!r})"

    # ------------------ GENERATION ------------------
    def generate_random(self, count: int) -> None:
        """Replace the colors with ``count`` uniform samples of the RGB cube."""
        count = _check_count(count)
        values = self._rng.integers(0, 0x1000000, size=count)
        self._colors = [int_to_hex(v) for v in values]
        logger.debug("generated %d random colors", count)

    def generate_harmonious(self, count: int) -> None:
        """
        Replace the colors with an evenly spaced hue wheel.

        One base hue, saturation and lightness are drawn per call; hues step
        by ``360 / count`` from the base while saturation and lightness stay
        fixed.
        """
        count = _check_count(count)
        base_hue = self._rng.uniform(0.0, HUE_360)
        saturation = self._rng.uniform(*self._config.saturation_range)
        lightness = self._rng.uniform(*self._config.lightness_range)

        hues = harmonious_hues(count, base_hue)
        rgb = np_css_hsl_to_rgb(hues, saturation, lightness)
        self._colors = np_unit_rgb_to_hex(rgb)
        logger.debug(
            "generated %d harmonious colors (h0=%.1f, s=%.2f, l=%.2f)",
            count, base_hue, saturation, lightness,
        )

    # ------------------ EDITING ------------------
    def update_color(self, index: int, color: HexColor) -> None:
        """Replace one color; indices outside the sequence are ignored."""
        if 0 <= index < len(self._colors):
            self._colors[index] = color

    def set_mode(self, mode: GradientModeLike) -> None:
        self._mode = GradientMode.coerce(mode)

    def apply_preset(self, preset: Preset) -> None:
        self._colors = as_sequence(preset.colors)

    def get_colors(self) -> ColorSequence:
        return list(self._colors)

    # ------------------ OUTPUT ------------------
    def next_gradient_id(self) -> str:
        return f"gradient-{self._clock()}"

    def render_style_expression(self) -> str:
        """CSS gradient expression for the current colors and mode."""
        return render_css(self._colors, self._mode)

    def render_vector_markup(self) -> VectorMarkup:
        """
        SVG document for the current colors and mode.

        Conic gradients yield :class:`~gradstudio.gradients.renderers.UnsupportedFormat`.
        """
        return render_svg(self._colors, self._mode, self.next_gradient_id())

    def render_raster(self, width: int = 256, height: int = 64) -> NDArray:
        return render_raster(self._colors, self._mode, width, height)
