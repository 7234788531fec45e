"""
Gradient Serializers
====================

Turn a color sequence and a :class:`GradientMode` into output text.

CSS:
    linear -> ``linear-gradient(90deg, <stops>)``
    radial -> ``radial-gradient(circle, <stops>)``
    conic  -> ``conic-gradient(<stops>)``

SVG:
    linear -> ``<linearGradient x1="0%" y1="0%" x2="100%" y2="0%">``
    radial -> ``<radialGradient>`` (centered circle)
    conic  -> :class:`UnsupportedFormat`; SVG has no angular gradient element

Every mode is listed explicitly in the dispatch tables below; adding a mode
without a renderer fails at import time.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Sequence, Union

from ..types.color_types import HexColor
from ..types.gradient_mode import GradientMode, GradientModeLike
from .stops import color_stops, format_offset

SVG_NS = "http://www.w3.org/2000/svg"
EMPTY_CSS = "none"


@dataclass(frozen=True)
class UnsupportedFormat:
    """Returned instead of markup when an output format cannot express a mode."""
    output: str
    mode: GradientMode
    reason: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.output} output does not support {self.mode.value} gradients: {self.reason}"


VectorMarkup = Union[str, UnsupportedFormat]


# ------------------ CSS ------------------

def css_stop_list(colors: Sequence[HexColor]) -> str:
    return ", ".join(f"{stop.color} {format_offset(stop.offset)}%" for stop in color_stops(colors))


_CSS_WRAPPERS: Dict[GradientMode, Callable[[str], str]] = {
    GradientMode.LINEAR: lambda stops: f"linear-gradient(90deg, {stops})",
    GradientMode.RADIAL: lambda stops: f"radial-gradient(circle, {stops})",
    GradientMode.CONIC: lambda stops: f"conic-gradient({stops})",
}


def render_css(colors: Sequence[HexColor], mode: GradientModeLike = GradientMode.LINEAR) -> str:
    """
    Render a CSS gradient function call.

    An empty sequence renders as ``none``, a valid ``background`` value.
    Unknown modes fall back to linear.
    """
    if not colors:
        return EMPTY_CSS
    return _CSS_WRAPPERS[GradientMode.coerce(mode)](css_stop_list(colors))


def css_declaration(expression: str, prop: str = "background") -> str:
    return f"{prop}: {expression};"


# ------------------ SVG ------------------

def _svg_stops(colors: Sequence[HexColor]) -> str:
    return "\n".join(
        f'  <stop offset="{format_offset(stop.offset)}%" stop-color="{stop.color}" />'
        for stop in color_stops(colors)
    )


def _svg_document(defs: str, fill: str) -> str:
    head = f'<svg width="100%" height="100%" xmlns="{SVG_NS}">\n'
    body = f'  <rect width="100%" height="100%" fill="{fill}" />\n</svg>'
    if not defs:
        return head + body
    return head + f"  <defs>\n{defs}\n  </defs>\n" + body


def _svg_linear(colors: Sequence[HexColor], gradient_id: str) -> VectorMarkup:
    defs = (
        f'    <linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="100%" y2="0%">\n'
        f"{_svg_stops(colors)}\n"
        f"    </linearGradient>"
    )
    return _svg_document(defs, f"url(#{gradient_id})")


def _svg_radial(colors: Sequence[HexColor], gradient_id: str) -> VectorMarkup:
    defs = (
        f'    <radialGradient id="{gradient_id}" cx="50%" cy="50%" r="50%">\n'
        f"{_svg_stops(colors)}\n"
        f"    </radialGradient>"
    )
    return _svg_document(defs, f"url(#{gradient_id})")


def _svg_conic(colors: Sequence[HexColor], gradient_id: str) -> VectorMarkup:
    return UnsupportedFormat(
        output="svg",
        mode=GradientMode.CONIC,
        reason="SVG has no conic gradient paint server",
    )


_SVG_RENDERERS: Dict[GradientMode, Callable[[Sequence[HexColor], str], VectorMarkup]] = {
    GradientMode.LINEAR: _svg_linear,
    GradientMode.RADIAL: _svg_radial,
    GradientMode.CONIC: _svg_conic,
}

for _table in (_CSS_WRAPPERS, _SVG_RENDERERS):
    _missing = set(GradientMode) - set(_table)
    if _missing:
        raise RuntimeError(f"No renderer for modes: {sorted(m.value for m in _missing)}")


def render_svg(
    colors: Sequence[HexColor],
    mode: GradientModeLike,
    gradient_id: str,
) -> VectorMarkup:
    """
    Render a standalone SVG document with an inline gradient definition.

    Args:
        colors: Ordered stop colors
        mode: Gradient mode; unknown values fall back to linear
        gradient_id: Id of the ``<defs>`` gradient, referenced by the rect fill

    Returns:
        SVG markup, or :class:`UnsupportedFormat` for conic gradients.
        An empty sequence yields an SVG whose rect is unfilled.
    """
    mode = GradientMode.coerce(mode)
    if not colors and mode is not GradientMode.CONIC:
        return _svg_document("", "none")
    return _SVG_RENDERERS[mode](colors, gradient_id)
