import re
import xml.etree.ElementTree as ET

import pytest

from gradstudio.gradients.renderers import (
    UnsupportedFormat,
    css_declaration,
    css_stop_list,
    render_css,
    render_svg,
)
from gradstudio.types.gradient_mode import GradientMode

SVG = "{http://www.w3.org/2000/svg}"
RED_BLUE = ["#FF0000", "#0000FF"]


def test_render_css_linear_two_colors():
    assert render_css(RED_BLUE, GradientMode.LINEAR) == "linear-gradient(90deg, #FF0000 0%, #0000FF 100%)"


def test_render_css_wrappers():
    colors = ["#FF0000", "#00FF00", "#0000FF"]
    stops = "#FF0000 0%, #00FF00 50%, #0000FF 100%"
    assert render_css(colors, GradientMode.LINEAR) == f"linear-gradient(90deg, {stops})"
    assert render_css(colors, GradientMode.RADIAL) == f"radial-gradient(circle, {stops})"
    assert render_css(colors, GradientMode.CONIC) == f"conic-gradient({stops})"


@pytest.mark.parametrize("mode", list(GradientMode))
def test_mode_changes_only_wrapper(mode):
    colors = ["#0F2027", "#203A43", "#2C5364", "#FFFFFF"]
    expression = render_css(colors, mode)
    assert expression.endswith(f"{css_stop_list(colors)})")


def test_render_css_unknown_mode_is_linear():
    assert render_css(RED_BLUE, "spiral") == render_css(RED_BLUE, GradientMode.LINEAR)


def test_render_css_keeps_colors_verbatim():
    assert render_css(["#abcdef", "oops"]) == "linear-gradient(90deg, #abcdef 0%, oops 100%)"


def test_render_css_single_color():
    assert render_css(["#123456"], GradientMode.RADIAL) == "radial-gradient(circle, #123456 0%, #123456 100%)"


def test_render_css_empty():
    for mode in GradientMode:
        assert render_css([], mode) == "none"


def test_css_declaration():
    assert css_declaration("none") == "background: none;"


def test_render_svg_linear():
    markup = render_svg(RED_BLUE, GradientMode.LINEAR, "gradient-1")
    root = ET.fromstring(markup)
    grad = root.find(f"{SVG}defs/{SVG}linearGradient")
    assert grad is not None
    assert grad.attrib["id"] == "gradient-1"
    assert (grad.attrib["x1"], grad.attrib["y1"], grad.attrib["x2"], grad.attrib["y2"]) == ("0%", "0%", "100%", "0%")
    stops = [(s.attrib["offset"], s.attrib["stop-color"]) for s in grad.findall(f"{SVG}stop")]
    assert stops == [("0%", "#FF0000"), ("100%", "#0000FF")]
    assert root.find(f"{SVG}rect").attrib["fill"] == "url(#gradient-1)"


def test_render_svg_radial():
    markup = render_svg(["#FF0000", "#00FF00", "#0000FF"], GradientMode.RADIAL, "gradient-2")
    root = ET.fromstring(markup)
    grad = root.find(f"{SVG}defs/{SVG}radialGradient")
    assert grad is not None
    assert grad.attrib["cx"] == grad.attrib["cy"] == grad.attrib["r"] == "50%"
    assert [s.attrib["offset"] for s in grad.findall(f"{SVG}stop")] == ["0%", "50%", "100%"]


def test_render_svg_conic_is_unsupported():
    result = render_svg(RED_BLUE, GradientMode.CONIC, "gradient-3")
    assert isinstance(result, UnsupportedFormat)
    assert result.mode is GradientMode.CONIC
    assert not result
    assert "conic" in str(result)


def test_render_svg_single_color_is_solid():
    markup = render_svg(["#ABCDEF"], GradientMode.LINEAR, "g")
    assert re.findall(r'stop-color="(#\w+)"', markup) == ["#ABCDEF", "#ABCDEF"]


def test_render_svg_empty():
    root = ET.fromstring(render_svg([], GradientMode.LINEAR, "g"))
    assert root.find(f"{SVG}defs") is None
    assert root.find(f"{SVG}rect").attrib["fill"] == "none"


def test_render_svg_unknown_mode_is_linear():
    markup = render_svg(RED_BLUE, "spiral", "g")
    assert "<linearGradient" in markup
    assert markup == render_svg(RED_BLUE, GradientMode.LINEAR, "g")


def test_missing_mode_is_linear():
    assert GradientMode.coerce(None) is GradientMode.LINEAR
    assert render_css(RED_BLUE, None) == render_css(RED_BLUE, GradientMode.LINEAR)
