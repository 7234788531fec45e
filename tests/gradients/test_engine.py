import re

import numpy as np
import pytest

from gradstudio.config import GradientConfig
from gradstudio.conversions.hex import is_hex_color, np_hex_to_unit_rgb
from gradstudio.conversions.css_to_hsl import np_css_rgb_to_hsl
from gradstudio.gradients.engine import GradientEngine, harmonious_hues
from gradstudio.gradients.renderers import UnsupportedFormat
from gradstudio.samples.presets import Preset, default_catalog
from gradstudio.types.gradient_mode import GradientMode

HEX6 = r"^#[0-9A-F]{6}$"


def _hsl(colors):
    rgb = np_hex_to_unit_rgb(colors)
    return np_css_rgb_to_hsl(rgb[:, 0], rgb[:, 1], rgb[:, 2])


def test_default_construction():
    engine = GradientEngine(rng=0)
    assert len(engine) == 3
    assert engine.mode is GradientMode.LINEAR


def test_initial_count_from_config():
    engine = GradientEngine(rng=0, config=GradientConfig(initial_count=5))
    assert len(engine) == 5


@pytest.mark.parametrize("count", [1, 2, 3, 7, 10, 64])
def test_generate_random(engine, count):
    engine.generate_random(count)
    colors = engine.get_colors()
    assert len(colors) == count
    for color in colors:
        assert is_hex_color(color)
        assert re.match(HEX6, color)


def test_generate_random_zero_is_empty(engine):
    engine.generate_random(0)
    assert engine.get_colors() == []
    assert engine.render_style_expression() == "none"


def test_generate_negative_count_raises(engine):
    with pytest.raises(ValueError):
        engine.generate_random(-1)
    with pytest.raises(ValueError):
        engine.generate_harmonious(-2)


def test_seeded_engines_agree():
    a = GradientEngine(rng=99)
    b = GradientEngine(rng=99)
    a.generate_harmonious(5)
    b.generate_harmonious(5)
    assert a.get_colors() == b.get_colors()


@pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 8, 10])
def test_generate_harmonious_spacing(count):
    engine = GradientEngine(rng=count * 17)
    engine.generate_harmonious(count)
    colors = engine.get_colors()
    assert len(colors) == count

    hsl = _hsl(colors)
    step = 360.0 / count
    for i in range(1, count):
        diff = (hsl[i, 0] - hsl[0, 0]) % 360.0
        expected = i * step
        # quantization to 8 bits moves each hue by under a degree
        delta = min(abs(diff - expected), 360.0 - abs(diff - expected))
        assert delta < 2.0

    assert np.ptp(hsl[:, 1]) < 0.03
    assert np.ptp(hsl[:, 2]) < 0.01
    assert 0.6 - 0.02 <= hsl[0, 1] <= 0.9 + 0.02
    assert 0.5 - 0.01 <= hsl[0, 2] <= 0.7 + 0.01


def test_harmonious_hues_exact():
    hues = harmonious_hues(4, 300.0)
    assert np.allclose(hues, [300.0, 30.0, 120.0, 210.0])
    assert harmonious_hues(0, 10.0).shape == (0,)


def test_generate_harmonious_zero(engine):
    engine.generate_harmonious(0)
    assert engine.get_colors() == []


def test_generate_harmonious_respects_config_ranges():
    config = GradientConfig(saturation_range=(1.0, 1.0), lightness_range=(0.5, 0.5))
    engine = GradientEngine(rng=3, config=config)
    engine.generate_harmonious(3)
    hsl = _hsl(engine.get_colors())
    assert np.allclose(hsl[:, 1], 1.0, atol=0.01)
    assert np.allclose(hsl[:, 2], 0.5, atol=0.01)


def test_update_color(engine):
    engine.apply_preset(Preset("t", ("#000000", "#111111", "#222222")))
    engine.update_color(1, "#ABCDEF")
    assert engine.get_colors() == ["#000000", "#ABCDEF", "#222222"]


@pytest.mark.parametrize("index", [3, 4, 100, -1])
def test_update_color_out_of_range_is_ignored(engine, index):
    engine.apply_preset(Preset("t", ("#000000", "#111111", "#222222")))
    engine.update_color(index, "#ABCDEF")
    assert engine.get_colors() == ["#000000", "#111111", "#222222"]


def test_get_colors_is_a_copy(engine):
    colors = engine.get_colors()
    colors[0] = "#FFFFFF"
    colors.append("#000000")
    assert engine.get_colors() != colors
    assert len(engine) == 3


def test_apply_preset_does_not_alias_catalog(engine):
    preset = default_catalog()[0]
    original = tuple(preset.colors)
    engine.apply_preset(preset)
    assert engine.get_colors() == list(preset.colors)
    engine.update_color(0, "#000000")
    assert preset.colors == original
    assert default_catalog()[0].colors == original


def test_apply_preset_accepts_list_backed_preset(engine):
    source = ["#111111", "#222222"]
    engine.apply_preset(Preset("mutable", source))
    source[0] = "#FFFFFF"
    assert engine.get_colors() == ["#111111", "#222222"]


def test_set_mode_switches_wrapper_only(engine):
    engine.apply_preset(Preset("t", ("#FF0000", "#00FF00", "#0000FF")))
    linear = engine.render_style_expression()
    engine.set_mode(GradientMode.CONIC)
    conic = engine.render_style_expression()
    engine.set_mode("radial")
    radial = engine.render_style_expression()
    stops = "#FF0000 0%, #00FF00 50%, #0000FF 100%"
    assert linear == f"linear-gradient(90deg, {stops})"
    assert conic == f"conic-gradient({stops})"
    assert radial == f"radial-gradient(circle, {stops})"


def test_set_mode_unknown_is_coerced(engine):
    engine.set_mode(GradientMode.RADIAL)
    engine.set_mode("diagonal")
    assert engine.mode is GradientMode.LINEAR


def test_render_style_expression_two_colors(engine):
    engine.apply_preset(Preset("rb", ("#FF0000", "#0000FF")))
    assert engine.render_style_expression() == "linear-gradient(90deg, #FF0000 0%, #0000FF 100%)"


def test_render_single_color(engine):
    engine.generate_random(1)
    color = engine.get_colors()[0]
    assert engine.render_style_expression() == f"linear-gradient(90deg, {color} 0%, {color} 100%)"
    markup = engine.render_vector_markup()
    assert isinstance(markup, str)
    assert markup.count(f'stop-color="{color}"') == 2


def test_render_vector_markup_unique_ids(engine):
    first = engine.render_vector_markup()
    second = engine.render_vector_markup()
    assert 'id="gradient-1000"' in first
    assert 'id="gradient-1001"' in second


def test_render_vector_markup_conic(engine):
    engine.set_mode(GradientMode.CONIC)
    assert isinstance(engine.render_vector_markup(), UnsupportedFormat)


def test_round_trip_through_fresh_engine():
    for preset in default_catalog():
        first = GradientEngine(rng=1)
        first.apply_preset(preset)
        second = GradientEngine(rng=2)
        second.apply_preset(Preset(preset.name, first.get_colors()))
        assert second.render_style_expression() == first.render_style_expression()


def test_render_raster(engine):
    engine.apply_preset(Preset("rb", ("#FF0000", "#0000FF")))
    pixels = engine.render_raster(32, 4)
    assert pixels.shape == (4, 32, 3)
    assert pixels.dtype == np.uint8
