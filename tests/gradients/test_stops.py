import numpy as np

from gradstudio.gradients.stops import ColorStop, color_stops, format_offset, stop_offsets


def test_stop_offsets_even_spacing():
    assert np.allclose(stop_offsets(2), [0.0, 100.0])
    assert np.allclose(stop_offsets(3), [0.0, 50.0, 100.0])
    assert np.allclose(stop_offsets(5), [0.0, 25.0, 50.0, 75.0, 100.0])


def test_stop_offsets_middle_is_exact():
    assert stop_offsets(3)[1] == 50.0


def test_stop_offsets_degenerate():
    assert stop_offsets(0).size == 0
    assert list(stop_offsets(1)) == [0.0]


def test_color_stops_single_color_is_solid():
    assert color_stops(["#123456"]) == [ColorStop("#123456", 0.0), ColorStop("#123456", 100.0)]


def test_color_stops_empty():
    assert color_stops([]) == []


def test_format_offset():
    assert format_offset(0.0) == "0"
    assert format_offset(50.0) == "50"
    assert format_offset(100.0) == "100"
    assert format_offset(12.5) == "12.5"
    assert format_offset(1 / 3 * 100) == "33.33333333333333"
