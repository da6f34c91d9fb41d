import io

import pytest

from raysketch.color import Color, color_to_bytes, linear_to_gamma, write_color


def test_gamma_is_square_root():
    assert linear_to_gamma(0.25) == pytest.approx(0.5)


@pytest.mark.parametrize("value", [0.0, -0.5])
def test_gamma_non_positive_is_zero(value):
    assert linear_to_gamma(value) == 0


def test_black_and_white_bytes():
    assert color_to_bytes(Color(0, 0, 0)) == (0, 0, 0)
    assert color_to_bytes(Color(1, 1, 1)) == (255, 255, 255)


def test_out_of_range_is_clamped():
    assert color_to_bytes(Color(-4, 10, 2)) == (0, 255, 255)


def test_bytes_are_monotonic():
    levels = [color_to_bytes(Color(v, v, v))[0] for v in (0.0, 0.1, 0.3, 0.6, 0.9)]
    assert levels == sorted(levels)


def test_write_color_line():
    out = io.StringIO()
    write_color(out, Color(1, 0, 1))
    assert out.getvalue() == "255 0 255\n"