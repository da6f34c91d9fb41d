import io

import numpy as np
import pytest

from raysketch.ppm import PpmHeader, PpmImage, read_ppm, read_ppm_header, write_ppm


def test_read_simple_image():
    image = read_ppm(io.StringIO("P3\n2 1\n255\n1 2 3 4 5 6\n"))
    assert image.width == 2
    assert image.height == 1
    assert image.maxval == 255
    assert image.pixels.tolist() == [[[1, 2, 3], [4, 5, 6]]]


def test_read_skips_comments():
    text = "P3\n# a comment\n1 2\n# another\n15\n1 2 3\n4 5 6 # trailing\n"
    image = read_ppm(io.StringIO(text))
    assert image.maxval == 15
    assert image.pixels.tolist() == [[[1, 2, 3]], [[4, 5, 6]]]


def test_read_header_only():
    header = read_ppm_header(io.StringIO("P3\n# c\n7 3\n100\n"))
    assert header == PpmHeader(7, 3, 100)


def test_wrong_magic_rejected():
    with pytest.raises(ValueError):
        read_ppm(io.StringIO("P6\n1 1\n255\n0 0 0\n"))


@pytest.mark.parametrize("dims", ["0 1\n255", "1 -2\n255", "1 1\n0"])
def test_non_positive_header_rejected(dims):
    with pytest.raises(ValueError):
        read_ppm_header(io.StringIO(f"P3\n{dims}\n"))


def test_truncated_header_rejected():
    with pytest.raises(ValueError):
        read_ppm_header(io.StringIO("P3\n4\n"))


def test_truncated_pixels_rejected():
    with pytest.raises(ValueError):
        read_ppm(io.StringIO("P3\n2 1\n255\n1 2 3 4\n"))


def test_bad_pixel_rejected():
    with pytest.raises(ValueError):
        read_ppm(io.StringIO("P3\n1 1\n255\n1 x 3\n"))


def test_write_format():
    out = io.StringIO()
    write_ppm(out, PpmImage(np.array([[[1, 2, 3], [4, 5, 6]]]), 255))
    assert out.getvalue() == "P3\n2 1\n255\n1 2 3 4 5 6 \n"


def test_round_trip():
    rng = np.random.default_rng(3)
    pixels = rng.integers(0, 256, size=(4, 5, 3))
    out = io.StringIO()
    write_ppm(out, PpmImage(pixels, 255))
    back = read_ppm(io.StringIO(out.getvalue()))
    assert back.maxval == 255
    assert np.array_equal(back.pixels, pixels)


def test_image_shape_validation():
    with pytest.raises(ValueError):
        PpmImage(np.zeros((2, 2)), 255)


def test_channel_normalised():
    image = PpmImage(np.array([[[0, 50, 100]]]), 100)
    assert image.channel(1).tolist() == [[0.5]]
    with pytest.raises(ValueError):
        image.channel(3)