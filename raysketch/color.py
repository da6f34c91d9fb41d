"""Colour conversion and PPM pixel output."""

import math
from typing import TextIO

from raysketch.interval import Interval
from raysketch.vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply gamma 2 correction; non-positive values map to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def color_to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Convert a linear colour to gamma-corrected 0..255 components."""
    r, g, b = (int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in pixel_color)
    return r, g, b


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a line of a plain PPM file."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")