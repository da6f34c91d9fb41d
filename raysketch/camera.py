"""A pinhole camera that renders a world into a plain PPM image."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import NamedTuple, TextIO

from raysketch.color import Color, write_color
from raysketch.hittable import Hittable
from raysketch.interval import Interval
from raysketch.ray import Ray
from raysketch.rtutil import INFINITY, random_double
from raysketch.vec3 import Point3, Vec3, unit_vector

_FOCAL_LENGTH = 1.0
_VIEWPORT_HEIGHT = 2.0
_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)
_HIT_RANGE = Interval(0.001, INFINITY)


class _Viewport(NamedTuple):
    center: Point3
    pixel00_loc: Point3
    pixel_delta_u: Vec3
    pixel_delta_v: Vec3


@dataclass
class Camera:
    """Camera at the origin looking down -z, with antialiasing and bounce limit."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10

    @property
    def image_height(self) -> int:
        """Image height derived from width and aspect ratio, at least 1."""
        return max(1, int(self.image_width / self.aspect_ratio))

    def _viewport(self) -> _Viewport:
        height = self.image_height
        center = Point3(0, 0, 0)
        viewport_width = _VIEWPORT_HEIGHT * (float(self.image_width) / height)

        viewport_u = Vec3(viewport_width, 0, 0)
        viewport_v = Vec3(0, -_VIEWPORT_HEIGHT, 0)

        pixel_delta_u = viewport_u / self.image_width
        pixel_delta_v = viewport_v / height

        upper_left = center - Vec3(0, 0, _FOCAL_LENGTH) - viewport_u / 2 - viewport_v / 2
        pixel00_loc = upper_left + 0.5 * (pixel_delta_u + pixel_delta_v)
        return _Viewport(center, pixel00_loc, pixel_delta_u, pixel_delta_v)

    def render(self, world: Hittable, out: TextIO | None = None, log: TextIO | None = None) -> None:
        """Render ``world`` as a P3 image to ``out``, reporting progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log

        view = self._viewport()
        width, height = self.image_width, self.image_height
        scale = 1.0 / self.samples_per_pixel

        out.write(f"P3\n{width} {height}\n255\n")
        for j in range(height):
            log.write(f"\nScanlines remaining: {height - j} ")
            log.flush()
            for i in range(width):
                pixel_color = sum(
                    (
                        self.ray_color(_sample_ray(view, i, j), self.max_depth, world)
                        for _ in range(self.samples_per_pixel)
                    ),
                    Color(),
                )
                write_color(out, scale * pixel_color)
        log.write("\rDone                           \n")

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray from the camera centre through a random point of pixel (i, j)."""
        return _sample_ray(self._viewport(), i, j)

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """The colour seen along ``r``, following at most ``depth`` bounces."""
        attenuation = Color(1.0, 1.0, 1.0)
        for _ in range(depth):
            rec = world.hit(r, _HIT_RANGE)
            if rec is None:
                unit_direction = unit_vector(r.direction)
                a = 0.5 * (unit_direction.y + 1.0)
                return attenuation * ((1.0 - a) * _WHITE + a * _SKY_BLUE)
            scatter = rec.mat.scatter(r, rec) if rec.mat is not None else None
            if scatter is None:
                return Color(0, 0, 0)
            attenuation = attenuation * scatter.attenuation
            r = scatter.scattered
        return Color(0, 0, 0)


def _sample_ray(view: _Viewport, i: int, j: int) -> Ray:
    offset_x = random_double() - 0.5
    offset_y = random_double() - 0.5
    pixel_sample = (
        view.pixel00_loc
        + (i + offset_x) * view.pixel_delta_u
        + (j + offset_y) * view.pixel_delta_v
    )
    return Ray(view.center, pixel_sample - view.center)