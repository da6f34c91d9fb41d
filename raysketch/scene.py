"""The demo scene: four spheres on a large ground sphere."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from raysketch.camera import Camera
from raysketch.color import Color
from raysketch.hittable import HittableList
from raysketch.material import Lambertian, Metal
from raysketch.sphere import Sphere
from raysketch.vec3 import Point3


def build_world() -> HittableList:
    """The ground, a diffuse centre sphere and two metal spheres."""
    material_ground = Lambertian(Color(0.8, 0.8, 0.0))
    material_center = Lambertian(Color(0.1, 0.2, 0.5))
    material_left = Metal(Color(0.8, 0.8, 0.8), 0.3)
    material_right = Metal(Color(0.8, 0.6, 0.2), 1.0)

    return HittableList(
        Sphere(Point3(0, -100.5, -1), 100, material_ground),
        Sphere(Point3(0, 0, -1.2), 0.5, material_center),
        Sphere(Point3(-1, 0, -1), 0.5, material_left),
        Sphere(Point3(1, 0, -1), 0.5, material_right),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Render the demo scene as a PPM image on standard output."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene as a PPM image on standard output."
    )
    parser.parse_args(argv)

    cam = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
    )
    cam.render(build_world())
    return 0