"""Surface materials that scatter incoming rays."""

from __future__ import annotations

from typing import NamedTuple

from raysketch.color import Color
from raysketch.hittable import HitRecord
from raysketch.ray import Ray
from raysketch.vec3 import dot, random_unit_vector, reflect, unit_vector


class Scatter(NamedTuple):
    """The outcome of a scattering event."""

    attenuation: Color
    scattered: Ray


class Material:
    """A material that absorbs every ray."""

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        """Return the scattered ray and its attenuation, or None if absorbed."""
        return None


class Lambertian(Material):
    """Ideal diffuse surface."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Scatter(self.albedo, Ray(rec.p, direction))


class Metal(Material):
    """Reflective surface with optional fuzz, capped at 1."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected)
        if dot(scattered.direction, rec.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None