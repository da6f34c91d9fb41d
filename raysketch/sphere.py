"""Spheres."""

from __future__ import annotations

import math

from raysketch.hittable import Hittable, HitRecord
from raysketch.interval import Interval
from raysketch.material import Material
from raysketch.ray import Ray
from raysketch.vec3 import Point3, dot


class Sphere(Hittable):
    """A sphere with a material; negative radii become zero."""

    def __init__(self, center: Point3, radius: float, mat: Material) -> None:
        self.center = center
        self.radius = max(0.0, radius)
        self.mat = mat

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        oc = self.center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        rec = HitRecord(p=p, t=root, mat=self.mat)
        rec.set_face_normal(r, (p - self.center) / self.radius)
        return rec