"""Hit records and objects that rays can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from raysketch.interval import Interval
from raysketch.ray import Ray
from raysketch.vec3 import Vec3, dot

if TYPE_CHECKING:
    from raysketch.material import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    mat: Material | None = None
    t: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Something a ray can intersect."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        """Return the hit within ``ray_t``, or None if there is none."""


class HittableList(Hittable):
    """A collection of hittables that reports the closest hit."""

    def __init__(self, *objects: Hittable) -> None:
        self.objects: list[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        """Append an object."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove every object."""
        self.objects.clear()

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest