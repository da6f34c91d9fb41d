"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from raysketch.rtutil import random_double

_NEAR_ZERO = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return self * (1 / t)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True if every component is very close to zero."""
        return all(abs(c) < _NEAR_ZERO for c in self)

    @classmethod
    def random(cls, low: float = 0.0, high: float = 1.0) -> Vec3:
        """A vector whose components are uniform in [low, high)."""
        return cls(random_double(low, high), random_double(low, high), random_double(low, high))


Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    """Dot product."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Cross product."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """The vector scaled to length one."""
    return v / v.length()


def random_unit_vector() -> Vec3:
    """A uniformly distributed random vector on the unit sphere."""
    while True:
        p = Vec3.random(-1, 1)
        lensq = p.length_squared()
        if 1e-160 < lensq <= 1:
            return p / math.sqrt(lensq)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with normal ``n``."""
    return v - 2 * dot(v, n) * n