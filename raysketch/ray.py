"""Rays with an origin and a direction."""

from dataclasses import dataclass, field

from raysketch.vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    """A half-line P(t) = origin + t * direction."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Vec3:
        """The point reached at parameter t."""
        return self.origin + t * self.direction