"""Axis-aligned bounding boxes and bounding spheres."""

from __future__ import annotations

from dataclasses import dataclass, field

from sbrcs.vecmath import length, unit, vmax, vmin
from sbrcs.vector import Vec3


@dataclass(frozen=True)
class BoundBox:
    """Axis-aligned box spanning ``lower`` to ``upper``."""

    lower: Vec3 = field(default_factory=Vec3)
    upper: Vec3 = field(default_factory=Vec3)

    def union_with(self, other: BoundBox) -> BoundBox:
        """Smallest box enclosing both boxes."""
        return BoundBox(vmin(self.lower, other.lower), vmax(self.upper, other.upper))

    def center(self) -> Vec3:
        """Midpoint of the box."""
        return (self.lower + self.upper) / 2.0

    def radius(self) -> float:
        """Half the length of the box diagonal."""
        return length(self.upper - self.lower) / 2.0

    def contains(self, vec: Vec3) -> bool:
        """Whether ``vec`` lies in the half-open box ``[lower, upper)``."""
        return all(lo <= c < hi for c, lo, hi in zip(vec, self.lower, self.upper))


@dataclass(frozen=True)
class BoundSphere:
    """Sphere given by ``center`` and ``radius``."""

    center: Vec3 = field(default_factory=Vec3)
    radius: float = 0.0

    def union_with(self, other: BoundSphere) -> BoundSphere:
        """Smallest sphere enclosing both spheres."""
        if self.center == other.center:
            return BoundSphere(self.center, max(self.radius, other.radius))

        to_other = other.center - self.center
        distance = length(to_other)
        direction = unit(to_other)

        extents = (
            -self.radius,
            self.radius,
            distance - other.radius,
            distance + other.radius,
        )
        r_min = min(extents)
        r_max = max(extents)
        r_center = (r_min + r_max) / 2
        return BoundSphere(self.center + r_center * direction, r_max - r_center)