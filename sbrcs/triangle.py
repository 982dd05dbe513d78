"""Triangles in 3-space."""

from __future__ import annotations

from dataclasses import dataclass

from sbrcs.bounds import BoundBox
from sbrcs.vecmath import plane_normal, vmax, vmin
from sbrcs.vector import Vec3


@dataclass(frozen=True)
class Triangle:
    """A triangle with vertices ``v1``, ``v2``, ``v3``."""

    v1: Vec3
    v2: Vec3
    v3: Vec3

    def normal(self) -> Vec3:
        """Unit normal following the right-hand rule on ``v1 -> v2 -> v3``."""
        return plane_normal(self.v1, self.v2, self.v3)

    def center(self) -> Vec3:
        """Centroid of the vertices."""
        return (self.v1 + self.v2 + self.v3) / 3

    def bound_box(self) -> BoundBox:
        """Axis-aligned box spanning the three vertices."""
        return BoundBox(
            vmin(vmin(self.v1, self.v2), self.v3),
            vmax(vmax(self.v1, self.v2), self.v3),
        )