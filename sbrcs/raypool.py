"""A square grid of parallel ray tubes aimed at a bounding box."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from sbrcs.bounds import BoundBox
from sbrcs.ray import RayTube
from sbrcs.vecmath import cts_to_sph, orthonormal_set, orthonormalize
from sbrcs.vector import Vec3

_FAR = 1e36


@dataclass
class RayPool:
    """``ray_count_sqrt`` by ``ray_count_sqrt`` ray tubes, each covering ``ray_area``."""

    ray_count_sqrt: int
    ray_area: float = 0.0
    rays: list[RayTube] = field(init=False)

    def __post_init__(self) -> None:
        if self.ray_count_sqrt < 1:
            raise ValueError("ray_count_sqrt must be at least 1")
        self.rays = [RayTube() for _ in range(self.ray_count)]

    @property
    def ray_count(self) -> int:
        """Total number of rays."""
        return self.ray_count_sqrt * self.ray_count_sqrt

    def _grid(self, bound_box: BoundBox, inc_dir: Vec3) -> tuple[Vec3, Vec3, Vec3, Vec3]:
        out_sph = cts_to_sph(-inc_dir)
        dir_n, dir_u, dir_r = orthonormalize(*orthonormal_set(out_sph[1], out_sph[2]))

        radius = bound_box.radius()
        pool_center = bound_box.center() - dir_n * 2.0 * radius
        rect_min = pool_center - (dir_r + dir_u) * radius

        diameter = 2.0 * radius / self.ray_count_sqrt
        step_u = diameter * dir_u
        step_r = diameter * dir_r
        begin = rect_min + (step_u + step_r) / 2.0
        self.ray_area = diameter * diameter
        return dir_n, begin, step_u, step_r

    def _fill(
        self, bound_box: BoundBox, inc_dir: Vec3, pol_dir: Vec3, cells: list[int]
    ) -> None:
        dir_n, begin, step_u, step_r = self._grid(bound_box, inc_dir)
        n = self.ray_count_sqrt
        self.rays = [
            RayTube(
                pos=begin + step_u * (cell // n) + step_r * (cell % n),
                direction=dir_n,
                pol=pol_dir,
                dist=_FAR,
                ref_count=0,
                last_hit_idx=None,
            )
            for cell in cells
        ]

    def regenerate_rays(self, bound_box: BoundBox, inc_dir: Vec3, pol_dir: Vec3) -> None:
        """Lay the rays out row by row on a plane behind the box, pointing along ``-inc_dir``."""
        self._fill(bound_box, inc_dir, pol_dir, list(range(self.ray_count)))

    def regenerate_rays_random(
        self,
        bound_box: BoundBox,
        inc_dir: Vec3,
        pol_dir: Vec3,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Like :meth:`regenerate_rays`, but with grid cells assigned in shuffled order."""
        cells = list(range(self.ray_count))
        (rng or random.Random()).shuffle(cells)
        self._fill(bound_box, inc_dir, pol_dir, cells)