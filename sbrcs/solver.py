"""Shooting-and-bouncing-rays solver for monostatic radar cross section."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable
from typing import ClassVar, Optional, Union

from sbrcs.bounds import BoundBox
from sbrcs.bvh import NodeStatus, ReducedBvhArray, ReducedBvhNode
from sbrcs.observation import Observation, ObservationArray
from sbrcs.ray import RayTube
from sbrcs.raypool import RayPool
from sbrcs.rcs import RcsArray
from sbrcs.triangle import Triangle
from sbrcs.vecmath import cross, cts_to_sph, dot, unit
from sbrcs.vector import Vec3

_MAX_REFLECTIONS = 4
_FAR_HIT = 1e32
_INNER = (NodeStatus.BRANCH, NodeStatus.ROOT)


class SbrSolver:
    """Traces ray tubes through a hierarchy and sums their physical-optics field."""

    c0: ClassVar[float] = 299792458.0
    mu0: ClassVar[float] = 12.566370614e-7
    eps0: ClassVar[float] = 8.854187817e-12
    z0: ClassVar[float] = 376.730313451
    pi: ClassVar[float] = 3.14159265359

    def monostatic_rcs(
        self, bvh: ReducedBvhArray, observations: Union[ObservationArray, Iterable[Observation]]
    ) -> RcsArray:
        """Radar cross section for every observation, in order."""
        if isinstance(observations, ObservationArray):
            observations = observations.observations
        values = []
        for observation in observations:
            pool = self.populate_ray_pool(bvh, observation)
            self.shoot_and_bounce(bvh, pool)
            values.append(self.physical_optics_integral(pool, observation))
        return RcsArray(values)

    def populate_ray_pool(self, bvh: ReducedBvhArray, observation: Observation) -> RayPool:
        """A ray grid sized to the object and wavelength, aimed along the observation."""
        box = self._root_box(bvh)
        wavelength = self.c0 / observation.frequency
        width_lambda = box.radius() * 2 / wavelength
        count_sqrt = math.ceil(width_lambda * observation.ray_per_lam + 1.0) + 1
        pool = RayPool(count_sqrt)
        pool.regenerate_rays(box, observation.direction, observation.polarization)
        return pool

    def shoot_and_bounce(self, bvh: ReducedBvhArray, ray_pool: RayPool) -> None:
        """Trace every ray of the pool through up to four reflections, in place."""
        if not bvh.nodes:
            raise ValueError("the hierarchy has no nodes")
        for ray in ray_pool.rays:
            self._trace(bvh.nodes, ray)

    def physical_optics_integral(self, ray_pool: RayPool, observation: Observation) -> float:
        """Monostatic radar cross section from the reflected rays of the pool."""
        pi = self.pi
        wave_num = 2 * pi / (self.c0 / observation.frequency)

        sph = cts_to_sph(observation.direction)
        phi, the = sph[1], sph[2]
        cp, sp = math.cos(phi), math.sin(phi)
        ct, st = math.cos(the), math.sin(the)

        dir_p = Vec3(-sp, cp, 0.0)
        dir_t = Vec3(cp * ct, sp * ct, -st)
        vec_k = wave_num * Vec3(cp * st, sp * st, ct)
        scale = complex(0.0, wave_num * ray_pool.ray_area / (4.0 * pi))

        au = 0j
        ar = 0j
        for ray in ray_pool.rays:
            if ray.ref_count <= 0:
                continue
            ap_e = cmath.exp(1j * wave_num * ray.dist) * ray.pol
            ap_h = -cross(ap_e, ray.direction)
            bu = dot(-(cross(ap_e, -dir_p) + cross(ap_h, dir_t)), ray.direction)
            br = dot(-(cross(ap_e, dir_t) + cross(ap_h, dir_p)), ray.direction)
            factor = scale * cmath.exp(-1j * dot(vec_k, ray.pos))
            au += bu * factor
            ar += br * factor

        return 4.0 * pi * (abs(au) ** 2 + abs(ar) ** 2)

    @staticmethod
    def _root_box(bvh: ReducedBvhArray) -> BoundBox:
        if not bvh.nodes:
            raise ValueError("the hierarchy has no nodes")
        root = bvh.nodes[0]
        if root.data is not None:
            return root.data.box
        return root.trig.bound_box()

    def _trace(self, nodes: list[ReducedBvhNode], ray: RayTube) -> None:
        ray.dist = 0.0
        while ray.ref_count < _MAX_REFLECTIONS:
            hit = self._nearest_hit(nodes, ray)
            if hit is None:
                break
            idx, t, point = hit
            self._reflect(ray, nodes[idx].trig, idx, t, point)

    @staticmethod
    def _nearest_hit(
        nodes: list[ReducedBvhNode], ray: RayTube
    ) -> Optional[tuple[int, float, Vec3]]:
        best_t = _FAR_HIT
        best = None
        stack = [0]
        while stack:
            idx = stack.pop()
            node = nodes[idx]
            if node.status in _INNER:
                t = ray.collide_box(node.data.box)
                if t is not None and t < best_t:
                    stack.append(node.data.left)
                    stack.append(node.data.right)
            elif node.status is NodeStatus.LEAF and idx != ray.last_hit_idx:
                result = ray.collide_triangle_sbr(node.trig)
                if result is not None and result[0] < best_t:
                    best_t = result[0]
                    best = (idx, result[0], result[1])
        return best

    @staticmethod
    def _reflect(ray: RayTube, trig: Triangle, idx: int, t: float, point: Vec3) -> None:
        normal = trig.normal()
        direction = ray.direction

        pol_u = unit(cross(direction, normal))
        pol_r = unit(cross(direction, pol_u))
        ref_dir = unit(direction - normal * (2.0 * dot(direction, normal)))
        ref_pol_u = -pol_u
        ref_pol_r = cross(ref_dir, ref_pol_u)

        comp_u = dot(ray.pol, pol_u)
        comp_r = dot(ray.pol, pol_r)

        ray.pos = point
        ray.direction = ref_dir
        ray.pol = -comp_r * ref_pol_r + comp_u * ref_pol_u
        ray.dist += t
        ray.ref_normal = normal
        ray.ref_count += 1
        ray.last_hit_idx = idx