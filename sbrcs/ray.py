"""Ray tubes and their intersection tests against boxes and triangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from sbrcs.bounds import BoundBox
from sbrcs.triangle import Triangle
from sbrcs.vecmath import cross, dot
from sbrcs.vector import Vec3

_EPS = 1e-7


def _div(num: float, den: float) -> float:
    """Division with IEEE semantics for a zero denominator."""
    if den != 0:
        return num / den
    if num > 0:
        return math.inf
    if num < 0:
        return -math.inf
    return math.nan


def _min(a: float, b: float) -> float:
    return b if b < a else a


def _max(a: float, b: float) -> float:
    return b if a < b else a


@dataclass
class RayTube:
    """A ray tube travelling from ``pos`` along ``direction``.

    ``pol`` is the polarisation of the carried field, ``dist`` the path length
    travelled so far, ``ref_count`` the number of reflections, ``ref_normal``
    the normal at the last reflection and ``last_hit_idx`` the node index of
    the last triangle hit (``None`` before the first hit).
    """

    pos: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    pol: Vec3 = field(default_factory=Vec3)
    dist: float = 1e36
    ref_normal: Vec3 = field(default_factory=Vec3)
    ref_count: int = 0
    last_hit_idx: Optional[int] = None

    def collide_box(self, box: BoundBox) -> Optional[float]:
        """Slab test against ``box``.

        Returns the entry distance when the ray hits the box (negative when
        the ray starts inside it), otherwise ``None``.
        """
        t_min = -math.inf
        t_max = math.inf
        first = True
        for lo, hi, p, d in zip(box.lower, box.upper, self.pos, self.direction):
            t0 = _div(lo - p, d)
            t1 = _div(hi - p, d)
            if first:
                t_min = _min(t0, t1)
                t_max = _max(t0, t1)
                first = False
            else:
                t_min = _max(t_min, _min(t0, t1))
                t_max = _min(t_max, _max(t0, t1))
        if t_max >= _max(t_min, 0.0):
            return t_min
        return None

    def _moller_trumbore(self, trig: Triangle) -> Optional[float]:
        edge1 = trig.v2 - trig.v1
        edge2 = trig.v3 - trig.v1
        perp = cross(self.direction, edge2)
        det = dot(edge1, perp)
        if -_EPS < det < _EPS:
            return None
        inv_det = 1.0 / det
        to_pos = self.pos - trig.v1
        u = inv_det * dot(to_pos, perp)
        if u < 0.0 or u > 1.0:
            return None
        q = cross(to_pos, edge1)
        v = inv_det * dot(self.direction, q)
        if v < 0.0 or u + v > 1.0:
            return None
        t = inv_det * dot(edge2, q)
        if t > _EPS:
            return t
        return None

    def collide_triangle(self, trig: Triangle) -> Optional[float]:
        """Distance along the ray to ``trig``, or ``None`` when it is missed."""
        return self._moller_trumbore(trig)

    def collide_triangle_sbr(self, trig: Triangle) -> Optional[tuple[float, Vec3]]:
        """Distance and hit point on ``trig``, or ``None`` when it is missed."""
        t = self._moller_trumbore(trig)
        if t is None:
            return None
        return t, self.pos + self.direction * t