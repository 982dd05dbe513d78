"""Vector algebra and geometry helpers for :class:`Vec3`."""

from __future__ import annotations

import math

from sbrcs.vector import Scalar, Vec3

_NAN_VEC = Vec3(math.nan, math.nan, math.nan)


def vsum(vec: Vec3) -> Scalar:
    """Sum of the components."""
    return sum(vec)


def vabs(vec: Vec3) -> Vec3:
    """Component-wise absolute value."""
    return Vec3(*(abs(c) for c in vec))


def dot(lhs: Vec3, rhs: Vec3) -> Scalar:
    """Plain (non-conjugating) dot product."""
    return sum(a * b for a, b in zip(lhs, rhs))


def cross(lhs: Vec3, rhs: Vec3) -> Vec3:
    """Cross product ``lhs x rhs``."""
    return Vec3(
        lhs[1] * rhs[2] - lhs[2] * rhs[1],
        lhs[2] * rhs[0] - lhs[0] * rhs[2],
        lhs[0] * rhs[1] - lhs[1] * rhs[0],
    )


def length(vec: Vec3) -> float:
    """Euclidean norm of a real vector."""
    return math.sqrt(dot(vec, vec))


def unit(vec: Vec3) -> Vec3:
    """The vector scaled to unit length.

    A zero vector has no direction; like IEEE division it yields NaN components.
    """
    norm = length(vec)
    if norm == 0:
        return _NAN_VEC
    return vec / norm


def vmin(lhs: Vec3, rhs: Vec3) -> Vec3:
    """Component-wise minimum."""
    return Vec3(*(a if a < b else b for a, b in zip(lhs, rhs)))


def vmax(lhs: Vec3, rhs: Vec3) -> Vec3:
    """Component-wise maximum."""
    return Vec3(*(a if a > b else b for a, b in zip(lhs, rhs)))


def reflect(vec: Vec3, normal: Vec3) -> Vec3:
    """Mirror ``vec`` about the plane with unit ``normal``."""
    return vec - normal * dot(vec, normal) * 2


def cts_to_sph(cts: Vec3) -> Vec3:
    """Cartesian to spherical ``(r, phi, theta)`` in the physics convention."""
    norm = length(cts)
    phi = 0.0 if cts[0] == 0 and cts[1] == 0 else math.atan2(cts[1], cts[0])
    if norm == 0:
        theta = math.nan
    else:
        theta = math.acos(max(-1.0, min(1.0, cts[2] / norm)))
    return Vec3(norm, phi, theta)


def sph_to_cts(sph: Vec3) -> Vec3:
    """Spherical ``(r, phi, theta)`` to Cartesian."""
    planar = sph[0] * math.sin(sph[2])
    return Vec3(planar * math.cos(sph[1]), planar * math.sin(sph[1]), sph[0] * math.cos(sph[2]))


def orthonormal_set(ang_p: float, ang_t: float) -> tuple[Vec3, Vec3, Vec3]:
    """Return ``(dir_n, dir_u, dir_r)`` for looking out of a sphere at the given angles.

    ``dir_n`` points outward, ``dir_r`` lies in the XY plane and
    ``dir_u = dir_r x dir_n``.
    """
    cp, sp = math.cos(ang_p), math.sin(ang_p)
    ct, st = math.cos(ang_t), math.sin(ang_t)
    dir_n = Vec3(st * cp, st * sp, ct)
    dir_r = Vec3(sp, -cp, 0.0)
    dir_u = cross(dir_r, dir_n)
    return dir_n, dir_u, dir_r


def orthonormal_r(dir_n: Vec3) -> Vec3:
    """Unit vector in the XY plane, to the right of ``dir_n``'s azimuth."""
    ang = 0.0 if dir_n[0] == 0 and dir_n[1] == 0 else math.atan2(dir_n[1], dir_n[0])
    return Vec3(math.sin(ang), -math.cos(ang), 0.0)


def orthonormalize(dir_n: Vec3, dir_u: Vec3, dir_r: Vec3) -> tuple[Vec3, Vec3, Vec3]:
    """Gram-Schmidt the triple so that it is exactly orthonormal, keeping ``dir_n``'s direction."""
    dir_n = unit(dir_n)
    dir_u = unit(dir_u)
    dir_r = unit(dir_r)
    dir_u = unit(dir_u - dot(dir_u, dir_n) * dir_n)
    dir_r = unit(dir_r - dot(dir_r, dir_n) * dir_n)
    dir_r = unit(dir_r - dot(dir_r, dir_u) * dir_u)
    return dir_n, dir_u, dir_r


def proj_line(vec: Vec3, v1: Vec3, v2: Vec3) -> Vec3:
    """Project ``vec`` onto the line through ``v1`` and ``v2``."""
    v12 = unit(v2 - v1)
    return v1 + dot(v12, vec - v1) * v12


def proj_line_l(vec: Vec3, v1: Vec3, line_dir: Vec3) -> Vec3:
    """Project ``vec`` onto the line through ``v1`` with unit direction ``line_dir``."""
    return v1 + dot(line_dir, vec - v1) * line_dir


def line_normal(v1: Vec3, v2: Vec3) -> Vec3:
    """A unit normal of the line through ``v1`` and ``v2``, lying in the XY plane."""
    return orthonormal_r(unit(v2 - v1))


def line_normal_p(vec: Vec3, v1: Vec3, v2: Vec3) -> Vec3:
    """Unit normal of the line through ``v1``, ``v2`` pointing towards ``vec``."""
    return line_normal_pl(vec, v1, unit(v2 - v1))


def line_normal_pl(vec: Vec3, v1: Vec3, line_dir: Vec3) -> Vec3:
    """Unit normal of the line ``(v1, line_dir)`` pointing towards ``vec``.

    When ``vec`` lies on the line, an XY-plane normal is returned instead.
    """
    ort = vec - proj_line_l(vec, v1, line_dir)
    norm = length(ort)
    return ort / norm if norm > 0 else orthonormal_r(line_dir)


def proj_plane(vec: Vec3, v1: Vec3, n: Vec3) -> Vec3:
    """Project ``vec`` onto the plane through ``v1`` with unit normal ``n``."""
    return vec - dot(vec - v1, n) * n


def plane_normal(v1: Vec3, v2: Vec3, v3: Vec3) -> Vec3:
    """Unit normal of the plane through three points, by right-hand winding."""
    return unit(cross(v2 - v1, v3 - v1))


def plane_normal_p(vec: Vec3, v1: Vec3, v2: Vec3, v3: Vec3) -> Vec3:
    """Unit plane normal oriented towards the side containing ``vec``."""
    n = plane_normal(v1, v2, v3)
    return n if dot(n, vec - v1) > 0 else -n


def triangle_area(v1: Vec3, v2: Vec3, v3: Vec3) -> float:
    """Area of a triangle."""
    return length(cross(v2 - v1, v3 - v1)) / 2.0


def tetrahedron_volume(v1: Vec3, v2: Vec3, v3: Vec3, v4: Vec3) -> float:
    """Volume of a tetrahedron."""
    return abs(dot(cross(v2 - v1, v3 - v1), v4 - v1)) / 6.0