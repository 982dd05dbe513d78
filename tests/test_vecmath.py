import math

import pytest

from sbrcs.vecmath import (
    cross,
    cts_to_sph,
    dot,
    length,
    line_normal,
    line_normal_p,
    line_normal_pl,
    orthonormal_r,
    orthonormal_set,
    orthonormalize,
    plane_normal,
    plane_normal_p,
    proj_line,
    proj_line_l,
    proj_plane,
    reflect,
    sph_to_cts,
    tetrahedron_volume,
    triangle_area,
    unit,
    vabs,
    vmax,
    vmin,
    vsum,
)
from sbrcs.vector import Vec3

A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-0.5, 4.0, 2.0)


def assert_vec_close(actual, expected, tol=1e-9):
    for a, e in zip(actual, expected):
        assert a == pytest.approx(e, abs=tol)


def test_vsum_matches_dot_with_ones():
    assert vsum(A) == pytest.approx(dot(A, Vec3(1.0, 1.0, 1.0)))


def test_vabs_is_non_negative_and_sign_blind():
    assert vabs(-A) == vabs(A)
    assert all(c >= 0 for c in vabs(A))


def test_dot_symmetric_and_consistent_with_length():
    assert dot(A, B) == pytest.approx(dot(B, A))
    assert dot(A, A) == pytest.approx(length(A) ** 2)


def test_cross_is_orthogonal_and_anticommutative():
    c = cross(A, B)
    assert dot(c, A) == pytest.approx(0.0, abs=1e-9)
    assert dot(c, B) == pytest.approx(0.0, abs=1e-9)
    assert_vec_close(cross(B, A), -c)
    assert cross(A, A) == Vec3(0.0, 0.0, 0.0)


def test_unit_has_length_one_and_same_direction():
    u = unit(A)
    assert length(u) == pytest.approx(1.0)
    assert_vec_close(cross(u, A), Vec3())


def test_unit_of_zero_vector_is_nan():
    result = unit(Vec3(0.0, 0.0, 0.0))
    assert [math.isnan(c) for c in result] == [True, True, True]


def test_vmin_vmax_partition_components():
    lo, hi = vmin(A, B), vmax(A, B)
    assert lo + hi == A + B
    assert all(l <= h for l, h in zip(lo, hi))


def test_reflect_is_involution_and_preserves_length():
    n = unit(Vec3(1.0, 1.0, 0.0))
    r = reflect(A, n)
    assert length(r) == pytest.approx(length(A))
    assert dot(r, n) == pytest.approx(-dot(A, n))
    assert_vec_close(reflect(r, n), A)


def test_spherical_round_trip():
    sph = cts_to_sph(A)
    assert sph[0] == pytest.approx(length(A))
    assert 0 <= sph[2] <= math.pi
    assert_vec_close(sph_to_cts(sph), A)


def test_cts_to_sph_on_z_axis_has_zero_azimuth():
    sph = cts_to_sph(Vec3(0.0, 0.0, 2.0))
    assert sph[1] == 0.0
    assert sph[2] == pytest.approx(0.0)


def test_orthonormal_set_is_orthonormal():
    p, t = 0.7, 1.1
    n, u, r = orthonormal_set(p, t)
    for v in (n, u, r):
        assert length(v) == pytest.approx(1.0)
    assert dot(n, u) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, r) == pytest.approx(0.0, abs=1e-12)
    assert dot(u, r) == pytest.approx(0.0, abs=1e-12)
    assert r[2] == 0.0
    assert_vec_close(n, sph_to_cts(Vec3(1.0, p, t)))
    assert_vec_close(u, cross(r, n))


def test_orthonormal_r_lies_in_xy_plane():
    r = orthonormal_r(A)
    assert r[2] == 0.0
    assert length(r) == pytest.approx(1.0)
    assert dot(r, Vec3(A[0], A[1], 0.0)) == pytest.approx(0.0, abs=1e-12)


def test_orthonormal_r_along_z_axis():
    assert_vec_close(orthonormal_r(Vec3(0.0, 0.0, 1.0)), Vec3(0.0, -1.0, 0.0))


def test_orthonormalize_produces_orthonormal_triple():
    n, u, r = orthonormalize(A, B, Vec3(0.3, 0.1, -2.0))
    for v in (n, u, r):
        assert length(v) == pytest.approx(1.0)
    assert dot(n, u) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, r) == pytest.approx(0.0, abs=1e-12)
    assert dot(u, r) == pytest.approx(0.0, abs=1e-12)
    assert_vec_close(n, unit(A))


def test_proj_line_lies_on_line_and_is_orthogonal():
    v1, v2 = Vec3(0.0, 1.0, 0.0), Vec3(2.0, 3.0, 1.0)
    p = proj_line(A, v1, v2)
    assert_vec_close(cross(p - v1, v2 - v1), Vec3())
    assert dot(A - p, v2 - v1) == pytest.approx(0.0, abs=1e-9)
    assert_vec_close(proj_line_l(A, v1, unit(v2 - v1)), p)


def test_line_normal_is_perpendicular_unit_in_xy_plane():
    v1, v2 = Vec3(0.0, 0.0, 0.0), Vec3(1.0, 2.0, 0.0)
    n = line_normal(v1, v2)
    assert length(n) == pytest.approx(1.0)
    assert dot(n, v2 - v1) == pytest.approx(0.0, abs=1e-12)
    assert n[2] == 0.0


def test_line_normal_p_points_toward_point():
    v1, v2 = Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 1.0)
    n = line_normal_p(A, v1, v2)
    assert length(n) == pytest.approx(1.0)
    assert dot(n, v2 - v1) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, A - v1) > 0
    assert_vec_close(line_normal_pl(A, v1, unit(v2 - v1)), n)


def test_line_normal_p_on_line_falls_back():
    v1, v2 = Vec3(0.0, 0.0, 0.0), Vec3(1.0, 2.0, 0.0)
    on_line = Vec3(0.5, 1.0, 0.0)
    assert_vec_close(line_normal_p(on_line, v1, v2), line_normal(v1, v2))


def test_proj_plane_lands_on_plane_and_is_idempotent():
    v1 = Vec3(1.0, 1.0, 1.0)
    n = unit(Vec3(1.0, -2.0, 0.5))
    p = proj_plane(A, v1, n)
    assert dot(p - v1, n) == pytest.approx(0.0, abs=1e-12)
    assert_vec_close(proj_plane(p, v1, n), p)


def test_plane_normal_perpendicular_to_edges():
    v1, v2, v3 = Vec3(0.0, 0.0, 0.0), A, B
    n = plane_normal(v1, v2, v3)
    assert length(n) == pytest.approx(1.0)
    assert dot(n, v2 - v1) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, v3 - v1) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("point", [Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -5.0)])
def test_plane_normal_p_faces_point(point):
    v1, v2, v3 = Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)
    n = plane_normal_p(point, v1, v2, v3)
    assert dot(n, point - v1) > 0


def test_triangle_area_value_and_scaling():
    v1, v2, v3 = Vec3(0.0, 0.0, 0.0), Vec3(2.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0)
    assert triangle_area(v1, v2, v3) == pytest.approx(2.0)
    assert triangle_area(A, B, v2) == pytest.approx(triangle_area(B, v2, A))
    assert triangle_area(A * 2, B * 2, v2 * 2) == pytest.approx(4 * triangle_area(A, B, v2))


def test_tetrahedron_volume_value_and_invariants():
    o = Vec3(0.0, 0.0, 0.0)
    x, y, z = Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)
    assert tetrahedron_volume(o, x, y, z) == pytest.approx(1 / 6)
    assert tetrahedron_volume(o, y, x, z) == pytest.approx(tetrahedron_volume(o, x, y, z))
    assert tetrahedron_volume(o, x * 2, y * 2, z * 2) == pytest.approx(
        8 * tetrahedron_volume(o, x, y, z)
    )