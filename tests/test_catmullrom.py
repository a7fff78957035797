import pytest

from splinekit.catmullrom import (
    BASIS,
    CatmullRomQuad,
    calc_point_on_patch,
    calc_point_on_spline,
    calc_quad,
    precalc_catmullrom,
    set_spline_matrix,
)
from splinekit.errors import InvalidArgument, PreconditionViolation
from splinekit.vector import Vector3, Vector4, close

HEIGHTS = [3, 1, 4, 1, 5,
           9, 2, 6, 5, 3,
           5, 8, 9, 7, 9,
           3, 2, 3, 8, 4,
           6, 2, 6, 4, 3]
SIZE = 5


def _patch_points(xi, zi):
    return [Vector3(x, HEIGHTS[z * SIZE + x], z)
            for z in range(zi, zi + 4) for x in range(xi, xi + 4)]


def test_spline_interpolates():
    p0, p1, p2, p3 = Vector3(0, 0, 0), Vector3(1, 2, 0), Vector3(3, -1, 2), Vector3(4, 4, 4)
    assert calc_point_on_spline(0.0, p0, p1, p2, p3).equal_to(p1)
    assert calc_point_on_spline(1.0, p0, p1, p2, p3).equal_to(p2)


def test_spline_tangent_symmetry():
    ## collinear, evenly spaced points give a straight, evenly paced segment
    pts = [Vector3(i, 2 * i, 0) for i in range(4)]
    p = calc_point_on_spline(0.5, *pts)
    assert p.equal_to(Vector3(1.5, 3.0, 0))


def test_precalc_coefficients():
    c = precalc_catmullrom(1.0, 2.0, 4.0, 8.0)
    assert c == Vector4(2.0, 1.5, 1.0 - 5.0 + 8.0 - 4.0, -0.5 + 3.0 - 6.0 + 4.0)
    for t in (0.0, 0.3, 1.0):
        h = c.x + c.y * t + c.z * t * t + c.w * t * t * t
        p = calc_point_on_spline(t, Vector3(0, 1, 0), Vector3(0, 2, 0),
                                 Vector3(0, 4, 0), Vector3(0, 8, 0))
        assert close(h, p.y)


def test_basis_first_row():
    assert BASIS.get_row(0) == Vector4(0, 1, 0, 0)


def test_quad_matches_patch():
    for zi in (0, 1):
        for xi in (0, 1):
            quad = set_spline_matrix(xi, zi, HEIGHTS, SIZE)
            buf = _patch_points(xi, zi)
            for u in (0.0, 0.2, 0.5, 0.9, 1.0):
                for v in (0.0, 0.4, 1.0):
                    assert close(calc_quad(quad, u, v), calc_point_on_patch(u, v, buf).y)


def test_quad_hits_control_heights():
    quad = set_spline_matrix(1, 1, HEIGHTS, SIZE)
    assert close(quad.calc(0, 0), HEIGHTS[2 * SIZE + 2])
    assert close(quad.calc(1, 0), HEIGHTS[2 * SIZE + 3])
    assert close(quad.calc(0, 1), HEIGHTS[3 * SIZE + 2])
    assert close(quad.calc(1, 1), HEIGHTS[3 * SIZE + 3])


def test_quads_are_independent():
    a = set_spline_matrix(0, 0, HEIGHTS, SIZE)
    b = set_spline_matrix(1, 1, HEIGHTS, SIZE)
    before = calc_quad(a, 0.5, 0.5)
    calc_quad(b, 0.5, 0.5)
    assert calc_quad(a, 0.5, 0.5) == before
    assert (a.xi, a.zi) == (0, 0)


def test_quad_bounds():
    with pytest.raises(InvalidArgument):
        set_spline_matrix(2, 0, HEIGHTS, SIZE)
    with pytest.raises(InvalidArgument):
        set_spline_matrix(0, 2, HEIGHTS, SIZE)
    with pytest.raises(InvalidArgument):
        set_spline_matrix(-1, 0, HEIGHTS, SIZE)


def test_quad_precondition():
    with pytest.raises(PreconditionViolation):
        calc_quad(None, 0.5, 0.5)
    with pytest.raises(PreconditionViolation):
        calc_quad(BASIS, 0.5, 0.5)
    assert isinstance(set_spline_matrix(0, 0, HEIGHTS, SIZE), CatmullRomQuad)


def test_patch_bad_buffer():
    with pytest.raises(InvalidArgument):
        calc_point_on_patch(0, 0, _patch_points(0, 0)[:12])


def test_quad_shares_no_state():
    quad = set_spline_matrix(1, 1, HEIGHTS, SIZE)
    before = quad.calc(0.5, 0.5)
    m = quad.matrix
    m *= BASIS
    m.i[0] = -100.0
    assert quad.calc(0.5, 0.5) == before
    assert quad == set_spline_matrix(1, 1, HEIGHTS, SIZE)
    assert hash(quad) == hash(set_spline_matrix(1, 1, HEIGHTS, SIZE))
