import pytest

from splinekit.bspline import (
    KnotType,
    basis,
    calc_point_on_bicubic_patch,
    calc_point_on_bspline,
    calc_point_on_cubic_bspline,
    make_knot_vector,
)
from splinekit.cubic_bspline import calc_height_on_cubic_bspline
from splinekit.errors import InvalidArgument
from splinekit.vector import Vector3, close

PTS = [Vector3(0, 0, 0), Vector3(1, 3, 0), Vector3(3, -1, 1),
       Vector3(4, 2, 2), Vector3(6, 0, -1), Vector3(7, 5, 0)]


def test_open_knots():
    assert make_knot_vector(4, 4, KnotType.OPEN_NORMALIZED) == (0, 0, 0, 0, 1, 1, 1, 1)
    assert make_knot_vector(6, 4, KnotType.OPEN_NOT_NORMALIZED) == \
        (0, 0, 0, 0, 1, 2, 3, 3, 3, 3)
    knots = make_knot_vector(6, 4, KnotType.OPEN_NORMALIZED)
    assert len(knots) == 10
    assert knots[:4] == (0, 0, 0, 0)
    assert knots[6:] == (1, 1, 1, 1)
    assert close(knots[4], 1.0 / 3) and close(knots[5], 2.0 / 3)


def test_periodic_knots():
    assert make_knot_vector(4, 2, KnotType.PERIODIC_NOT_NORMALIZED) == (0, 1, 2, 3, 4, 5)
    knots = make_knot_vector(5, 3, KnotType.PERIODIC_NORMALIZED)
    assert len(knots) == 8
    for a, b in zip(knots, knots[1:]):
        assert close(b - a, 1.0 / 3)


def test_knots_accept_enum_values():
    assert make_knot_vector(4, 4, 0) == make_knot_vector(4, 4, KnotType.OPEN_NORMALIZED)
    with pytest.raises(ValueError):
        make_knot_vector(4, 4, 7)


def test_basis_partition_of_unity():
    for knot_type in (KnotType.OPEN_NORMALIZED, KnotType.OPEN_NOT_NORMALIZED):
        knots = make_knot_vector(6, 4, knot_type)
        end = knots[-1]
        for step in range(11):
            t = end * step / 10.0
            total = sum(basis(t, i, 4, knots) for i in range(6))
            assert close(total, 1.0)


def test_basis_order_one():
    knots = (0.0, 1.0, 2.0, 3.0)
    assert basis(0.5, 0, 1, knots) == 1.0
    assert basis(1.0, 0, 1, knots) == 0.0
    assert basis(1.0, 1, 1, knots) == 1.0
    ## the final knot belongs to the last span
    assert basis(3.0, 2, 1, knots) == 1.0


def test_basis_repeated_knots():
    knots = (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    ## zero-width spans are dropped rather than dividing by zero
    assert close(basis(0.0, 0, 3, knots), 1.0)
    assert close(basis(0.5, 1, 3, knots), 0.5)


def test_open_endpoints():
    for n in range(4, 7):
        pts = PTS[:n]
        assert calc_point_on_cubic_bspline(0.0, pts).equal_to(pts[0])
        assert calc_point_on_cubic_bspline(1.0, pts).equal_to(pts[-1])
    end = calc_point_on_cubic_bspline(3.0, PTS, KnotType.OPEN_NOT_NORMALIZED)
    assert end.equal_to(PTS[-1])


def test_bezier_equivalence():
    ## four points with clamped knots make a cubic Bezier
    p = PTS[:4]
    t = 0.5
    expected = p[0] * 0.125 + p[1] * 0.375 + p[2] * 0.375 + p[3] * 0.125
    assert calc_point_on_bspline(t, 4, p).equal_to(expected)


def test_order_two_is_polyline():
    pts = [Vector3(0, 0, 0), Vector3(2, 2, 0), Vector3(4, 0, 0)]
    assert calc_point_on_bspline(0.25, 2, pts).equal_to(Vector3(1, 1, 0))
    assert calc_point_on_bspline(0.5, 2, pts).equal_to(Vector3(2, 2, 0))


def test_periodic_matches_uniform_cubic():
    ## on integer periodic knots a segment is the uniform cubic B-spline
    h = [2.0, -1.0, 4.0, 3.0]
    pts = [Vector3(0, y, 0) for y in h]
    for u in (0.0, 0.3, 0.7):
        p = calc_point_on_cubic_bspline(3.0 + u, pts, KnotType.PERIODIC_NOT_NORMALIZED)
        assert close(p.y, calc_height_on_cubic_bspline(u, *h))


def test_num_pts():
    p = calc_point_on_bspline(1.0, 4, PTS, num_pts=4)
    assert p.equal_to(PTS[3])
    with pytest.raises(InvalidArgument):
        calc_point_on_bspline(0.5, 4, PTS, num_pts=7)


def test_bad_order():
    for k in (1, 7):
        with pytest.raises(InvalidArgument):
            calc_point_on_bspline(0.5, k, PTS)
    with pytest.raises(InvalidArgument):
        calc_point_on_cubic_bspline(0.5, PTS[:3])


def test_bicubic_patch():
    width, height = 5, 4
    pts = [Vector3(x, x * z, z) for z in range(height) for x in range(width)]
    assert calc_point_on_bicubic_patch(0, 0, pts, width, height).equal_to(pts[0])
    assert calc_point_on_bicubic_patch(1, 1, pts, width, height).equal_to(pts[-1])
    assert calc_point_on_bicubic_patch(1, 0, pts, width, height).equal_to(pts[width - 1])
    p = calc_point_on_bicubic_patch(0.5, 0.5, pts, width, height)
    assert close(p.x, 2.0) and close(p.z, 1.5)
    with pytest.raises(InvalidArgument):
        calc_point_on_bicubic_patch(0.5, 0.5, pts[:-1], width, height)
