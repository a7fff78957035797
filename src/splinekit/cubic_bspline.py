## uniform cubic B-spline heightfield evaluation for splinekit
## Copyright (c) 2026 splinekit contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Uniform cubic B-splines over scalar heights.

The basis functions are ::

  x(t) = h0 (1-3t+3t^2-t^3)/6 + h1 (4-6t^2+3t^3)/6
       + h2 (1+3t+3t^2-3t^3)/6 + h3 t^3/6

Three interchangeable strategies evaluate heights, tangents (first
derivative) and concavity (second derivative), trading setup work for
per-sample cost:

- *direct*: ``calc_height_on_cubic_bspline`` and friends evaluate the
  closed form on every call.  ``calc_height_on_patch`` runs it over a
  16 height patch.

- *1D precompute*: ``precalc_spline``, ``precalc_tangent`` and
  ``precalc_concavity`` collapse four heights into a coefficient
  vector once; ``get_precalc_height(coeffs, t)`` etc. are then a short
  dot product with ``[1, t, t^2, t^3]``.

- *2D matrix precompute*: ``precalc_middle_matrix`` blends a whole
  patch into ``basis * P * basis^T`` once and returns a
  :class:`BSplinePatch`.  Heights, normals and concavity at any
  ``(u, v)`` are then two dot products each.

In a 16 height patch buffer ``u`` runs along a row and ``v`` across
rows.  All three strategies agree to floating point tolerance.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from splinekit.errors import InvalidArgument, PreconditionViolation
from splinekit.vector import Vector2, Vector3, Vector4, epsilon
from splinekit.xform import Matrix4x4

ONE_SIXTH = 1.0 / 6.0

BASIS = Matrix4x4(Vector4(1.0, 4.0, 1.0, 0.0) / 6.0,
                  Vector4(-3.0, 0.0, 3.0, 0.0) / 6.0,
                  Vector4(3.0, -6.0, 3.0, 0.0) / 6.0,
                  Vector4(-1.0, 3.0, -3.0, 1.0) / 6.0)

BASIS_T = BASIS.get_transpose()


def _check_patch(hbuffer):
    if len(hbuffer) != 16:
        raise InvalidArgument('cubic b-spline patch needs 16 heights, got {}'.format(len(hbuffer)))


## direct form
## -----------

def calc_height_on_cubic_bspline(t, h0, h1, h2, h3):
    t2 = t * t
    t3 = t2 * t
    return (h0 * ONE_SIXTH * (1.0 - 3.0 * t + 3.0 * t2 - t3) +
            h1 * ONE_SIXTH * (4.0 - 6.0 * t2 + 3.0 * t3) +
            h2 * ONE_SIXTH * (1.0 + 3.0 * t + 3.0 * t2 - 3.0 * t3) +
            h3 * ONE_SIXTH * t3)


def get_tangent_on_cubic_bspline(t, h0, h1, h2, h3):
    """first derivative of the curve at ``t``"""
    t2 = t * t
    return (h0 * ONE_SIXTH * (-3.0 + 6.0 * t - 3.0 * t2) +
            h1 * ONE_SIXTH * (-12.0 * t + 9.0 * t2) +
            h2 * ONE_SIXTH * (3.0 + 6.0 * t - 9.0 * t2) +
            h3 * ONE_SIXTH * (3.0 * t2))


def get_concavity_on_cubic_bspline(t, h0, h1, h2, h3):
    """second derivative of the curve at ``t``"""
    return (h0 * ONE_SIXTH * (6.0 - 6.0 * t) +
            h1 * ONE_SIXTH * (-12.0 + 18.0 * t) +
            h2 * ONE_SIXTH * (6.0 - 18.0 * t) +
            h3 * ONE_SIXTH * (6.0 * t))


def calc_height_on_patch(u, v, hbuffer):
    """Height at ``(u, v)`` on a 16 height patch, direct form.

    A parameter within ``epsilon`` of 1.0 is evaluated as 0.0 on the
    reversed control points, which is the same point.
    """

    _check_patch(hbuffer)
    h = hbuffer

    if abs(u - 1.0) <= epsilon:
        rows = [calc_height_on_cubic_bspline(0.0, h[r + 3], h[r + 2], h[r + 1], h[r])
                for r in (0, 4, 8, 12)]
    else:
        rows = [calc_height_on_cubic_bspline(u, h[r], h[r + 1], h[r + 2], h[r + 3])
                for r in (0, 4, 8, 12)]

    if abs(v - 1.0) <= epsilon:
        return calc_height_on_cubic_bspline(0.0, rows[3], rows[2], rows[1], rows[0])
    return calc_height_on_cubic_bspline(v, rows[0], rows[1], rows[2], rows[3])


## 1D precompute
## -------------

def precalc_spline(pts):
    """coefficients of the height polynomial for four control heights"""
    p1, p2, p3, p4 = pts
    return Vector4(p1 + 4.0 * p2 + p3,
                   -3.0 * p1 + 3.0 * p3,
                   3.0 * p1 - 6.0 * p2 + 3.0 * p3,
                   -p1 + 3.0 * p2 - 3.0 * p3 + p4) * ONE_SIXTH


def precalc_tangent(pts):
    """coefficients of the first derivative polynomial"""
    p1, p2, p3, p4 = pts
    return Vector3(-3.0 * p1 + 3.0 * p3,
                   6.0 * p1 - 12.0 * p2 + 6.0 * p3,
                   -3.0 * p1 + 9.0 * p2 - 9.0 * p3 + 3.0 * p4) * ONE_SIXTH


def precalc_concavity(pts):
    """coefficients of the second derivative polynomial"""
    p1, p2, p3, p4 = pts
    return Vector2(6.0 * p1 - 12.0 * p2 + 6.0 * p3,
                   -6.0 * p1 + 18.0 * p2 - 18.0 * p3 + 6.0 * p4) * ONE_SIXTH


def get_precalc_height(coeffs, t):
    return coeffs.x + t * (coeffs.y + t * (coeffs.z + t * coeffs.w))


def get_precalc_tangent(coeffs, t):
    return coeffs.x + t * (coeffs.y + t * coeffs.z)


def get_precalc_concavity(coeffs, t):
    return coeffs.x + t * coeffs.y


def calc_height_on_patch_precalc(u, v, hbuffer):
    """Height at ``(u, v)`` on a 16 height patch, 1D precompute form."""

    _check_patch(hbuffer)
    h = hbuffer
    col = [get_precalc_height(precalc_spline((h[r], h[r + 1], h[r + 2], h[r + 3])), u)
           for r in (0, 4, 8, 12)]
    return get_precalc_height(precalc_spline(col), v)


## 2D matrix precompute
## --------------------

@dataclass(frozen=True)
class BSplinePatch:
    """A precomputed middle matrix plus the grid spacing used to scale
    normals and concavity.

    ``elements`` holds the sixteen matrix entries, row-major.  The
    ``matrix`` property hands out a fresh :class:`Matrix4x4` copy, so
    patches made by ``with_spacing()`` never share mutable state.
    ``h_spacing`` is the horizontal distance between control points
    and ``v_spacing`` the vertical scale applied to heights.
    """

    elements: tuple = field(repr=False)
    h_spacing: float = 1.0
    v_spacing: float = 1.0

    @classmethod
    def from_matrix(cls, m, h_spacing=1.0, v_spacing=1.0):
        """wrap a middle matrix computed elsewhere"""
        return cls(tuple(float(e) for e in m.i), float(h_spacing), float(v_spacing))

    @property
    def matrix(self):
        return Matrix4x4(list(self.elements))

    @property
    def inv_v_spacing(self):
        return 0.0 if self.v_spacing == 0 else 1.0 / self.v_spacing

    def with_spacing(self, h_spacing, v_spacing):
        return replace(self, h_spacing=float(h_spacing), v_spacing=float(v_spacing))

    def height(self, u, v):
        return calc_height_on_patch_matrix(self, u, v)

    def normal(self, u, v):
        return calc_normal_on_patch_matrix(self, u, v)

    def concavity(self, u, v):
        return calc_concavity_on_patch_matrix(self, u, v)


def precalc_middle_matrix(hbuffer, h_spacing=1.0, v_spacing=1.0):
    """Blend a 16 height patch (row-major 11,12,13,14,21,...,44) into
    ``basis * P * basis^T`` and return it as a :class:`BSplinePatch`."""

    _check_patch(hbuffer)
    points = Matrix4x4([float(h) for h in hbuffer])
    middle = BASIS * points
    middle *= BASIS_T
    return BSplinePatch(tuple(middle.i), float(h_spacing), float(v_spacing))


def _middle(patch):
    if not isinstance(patch, BSplinePatch):
        raise PreconditionViolation(
            'matrix-form sampling needs the patch returned by precalc_middle_matrix()')
    return patch.elements


## row vector (a0,a1,a2,a3) times the middle matrix, dotted with
## (b0,b1,b2,b3)
def _blend(m, a0, a1, a2, a3, b0, b1, b2, b3):
    return (b0 * (a0 * m[0] + a1 * m[4] + a2 * m[8] + a3 * m[12]) +
            b1 * (a0 * m[1] + a1 * m[5] + a2 * m[9] + a3 * m[13]) +
            b2 * (a0 * m[2] + a1 * m[6] + a2 * m[10] + a3 * m[14]) +
            b3 * (a0 * m[3] + a1 * m[7] + a2 * m[11] + a3 * m[15]))


def calc_height_on_patch_matrix(patch, u, v):
    m = _middle(patch)
    return _blend(m, 1.0, v, v * v, v * v * v, 1.0, u, u * u, u * u * u)


def calc_normal_on_patch_matrix(patch, u, v):
    """Unit surface normal at ``(u, v)``, +y up.

    The tangents along ``u`` (the x axis) and ``v`` (the z axis) are
    ``(h, dh/du * vs, 0)`` and ``(0, dh/dv * vs, h)`` with ``h`` and
    ``vs`` the patch spacing.  The slope is multiplied by ``vs`` (heights
    are scaled, not offset) and the cross product is taken as
    ``tangent_v x tangent_u`` so that a flat patch gives ``(0, 1, 0)``;
    reversing the operands turns every normal downwards.
    """

    m = _middle(patch)
    dv = _blend(m, 0.0, 1.0, 2.0 * v, 3.0 * v * v, 1.0, u, u * u, u * u * u)
    du = _blend(m, 1.0, v, v * v, v * v * v, 0.0, 1.0, 2.0 * u, 3.0 * u * u)

    h = patch.h_spacing
    tangent_v = Vector3(0.0, dv * patch.v_spacing, h)
    tangent_u = Vector3(h, du * patch.v_spacing, 0.0)
    n = Vector3()
    n.unit_normal_of(tangent_v, tangent_u)
    return n


def calc_concavity_on_patch_matrix(patch, u, v):
    """The larger magnitude of the second partials along ``u`` and
    ``v``, divided by the vertical spacing.  Large values mark sharp
    ridges and valleys."""

    m = _middle(patch)
    inv = patch.inv_v_spacing
    along_v = abs(_blend(m, 0.0, 0.0, 2.0, 6.0 * v, 1.0, u, u * u, u * u * u) * inv)
    along_u = abs(_blend(m, 1.0, v, v * v, v * v * v, 0.0, 0.0, 2.0, 6.0 * u) * inv)
    return along_u if along_u > along_v else along_v
