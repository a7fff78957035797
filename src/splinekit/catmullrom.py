## uniform Catmull-Rom splines and patches for splinekit
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

"""Uniform Catmull-Rom splines.

A segment is defined by four control points ``p0..p3``; the parameter
``t`` in ``[0, 1]`` spans ``p1`` to ``p2``, and the outer points only
shape the tangents.  The curve interpolates ``p1`` at ``t=0`` and
``p2`` at ``t=1``.

Two ways of sampling a surface are provided:

- ``calc_point_on_patch(u, v, buffer)`` evaluates a 16 point patch
  directly (four row curves at ``u``, then one curve at ``v``).

- For heightfields, ``set_spline_matrix()`` pulls a 4x4 block out of a
  larger height grid once and returns a :class:`CatmullRomQuad`;
  ``calc_quad(quad, u, v)`` then evaluates a height with two short dot
  products.  The quad is owned by the caller, so any number of quads
  can be live at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from splinekit.errors import InvalidArgument, PreconditionViolation
from splinekit.vector import Vector3, Vector4
from splinekit.xform import Matrix4x4

## blends per-row coefficient vectors across the four rows
BASIS = Matrix4x4(Vector4(0.0, 1.0, 0.0, 0.0),
                  Vector4(-0.5, 0.0, 0.5, 0.0),
                  Vector4(1.0, -2.5, 2.0, -0.5),
                  Vector4(-0.5, 1.5, -1.5, 0.5))


def calc_point_on_spline(t, p0, p1, p2, p3):
    """Return the point at ``t`` on the segment between ``p1`` and ``p2``."""

    t2 = t * t
    t3 = t2 * t

    def _axis(a, b, c, d):
        return 0.5 * ((2.0 * b) + (-a + c) * t +
                      (2.0 * a - 5.0 * b + 4.0 * c - d) * t2 +
                      (-a + 3.0 * b - 3.0 * c + d) * t3)

    return Vector3(_axis(p0.x, p1.x, p2.x, p3.x),
                   _axis(p0.y, p1.y, p2.y, p3.y),
                   _axis(p0.z, p1.z, p2.z, p3.z))


def calc_point_on_patch(u, v, buffer):
    """Return the point at ``(u, v)`` on a bicubic Catmull-Rom patch.

    The result lies within the middle quad of the sixteen points,
    ``buffer[5], buffer[6], buffer[9], buffer[10]``.
    """

    if len(buffer) != 16:
        raise InvalidArgument('catmull-rom patch needs 16 control points, got {}'.format(len(buffer)))
    b = buffer
    p0 = calc_point_on_spline(u, b[0], b[1], b[2], b[3])
    p1 = calc_point_on_spline(u, b[4], b[5], b[6], b[7])
    p2 = calc_point_on_spline(u, b[8], b[9], b[10], b[11])
    p3 = calc_point_on_spline(u, b[12], b[13], b[14], b[15])

    return calc_point_on_spline(v, p0, p1, p2, p3)


def precalc_catmullrom(p1, p2, p3, p4):
    """Collapse four scalar control values into the polynomial
    coefficients ``(c0, c1, c2, c3)`` of ``c0 + c1 t + c2 t^2 + c3 t^3``."""

    return Vector4(p2,
                   (p3 - p1) * 0.5,
                   p1 - 2.5 * p2 + 2.0 * p3 - 0.5 * p4,
                   -0.5 * p1 + 1.5 * p2 - 1.5 * p3 + 0.5 * p4)


@dataclass(frozen=True)
class CatmullRomQuad:
    """Precomputed spline matrix for one heightfield quad.

    The sixteen entries are kept as a tuple; ``matrix`` returns a
    fresh :class:`Matrix4x4` copy of them.
    """

    elements: tuple = field(repr=False)
    xi: int = 0
    zi: int = 0

    @property
    def matrix(self):
        return Matrix4x4(list(self.elements))

    def calc(self, u, v):
        return calc_quad(self, u, v)


def set_spline_matrix(xi, zi, heights, size):
    """Precompute the quad whose 4x4 control block starts at column
    ``xi``, row ``zi`` of the flat height grid ``heights``.

    ``size`` is the row stride of the grid.  The returned
    :class:`CatmullRomQuad` spans the middle cell of the block, between
    columns ``xi+1..xi+2`` and rows ``zi+1..zi+2``.
    """

    if size < 4 or xi < 0 or zi < 0 or xi + 3 >= size:
        raise InvalidArgument('quad ({},{}) does not fit a grid of width {}'.format(xi, zi, size))
    if (zi + 3) * size + xi + 3 >= len(heights):
        raise InvalidArgument('quad ({},{}) runs off the end of a {} element grid'.format(
            xi, zi, len(heights)))

    rows = []
    for r in range(4):
        index = (zi + r) * size + xi
        rows.append(precalc_catmullrom(float(heights[index]),
                                       float(heights[index + 1]),
                                       float(heights[index + 2]),
                                       float(heights[index + 3])))

    return CatmullRomQuad(tuple((BASIS * Matrix4x4(*rows)).i), xi, zi)


def calc_quad(quad, u, v):
    """Return the height at ``(u, v)`` of a precomputed quad.

    ``u`` runs along a grid row, ``v`` across rows.  Evaluates
    ``[1,v,v^2,v^3] * M . [1,u,u^2,u^3]``.
    """

    if not isinstance(quad, CatmullRomQuad):
        raise PreconditionViolation('calc_quad() needs the quad returned by set_spline_matrix()')

    m = quad.elements
    v2 = v * v
    v3 = v2 * v
    u2 = u * u
    u3 = u2 * u
    c0 = m[0] + v * m[4] + v2 * m[8] + v3 * m[12]
    c1 = m[1] + v * m[5] + v2 * m[9] + v3 * m[13]
    c2 = m[2] + v * m[6] + v2 * m[10] + v3 * m[14]
    c3 = m[3] + v * m[7] + v2 * m[11] + v3 * m[15]
    return c0 + c1 * u + c2 * u2 + c3 * u3
