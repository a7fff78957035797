## cubic Bezier curves and bicubic Bezier patches for splinekit
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

"""Cubic Bezier curves and bicubic Bezier patches.

Curves are defined by four ``Vector3`` control points and evaluated
with the Bernstein blend ::

  B(t) = p0 (1-t)^3 + 3 p1 t (1-t)^2 + 3 p2 t^2 (1-t) + p3 t^3

The curve passes through ``p0`` at ``t=0`` and ``p3`` at ``t=1``.
Parameters outside ``[0, 1]`` are not checked and extrapolate.

A patch is a flat, row-major buffer of sixteen control points.
"""

from splinekit.errors import InvalidArgument
from splinekit.vector import Vector3


def calc_point_on_curve(t, p0, p1, p2, p3):
    """Return the point at parameter ``t`` on the curve ``p0..p3``."""

    s = 1.0 - t
    b0 = s * s * s
    b1 = 3.0 * t * s * s
    b2 = 3.0 * t * t * s
    b3 = t * t * t

    return Vector3(b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
                   b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
                   b0 * p0.z + b1 * p1.z + b2 * p2.z + b3 * p3.z)


def calc_point_on_patch(u, v, buffer):
    """Return the point at ``(u, v)`` on a bicubic Bezier patch.

    Each of the four rows of ``buffer`` is evaluated at ``u``, and the
    four resulting points are blended at ``v``.
    """

    if len(buffer) != 16:
        raise InvalidArgument('bezier patch needs 16 control points, got {}'.format(len(buffer)))
    b = buffer
    p0 = calc_point_on_curve(u, b[0], b[1], b[2], b[3])
    p1 = calc_point_on_curve(u, b[4], b[5], b[6], b[7])
    p2 = calc_point_on_curve(u, b[8], b[9], b[10], b[11])
    p3 = calc_point_on_curve(u, b[12], b[13], b[14], b[15])

    return calc_point_on_curve(v, p0, p1, p2, p3)
