## general B-spline curves and bicubic patches for splinekit
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

"""B-splines of any order, evaluated with the Cox-de Boor recursion.

``k`` is the order (degree + 1), so ``k=4`` is a cubic.  Knot vectors
are built from one of four :class:`KnotType` policies:

- open (clamped) knots repeat the first and last value ``k`` times, so
  the curve starts on the first control point and ends on the last;
- periodic knots are evenly spaced and the curve only approaches its
  end points.

Normalized vectors run from 0 to 1, the others step by whole numbers.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from splinekit.errors import InvalidArgument
from splinekit.vector import Vector3


class KnotType(Enum):
    OPEN_NORMALIZED = 0
    OPEN_NOT_NORMALIZED = 1
    PERIODIC_NORMALIZED = 2
    PERIODIC_NOT_NORMALIZED = 3


def make_knot_vector(num_pts: int, k: int, knot_type: KnotType) -> tuple:
    """Build the ``num_pts + k`` entry knot vector for ``num_pts``
    control points of order ``k``."""

    if not 2 <= k <= num_pts:
        raise InvalidArgument('b-spline order {} must be in [2, {}]'.format(k, num_pts))
    knot_type = KnotType(knot_type)

    count = num_pts + k
    segments = num_pts - k + 1
    normalized = knot_type in (KnotType.OPEN_NORMALIZED, KnotType.PERIODIC_NORMALIZED)
    step = 1.0 / segments if normalized else 1.0

    if knot_type in (KnotType.PERIODIC_NORMALIZED, KnotType.PERIODIC_NOT_NORMALIZED):
        return tuple(s * step for s in range(count))

    knots = []
    value = 0.0
    for c in range(count):
        knots.append(value)
        if k - 1 <= c < num_pts:
            value += step
    ## pin the clamped end exactly, float steps can drift below 1.0
    if normalized:
        knots[num_pts:] = [1.0] * k
    return tuple(knots)


def basis(t: float, i: int, k: int, knots: Sequence[float]) -> float:
    """Value of the ``i``-th basis function of order ``k`` at ``t``.

    Terms with a zero knot span are dropped.  At ``t`` equal to the
    final knot the last non-empty span counts as containing ``t``.
    """

    if k == 1:
        if knots[i] <= t < knots[i + 1]:
            return 1.0
        if t == knots[-1] and knots[i] < knots[i + 1] == knots[-1]:
            return 1.0
        return 0.0

    left = 0.0
    denom = knots[i + k - 1] - knots[i]
    if denom != 0.0:
        left = (t - knots[i]) * basis(t, i, k - 1, knots) / denom

    right = 0.0
    denom = knots[i + k] - knots[i + 1]
    if denom != 0.0:
        right = (knots[i + k] - t) * basis(t, i + 1, k - 1, knots) / denom

    return left + right


def calc_point_on_bspline(t, k, pts, knot_type=KnotType.OPEN_NORMALIZED, num_pts=None):
    """Point at ``t`` on the order ``k`` B-spline through the first
    ``num_pts`` points of ``pts`` (all of them by default)."""

    if num_pts is None:
        num_pts = len(pts)
    elif num_pts > len(pts):
        raise InvalidArgument('{} control points requested, {} given'.format(num_pts, len(pts)))

    knots = make_knot_vector(num_pts, k, knot_type)
    result = Vector3()
    for i in range(num_pts):
        n = basis(t, i, k, knots)
        if n != 0.0:
            result += pts[i] * n
    return result


def calc_point_on_cubic_bspline(t, pts, knot_type=KnotType.OPEN_NORMALIZED, num_pts=None):
    return calc_point_on_bspline(t, 4, pts, knot_type, num_pts)


def calc_point_on_bicubic_patch(u, v, pts, width, height, knot_type=KnotType.OPEN_NORMALIZED):
    """Point at ``(u, v)`` on a tensor product cubic B-spline surface.

    ``pts`` is a flat row-major grid of ``width * height`` points; each
    row is evaluated at ``u`` and the resulting column at ``v``.
    """

    if len(pts) < width * height:
        raise InvalidArgument('a {}x{} patch needs {} points, got {}'.format(
            width, height, width * height, len(pts)))

    column = [calc_point_on_cubic_bspline(u, pts[r * width:(r + 1) * width], knot_type)
              for r in range(height)]
    return calc_point_on_cubic_bspline(v, column, knot_type)
