## 3D planes for splinekit
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

"""A plane stored as a unit normal ``n`` and offset ``d``.

Every point ``p`` on the plane satisfies ``n.dot(p) == d``, so
``find_dist(p)`` is the signed distance of ``p`` from the plane.
Three collinear points give a zero normal rather than an error.
"""

from splinekit.vector import Vector3


class Plane3:

    def __init__(self, n=None, d=0.0):
        self.n = Vector3() if n is None else Vector3(n)
        self.n.normalize()
        self.d = float(d)

    @classmethod
    def from_points(cls, p1, p2, p3):
        plane = cls()
        plane.set_points(p1, p2, p3)
        return plane

    @classmethod
    def from_point_normal(cls, p, n, unit_normal=False):
        """plane through ``p`` with normal ``n``; pass
        ``unit_normal=True`` to skip normalizing a known unit normal"""
        plane = cls()
        plane.set_point_normal(p, n, unit_normal)
        return plane

    def __repr__(self):
        return "Plane3({!r}, {})".format(self.n, self.d)

    def copy(self):
        return Plane3(self.n, self.d)

    def set_points(self, p1, p2, p3):
        one = p2 - p1
        two = p3 - p1
        self.n.unit_normal_of(one, two)
        self.d = self.n.dot(p1)

    def set_point_normal(self, p, n, unit_normal=False):
        self.n = Vector3(n)
        if not unit_normal:
            self.n.normalize()
        self.d = self.n.dot(p)

    def find_dist(self, p):
        return self.n.dot(p) - self.d
