## tiled heightfield sampling for splinekit
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

"""Terrain built from a grid of control heights.

The grid is indexed ``heights[z, x]``: rows run along z, columns along
x, and control point ``(x, z)`` sits at world position
``(x * horizontal_scale, h * vertical_scale, z * horizontal_scale)``.

Every 4x4 block of control points defines one cubic B-spline patch
covering the cell between its two middle rows and columns, so an
``N x M`` grid holds ``(N-3) x (M-3)`` patches.  ``tessellate()``
samples every patch into numpy arrays ready for a vertex buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import floor

import numpy as np

from splinekit.catmullrom import set_spline_matrix, calc_quad
from splinekit.cubic_bspline import precalc_middle_matrix
from splinekit.errors import InvalidArgument

logger = logging.getLogger(__name__)

## samples per patch edge used by tessellate()
SUBDIVISIONS = 10


@dataclass(frozen=True, eq=False)
class SurfaceMesh:
    """Tessellated surface.

    ``vertices`` and ``normals`` are ``(n, 3)`` float32 arrays,
    ``concavity`` an ``(n,)`` float32 array and ``indices`` a flat
    uint32 array of counter-clockwise (seen from +y) triangles.
    """

    vertices: np.ndarray
    normals: np.ndarray
    concavity: np.ndarray
    indices: np.ndarray

    @property
    def triangle_count(self):
        return len(self.indices) // 3


class HeightField:

    def __init__(self, heights, horizontal_scale=1.0, vertical_scale=1.0):
        grid = np.array(heights, dtype=np.float64)
        if grid.ndim != 2 or grid.shape[0] < 4 or grid.shape[1] < 4:
            raise InvalidArgument('heightfield needs a 2D grid of at least 4x4, got shape {}'.format(
                grid.shape))
        if not np.all(np.isfinite(grid)):
            raise InvalidArgument('heightfield contains non-finite heights')
        grid.setflags(write=False)

        self.heights = grid
        self.horizontal_scale = float(horizontal_scale)
        self.vertical_scale = float(vertical_scale)
        logger.debug('heightfield %dx%d, scale %g/%g', grid.shape[1], grid.shape[0],
                     self.horizontal_scale, self.vertical_scale)

    @classmethod
    def random(cls, size=8, horizontal_scale=1.0, vertical_scale=1.0, seed=None):
        """square field of whole-number heights in ``[-6, 6)``"""
        rng = np.random.default_rng(seed)
        heights = rng.integers(0, 12, size=(size, size)) - 6.0
        return cls(heights, horizontal_scale, vertical_scale)

    def __repr__(self):
        return "HeightField({}x{}, horizontal_scale={}, vertical_scale={})".format(
            self.width, self.depth, self.horizontal_scale, self.vertical_scale)

    @property
    def width(self):
        return self.heights.shape[1]

    @property
    def depth(self):
        return self.heights.shape[0]

    @property
    def patch_shape(self):
        """number of patches along ``(x, z)``"""
        return (self.width - 3, self.depth - 3)

    def _check_patch(self, x, z):
        px, pz = self.patch_shape
        if not (0 <= x < px and 0 <= z < pz):
            raise InvalidArgument('patch ({},{}) outside a {}x{} patch grid'.format(x, z, px, pz))

    def patch_buffer(self, x, z):
        """the 16 control heights of patch ``(x, z)``, row-major"""
        self._check_patch(x, z)
        return self.heights[z:z + 4, x:x + 4].ravel().tolist()

    def patch(self, x, z):
        return precalc_middle_matrix(self.patch_buffer(x, z),
                                     self.horizontal_scale, self.vertical_scale)

    def control_points(self):
        """world positions of every control point, ``(n, 3)`` float32"""
        zs, xs = np.mgrid[0:self.depth, 0:self.width]
        pts = np.stack([xs * self.horizontal_scale,
                        self.heights * self.vertical_scale,
                        zs * self.horizontal_scale], axis=-1)
        return pts.reshape(-1, 3).astype(np.float32)

    def tessellate(self, subdivisions=SUBDIVISIONS):
        """Sample every patch on a ``(subdivisions+1)^2`` grid.

        Neighbouring patches do not share vertices.  The B-spline
        approximates the control heights, so vertices pass near but
        not through them.
        """

        if subdivisions < 1:
            raise InvalidArgument('subdivisions must be at least 1, got {}'.format(subdivisions))

        px, pz = self.patch_shape
        side = subdivisions + 1
        step = 1.0 / subdivisions
        hs = self.horizontal_scale

        vertices = []
        normals = []
        concavity = []
        indices = []

        for z in range(pz):
            for x in range(px):
                patch = self.patch(x, z)
                base = len(vertices)
                for j in range(side):
                    v = j * step
                    for i in range(side):
                        u = i * step
                        vertices.append(((x + 1 + u) * hs,
                                         patch.height(u, v) * self.vertical_scale,
                                         (z + 1 + v) * hs))
                        normals.append(tuple(patch.normal(u, v)))
                        concavity.append(patch.concavity(u, v))

                for j in range(subdivisions):
                    for i in range(subdivisions):
                        a = base + j * side + i
                        b = a + 1
                        c = a + side
                        d = c + 1
                        indices.extend((a, c, b, b, c, d))

        logger.debug('tessellated %d patches into %d vertices, %d triangles',
                     px * pz, len(vertices), len(indices) // 3)

        return SurfaceMesh(np.asarray(vertices, dtype=np.float32),
                           np.asarray(normals, dtype=np.float32),
                           np.asarray(concavity, dtype=np.float32),
                           np.asarray(indices, dtype=np.uint32))

    def height_at(self, x, z):
        """World height at fractional grid coordinates ``(x, z)``.

        Uses the interpolating Catmull-Rom surface, so whole-number
        coordinates return the control height exactly.  Coordinates
        must lie between the second and the second-to-last control
        point along each axis.
        """

        if not (1.0 <= x <= self.width - 2 and 1.0 <= z <= self.depth - 2):
            raise InvalidArgument('({},{}) outside the sampled area of the heightfield'.format(x, z))

        xi = min(int(floor(x)) - 1, self.width - 4)
        zi = min(int(floor(z)) - 1, self.depth - 4)
        quad = set_spline_matrix(xi, zi, self.heights.ravel(), self.width)
        return calc_quad(quad, x - (xi + 1), z - (zi + 1)) * self.vertical_scale
