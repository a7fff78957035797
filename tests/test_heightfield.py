import numpy as np
import pytest

from splinekit.cubic_bspline import BSplinePatch, calc_height_on_patch
from splinekit.errors import InvalidArgument
from splinekit.heightfield import HeightField, SurfaceMesh
from splinekit.vector import close


def _bumpy(size=6):
    z, x = np.mgrid[0:size, 0:size]
    return np.sin(x * 0.9) * 2.0 + np.cos(z * 1.3)


class TestHeightField:

    def test_shape(self):
        hf = HeightField(np.zeros((5, 7)))
        assert hf.width == 7 and hf.depth == 5
        assert hf.patch_shape == (4, 2)
        with pytest.raises(InvalidArgument):
            HeightField(np.zeros((3, 8)))
        with pytest.raises(InvalidArgument):
            HeightField(np.zeros(16))
        with pytest.raises(InvalidArgument):
            HeightField([[0, 0, 0, 0]] * 3 + [[0, 0, 0, float('nan')]])

    def test_heights_are_copied(self):
        src = np.zeros((4, 4))
        hf = HeightField(src)
        src[0, 0] = 9.0
        assert hf.heights[0, 0] == 0.0
        with pytest.raises(ValueError):
            hf.heights[0, 0] = 1.0

    def test_patch_buffer(self):
        grid = np.arange(36, dtype=float).reshape(6, 6)
        hf = HeightField(grid)
        buf = hf.patch_buffer(1, 2)
        assert len(buf) == 16
        assert buf[:4] == [13.0, 14.0, 15.0, 16.0]
        assert buf[12:] == [31.0, 32.0, 33.0, 34.0]
        with pytest.raises(InvalidArgument):
            hf.patch_buffer(3, 0)
        with pytest.raises(InvalidArgument):
            hf.patch_buffer(0, -1)

    def test_patch(self):
        hf = HeightField(_bumpy(), horizontal_scale=2.0, vertical_scale=0.5)
        patch = hf.patch(1, 1)
        assert isinstance(patch, BSplinePatch)
        assert patch.h_spacing == 2.0 and patch.v_spacing == 0.5
        assert close(patch.height(0.3, 0.6), calc_height_on_patch(0.3, 0.6, hf.patch_buffer(1, 1)))

    def test_tessellate(self):
        hf = HeightField(_bumpy(), horizontal_scale=2.0)
        mesh = hf.tessellate(subdivisions=4)
        assert isinstance(mesh, SurfaceMesh)
        patches = 3 * 3
        assert mesh.vertices.shape == (patches * 25, 3)
        assert mesh.normals.shape == (patches * 25, 3)
        assert mesh.concavity.shape == (patches * 25,)
        assert mesh.vertices.dtype == np.float32
        assert mesh.indices.dtype == np.uint32
        assert mesh.triangle_count == patches * 4 * 4 * 2
        assert mesh.indices.max() < len(mesh.vertices)
        lengths = np.linalg.norm(mesh.normals, axis=1)
        assert np.allclose(lengths, 1.0, atol=1e-5)
        assert np.all(mesh.normals[:, 1] > 0.0)
        assert np.all(mesh.concavity >= 0.0)
        ## first patch covers the cell between control columns 1 and 2
        assert close(float(mesh.vertices[0, 0]), 2.0)
        assert close(float(mesh.vertices[4, 0]), 4.0)

    def test_tessellate_winding(self):
        hf = HeightField(_bumpy())
        mesh = hf.tessellate(subdivisions=2)
        tri = mesh.vertices[mesh.indices[:3]]
        n = np.cross(tri[1] - tri[0], tri[2] - tri[0])
        assert n[1] > 0.0

    def test_flat_field(self):
        hf = HeightField(np.full((6, 6), 3.0), horizontal_scale=1.5, vertical_scale=2.0)
        mesh = hf.tessellate()
        assert np.allclose(mesh.normals, [0.0, 1.0, 0.0], atol=1e-6)
        assert np.allclose(mesh.concavity, 0.0, atol=1e-6)
        assert np.allclose(mesh.vertices[:, 1], 6.0)

    def test_tessellate_bad_subdivisions(self):
        with pytest.raises(InvalidArgument):
            HeightField(np.zeros((4, 4))).tessellate(0)

    def test_height_at(self):
        grid = _bumpy()
        hf = HeightField(grid, vertical_scale=3.0)
        for x, z in ((1, 1), (2, 3), (4, 4), (3, 2)):
            assert close(hf.height_at(x, z), grid[z, x] * 3.0)
        h = hf.height_at(2.5, 1.25)
        assert np.isfinite(h)
        with pytest.raises(InvalidArgument):
            hf.height_at(0.5, 2)
        with pytest.raises(InvalidArgument):
            hf.height_at(2, 4.5)

    def test_control_points(self):
        hf = HeightField(np.arange(16, dtype=float).reshape(4, 4), horizontal_scale=2.0)
        pts = hf.control_points()
        assert pts.shape == (16, 3)
        assert tuple(pts[5]) == (2.0, 5.0, 2.0)

    def test_random(self):
        a = HeightField.random(size=8, seed=7)
        b = HeightField.random(size=8, seed=7)
        assert np.array_equal(a.heights, b.heights)
        assert a.heights.min() >= -6.0 and a.heights.max() < 6.0
        assert a.patch_shape == (5, 5)
