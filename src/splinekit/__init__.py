# -*- coding: utf-8 -*-
"""splinekit: vectors, 4x4 matrices and cubic spline surface evaluation.

The submodules are imported by name, e.g. ``from splinekit.bezier
import calc_point_on_curve``.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("splinekit")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "unknown"
