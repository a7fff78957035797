import pytest
from math import sin, cos, radians

from splinekit.errors import InvalidArgument
from splinekit.lookup import TrigLookup, TAN_INFINITY
from splinekit.vector import close


class TestTrigLookup:

    def test_constants(self):
        lk = TrigLookup(80)
        assert lk.ANGLE360 == 28800
        assert lk.ANGLE1 == 80
        assert lk.ANGLE90 == 7200
        assert lk.ANGLE271 == 271 * 80
        assert close(lk.increment, 1.0 / 80)

    def test_values(self):
        lk = TrigLookup(10)
        for deg in (0, 15, 45, 89, 135, 200, 359):
            index = lk.deg_to_index(deg)
            assert close(lk.get_sin(index), sin(radians(deg)))
            assert close(lk.get_cos(index), cos(radians(deg)))
        assert close(lk.get_tan(lk.ANGLE45), 1.0)
        assert lk.get_tan(lk.ANGLE90) == TAN_INFINITY
        assert lk.get_tan(lk.ANGLE270) == TAN_INFINITY

    def test_conversion(self):
        lk = TrigLookup(4)
        assert lk.deg_to_index(90) == 360
        assert lk.deg_to_index(0.3) == 1
        assert close(lk.index_to_deg(3), 0.75)
        with pytest.raises(InvalidArgument):
            lk.deg_to_index(360)
        with pytest.raises(InvalidArgument):
            lk.deg_to_index(-0.5)

    def test_bounds(self):
        lk = TrigLookup(1)
        assert close(lk.get_sin(359), sin(radians(359)))
        for bad in (-1, 360, 2.5, True):
            with pytest.raises(InvalidArgument):
                lk.get_sin(bad)

    def test_bad_precision(self):
        for bad in (0, -3, 1.5, None):
            with pytest.raises(InvalidArgument):
                TrigLookup(bad)

    def test_independent_tables(self):
        coarse = TrigLookup(1)
        fine = TrigLookup(100)
        assert coarse.ANGLE360 == 360
        assert fine.ANGLE360 == 36000
        assert close(coarse.get_sin(coarse.ANGLE30), fine.get_sin(fine.ANGLE30))
