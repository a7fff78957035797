## trigonometric lookup tables for integer-angle rotations in splinekit
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

"""Trigonometric lookup tables.

A table built with ``precision`` entries per degree replaces the 360
degree system with a ``360*precision`` "index" system: with a
precision of 80, index 80 is one degree and ``ANGLE360 == 28800``.
``deg_to_index`` and ``index_to_deg`` convert between the two.

Tables are plain objects.  Construct one and pass it to whatever needs
integer-angle trig (``Matrix4x4.set_rotation_lookup``,
``Vector3.rot3d``, ...).
"""

import logging
import numbers
from math import radians, sin, cos, tan

from splinekit.errors import InvalidArgument

logger = logging.getLogger(__name__)

## stand-in for tan() at 90 and 270 degrees
TAN_INFINITY = 2147483648.0

## names of the convenience angle constants, in degrees
_ANGLES = (360, 315, 271, 270, 225, 180, 135, 90, 89, 60, 45, 40, 30,
           20, 15, 10, 5, 2, 1)


class TrigLookup:
    """sin, cos and tan tables accurate to ``1/precision`` of a degree"""

    def __init__(self, precision=10):
        if isinstance(precision, bool) or not isinstance(precision, int) \
           or precision < 1:
            raise InvalidArgument('bad lookup precision: {}'.format(precision))

        self.precision = precision
        self.increment = 1.0 / precision
        for deg in _ANGLES:
            setattr(self, 'ANGLE{}'.format(deg), deg * precision)

        step = radians(self.increment)
        count = self.ANGLE360
        self._sin = [sin(a * step) for a in range(count)]
        self._cos = [cos(a * step) for a in range(count)]
        self._tan = [TAN_INFINITY if a in (self.ANGLE90, self.ANGLE270)
                     else tan(a * step) for a in range(count)]
        logger.debug('built trig lookup tables: precision=%d entries=%d',
                     precision, count)

    def __repr__(self):
        return "TrigLookup({})".format(self.precision)

    def check_index(self, index):
        if isinstance(index, bool) or not isinstance(index, numbers.Integral) \
           or not 0 <= index < self.ANGLE360:
            raise InvalidArgument('lookup index out of bounds: {}'.format(index))

    def get_sin(self, index):
        self.check_index(index)
        return self._sin[index]

    def get_cos(self, index):
        self.check_index(index)
        return self._cos[index]

    def get_tan(self, index):
        self.check_index(index)
        return self._tan[index]

    ## negative angles and angles of 360 or more are not folded
    def deg_to_index(self, degree):
        """convert degrees in ``[0, 360)`` to a table index, truncating"""
        if not 0 <= degree < 360:
            raise InvalidArgument('degree out of bounds: {}'.format(degree))
        return int(degree * self.precision)

    def index_to_deg(self, index):
        self.check_index(index)
        return index * self.increment
