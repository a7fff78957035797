## fixed-size vector types for splinekit
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

"""fixed-size vector types for **splinekit**

=======
vectors
=======

``Vector2``, ``Vector3`` and ``Vector4`` hold 2, 3 and 4 floating
point components.  They are small mutable objects with value
semantics: assignment between variables shares the object, so use
``copy()`` (or the copy constructor, ``Vector3(v)``) when an
independent value is needed.

Operations come in two flavours:

- *pure* operations return a new vector: ``a + b``, ``a - b``,
  ``a * s``, ``a / s``, ``-a``, ``a.cross(b)``, ``v * M``.

- *mutating* operations write into ``self`` and return nothing:
  ``normalize()``, ``add(p1,p2)``, ``subtract(p1,p2)``,
  ``multiply(p,s)``, ``divide(p,s)``, ``cross_product(p1,p2)``,
  ``unit_normal_of(p1,p2)``, ``multiply_matrix(p,M)``, ``assign(...)``
  and the augmented operators ``+= -= *= /=``.  They avoid building
  a temporary in tight loops.

The dot product is ``a.dot(b)`` or ``a @ b``.  ``==`` compares
components exactly; ``equal_to()`` compares within ``epsilon``.

Division by a zero scalar raises ``InvalidArgument``.  Normalizing a
zero-length vector is a no-op.

Multiplying by a matrix uses the row-vector convention ``v' = v * M``.
``Vector3`` only uses the upper-left 3x3 block of the matrix, so a
``Vector3`` is never translated.

"""

import numbers
from math import sqrt

from splinekit.errors import InvalidArgument

## constants
## ---------

## minimum difference used for equality tests in 3D equations.
## Redefine at your peril.
epsilon = 0.000001

## operations on scalars
## ---------------------

## booleans are ints as far as isinstance() is concerned, but a
## True is not a coordinate
def isgoodnum(n):
    """ determine if an argument is actually a real scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, numbers.Real)

def close(a, b):
    """ are two scalars the same within epsilon
    """
    return abs(a - b) <= epsilon

def _inverse(s):
    if s == 0:
        raise InvalidArgument('vector divide by 0')
    return 1.0 / s

def _ismatrix(m):
    return len(getattr(m, 'i', ())) == 16


class Vector2:
    """2D vector"""

    def __init__(self, x=0.0, y=0.0):
        if isinstance(x, Vector2):
            x, y = x.x, x.y
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return "Vector2({}, {})".format(self.x, self.y)

    def __str__(self):
        return "({},{})".format(self.x, self.y)

    def __iter__(self):
        return iter((self.x, self.y))

    def __len__(self):
        return 2

    def __getitem__(self, i):
        return (self.x, self.y)[i]

    def __eq__(self, p):
        if not isinstance(p, Vector2):
            return NotImplemented
        return self.x == p.x and self.y == p.y

    __hash__ = None

    ## numpy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    def copy(self):
        return Vector2(self.x, self.y)

    def assign(self, x, y):
        self.x = float(x)
        self.y = float(y)

    ## streamed operators
    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __add__(self, p):
        return Vector2(self.x + p.x, self.y + p.y)

    def __sub__(self, p):
        return Vector2(self.x - p.x, self.y - p.y)

    def __mul__(self, s):
        if not isgoodnum(s):
            return NotImplemented
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        s = _inverse(s)
        return Vector2(self.x * s, self.y * s)

    def __matmul__(self, p):
        return self.dot(p)

    ## assignment operators
    def __iadd__(self, p):
        self.x += p.x
        self.y += p.y
        return self

    def __isub__(self, p):
        self.x -= p.x
        self.y -= p.y
        return self

    def __imul__(self, s):
        if not isgoodnum(s):
            return NotImplemented
        self.x *= s
        self.y *= s
        return self

    def __itruediv__(self, s):
        s = _inverse(s)
        self.x *= s
        self.y *= s
        return self

    def dot(self, p):
        return self.x * p.x + self.y * p.y

    def equal_to(self, p):
        """ same as ``p`` within epsilon"""
        return abs(p.x - self.x) <= epsilon and abs(p.y - self.y) <= epsilon

    def not_equal_to(self, p):
        return not self.equal_to(p)

    ## faster than the operators, no temporaries
    def add(self, p1, p2):
        self.x = p1.x + p2.x
        self.y = p1.y + p2.y

    def subtract(self, p1, p2):
        self.x = p1.x - p2.x
        self.y = p1.y - p2.y

    def multiply(self, p, s):
        self.x = p.x * s
        self.y = p.y * s

    def divide(self, p, s):
        s = _inverse(s)
        self.x = p.x * s
        self.y = p.y * s

    def dist(self, p):
        return sqrt(self.dist_squared(p))

    def dist_squared(self, p):
        dx = p.x - self.x
        dy = p.y - self.y
        return dx * dx + dy * dy

    def mag(self):
        return sqrt(self.x * self.x + self.y * self.y)

    def mag_squared(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        """normalize to unit length in place, no-op for the zero vector"""
        magsq = self.mag_squared()
        if magsq > 0:
            inv = 1.0 / sqrt(magsq)
            self.x *= inv
            self.y *= inv


class Vector3:
    """3D vector"""

    def __init__(self, x=0.0, y=0.0, z=0.0):
        if isinstance(x, (Vector3, Vector4)):
            x, y, z = x.x, x.y, x.z
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return "Vector3({}, {}, {})".format(self.x, self.y, self.z)

    def __str__(self):
        return "({},{},{})".format(self.x, self.y, self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __len__(self):
        return 3

    def __getitem__(self, i):
        return (self.x, self.y, self.z)[i]

    def __eq__(self, p):
        if not isinstance(p, Vector3):
            return NotImplemented
        return self.x == p.x and self.y == p.y and self.z == p.z

    __hash__ = None

    __array_ufunc__ = None

    def copy(self):
        return Vector3(self.x, self.y, self.z)

    def assign(self, x, y=0.0, z=0.0):
        """assign components, or take x,y,z of a ``Vector4`` ignoring w"""
        if isinstance(x, (Vector3, Vector4)):
            x, y, z = x.x, x.y, x.z
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    ## streamed operators
    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, p):
        return Vector3(self.x + p.x, self.y + p.y, self.z + p.z)

    def __sub__(self, p):
        return Vector3(self.x - p.x, self.y - p.y, self.z - p.z)

    def __mul__(self, s):
        if isgoodnum(s):
            return Vector3(self.x * s, self.y * s, self.z * s)
        if _ismatrix(s):
            r = Vector3()
            r.multiply_matrix(self, s)
            return r
        return NotImplemented

    def __rmul__(self, s):
        if not isgoodnum(s):
            return NotImplemented
        return Vector3(self.x * s, self.y * s, self.z * s)

    def __truediv__(self, s):
        s = _inverse(s)
        return Vector3(self.x * s, self.y * s, self.z * s)

    def __matmul__(self, p):
        return self.dot(p)

    ## assignment operators
    def __iadd__(self, p):
        self.x += p.x
        self.y += p.y
        self.z += p.z
        return self

    def __isub__(self, p):
        self.x -= p.x
        self.y -= p.y
        self.z -= p.z
        return self

    def __imul__(self, s):
        if isgoodnum(s):
            self.x *= s
            self.y *= s
            self.z *= s
            return self
        if _ismatrix(s):
            self.multiply_matrix(self, s)
            return self
        return NotImplemented

    def __itruediv__(self, s):
        s = _inverse(s)
        self.x *= s
        self.y *= s
        self.z *= s
        return self

    def dot(self, p):
        return self.x * p.x + self.y * p.y + self.z * p.z

    def cross(self, p):
        """ ``self x p``, returned as a new vector"""
        return Vector3(self.y * p.z - self.z * p.y,
                       self.z * p.x - self.x * p.z,
                       self.x * p.y - self.y * p.x)

    def equal_to(self, p):
        """ same as ``p`` within epsilon"""
        return abs(p.x - self.x) <= epsilon and \
            abs(p.y - self.y) <= epsilon and \
            abs(p.z - self.z) <= epsilon

    def not_equal_to(self, p):
        return not self.equal_to(p)

    ## faster than the operators, no temporaries
    def add(self, p1, p2):
        self.x = p1.x + p2.x
        self.y = p1.y + p2.y
        self.z = p1.z + p2.z

    def subtract(self, p1, p2):
        self.x = p1.x - p2.x
        self.y = p1.y - p2.y
        self.z = p1.z - p2.z

    def multiply(self, p, s):
        self.x = p.x * s
        self.y = p.y * s
        self.z = p.z * s

    def divide(self, p, s):
        s = _inverse(s)
        self.x = p.x * s
        self.y = p.y * s
        self.z = p.z * s

    def cross_product(self, p1, p2):
        """ set self to ``p1 x p2``"""
        x = p1.y * p2.z - p1.z * p2.y
        y = p1.z * p2.x - p1.x * p2.z
        z = p1.x * p2.y - p1.y * p2.x
        self.x, self.y, self.z = x, y, z

    normal_of = cross_product

    def unit_normal_of(self, p1, p2):
        """ set self to the unit normal of ``p1 x p2``; parallel inputs
        leave the zero vector"""
        self.cross_product(p1, p2)
        self.normalize()

    ## only the 3x3 block of m is used, so the vector is not translated
    def multiply_matrix(self, p, m):
        i = m.i
        x, y, z = p.x, p.y, p.z
        self.x = x * i[0] + y * i[4] + z * i[8]
        self.y = x * i[1] + y * i[5] + z * i[9]
        self.z = x * i[2] + y * i[6] + z * i[10]

    def dist(self, p):
        return sqrt(self.dist_squared(p))

    def dist_squared(self, p):
        dx = p.x - self.x
        dy = p.y - self.y
        dz = p.z - self.z
        return dx * dx + dy * dy + dz * dz

    def mag(self):
        return sqrt(self.mag_squared())

    def mag_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self):
        """normalize to unit length in place, no-op for the zero vector"""
        magsq = self.mag_squared()
        if magsq > 0:
            inv = 1.0 / sqrt(magsq)
            self.x *= inv
            self.y *= inv
            self.z *= inv

    def rot3d(self, lookup, xa, ya, za, p=None):
        """Rotate by lookup-table angle indices about z, then x, then y.

        ``lookup`` is a :class:`splinekit.lookup.TrigLookup`.  If ``p``
        is given, self is first set to ``p``.  Indices outside
        ``[0, lookup.ANGLE360)`` raise ``InvalidArgument``.
        """
        for a in (xa, ya, za):
            lookup.check_index(a)
        if p is not None:
            self.assign(p)

        sz, cz = lookup.get_sin(za), lookup.get_cos(za)
        x = self.x * cz + self.y * sz
        y = self.y * cz - self.x * sz
        self.x, self.y = x, y

        sx, cx = lookup.get_sin(xa), lookup.get_cos(xa)
        y = self.y * cx + self.z * sx
        z = self.z * cx - self.y * sx
        self.y, self.z = y, z

        sy, cy = lookup.get_sin(ya), lookup.get_cos(ya)
        z = self.z * cy + self.x * sy
        x = self.x * cy - self.z * sy
        self.x, self.z = x, z


class Vector4:
    """4D vector.

    A ``Vector3`` converts to a ``Vector4`` with an explicit ``w``;
    ``w=1`` marks a point that a matrix can translate, ``w=0`` a
    direction that it cannot.
    """

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        if isinstance(x, Vector4):
            x, y, z, w = x.x, x.y, x.z, x.w
        elif isinstance(x, Vector3):
            # Vector4(Vector3, w)
            x, y, z, w = x.x, x.y, x.z, y
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __repr__(self):
        return "Vector4({}, {}, {}, {})".format(self.x, self.y, self.z, self.w)

    def __str__(self):
        return "({},{},{},{})".format(self.x, self.y, self.z, self.w)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __len__(self):
        return 4

    def __getitem__(self, i):
        return (self.x, self.y, self.z, self.w)[i]

    def __eq__(self, p):
        if not isinstance(p, Vector4):
            return NotImplemented
        return self.x == p.x and self.y == p.y and \
            self.z == p.z and self.w == p.w

    __hash__ = None

    __array_ufunc__ = None

    def copy(self):
        return Vector4(self.x, self.y, self.z, self.w)

    def assign(self, x, y=0.0, z=0.0, w=0.0):
        """assign components, or ``assign(Vector3, w)``"""
        if isinstance(x, Vector3):
            x, y, z, w = x.x, x.y, x.z, y
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    ## streamed operators
    def __neg__(self):
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, p):
        return Vector4(self.x + p.x, self.y + p.y, self.z + p.z, self.w + p.w)

    def __sub__(self, p):
        return Vector4(self.x - p.x, self.y - p.y, self.z - p.z, self.w - p.w)

    def __mul__(self, s):
        if isgoodnum(s):
            return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)
        if _ismatrix(s):
            r = Vector4()
            r.multiply_matrix(self, s)
            return r
        return NotImplemented

    def __rmul__(self, s):
        if not isgoodnum(s):
            return NotImplemented
        return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)

    def __truediv__(self, s):
        s = _inverse(s)
        return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)

    def __matmul__(self, p):
        return self.dot(p)

    ## assignment operators
    def __iadd__(self, p):
        self.x += p.x
        self.y += p.y
        self.z += p.z
        self.w += p.w
        return self

    def __isub__(self, p):
        self.x -= p.x
        self.y -= p.y
        self.z -= p.z
        self.w -= p.w
        return self

    def __imul__(self, s):
        if isgoodnum(s):
            self.x *= s
            self.y *= s
            self.z *= s
            self.w *= s
            return self
        if _ismatrix(s):
            self.multiply_matrix(self, s)
            return self
        return NotImplemented

    def __itruediv__(self, s):
        s = _inverse(s)
        self.x *= s
        self.y *= s
        self.z *= s
        self.w *= s
        return self

    def dot(self, p):
        return self.x * p.x + self.y * p.y + self.z * p.z + self.w * p.w

    def equal_to(self, p):
        """ same as ``p`` within epsilon"""
        return abs(p.x - self.x) <= epsilon and \
            abs(p.y - self.y) <= epsilon and \
            abs(p.z - self.z) <= epsilon and \
            abs(p.w - self.w) <= epsilon

    def not_equal_to(self, p):
        return not self.equal_to(p)

    ## faster than the operators, no temporaries
    def add(self, p1, p2):
        self.x = p1.x + p2.x
        self.y = p1.y + p2.y
        self.z = p1.z + p2.z
        self.w = p1.w + p2.w

    def subtract(self, p1, p2):
        self.x = p1.x - p2.x
        self.y = p1.y - p2.y
        self.z = p1.z - p2.z
        self.w = p1.w - p2.w

    def multiply(self, p, s):
        self.x = p.x * s
        self.y = p.y * s
        self.z = p.z * s
        self.w = p.w * s

    def divide(self, p, s):
        s = _inverse(s)
        self.x = p.x * s
        self.y = p.y * s
        self.z = p.z * s
        self.w = p.w * s

    def multiply_matrix(self, p, m):
        """ set self to the row vector product ``p * m``"""
        i = m.i
        x, y, z, w = p.x, p.y, p.z, p.w
        self.x = x * i[0] + y * i[4] + z * i[8] + w * i[12]
        self.y = x * i[1] + y * i[5] + z * i[9] + w * i[13]
        self.z = x * i[2] + y * i[6] + z * i[10] + w * i[14]
        self.w = x * i[3] + y * i[7] + z * i[11] + w * i[15]

    def dist(self, p):
        return sqrt(self.dist_squared(p))

    def dist_squared(self, p):
        dx = p.x - self.x
        dy = p.y - self.y
        dz = p.z - self.z
        dw = p.w - self.w
        return dx * dx + dy * dy + dz * dz + dw * dw

    def mag(self):
        return sqrt(self.mag_squared())

    def mag_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalize(self):
        """normalize to unit length in place, no-op for the zero vector"""
        magsq = self.mag_squared()
        if magsq > 0:
            inv = 1.0 / sqrt(magsq)
            self.x *= inv
            self.y *= inv
            self.z *= inv
            self.w *= inv
