## 4x4 row-major matrix transformations for splinekit
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

from math import sin, cos

from splinekit.errors import InvalidArgument
from splinekit.vector import Vector4, isgoodnum, epsilon

## a matrix is a flat list ``i`` of sixteen floats holding four rows
## of four, so element (r,c) lives at i[r*4+c].  Vectors are rows: a
## vector is transformed as v' = v * M and the translation lives in
## the last row, i[12..14].  Composition reads left to right, A*B
## applies A first and then B.

## The rotation setters only write the upper-left 3x3 block.  They are
## meant to set up a matrix that is already known to be the identity
## (or a pure translation); they do not compose with an existing
## rotation.

_IDENTITY = (1.0, 0.0, 0.0, 0.0,
             0.0, 1.0, 0.0, 0.0,
             0.0, 0.0, 1.0, 0.0,
             0.0, 0.0, 0.0, 1.0)

## index pairs swapped by an in-place transpose
_TRANSPOSE_PAIRS = ((1, 4), (2, 8), (6, 9), (3, 12), (7, 13), (11, 14))


class Matrix4x4:
    """4x4 row-major transformation matrix.

    ``Matrix4x4()`` is the identity.  A matrix can also be built from
    another matrix, from four ``Vector4`` rows, from a list of four
    rows of four numbers, or from a flat list of up to sixteen
    numbers (a short list fills a prefix of the identity).
    """

    def __init__(self, a=None, *rows):
        self.i = list(_IDENTITY)

        if a is None:
            return
        if isinstance(a, Matrix4x4):
            self.i = list(a.i)
        elif isinstance(a, Vector4):
            if len(rows) != 3:
                raise InvalidArgument('matrix construction needs four row vectors')
            self.set_rows(a, *rows)
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list, Vector4)) for r in a):
                flat = []
                for r in a:
                    if len(r) != 4:
                        raise InvalidArgument('bad row in matrix initialization: {}'.format(r))
                    flat.extend(r)
            else:
                flat = a
            if not 0 < len(flat) <= 16:
                raise InvalidArgument('bad element count in matrix initialization: {}'.format(len(flat)))
            for c, x in enumerate(flat):
                if not isgoodnum(x):
                    raise InvalidArgument('bad element in matrix initialization: {}'.format(x))
                self.i[c] = float(x)
        else:
            raise InvalidArgument('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix4x4({},{},{},{})".format(self.i[0:4], self.i[4:8],
                                               self.i[8:12], self.i[12:16])

    def __eq__(self, m):
        if not isinstance(m, Matrix4x4):
            return NotImplemented
        return self.i == m.i

    __hash__ = None

    def copy(self):
        return Matrix4x4(self)

    def equal_to(self, m):
        """ same as ``m`` within epsilon"""
        return all(abs(a - b) <= epsilon for a, b in zip(self.i, m.i))

    #return value indexed by r,c
    def get(self, r, c):
        if r < 0 or r > 3 or c < 0 or c > 3:
            raise InvalidArgument('bad index passed to get: {},{}'.format(r, c))
        return self.i[r * 4 + c]

    #set value indexed by r,c
    def set_element(self, r, c, x):
        if r < 0 or r > 3 or c < 0 or c > 3:
            raise InvalidArgument('bad index passed to set_element: {},{}'.format(r, c))
        if not isgoodnum(x):
            raise InvalidArgument('bad value passed to set_element: {}'.format(x))
        self.i[r * 4 + c] = float(x)

    def get_row(self, r):
        if r < 0 or r > 3:
            raise InvalidArgument('bad row passed to get_row: {}'.format(r))
        return Vector4(*self.i[r * 4:r * 4 + 4])

    def get_col(self, c):
        if c < 0 or c > 3:
            raise InvalidArgument('bad column passed to get_col: {}'.format(c))
        return Vector4(self.i[c], self.i[c + 4], self.i[c + 8], self.i[c + 12])

    def rows(self):
        """ the matrix as four lists of four floats"""
        return [self.i[0:4], self.i[4:8], self.i[8:12], self.i[12:16]]

    def set(self, m):
        """ copy the elements of ``m`` into self"""
        self.i[:] = m.i

    def set_rows(self, r1, r2, r3, r4):
        i = self.i
        for n, r in enumerate((r1, r2, r3, r4)):
            i[n * 4] = r.x
            i[n * 4 + 1] = r.y
            i[n * 4 + 2] = r.z
            i[n * 4 + 3] = r.w

    ## matrix product
    ## --------------

    def multiply(self, m1, m2):
        """ set self to the product ``m1 * m2``"""
        a = m1.i
        b = m2.i
        out = [0.0] * 16
        for r in range(0, 16, 4):
            a0, a1, a2, a3 = a[r], a[r + 1], a[r + 2], a[r + 3]
            out[r] = a0 * b[0] + a1 * b[4] + a2 * b[8] + a3 * b[12]
            out[r + 1] = a0 * b[1] + a1 * b[5] + a2 * b[9] + a3 * b[13]
            out[r + 2] = a0 * b[2] + a1 * b[6] + a2 * b[10] + a3 * b[14]
            out[r + 3] = a0 * b[3] + a1 * b[7] + a2 * b[11] + a3 * b[15]
        self.i = out

    # matrix multiply.  If x is a matrix, compute self*x.  If x is a
    # scalar, scale every element.  Vectors multiply from the left,
    # see Vector4.__mul__
    def mul(self, x):
        if isinstance(x, Matrix4x4):
            result = Matrix4x4()
            result.multiply(self, x)
            return result
        elif isgoodnum(x):
            result = Matrix4x4()
            result.i = [e * x for e in self.i]
            return result

        raise InvalidArgument('bad thing passed to mul(): {}'.format(x))

    def __mul__(self, x):
        if isinstance(x, Matrix4x4) or isgoodnum(x):
            return self.mul(x)
        return NotImplemented

    def __imul__(self, x):
        if isinstance(x, Matrix4x4):
            self.multiply(self, x)
            return self
        if isinstance(x, Vector4):
            self.scale_columns(x)
            return self
        return NotImplemented

    def scale_columns(self, v):
        """ multiply column j by the j-th component of ``v``, which is
        a post-multiply by the diagonal matrix of ``v``"""
        i = self.i
        for r in range(0, 16, 4):
            i[r] *= v.x
            i[r + 1] *= v.y
            i[r + 2] *= v.z
            i[r + 3] *= v.w

    ## setters
    ## -------

    def set_identity(self):
        self.i = list(_IDENTITY)

    def set_translation(self, x, y, z):
        """ set to the identity plus a translation row"""
        self.i = list(_IDENTITY)
        self.translate(x, y, z)

    def set_scaling(self, x, y, z):
        """ set to a pure scaling matrix"""
        self.i = list(_IDENTITY)
        self.scale(x, y, z)

    ## translations set by translate() are not additive
    def translate(self, x, y, z):
        """ write the translation row, leave the rest alone"""
        self.i[12] = x
        self.i[13] = y
        self.i[14] = z

    def scale(self, x, y, z):
        """ write the diagonal scaling terms, leave the rest alone"""
        self.i[0] = x
        self.i[5] = y
        self.i[10] = z

    ## rotations
    ## ---------

    def _set_hpb(self, sh, ch, sp, cp, sb, cb):
        i = self.i
        i[0] = ch * cb + sh * sp * sb
        i[1] = -ch * sb + sh * sp * cb
        i[2] = sh * cp

        i[4] = sb * cp
        i[5] = cb * cp
        i[6] = -sp

        i[8] = -sh * cb + ch * sp * sb
        i[9] = sb * sh + ch * sp * cb
        i[10] = ch * cp

        i[12] = i[13] = i[14] = 0.0

    def set_rotation(self, h, p, b):
        """ heading/pitch/bank rotation, angles in radians.  Clears
        the translation row."""
        self._set_hpb(sin(h), cos(h), sin(p), cos(p), sin(b), cos(b))

    def rotate_x(self, a):
        self.i[5] = cos(a)
        self.i[6] = sin(a)
        self.i[9] = -self.i[6]
        self.i[10] = self.i[5]

    def rotate_y(self, a):
        self.i[0] = cos(a)
        self.i[8] = sin(a)
        self.i[2] = -self.i[8]
        self.i[10] = self.i[0]

    def rotate_z(self, a):
        self.i[0] = cos(a)
        self.i[1] = sin(a)
        self.i[4] = -self.i[1]
        self.i[5] = self.i[0]

    ## integer-angle versions take a TrigLookup and table indices in
    ## [0, lookup.ANGLE360)
    def set_rotation_lookup(self, lookup, h, p, b):
        self._set_hpb(lookup.get_sin(h), lookup.get_cos(h),
                      lookup.get_sin(p), lookup.get_cos(p),
                      lookup.get_sin(b), lookup.get_cos(b))

    def rotate_x_lookup(self, lookup, a):
        self.i[5] = lookup.get_cos(a)
        self.i[6] = lookup.get_sin(a)
        self.i[9] = -self.i[6]
        self.i[10] = self.i[5]

    def rotate_y_lookup(self, lookup, a):
        self.i[0] = lookup.get_cos(a)
        self.i[8] = lookup.get_sin(a)
        self.i[2] = -self.i[8]
        self.i[10] = self.i[0]

    def rotate_z_lookup(self, lookup, a):
        self.i[0] = lookup.get_cos(a)
        self.i[1] = lookup.get_sin(a)
        self.i[4] = -self.i[1]
        self.i[5] = self.i[0]

    ## transpose
    ## ---------

    def get_transpose(self):
        """ return a new matrix, the transpose of self"""
        i = self.i
        return Matrix4x4([i[0], i[4], i[8], i[12],
                          i[1], i[5], i[9], i[13],
                          i[2], i[6], i[10], i[14],
                          i[3], i[7], i[11], i[15]])

    def set_transpose(self):
        """ transpose self in place"""
        i = self.i
        for a, b in _TRANSPOSE_PAIRS:
            i[a], i[b] = i[b], i[a]


## convenience constructors
## ------------------------

def Identity():
    return Matrix4x4()

def Translation(x, y=0.0, z=0.0):
    """ translation matrix from three scalars or anything with x,y,z"""
    if not isgoodnum(x):
        x, y, z = x[0], x[1], x[2]
    m = Matrix4x4()
    m.translate(x, y, z)
    return m

def Scaling(x, y=None, z=None):
    """ scaling matrix, uniform if only ``x`` is given"""
    if not isgoodnum(x):
        x, y, z = x[0], x[1], x[2]
    elif y is None or z is None:
        y = z = x
    m = Matrix4x4()
    m.scale(x, y, z)
    return m

def Rotation(h, p=0.0, b=0.0):
    """ heading/pitch/bank rotation matrix, angles in radians"""
    m = Matrix4x4()
    m.set_rotation(h, p, b)
    return m
