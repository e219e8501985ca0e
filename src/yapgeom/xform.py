## generalized matrix transformation operations for yapgeom vectors,
## directions and points

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

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

from math import cos, sin

import numpy as np

from yapgeom import numeric
from yapgeom.errors import require_same_space
from yapgeom.units import to_radians

## A matrix is represented as a tuple of row tuples, two or three
## rows of two or three numbers.  Vectors are column vectors, so
## ``mul(v)`` computes Mv.  Matrices are immutable; every operation
## returns a new matrix.

## Rotation and mirror matrices are computed once and can then be
## applied to any number of vectors, directions and points.  The
## Prepared* classes below wrap a matrix together with whatever
## reference geometry (center point, axis origin, plane origin) a point
## transformation needs.


class Matrix:
    """2x2 or 3x3 linear transformation matrix"""

    def __init__(self, rows=None):
        if rows is None:
            rows = ((1.0, 0.0, 0.0),
                    (0.0, 1.0, 0.0),
                    (0.0, 0.0, 1.0))
        if isinstance(rows, Matrix):
            rows = rows.m
        if not isinstance(rows, (tuple, list)) or len(rows) not in (2, 3):
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(rows))
        n = len(rows)
        m = []
        for r in rows:
            if not isinstance(r, (tuple, list)) or len(r) != n:
                raise ValueError('bad row in matrix initialization: {}'.format(r))
            for x in r:
                if not numeric.isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
            m.append(tuple(float(x) for x in r))
        self.m = tuple(m)
        self.n = n

    @classmethod
    def identity(cls, n=3):
        return cls(tuple(tuple(1.0 if i == j else 0.0 for j in range(n))
                         for i in range(n)))

    def __repr__(self):
        return "Matrix({})".format(", ".join(str(list(r)) for r in self.m))

    def __eq__(self, other):
        return isinstance(other, Matrix) and self.m == other.m

    def __hash__(self):
        return hash(self.m)

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i >= self.n or j < 0 or j >= self.n:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i >= self.n:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self, j):
        if j < 0 or j >= self.n:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return tuple(r[j] for r in self.m)

    def transpose(self):
        return Matrix(tuple(self.getcol(j) for j in range(self.n)))

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # component tuple, compute Mx. If x is a scalar, compute xM.
    def mul(self, x):
        if isinstance(x, Matrix):
            if x.n != self.n:
                raise ValueError('matrix size mismatch in mul(): {} vs {}'.format(self.n, x.n))
            return Matrix(tuple(tuple(numeric.dot(self.getrow(i), x.getcol(j))
                                      for j in range(self.n))
                                for i in range(self.n)))
        elif isinstance(x, (tuple, list)) and len(x) == self.n:
            return self.apply(x)
        elif numeric.isgoodnum(x):
            return Matrix(tuple(numeric.scale(r, x) for r in self.m))

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def apply(self, c):
        """ apply the matrix to a component tuple, returning a tuple"""
        if self.n == 2:
            m = self.m
            return (m[0][0] * c[0] + m[0][1] * c[1],
                    m[1][0] * c[0] + m[1][1] * c[1])
        m = self.m
        return (m[0][0] * c[0] + m[0][1] * c[1] + m[0][2] * c[2],
                m[1][0] * c[0] + m[1][1] * c[1] + m[1][2] * c[2],
                m[2][0] * c[0] + m[2][1] * c[1] + m[2][2] * c[2])

    def apply_array(self, a):
        """Apply the matrix to every row of an ``(N, n)`` array.

        Returns a new float64 numpy array of the same shape.
        """
        arr = np.asarray(a, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != self.n:
            raise ValueError('expected an (N, {}) array, got shape {}'.format(self.n, arr.shape))
        return arr @ np.array(self.m, dtype=np.float64).T


## quaternion corresponding to a rotation of ``angle`` radians about
## unit axis ``u``: (sin(angle/2) u, cos(angle/2))
def quaternion(u, angle):
    half = 0.5 * to_radians(angle)
    s = sin(half)
    return (u[0] * s, u[1] * s, u[2] * s, cos(half))


# return the 3x3 rotation matrix about unit axis u, derived from the
# equivalent unit quaternion.  u is assumed to be unit length, which is
# always true for a yapgeom Direction3d.
def Rotation(u, angle, inverse=False):
    if inverse:
        angle = -to_radians(angle)
    qx, qy, qz, qw = quaternion(u, angle)

    wx = qw * qx
    wy = qw * qy
    wz = qw * qz
    xx = qx * qx
    xy = qx * qy
    xz = qx * qz
    yy = qy * qy
    yz = qy * qz
    zz = qz * qz

    R = ((1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy)),
         (2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx)),
         (2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy)))
    return Matrix(R)


# return the 2x2 counterclockwise rotation matrix
def Rotation2(angle, inverse=False):
    rad = to_radians(angle)
    if inverse:
        rad = -rad
    c = cos(rad)
    s = sin(rad)
    return Matrix(((c, -s),
                   (s, c)))


# Householder reflection I - 2nn^t across the line/plane with unit
# normal n.  Works for both 2 and 3 component normals.
def Mirror(n):
    k = len(n)
    return Matrix(tuple(tuple((1.0 if i == j else 0.0) - 2.0 * n[i] * n[j]
                              for j in range(k))
                        for i in range(k)))


class PreparedRotation2d:
    """A 2D rotation by a fixed angle, optionally about a center point.

    The sine and cosine are computed once; the resulting object can be
    applied to as many vectors, directions and points as needed.
    """

    def __init__(self, angle, center=None):
        self.angle = to_radians(angle)
        self.center = center
        self.matrix = Rotation2(self.angle)

    def _check(self, value, operation):
        ## a rotation about the origin applies in any space
        if self.center is not None:
            require_same_space(value.space, self.center.space, operation)

    def vector(self, v):
        self._check(v, "rotate_by")
        return v._transformed(self.matrix)

    def direction(self, d):
        self._check(d, "rotate_by")
        return d._transformed(self.matrix)

    def point(self, p):
        if self.center is None:
            return p._transformed(self.matrix)
        return self.center + (p - self.center)._transformed(self.matrix)

    def array(self, a):
        if self.center is None:
            return self.matrix.apply_array(a)
        c = np.array(self.center.coordinates_tuple(), dtype=np.float64)
        return self.matrix.apply_array(np.asarray(a, dtype=np.float64) - c) + c


class PreparedRotation3d:
    """A rotation by a fixed angle about a fixed ``Axis3d``."""

    def __init__(self, axis, angle):
        self.axis = axis
        self.angle = to_radians(angle)
        self.matrix = Rotation(axis.direction.components_tuple(), self.angle)

    def vector(self, v):
        require_same_space(v.space, self.axis.parent_space, "rotate_around")
        return v._transformed(self.matrix)

    def direction(self, d):
        require_same_space(d.space, self.axis.parent_space, "rotate_around")
        return d._transformed(self.matrix)

    def point(self, p):
        o = self.axis.origin
        return o + (p - o)._transformed(self.matrix)

    def array(self, a):
        o = np.array(self.axis.origin.coordinates_tuple(), dtype=np.float64)
        return self.matrix.apply_array(np.asarray(a, dtype=np.float64) - o) + o


class PreparedMirror3d:
    """A reflection across a fixed ``Plane3d``."""

    def __init__(self, plane):
        self.plane = plane
        self.matrix = Mirror(plane.normal.components_tuple())

    def vector(self, v):
        require_same_space(v.space, self.plane.parent_space, "mirror_across")
        return v._transformed(self.matrix)

    def direction(self, d):
        require_same_space(d.space, self.plane.parent_space, "mirror_across")
        return d._transformed(self.matrix)

    def point(self, p):
        o = self.plane.origin
        return o + (p - o)._transformed(self.matrix)

    def array(self, a):
        o = np.array(self.plane.origin.coordinates_tuple(), dtype=np.float64)
        return self.matrix.apply_array(np.asarray(a, dtype=np.float64) - o) + o
