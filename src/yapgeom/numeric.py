## numerically careful component arithmetic shared by the yapgeom
## vector, direction and point types

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

"""Component-tuple helpers.

Everything here works on plain tuples of floats so that the 2D and 3D
types can share one implementation.  The length and normalization
routines rescale by the largest component before squaring, which keeps
``(1e200, 1e200)`` from overflowing to ``inf`` and ``(1e-200, 1e-200)``
from underflowing to zero.
"""

from math import sqrt
from typing import Optional, Sequence, Tuple

Components = Tuple[float, ...]


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def maxabs(c: Sequence[float]) -> float:
    """ largest absolute component """
    return max(abs(x) for x in c)


def stable_normalize(c: Sequence[float]) -> Tuple[float, Optional[Components]]:
    """Return ``(length, unit_components)`` for component tuple ``c``.

    The zero tuple (compared exactly, not within a tolerance) has length
    ``0.0`` and no unit components, in which case ``None`` is returned
    in their place.
    """
    m = maxabs(c)
    if m == 0:
        return 0.0, None
    scaled = [x / m for x in c]
    scaled_length = sqrt(sum(x * x for x in scaled))
    return m * scaled_length, tuple(x / scaled_length for x in scaled)


def stable_length(c: Sequence[float]) -> float:
    """ overflow/underflow-safe euclidean norm of ``c``"""
    m = maxabs(c)
    if m == 0:
        return 0.0
    scaled = [x / m for x in c]
    return m * sqrt(sum(x * x for x in scaled))


def squared_norm(c: Sequence[float]) -> float:
    return sum(x * x for x in c)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """ ``a`` dot ``b`` """
    return sum(x * y for x, y in zip(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> Components:
    """ 3 vector ``a`` cross ``b``"""
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def cross2(a: Sequence[float], b: Sequence[float]) -> float:
    """ scalar (z-component) cross product of two 2 vectors"""
    return a[0] * b[1] - a[1] * b[0]


def add(a: Sequence[float], b: Sequence[float]) -> Components:
    return tuple(x + y for x, y in zip(a, b))


def sub(a: Sequence[float], b: Sequence[float]) -> Components:
    return tuple(x - y for x, y in zip(a, b))


def scale(a: Sequence[float], k: float) -> Components:
    return tuple(x * k for x in a)


## Interpolation always starts from the nearer end point, so that t=0
## and t=1 reproduce the end points exactly and the rounding error grows
## with distance from the closest one.
def interpolate(a: Sequence[float], b: Sequence[float], t: float) -> Components:
    """ component-wise interpolation from ``a`` (t=0) to ``b`` (t=1)"""
    if t <= 0.5:
        return tuple(x + t * (y - x) for x, y in zip(a, b))
    else:
        return tuple(y + (1 - t) * (x - y) for x, y in zip(a, b))


## There is no unique perpendicular in 3D.  Dropping the smallest
## component and swapping the other two (with one sign flip) avoids
## cancellation, gives an exactly perpendicular result, and is non-zero
## whenever the input is.  The branch order is part of the contract.
def perpendicular3(c: Sequence[float]) -> Components:
    """ a vector perpendicular to 3 vector ``c``"""
    x, y, z = c[0], c[1], c[2]
    absx = abs(x)
    absy = abs(y)
    absz = abs(z)
    if absx <= absy and absx <= absz:
        return (0.0, -z, y)
    elif absy <= absz:
        return (z, 0.0, -x)
    else:
        return (-y, x, 0.0)


def perpendicular2(c: Sequence[float]) -> Components:
    """ rotate 2 vector ``c`` 90 degrees counterclockwise"""
    return (-c[1], c[0])


def lexicographic(a: Sequence[float], b: Sequence[float]) -> int:
    """ -1, 0 or 1 comparing ``a`` and ``b`` component by component"""
    for x, y in zip(a, b):
        if x < y:
            return -1
        elif x > y:
            return 1
    return 0
