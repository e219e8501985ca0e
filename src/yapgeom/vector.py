## unit- and space-tagged displacement vectors in 2D and 3D for yapgeom

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

"""displacement vectors for **yapgeom**

====================
OVERVIEW
====================

``Vector2d`` and ``Vector3d`` are immutable displacements.  Each one
carries, besides its components, two tags:

``units``
    a ``yapgeom.units.Unit``.  Lengths, dot products and components
    come back as ``Quantity`` values carrying these units; the dot or
    cross product of two vectors carries the product of their units, so
    the dot product of two ``METERS`` vectors is in ``SQUARE_METERS``.

``space``
    the name of the coordinate system the components are expressed
    in, ``"global"`` unless the vector was produced by
    ``relative_to()`` a frame.  Vectors from different spaces cannot be
    added, compared, dotted or crossed; convert one of them first.

Mismatched tags raise ``UnitsMismatchError`` or ``SpaceMismatchError``
at the call, before any arithmetic is done.

lengths and directions
======================

``length()`` rescales the components by the largest absolute component
before squaring, so vectors with components near the limits of
double-precision range neither overflow nor underflow.  ``direction()``
uses the same rescaling and returns ``None`` for the exact zero vector;
``normalize()`` is the lenient version that returns the zero vector
instead.

interpolation
=============

``interpolate_from(a, b, t)`` starts from ``a`` for ``t <= 0.5`` and
from ``b`` otherwise, so both end points are reproduced exactly.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import atan2, cos, sin
from typing import Iterable, Tuple

from yapgeom import numeric, xform
from yapgeom.direction import Direction2d, Direction3d
from yapgeom.errors import (
    UnitsMismatchError,
    require_same_space,
    require_same_units,
)
from yapgeom.tolerances import GLOBAL_SPACE
from yapgeom.units import METERS, UNITLESS, Quantity, Unit, to_radians, units_of

logger = logging.getLogger(__name__)


def _common_units(values) -> Unit:
    """Units shared by a set of scalar arguments.

    Plain numbers are unitless, except that a plain zero is accepted
    alongside quantities of any units.
    """
    units = None
    for v in values:
        if isinstance(v, Quantity):
            if units is None:
                units = v.units
            else:
                require_same_units(units, v.units, "vector construction")
    if units is None:
        return UNITLESS
    for v in values:
        if not isinstance(v, Quantity) and v != 0 and not units.is_unitless:
            raise UnitsMismatchError(
                "vector construction: cannot mix '{}' quantities with plain numbers".format(units))
    return units


def _coerce_components(obj, names) -> None:
    units = obj.units
    if not isinstance(units, Unit):
        raise ValueError('bad units: {}'.format(units))
    if not isinstance(obj.space, str):
        raise ValueError('bad coordinate space: {}'.format(obj.space))
    for name in names:
        v = getattr(obj, name)
        if not numeric.isgoodnum(v):
            raise ValueError('bad {} component: {}'.format(name, v))
        if isinstance(v, Quantity):
            require_same_units(v.units, units, "vector construction")
        object.__setattr__(obj, name, float(v))


def _scale_factor(k):
    """Return ``(raw_factor, units)`` for a scalar multiplier."""
    if not numeric.isgoodnum(k):
        raise ValueError('bad scale factor: {}'.format(k))
    return float(k), units_of(k)


class _VectorOps:
    """Operations that are the same for 2D and 3D vectors."""

    _direction_type = None

    def components_tuple(self) -> Tuple[float, ...]:
        raise NotImplementedError

    @classmethod
    def _build(cls, c, units, space):
        return cls(*c, units=units, space=space)

    def _check_compatible(self, other, operation: str) -> None:
        if not isinstance(other, type(self)):
            raise ValueError('{}: expected a {}, got {}'.format(
                operation, type(self).__name__, other))
        require_same_units(self.units, other.units, operation)
        require_same_space(self.space, other.space, operation)

    def components(self) -> Tuple[Quantity, ...]:
        return tuple(Quantity(c, self.units) for c in self.components_tuple())

    def _component_along(self, c) -> Quantity:
        return Quantity(numeric.dot(self.components_tuple(), c), self.units)

    def component_in(self, direction) -> Quantity:
        """ signed component of this vector in ``direction``"""
        require_same_space(self.space, direction.space, "component_in")
        return self._component_along(direction.components_tuple())

    def length(self) -> Quantity:
        return Quantity(numeric.stable_length(self.components_tuple()), self.units)

    def squared_length(self) -> Quantity:
        return Quantity(numeric.squared_norm(self.components_tuple()),
                        self.units * self.units)

    def is_zero(self) -> bool:
        return all(c == 0 for c in self.components_tuple())

    def direction(self):
        """The direction of this vector, or ``None`` for the zero vector."""
        _, u = numeric.stable_normalize(self.components_tuple())
        if u is None:
            logger.debug("zero vector has no direction")
            return None
        return self._direction_type._unsafe(*u, space=self.space)

    def length_and_direction(self):
        """``(length, direction)``, or ``None`` for the zero vector."""
        length, u = numeric.stable_normalize(self.components_tuple())
        if u is None:
            logger.debug("zero vector has no length and direction")
            return None
        return (Quantity(length, self.units),
                self._direction_type._unsafe(*u, space=self.space))

    def normalize(self):
        """A unitless unit vector, or the zero vector if this is zero.

        Callers that need to handle the zero case should use
        ``direction()`` instead.
        """
        _, u = numeric.stable_normalize(self.components_tuple())
        if u is None:
            return self._build(self.components_tuple(), UNITLESS, self.space)
        return self._build(u, UNITLESS, self.space)

    def equal_within(self, tolerance, other) -> bool:
        """``True`` if ``other`` is no further than ``tolerance`` away."""
        self._check_compatible(other, "equal_within")
        if isinstance(tolerance, Quantity):
            require_same_units(tolerance.units, self.units, "equal_within")
        d = numeric.sub(self.components_tuple(), other.components_tuple())
        return numeric.stable_length(d) <= float(tolerance)

    @classmethod
    def lexicographic_comparison(cls, a, b) -> int:
        """Order by x, then y (then z): -1, 0 or 1."""
        a._check_compatible(b, "lexicographic_comparison")
        return numeric.lexicographic(a.components_tuple(), b.components_tuple())

    def lexicographic_key(self) -> Tuple[float, ...]:
        """ sort key giving the same order as ``lexicographic_comparison``"""
        return self.components_tuple()

    @classmethod
    def interpolate_from(cls, a, b, t: float):
        a._check_compatible(b, "interpolate_from")
        return cls._build(numeric.interpolate(a.components_tuple(),
                                              b.components_tuple(), t),
                          a.units, a.space)

    @classmethod
    def sum(cls, vectors: Iterable, units: Unit = UNITLESS, space: str = GLOBAL_SPACE):
        """Sum of ``vectors``; the zero vector in ``units`` if empty."""
        result = None
        for v in vectors:
            result = v if result is None else result + v
        if result is None:
            return cls.zero(units, space)
        return result

    def plus(self, other):
        return self + other

    def minus(self, other):
        return self - other

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_compatible(other, "add")
        return self._build(numeric.add(self.components_tuple(), other.components_tuple()),
                           self.units, self.space)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_compatible(other, "subtract")
        return self._build(numeric.sub(self.components_tuple(), other.components_tuple()),
                           self.units, self.space)

    def __neg__(self):
        return self.reverse()

    def reverse(self):
        return self._build(tuple(-c for c in self.components_tuple()),
                           self.units, self.space)

    def scale_by(self, k):
        """Multiply by ``k``; a ``Quantity`` factor multiplies the units too."""
        f, u = _scale_factor(k)
        return self._build(numeric.scale(self.components_tuple(), f),
                           self.units * u, self.space)

    def __mul__(self, k):
        if not numeric.isgoodnum(k):
            return NotImplemented
        return self.scale_by(k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not numeric.isgoodnum(k):
            return NotImplemented
        f, u = _scale_factor(k)
        return self._build(tuple(c / f for c in self.components_tuple()),
                           self.units / u, self.space)

    def half(self):
        return self.scale_by(0.5)

    def twice(self):
        return self.scale_by(2.0)

    def scale_to(self, length):
        """A vector of the given length in the same direction.

        The zero vector stays zero (in the units of ``length``).
        """
        f, u = _scale_factor(length)
        _, d = numeric.stable_normalize(self.components_tuple())
        if d is None:
            return self._build(self.components_tuple(), u, self.space)
        return self._build(numeric.scale(d, f), u, self.space)

    def dot(self, other) -> Quantity:
        """ dot product; the units are the product of both units"""
        if not isinstance(other, type(self)):
            raise ValueError('dot: expected a {}, got {}'.format(type(self).__name__, other))
        require_same_space(self.space, other.space, "dot")
        return Quantity(numeric.dot(self.components_tuple(), other.components_tuple()),
                        self.units * other.units)

    def projection_in(self, direction):
        """ the component of this vector parallel to ``direction``"""
        require_same_space(self.space, direction.space, "projection_in")
        d = direction.components_tuple()
        return self._build(numeric.scale(d, numeric.dot(d, self.components_tuple())),
                           self.units, self.space)

    def _transformed(self, m):
        return self._build(m.apply(self.components_tuple()), self.units, self.space)


@dataclass(frozen=True)
class Vector2d(_VectorOps):
    """A 2D displacement."""

    x: float
    y: float
    units: Unit = UNITLESS
    space: str = GLOBAL_SPACE

    _direction_type = Direction2d

    def __post_init__(self):
        _coerce_components(self, ("x", "y"))

    @classmethod
    def zero(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Vector2d":
        return cls(0.0, 0.0, units, space)

    @classmethod
    def xy(cls, x, y, space: str = GLOBAL_SPACE) -> "Vector2d":
        """Build from components, taking the units from quantity arguments."""
        return cls(x, y, _common_units((x, y)), space)

    @classmethod
    def meters(cls, x, y, space: str = GLOBAL_SPACE) -> "Vector2d":
        return cls(x, y, METERS, space)

    @classmethod
    def from_points(cls, p0, p1) -> "Vector2d":
        """ the displacement from ``p0`` to ``p1``"""
        return p1 - p0

    @classmethod
    def with_length(cls, length, direction: Direction2d) -> "Vector2d":
        f, u = _scale_factor(length)
        return cls(f * direction.x, f * direction.y, u, direction.space)

    @classmethod
    def polar(cls, r, theta, space: str = GLOBAL_SPACE) -> "Vector2d":
        """ from radius ``r`` and angle ``theta`` from the X axis"""
        f, u = _scale_factor(r)
        rad = to_radians(theta)
        return cls(f * cos(rad), f * sin(rad), u, space)

    def components_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def x_component(self) -> Quantity:
        return self._component_along((1.0, 0.0))

    def y_component(self) -> Quantity:
        return self._component_along((0.0, 1.0))

    def polar_components(self) -> Tuple[Quantity, float]:
        """ ``(radius, angle)``; the angle of the zero vector is 0"""
        return (self.length(), atan2(self.y, self.x))

    def cross(self, other: "Vector2d") -> Quantity:
        """ scalar 2D cross product ``x1*y2 - y1*x2``"""
        if not isinstance(other, Vector2d):
            raise ValueError('cross: expected a Vector2d, got {}'.format(other))
        require_same_space(self.space, other.space, "cross")
        return Quantity(numeric.cross2(self.components_tuple(), other.components_tuple()),
                        self.units * other.units)

    def perpendicular(self) -> "Vector2d":
        """ this vector rotated 90 degrees counterclockwise"""
        return Vector2d(*numeric.perpendicular2((self.x, self.y)), self.units, self.space)

    rotate_counterclockwise = perpendicular

    def rotate_clockwise(self) -> "Vector2d":
        return Vector2d(self.y, -self.x, self.units, self.space)

    def rotate_by(self, angle) -> "Vector2d":
        return self._transformed(xform.Rotation2(angle))

    def mirror_across(self, axis) -> "Vector2d":
        require_same_space(self.space, axis.direction.space, "mirror_across")
        n = numeric.perpendicular2(axis.direction.components())
        return self._transformed(xform.Mirror(n))

    def project_onto(self, axis) -> "Vector2d":
        """ the component of this vector along ``axis``"""
        return self.projection_in(axis.direction)

    def relative_to(self, frame) -> "Vector2d":
        """ this vector expressed in the local coordinates of ``frame``"""
        require_same_space(self.space, frame.parent_space, "relative_to")
        c = self.components_tuple()
        return Vector2d(numeric.dot(c, frame.x_direction.components()),
                        numeric.dot(c, frame.y_direction.components()),
                        self.units, frame.local_space)

    def place_in(self, frame) -> "Vector2d":
        """ inverse of ``relative_to``: local components back to the parent space"""
        require_same_space(self.space, frame.local_space, "place_in")
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(self.x * xd.x + self.y * yd.x,
                        self.x * xd.y + self.y * yd.y,
                        self.units, frame.parent_space)

    def place_onto(self, sketch_plane) -> "Vector3d":
        """ the 3D vector this vector represents in ``sketch_plane``"""
        return Vector3d.on(sketch_plane, self)


@dataclass(frozen=True)
class Vector3d(_VectorOps):
    """A 3D displacement."""

    x: float
    y: float
    z: float
    units: Unit = UNITLESS
    space: str = GLOBAL_SPACE

    _direction_type = Direction3d

    def __post_init__(self):
        _coerce_components(self, ("x", "y", "z"))

    @classmethod
    def zero(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Vector3d":
        return cls(0.0, 0.0, 0.0, units, space)

    @classmethod
    def xyz(cls, x, y, z, space: str = GLOBAL_SPACE) -> "Vector3d":
        """Build from components, taking the units from quantity arguments."""
        return cls(x, y, z, _common_units((x, y, z)), space)

    @classmethod
    def meters(cls, x, y, z, space: str = GLOBAL_SPACE) -> "Vector3d":
        return cls(x, y, z, METERS, space)

    @classmethod
    def from_points(cls, p0, p1) -> "Vector3d":
        """ the displacement from ``p0`` to ``p1``"""
        return p1 - p0

    @classmethod
    def with_length(cls, length, direction: Direction3d) -> "Vector3d":
        f, u = _scale_factor(length)
        return cls(f * direction.x, f * direction.y, f * direction.z, u, direction.space)

    @classmethod
    def from_cylindrical(cls, r, theta, z, space: str = GLOBAL_SPACE) -> "Vector3d":
        """ from radius and angle in the XY plane plus a Z component"""
        units = _common_units((r, z))
        rad = to_radians(theta)
        return cls(float(r) * cos(rad), float(r) * sin(rad), float(z), units, space)

    @classmethod
    def on(cls, sketch_plane, v: Vector2d) -> "Vector3d":
        """ the 3D vector corresponding to 2D ``v`` in ``sketch_plane``"""
        require_same_space(v.space, sketch_plane.local_space, "on")
        xd = sketch_plane.x_direction
        yd = sketch_plane.y_direction
        return cls(v.x * xd.x + v.y * yd.x,
                   v.x * xd.y + v.y * yd.y,
                   v.x * xd.z + v.y * yd.z,
                   v.units, sketch_plane.parent_space)

    @classmethod
    def xy_on(cls, sketch_plane, x, y) -> "Vector3d":
        return cls.on(sketch_plane, Vector2d.xy(x, y, sketch_plane.local_space))

    @classmethod
    def r_theta_on(cls, sketch_plane, r, theta) -> "Vector3d":
        return cls.on(sketch_plane, Vector2d.polar(r, theta, sketch_plane.local_space))

    def components_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def x_component(self) -> Quantity:
        return self._component_along((1.0, 0.0, 0.0))

    def y_component(self) -> Quantity:
        return self._component_along((0.0, 1.0, 0.0))

    def z_component(self) -> Quantity:
        return self._component_along((0.0, 0.0, 1.0))

    def cross(self, other: "Vector3d") -> "Vector3d":
        """ cross product; the units are the product of both units"""
        if not isinstance(other, Vector3d):
            raise ValueError('cross: expected a Vector3d, got {}'.format(other))
        require_same_space(self.space, other.space, "cross")
        return Vector3d(*numeric.cross(self.components_tuple(), other.components_tuple()),
                        self.units * other.units, self.space)

    def perpendicular(self) -> "Vector3d":
        """An arbitrary vector perpendicular to this one.

        The smallest-magnitude component is dropped and the other two
        swapped with a sign change: ``(0, -z, y)`` if ``|x|`` is smallest,
        else ``(z, 0, -x)`` if ``|y| <= |z|``, else ``(-y, x, 0)``.  The
        result is exactly perpendicular, and zero only for the zero
        vector.
        """
        return Vector3d(*numeric.perpendicular3(self.components_tuple()),
                        self.units, self.space)

    def rotate_around(self, axis, angle) -> "Vector3d":
        """ rotate by ``angle`` about the direction of ``axis``"""
        require_same_space(self.space, axis.direction.space, "rotate_around")
        return self._transformed(xform.Rotation(axis.direction.components(), angle))

    def mirror_across(self, plane) -> "Vector3d":
        require_same_space(self.space, plane.normal.space, "mirror_across")
        return self._transformed(xform.Mirror(plane.normal.components()))

    def project_onto(self, plane) -> "Vector3d":
        """ the in-plane component of this vector"""
        return self - self.projection_in(plane.normal)

    def relative_to(self, frame) -> "Vector3d":
        """ this vector expressed in the local coordinates of ``frame``"""
        require_same_space(self.space, frame.parent_space, "relative_to")
        c = self.components_tuple()
        return Vector3d(numeric.dot(c, frame.x_direction.components()),
                        numeric.dot(c, frame.y_direction.components()),
                        numeric.dot(c, frame.z_direction.components()),
                        self.units, frame.local_space)

    def place_in(self, frame) -> "Vector3d":
        """ inverse of ``relative_to``: local components back to the parent space"""
        require_same_space(self.space, frame.local_space, "place_in")
        xd = frame.x_direction
        yd = frame.y_direction
        zd = frame.z_direction
        return Vector3d(self.x * xd.x + self.y * yd.x + self.z * zd.x,
                        self.x * xd.y + self.y * yd.y + self.z * zd.y,
                        self.x * xd.z + self.y * yd.z + self.z * zd.z,
                        self.units, frame.parent_space)

    def project_into(self, sketch_plane) -> Vector2d:
        """Project onto ``sketch_plane`` and express in its 2D coordinates.

        Dotting with the two in-plane basis directions gives the same
        result as ``project_onto`` followed by ``relative_to``, since the
        normal component has no part along either of them.
        """
        require_same_space(self.space, sketch_plane.parent_space, "project_into")
        c = self.components_tuple()
        return Vector2d(numeric.dot(c, sketch_plane.x_direction.components()),
                        numeric.dot(c, sketch_plane.y_direction.components()),
                        self.units, sketch_plane.local_space)


__all__ = ["Vector2d", "Vector3d"]
