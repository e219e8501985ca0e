## unit- and space-tagged positions in 2D and 3D for yapgeom

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

"""absolute positions for **yapgeom**

Points are thin wrappers around the vector machinery.  The difference
of two points is a vector, a point plus a vector is a point, and every
point transformation takes the same three steps:

1. compute the offset vector from the transformation's reference point
   (rotation center, axis origin, plane origin, frame origin),
2. apply the corresponding vector transformation to the offset,
3. add the result back to the reference point.

A vector is always added *to* a point; ``vector + point`` is not
defined.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from yapgeom import numeric
from yapgeom.errors import require_same_space, require_same_units
from yapgeom.tolerances import DEGENERATE_TRIANGLE_TOLERANCE, GLOBAL_SPACE
from yapgeom.units import METERS, UNITLESS, Quantity, Unit
from yapgeom.vector import Vector2d, Vector3d, _coerce_components, _common_units

logger = logging.getLogger(__name__)


class _PointOps:
    """Operations that are the same for 2D and 3D points."""

    _vector_type = None

    def coordinates_tuple(self) -> Tuple[float, ...]:
        raise NotImplementedError

    @classmethod
    def _build(cls, c, units, space):
        return cls(*c, units=units, space=space)

    def _check_compatible(self, other, operation: str) -> None:
        require_same_units(self.units, other.units, operation)
        require_same_space(self.space, other.space, operation)

    def coordinates(self) -> Tuple[Quantity, ...]:
        return tuple(Quantity(c, self.units) for c in self.coordinates_tuple())

    def _position(self):
        """ the vector from the origin of this point's space to the point"""
        return self._vector_type(*self.coordinates_tuple(), units=self.units, space=self.space)

    def __add__(self, v):
        if not isinstance(v, self._vector_type):
            return NotImplemented
        self._check_compatible(v, "translate")
        return self._build(numeric.add(self.coordinates_tuple(), v.components_tuple()),
                           self.units, self.space)

    def __sub__(self, other):
        if isinstance(other, type(self)):
            self._check_compatible(other, "subtract")
            return self._vector_type(
                *numeric.sub(self.coordinates_tuple(), other.coordinates_tuple()),
                units=self.units, space=self.space)
        if isinstance(other, self._vector_type):
            self._check_compatible(other, "translate")
            return self._build(numeric.sub(self.coordinates_tuple(), other.components_tuple()),
                               self.units, self.space)
        return NotImplemented

    def vector_from(self, other):
        """ the vector pointing from this point to ``other``"""
        return other - self

    def vector_to(self, other):
        """ the exact negation of ``vector_from(other)``"""
        return self - other

    def translate_by(self, v):
        return self + v

    def translate_in(self, direction, distance):
        return self + self._vector_type.with_length(distance, direction)

    def translate_along(self, axis, distance):
        return self.translate_in(axis.direction, distance)

    def distance_from(self, other) -> Quantity:
        return (self - other).length()

    def squared_distance_from(self, other) -> Quantity:
        """ squared distance, without the square root"""
        return (self - other).squared_length()

    def distance_along(self, axis) -> Quantity:
        """ signed distance of this point along ``axis`` from its origin"""
        return (self - axis.origin).component_in(axis.direction)

    def equal_within(self, tolerance, other) -> bool:
        self._check_compatible(other, "equal_within")
        return (self - other).equal_within(tolerance, self._vector_type.zero(self.units, self.space))

    def scale_about(self, center, scale):
        """``center + scale * (self - center)``.

        Negative factors are accepted but put the point on the far side
        of ``center``; use a mirror (and rotation) for a reflection.
        """
        return center + (self - center).scale_by(scale)

    def _transformed(self, m):
        return self._build(m.apply(self.coordinates_tuple()), self.units, self.space)

    @classmethod
    def interpolate_from(cls, a, b, t: float):
        a._check_compatible(b, "interpolate_from")
        return cls._build(numeric.interpolate(a.coordinates_tuple(),
                                              b.coordinates_tuple(), t),
                          a.units, a.space)

    @classmethod
    def midpoint(cls, a, b):
        return cls.interpolate_from(a, b, 0.5)

    @classmethod
    def along(cls, axis, distance):
        """ the point ``distance`` along ``axis`` from its origin"""
        return axis.origin.translate_in(axis.direction, distance)

    @classmethod
    def centroid(cls, points: Iterable):
        """The average of ``points``, or ``None`` if there are none.

        Offsets are averaged relative to the first point.
        """
        points = list(points)
        if not points:
            logger.debug("centroid of an empty point list")
            return None
        first = points[0]
        total = cls._vector_type.sum((p - first for p in points[1:]),
                                     first.units, first.space)
        return first + total / len(points)

    @classmethod
    def circumcenter(cls, p1, p2, p3):
        """Center of the circle through three points, or ``None`` if they
        are collinear.

        Uses barycentric weights ``a^2 (b^2 + c^2 - a^2)`` (and cyclic),
        where ``a`` is the side opposite each vertex.
        """
        a2 = float(p1.squared_distance_from(p2))
        b2 = float(p2.squared_distance_from(p3))
        c2 = float(p3.squared_distance_from(p1))
        t1 = a2 * (b2 + c2 - a2)
        t2 = b2 * (c2 + a2 - b2)
        t3 = c2 * (a2 + b2 - c2)
        total = t1 + t2 + t3
        scale = a2 + b2 + c2
        if abs(total) <= DEGENERATE_TRIANGLE_TOLERANCE * scale * scale:
            logger.debug("circumcenter of collinear points")
            return None
        w1 = t1 / total
        w2 = t2 / total
        w3 = t3 / total
        c = tuple(w1 * z + w2 * x + w3 * y for x, y, z in zip(p1.coordinates_tuple(),
                                                             p2.coordinates_tuple(),
                                                             p3.coordinates_tuple()))
        return cls._build(c, p1.units, p1.space)


@dataclass(frozen=True)
class Point2d(_PointOps):
    """A 2D position."""

    x: float
    y: float
    units: Unit = UNITLESS
    space: str = GLOBAL_SPACE

    _vector_type = Vector2d

    def __post_init__(self):
        _coerce_components(self, ("x", "y"))

    @classmethod
    def origin(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Point2d":
        return cls(0.0, 0.0, units, space)

    @classmethod
    def xy(cls, x, y, space: str = GLOBAL_SPACE) -> "Point2d":
        return cls(x, y, _common_units((x, y)), space)

    @classmethod
    def meters(cls, x, y, space: str = GLOBAL_SPACE) -> "Point2d":
        return cls(x, y, METERS, space)

    @classmethod
    def polar(cls, r, theta, space: str = GLOBAL_SPACE) -> "Point2d":
        v = Vector2d.polar(r, theta, space)
        return cls(v.x, v.y, v.units, space)

    def coordinates_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def x_coordinate(self) -> Quantity:
        return Quantity(self.x, self.units)

    def y_coordinate(self) -> Quantity:
        return Quantity(self.y, self.units)

    def distance_from_axis(self, axis) -> Quantity:
        """ unsigned perpendicular distance from ``axis``"""
        offset = self - axis.origin
        return abs(offset.cross(axis.direction.to_vector()))

    def signed_distance_from(self, axis) -> Quantity:
        """ perpendicular distance, positive to the left of ``axis``"""
        offset = self - axis.origin
        return axis.direction.to_vector().cross(offset)

    def rotate_around(self, center: "Point2d", angle) -> "Point2d":
        return center + (self - center).rotate_by(angle)

    def mirror_across(self, axis) -> "Point2d":
        o = axis.origin
        return o + (self - o).mirror_across(axis)

    def project_onto(self, axis) -> "Point2d":
        o = axis.origin
        return o + (self - o).project_onto(axis)

    def relative_to(self, frame) -> "Point2d":
        local = (self - frame.origin).relative_to(frame)
        return Point2d(local.x, local.y, local.units, local.space)

    def place_in(self, frame) -> "Point2d":
        require_same_units(self.units, frame.origin.units, "place_in")
        return frame.origin + self._position().place_in(frame)

    def place_onto(self, sketch_plane) -> "Point3d":
        return Point3d.on(sketch_plane, self)


@dataclass(frozen=True)
class Point3d(_PointOps):
    """A 3D position."""

    x: float
    y: float
    z: float
    units: Unit = UNITLESS
    space: str = GLOBAL_SPACE

    _vector_type = Vector3d

    def __post_init__(self):
        _coerce_components(self, ("x", "y", "z"))

    @classmethod
    def origin(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Point3d":
        return cls(0.0, 0.0, 0.0, units, space)

    @classmethod
    def xyz(cls, x, y, z, space: str = GLOBAL_SPACE) -> "Point3d":
        return cls(x, y, z, _common_units((x, y, z)), space)

    @classmethod
    def meters(cls, x, y, z, space: str = GLOBAL_SPACE) -> "Point3d":
        return cls(x, y, z, METERS, space)

    @classmethod
    def on(cls, sketch_plane, p: Point2d) -> "Point3d":
        """ the 3D point corresponding to 2D ``p`` in ``sketch_plane``"""
        require_same_units(p.units, sketch_plane.origin.units, "on")
        return sketch_plane.origin + Vector3d.on(sketch_plane, p._position())

    @classmethod
    def xy_on(cls, sketch_plane, x, y) -> "Point3d":
        return cls.on(sketch_plane, Point2d.xy(x, y, sketch_plane.local_space))

    def coordinates_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def x_coordinate(self) -> Quantity:
        return Quantity(self.x, self.units)

    def y_coordinate(self) -> Quantity:
        return Quantity(self.y, self.units)

    def z_coordinate(self) -> Quantity:
        return Quantity(self.z, self.units)

    def distance_from_axis(self, axis) -> Quantity:
        """ unsigned perpendicular distance from ``axis``"""
        offset = self - axis.origin
        return offset.cross(axis.direction.to_vector()).length()

    def signed_distance_from(self, plane) -> Quantity:
        """ distance from ``plane``, positive on the side its normal points to"""
        return (self - plane.origin).component_in(plane.normal)

    def rotate_around(self, axis, angle) -> "Point3d":
        o = axis.origin
        return o + (self - o).rotate_around(axis, angle)

    def mirror_across(self, plane) -> "Point3d":
        o = plane.origin
        return o + (self - o).mirror_across(plane)

    def project_onto(self, plane) -> "Point3d":
        o = plane.origin
        return o + (self - o).project_onto(plane)

    def project_onto_axis(self, axis) -> "Point3d":
        o = axis.origin
        return o + (self - o).projection_in(axis.direction)

    def relative_to(self, frame) -> "Point3d":
        local = (self - frame.origin).relative_to(frame)
        return Point3d(local.x, local.y, local.z, local.units, local.space)

    def place_in(self, frame) -> "Point3d":
        require_same_units(self.units, frame.origin.units, "place_in")
        return frame.origin + self._position().place_in(frame)

    def project_into(self, sketch_plane) -> Point2d:
        local = (self - sketch_plane.origin).project_into(sketch_plane)
        return Point2d(local.x, local.y, local.units, local.space)


__all__ = ["Point2d", "Point3d"]
