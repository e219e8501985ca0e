## axes, coordinate frames, planes and sketch planes for yapgeom

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

"""reference geometry: axes, frames, planes and sketch planes

All of these are frozen dataclasses built from a point and one or more
directions.  The point and the directions share a coordinate space,
which is the *parent space* of the object.  Frames and sketch planes
additionally name the *local space* that coordinates relative to them
are expressed in.

Frames are trusted: their directions are assumed orthonormal and are
not re-checked by the vector, point and direction operations that
consume them.  Use ``from_vectors()`` to build a frame from arbitrary
vectors, or ``is_orthonormal()`` to check one.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Optional

from yapgeom import numeric, xform
from yapgeom.direction import Direction2d, Direction3d
from yapgeom.errors import require_same_space
from yapgeom.point import Point2d, Point3d
from yapgeom.tolerances import GLOBAL_SPACE, LOCAL_SPACE, ORTHONORMAL_TOLERANCE, SKETCH_SPACE
from yapgeom.units import UNITLESS, Unit

logger = logging.getLogger(__name__)


def _is_orthonormal(directions, tol: float) -> bool:
    comps = [d.components() for d in directions]
    for i, a in enumerate(comps):
        if abs(numeric.dot(a, a) - 1.0) > tol:
            return False
        for b in comps[i + 1:]:
            if abs(numeric.dot(a, b)) > tol:
                return False
    return True


def _check_spaces(origin, directions, name: str) -> None:
    for d in directions:
        require_same_space(origin.space, d.space, name)


_space_ids = itertools.count(1)


def _name_local_space(obj, prefix: str) -> None:
    ## unnamed frames and sketch planes each get a fresh local space
    if obj.local_space is None:
        object.__setattr__(obj, "local_space", "{}-{}".format(prefix, next(_space_ids)))


@dataclass(frozen=True)
class Axis2d:
    """A directed line in 2D."""

    origin: Point2d
    direction: Direction2d

    def __post_init__(self):
        _check_spaces(self.origin, (self.direction,), "Axis2d")

    @property
    def parent_space(self) -> str:
        return self.origin.space

    @classmethod
    def x(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Axis2d":
        return cls(Point2d.origin(units, space), Direction2d._unsafe(1.0, 0.0, space))

    @classmethod
    def y(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Axis2d":
        return cls(Point2d.origin(units, space), Direction2d._unsafe(0.0, 1.0, space))

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> "Axis2d":
        return cls(point, direction)

    def reverse(self) -> "Axis2d":
        return Axis2d(self.origin, self.direction.reverse())

    def move_to(self, point: Point2d) -> "Axis2d":
        return Axis2d(point, self.direction)

    def translate_by(self, v) -> "Axis2d":
        return Axis2d(self.origin + v, self.direction)

    def rotate_around(self, center: Point2d, angle) -> "Axis2d":
        r = xform.PreparedRotation2d(angle, center)
        return Axis2d(r.point(self.origin), r.direction(self.direction))

    def mirror_across(self, axis: "Axis2d") -> "Axis2d":
        return Axis2d(self.origin.mirror_across(axis), self.direction.mirror_across(axis))

    def relative_to(self, frame) -> "Axis2d":
        return Axis2d(self.origin.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame) -> "Axis2d":
        return Axis2d(self.origin.place_in(frame), self.direction.place_in(frame))

    def place_onto(self, sketch_plane) -> "Axis3d":
        return Axis3d(self.origin.place_onto(sketch_plane),
                      self.direction.place_onto(sketch_plane))


@dataclass(frozen=True)
class Axis3d:
    """A directed line in 3D."""

    origin: Point3d
    direction: Direction3d

    def __post_init__(self):
        _check_spaces(self.origin, (self.direction,), "Axis3d")

    @property
    def parent_space(self) -> str:
        return self.origin.space

    @classmethod
    def x(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Axis3d":
        return cls(Point3d.origin(units, space), Direction3d._unsafe(1.0, 0.0, 0.0, space))

    @classmethod
    def y(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Axis3d":
        return cls(Point3d.origin(units, space), Direction3d._unsafe(0.0, 1.0, 0.0, space))

    @classmethod
    def z(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Axis3d":
        return cls(Point3d.origin(units, space), Direction3d._unsafe(0.0, 0.0, 1.0, space))

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> "Axis3d":
        return cls(point, direction)

    def reverse(self) -> "Axis3d":
        return Axis3d(self.origin, self.direction.reverse())

    def move_to(self, point: Point3d) -> "Axis3d":
        return Axis3d(point, self.direction)

    def translate_by(self, v) -> "Axis3d":
        return Axis3d(self.origin + v, self.direction)

    def rotate_around(self, axis: "Axis3d", angle) -> "Axis3d":
        require_same_space(self.parent_space, axis.parent_space, "rotate_around")
        r = xform.PreparedRotation3d(axis, angle)
        return Axis3d(r.point(self.origin), r.direction(self.direction))

    def mirror_across(self, plane: "Plane3d") -> "Axis3d":
        require_same_space(self.parent_space, plane.parent_space, "mirror_across")
        m = xform.PreparedMirror3d(plane)
        return Axis3d(m.point(self.origin), m.direction(self.direction))

    def relative_to(self, frame) -> "Axis3d":
        return Axis3d(self.origin.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame) -> "Axis3d":
        return Axis3d(self.origin.place_in(frame), self.direction.place_in(frame))

    def normal_plane(self) -> "Plane3d":
        """ the plane through the origin of this axis, normal to it"""
        return Plane3d(self.origin, self.direction)


@dataclass(frozen=True)
class Frame2d:
    """A 2D coordinate frame: an origin and two perpendicular directions."""

    origin: Point2d
    x_direction: Direction2d
    y_direction: Direction2d
    local_space: Optional[str] = None

    def __post_init__(self):
        _check_spaces(self.origin, (self.x_direction, self.y_direction), "Frame2d")
        _name_local_space(self, LOCAL_SPACE)

    @property
    def parent_space(self) -> str:
        return self.origin.space

    @classmethod
    def at_origin(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
                  local_space: Optional[str] = None) -> "Frame2d":
        return cls.at_point(Point2d.origin(units, space), local_space)

    @classmethod
    def at_point(cls, point: Point2d, local_space: Optional[str] = None) -> "Frame2d":
        """ a frame at ``point`` aligned with its parent space"""
        s = point.space
        return cls(point, Direction2d._unsafe(1.0, 0.0, s), Direction2d._unsafe(0.0, 1.0, s),
                   local_space)

    @classmethod
    def with_x_direction(cls, point: Point2d, x_direction: Direction2d,
                         local_space: Optional[str] = None) -> "Frame2d":
        """ right-handed frame with the given X direction"""
        return cls(point, x_direction, x_direction.perpendicular(), local_space)

    @classmethod
    def from_vectors(cls, point: Point2d, x_vector, y_vector,
                     local_space: Optional[str] = None) -> Optional["Frame2d"]:
        """Orthonormalize two vectors into a frame at ``point``.

        Returns ``None`` if the vectors are zero or parallel.
        """
        dirs = Direction2d.orthonormalize(x_vector, y_vector)
        if dirs is None:
            return None
        return cls(point, dirs[0], dirs[1], local_space)

    def is_orthonormal(self, tol: float = ORTHONORMAL_TOLERANCE) -> bool:
        return _is_orthonormal((self.x_direction, self.y_direction), tol)

    def is_right_handed(self) -> bool:
        return numeric.cross2(self.x_direction.components(), self.y_direction.components()) > 0

    def x_axis(self) -> Axis2d:
        return Axis2d(self.origin, self.x_direction)

    def y_axis(self) -> Axis2d:
        return Axis2d(self.origin, self.y_direction)

    def reverse_x(self) -> "Frame2d":
        return Frame2d(self.origin, self.x_direction.reverse(), self.y_direction,
                       self.local_space)

    def reverse_y(self) -> "Frame2d":
        return Frame2d(self.origin, self.x_direction, self.y_direction.reverse(),
                       self.local_space)

    def move_to(self, point: Point2d) -> "Frame2d":
        return Frame2d(point, self.x_direction, self.y_direction, self.local_space)

    def translate_by(self, v) -> "Frame2d":
        return self.move_to(self.origin + v)

    def rotate_around(self, center: Point2d, angle) -> "Frame2d":
        r = xform.PreparedRotation2d(angle, center)
        return Frame2d(r.point(self.origin), r.direction(self.x_direction),
                       r.direction(self.y_direction), self.local_space)

    def mirror_across(self, axis: Axis2d) -> "Frame2d":
        """ the mirrored frame; the result is left-handed if this one is right-handed"""
        return Frame2d(self.origin.mirror_across(axis),
                       self.x_direction.mirror_across(axis),
                       self.y_direction.mirror_across(axis),
                       self.local_space)

    def relative_to(self, frame: "Frame2d") -> "Frame2d":
        return Frame2d(self.origin.relative_to(frame),
                       self.x_direction.relative_to(frame),
                       self.y_direction.relative_to(frame),
                       self.local_space)

    def place_in(self, frame: "Frame2d") -> "Frame2d":
        return Frame2d(self.origin.place_in(frame),
                       self.x_direction.place_in(frame),
                       self.y_direction.place_in(frame),
                       self.local_space)


@dataclass(frozen=True)
class Frame3d:
    """A 3D coordinate frame: an origin and three perpendicular directions."""

    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d
    local_space: Optional[str] = None

    def __post_init__(self):
        _check_spaces(self.origin, (self.x_direction, self.y_direction, self.z_direction),
                      "Frame3d")
        _name_local_space(self, LOCAL_SPACE)

    @property
    def parent_space(self) -> str:
        return self.origin.space

    @classmethod
    def at_origin(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
                  local_space: Optional[str] = None) -> "Frame3d":
        return cls.at_point(Point3d.origin(units, space), local_space)

    @classmethod
    def at_point(cls, point: Point3d, local_space: Optional[str] = None) -> "Frame3d":
        """ a frame at ``point`` aligned with its parent space"""
        s = point.space
        return cls(point,
                   Direction3d._unsafe(1.0, 0.0, 0.0, s),
                   Direction3d._unsafe(0.0, 1.0, 0.0, s),
                   Direction3d._unsafe(0.0, 0.0, 1.0, s),
                   local_space)

    @classmethod
    def with_z_direction(cls, point: Point3d, z_direction: Direction3d,
                         local_space: Optional[str] = None) -> "Frame3d":
        """Right-handed frame with the given Z direction.

        The X direction is ``z_direction.perpendicular()``.
        """
        xd = z_direction.perpendicular()
        yd = Direction3d._unsafe(*numeric.cross(z_direction.components(), xd.components()),
                                 space=z_direction.space)
        return cls(point, xd, yd, z_direction, local_space)

    @classmethod
    def from_vectors(cls, point: Point3d, x_vector, y_vector, z_vector,
                     local_space: Optional[str] = None) -> Optional["Frame3d"]:
        """Orthonormalize three vectors into a frame at ``point``.

        Returns ``None`` if the vectors are linearly dependent.
        """
        dirs = Direction3d.orthonormalize(x_vector, y_vector, z_vector)
        if dirs is None:
            return None
        return cls(point, dirs[0], dirs[1], dirs[2], local_space)

    def is_orthonormal(self, tol: float = ORTHONORMAL_TOLERANCE) -> bool:
        return _is_orthonormal((self.x_direction, self.y_direction, self.z_direction), tol)

    def is_right_handed(self) -> bool:
        c = numeric.cross(self.x_direction.components(), self.y_direction.components())
        return numeric.dot(c, self.z_direction.components()) > 0

    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.y_direction)

    def z_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.z_direction)

    def xy_plane(self) -> "Plane3d":
        return Plane3d(self.origin, self.z_direction)

    def yz_plane(self) -> "Plane3d":
        return Plane3d(self.origin, self.x_direction)

    def zx_plane(self) -> "Plane3d":
        return Plane3d(self.origin, self.y_direction)

    def xy_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.x_direction, self.y_direction, local_space)

    def yx_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.y_direction, self.x_direction, local_space)

    def yz_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.y_direction, self.z_direction, local_space)

    def zy_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.z_direction, self.y_direction, local_space)

    def zx_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.z_direction, self.x_direction, local_space)

    def xz_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.x_direction, self.z_direction, local_space)

    def reverse_x(self) -> "Frame3d":
        return Frame3d(self.origin, self.x_direction.reverse(), self.y_direction,
                       self.z_direction, self.local_space)

    def reverse_y(self) -> "Frame3d":
        return Frame3d(self.origin, self.x_direction, self.y_direction.reverse(),
                       self.z_direction, self.local_space)

    def reverse_z(self) -> "Frame3d":
        return Frame3d(self.origin, self.x_direction, self.y_direction,
                       self.z_direction.reverse(), self.local_space)

    def move_to(self, point: Point3d) -> "Frame3d":
        return Frame3d(point, self.x_direction, self.y_direction, self.z_direction,
                       self.local_space)

    def translate_by(self, v) -> "Frame3d":
        return self.move_to(self.origin + v)

    def rotate_around(self, axis: Axis3d, angle) -> "Frame3d":
        require_same_space(self.parent_space, axis.parent_space, "rotate_around")
        r = xform.PreparedRotation3d(axis, angle)
        return Frame3d(r.point(self.origin),
                       r.direction(self.x_direction),
                       r.direction(self.y_direction),
                       r.direction(self.z_direction),
                       self.local_space)

    def mirror_across(self, plane: "Plane3d") -> "Frame3d":
        """ the mirrored frame; the result is left-handed if this one is right-handed"""
        require_same_space(self.parent_space, plane.parent_space, "mirror_across")
        m = xform.PreparedMirror3d(plane)
        return Frame3d(m.point(self.origin),
                       m.direction(self.x_direction),
                       m.direction(self.y_direction),
                       m.direction(self.z_direction),
                       self.local_space)

    def relative_to(self, frame: "Frame3d") -> "Frame3d":
        return Frame3d(self.origin.relative_to(frame),
                       self.x_direction.relative_to(frame),
                       self.y_direction.relative_to(frame),
                       self.z_direction.relative_to(frame),
                       self.local_space)

    def place_in(self, frame: "Frame3d") -> "Frame3d":
        return Frame3d(self.origin.place_in(frame),
                       self.x_direction.place_in(frame),
                       self.y_direction.place_in(frame),
                       self.z_direction.place_in(frame),
                       self.local_space)


@dataclass(frozen=True)
class Plane3d:
    """An oriented plane: a point on the plane and a unit normal."""

    origin: Point3d
    normal: Direction3d

    def __post_init__(self):
        _check_spaces(self.origin, (self.normal,), "Plane3d")

    @property
    def parent_space(self) -> str:
        return self.origin.space

    @classmethod
    def xy(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Plane3d":
        return cls(Point3d.origin(units, space), Direction3d._unsafe(0.0, 0.0, 1.0, space))

    @classmethod
    def yz(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Plane3d":
        return cls(Point3d.origin(units, space), Direction3d._unsafe(1.0, 0.0, 0.0, space))

    @classmethod
    def zx(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE) -> "Plane3d":
        return cls(Point3d.origin(units, space), Direction3d._unsafe(0.0, 1.0, 0.0, space))

    @classmethod
    def through(cls, point: Point3d, normal: Direction3d) -> "Plane3d":
        return cls(point, normal)

    @classmethod
    def through_points(cls, p1: Point3d, p2: Point3d, p3: Point3d) -> Optional["Plane3d"]:
        """Plane through three points, normal by the right-hand rule.

        Returns ``None`` if the points are collinear.
        """
        n = (p2 - p1).cross(p3 - p1).direction()
        if n is None:
            logger.debug("plane through collinear points")
            return None
        return cls(p1, n)

    def offset_by(self, distance) -> "Plane3d":
        """ this plane moved ``distance`` along its normal"""
        return Plane3d(self.origin.translate_in(self.normal, distance), self.normal)

    def reverse_normal(self) -> "Plane3d":
        return Plane3d(self.origin, self.normal.reverse())

    def normal_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.normal)

    def move_to(self, point: Point3d) -> "Plane3d":
        return Plane3d(point, self.normal)

    def translate_by(self, v) -> "Plane3d":
        return Plane3d(self.origin + v, self.normal)

    def rotate_around(self, axis: Axis3d, angle) -> "Plane3d":
        require_same_space(self.parent_space, axis.parent_space, "rotate_around")
        r = xform.PreparedRotation3d(axis, angle)
        return Plane3d(r.point(self.origin), r.direction(self.normal))

    def mirror_across(self, plane: "Plane3d") -> "Plane3d":
        require_same_space(self.parent_space, plane.parent_space, "mirror_across")
        m = xform.PreparedMirror3d(plane)
        return Plane3d(m.point(self.origin), m.direction(self.normal))

    def relative_to(self, frame: Frame3d) -> "Plane3d":
        return Plane3d(self.origin.relative_to(frame), self.normal.relative_to(frame))

    def place_in(self, frame: Frame3d) -> "Plane3d":
        return Plane3d(self.origin.place_in(frame), self.normal.place_in(frame))

    def to_sketch_plane(self, local_space: Optional[str] = None) -> "SketchPlane3d":
        """A sketch plane whose normal is this plane's normal.

        The X direction is ``normal.perpendicular()`` and the Y direction
        completes a right-handed triple.
        """
        xd = self.normal.perpendicular()
        yd = Direction3d._unsafe(*numeric.cross(self.normal.components(), xd.components()),
                                 space=self.normal.space)
        return SketchPlane3d(self.origin, xd, yd, local_space)


@dataclass(frozen=True)
class SketchPlane3d:
    """A plane with its own 2D coordinate system.

    2D geometry in ``local_space`` maps into the parent 3D space through
    ``origin``, ``x_direction`` and ``y_direction``.
    """

    origin: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    local_space: Optional[str] = None

    def __post_init__(self):
        _check_spaces(self.origin, (self.x_direction, self.y_direction), "SketchPlane3d")
        _name_local_space(self, SKETCH_SPACE)

    @property
    def parent_space(self) -> str:
        return self.origin.space

    @classmethod
    def _aligned(cls, xi: int, yi: int, units: Unit, space: str,
                 local_space: Optional[str]) -> "SketchPlane3d":
        basis = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
        return cls(Point3d.origin(units, space),
                   Direction3d._unsafe(*basis[xi], space=space),
                   Direction3d._unsafe(*basis[yi], space=space),
                   local_space)

    @classmethod
    def xy(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
           local_space: Optional[str] = None) -> "SketchPlane3d":
        return cls._aligned(0, 1, units, space, local_space)

    @classmethod
    def yx(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
           local_space: Optional[str] = None) -> "SketchPlane3d":
        return cls._aligned(1, 0, units, space, local_space)

    @classmethod
    def yz(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
           local_space: Optional[str] = None) -> "SketchPlane3d":
        return cls._aligned(1, 2, units, space, local_space)

    @classmethod
    def zy(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
           local_space: Optional[str] = None) -> "SketchPlane3d":
        return cls._aligned(2, 1, units, space, local_space)

    @classmethod
    def zx(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
           local_space: Optional[str] = None) -> "SketchPlane3d":
        return cls._aligned(2, 0, units, space, local_space)

    @classmethod
    def xz(cls, units: Unit = UNITLESS, space: str = GLOBAL_SPACE,
           local_space: Optional[str] = None) -> "SketchPlane3d":
        return cls._aligned(0, 2, units, space, local_space)

    @classmethod
    def from_plane(cls, plane: Plane3d, local_space: Optional[str] = None) -> "SketchPlane3d":
        return plane.to_sketch_plane(local_space)

    def is_orthonormal(self, tol: float = ORTHONORMAL_TOLERANCE) -> bool:
        return _is_orthonormal((self.x_direction, self.y_direction), tol)

    def normal_direction(self) -> Direction3d:
        """ ``x_direction`` cross ``y_direction``"""
        c = numeric.cross(self.x_direction.components(), self.y_direction.components())
        return Direction3d._unsafe(*c, space=self.parent_space)

    def to_plane(self) -> Plane3d:
        return Plane3d(self.origin, self.normal_direction())

    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin, self.y_direction)

    def reverse_x(self) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.x_direction.reverse(), self.y_direction,
                             self.local_space)

    def reverse_y(self) -> "SketchPlane3d":
        return SketchPlane3d(self.origin, self.x_direction, self.y_direction.reverse(),
                             self.local_space)

    def offset_by(self, distance) -> "SketchPlane3d":
        return self.move_to(self.origin.translate_in(self.normal_direction(), distance))

    def move_to(self, point: Point3d) -> "SketchPlane3d":
        return SketchPlane3d(point, self.x_direction, self.y_direction, self.local_space)

    def translate_by(self, v) -> "SketchPlane3d":
        return self.move_to(self.origin + v)

    def rotate_around(self, axis: Axis3d, angle) -> "SketchPlane3d":
        require_same_space(self.parent_space, axis.parent_space, "rotate_around")
        r = xform.PreparedRotation3d(axis, angle)
        return SketchPlane3d(r.point(self.origin), r.direction(self.x_direction),
                             r.direction(self.y_direction), self.local_space)

    def relative_to(self, frame: Frame3d) -> "SketchPlane3d":
        return SketchPlane3d(self.origin.relative_to(frame),
                             self.x_direction.relative_to(frame),
                             self.y_direction.relative_to(frame),
                             self.local_space)

    def place_in(self, frame: Frame3d) -> "SketchPlane3d":
        return SketchPlane3d(self.origin.place_in(frame),
                             self.x_direction.place_in(frame),
                             self.y_direction.place_in(frame),
                             self.local_space)


__all__ = ["Axis2d", "Axis3d", "Frame2d", "Frame3d", "Plane3d", "SketchPlane3d"]
