## unit-length directions in 2D and 3D for yapgeom

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

"""unit-length directions for **yapgeom**

A direction is pure orientation: two or three dimensionless components
whose squared norm is one.  Directions are never scaled, so the
operations here are the ones that preserve unit length exactly
(negation, 90 degree rotation, change of orthonormal basis) or that
renormalize their result.

Building a direction directly, ``Direction3d(0.6, 0.8, 0.0)``, checks
the unit-length invariant and raises ``GeometryError`` if it does not
hold.  ``Direction3d.from_components()`` normalizes arbitrary components
and returns ``None`` for the zero vector.  ``_unsafe()`` skips the check
entirely and is reserved for call sites that have already established
unit length by construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import atan2, cos, sin
from typing import Optional, Tuple

from yapgeom import numeric, xform
from yapgeom.errors import GeometryError, require_same_space
from yapgeom.tolerances import GLOBAL_SPACE, UNIT_LENGTH_TOLERANCE
from yapgeom.units import to_radians

logger = logging.getLogger(__name__)


def _check_unit_length(c, cls_name: str) -> None:
    for x in c:
        if not numeric.isgoodnum(x):
            raise GeometryError('bad component passed to {}: {}'.format(cls_name, x))
    if not abs(numeric.squared_norm(c) - 1.0) <= UNIT_LENGTH_TOLERANCE:
        raise GeometryError(
            '{} components {} are not unit length; use {}.from_components()'.format(
                cls_name, tuple(c), cls_name))


@dataclass(frozen=True)
class Direction2d:
    """A unit-length 2D direction."""

    x: float
    y: float
    space: str = GLOBAL_SPACE

    def __post_init__(self):
        _check_unit_length((self.x, self.y), "Direction2d")
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def _unsafe(cls, x: float, y: float, space: str = GLOBAL_SPACE) -> "Direction2d":
        d = object.__new__(cls)
        object.__setattr__(d, "x", x)
        object.__setattr__(d, "y", y)
        object.__setattr__(d, "space", space)
        return d

    @classmethod
    def from_components(cls, x: float, y: float,
                        space: str = GLOBAL_SPACE) -> Optional["Direction2d"]:
        """Normalize ``(x, y)``, or return ``None`` if it is exactly zero."""
        _, u = numeric.stable_normalize((x, y))
        if u is None:
            logger.debug("zero components have no 2D direction")
            return None
        return cls._unsafe(u[0], u[1], space)

    @classmethod
    def from_angle(cls, angle, space: str = GLOBAL_SPACE) -> "Direction2d":
        """Direction at ``angle`` counterclockwise from the positive X axis."""
        rad = to_radians(angle)
        return cls._unsafe(cos(rad), sin(rad), space)

    @staticmethod
    def orthonormalize(x_vector, y_vector) -> Optional[Tuple["Direction2d", "Direction2d"]]:
        """Gram-Schmidt two 2D vectors into an orthonormal pair.

        Returns ``None`` if the vectors are zero or parallel.
        """
        require_same_space(x_vector.space, y_vector.space, "orthonormalize")
        xc = x_vector.components_tuple()
        _, xd = numeric.stable_normalize(xc)
        if xd is None:
            logger.debug("orthonormalize: zero x vector")
            return None
        yc = y_vector.components_tuple()
        yc = numeric.sub(yc, numeric.scale(xd, numeric.dot(xd, yc)))
        _, yd = numeric.stable_normalize(yc)
        if yd is None:
            logger.debug("orthonormalize: parallel vectors")
            return None
        space = x_vector.space
        return (Direction2d._unsafe(xd[0], xd[1], space),
                Direction2d._unsafe(yd[0], yd[1], space))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    components_tuple = components

    def x_component(self) -> float:
        return self.x

    def y_component(self) -> float:
        return self.y

    def component_in(self, other: "Direction2d") -> float:
        """ cosine of the angle between this direction and ``other``"""
        require_same_space(self.space, other.space, "component_in")
        return self.x * other.x + self.y * other.y

    def to_angle(self) -> float:
        """ counterclockwise angle from the positive X axis, in (-pi, pi]"""
        return atan2(self.y, self.x)

    def angle_from(self, other: "Direction2d") -> float:
        """ signed counterclockwise angle from ``other`` to this direction"""
        require_same_space(self.space, other.space, "angle_from")
        return atan2(other.x * self.y - other.y * self.x,
                     other.x * self.x + other.y * self.y)

    def equal_within(self, angle, other: "Direction2d") -> bool:
        return abs(self.angle_from(other)) <= to_radians(angle)

    def to_vector(self):
        from yapgeom.vector import Vector2d
        return Vector2d(self.x, self.y, space=self.space)

    def reverse(self) -> "Direction2d":
        return Direction2d._unsafe(-self.x, -self.y, self.space)

    def perpendicular(self) -> "Direction2d":
        """ this direction rotated 90 degrees counterclockwise, exactly"""
        px, py = numeric.perpendicular2((self.x, self.y))
        return Direction2d._unsafe(px, py, self.space)

    rotate_counterclockwise = perpendicular

    def rotate_clockwise(self) -> "Direction2d":
        return Direction2d._unsafe(self.y, -self.x, self.space)

    def _transformed(self, m) -> "Direction2d":
        x, y = m.apply((self.x, self.y))
        return Direction2d._unsafe(x, y, self.space)

    def rotate_by(self, angle) -> "Direction2d":
        return self._transformed(xform.Rotation2(angle))

    def mirror_across(self, axis) -> "Direction2d":
        require_same_space(self.space, axis.direction.space, "mirror_across")
        n = numeric.perpendicular2(axis.direction.components())
        return self._transformed(xform.Mirror(n))

    def relative_to(self, frame) -> "Direction2d":
        require_same_space(self.space, frame.parent_space, "relative_to")
        c = (self.x, self.y)
        return Direction2d._unsafe(numeric.dot(c, frame.x_direction.components()),
                                   numeric.dot(c, frame.y_direction.components()),
                                   frame.local_space)

    def place_in(self, frame) -> "Direction2d":
        require_same_space(self.space, frame.local_space, "place_in")
        xd = frame.x_direction
        yd = frame.y_direction
        return Direction2d._unsafe(self.x * xd.x + self.y * yd.x,
                                   self.x * xd.y + self.y * yd.y,
                                   frame.parent_space)

    def place_onto(self, sketch_plane) -> "Direction3d":
        """ the 3D direction corresponding to this direction in ``sketch_plane``"""
        require_same_space(self.space, sketch_plane.local_space, "place_onto")
        xd = sketch_plane.x_direction
        yd = sketch_plane.y_direction
        return Direction3d._unsafe(self.x * xd.x + self.y * yd.x,
                                   self.x * xd.y + self.y * yd.y,
                                   self.x * xd.z + self.y * yd.z,
                                   sketch_plane.parent_space)


@dataclass(frozen=True)
class Direction3d:
    """A unit-length 3D direction."""

    x: float
    y: float
    z: float
    space: str = GLOBAL_SPACE

    def __post_init__(self):
        _check_unit_length((self.x, self.y, self.z), "Direction3d")
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def _unsafe(cls, x: float, y: float, z: float,
                space: str = GLOBAL_SPACE) -> "Direction3d":
        d = object.__new__(cls)
        object.__setattr__(d, "x", x)
        object.__setattr__(d, "y", y)
        object.__setattr__(d, "z", z)
        object.__setattr__(d, "space", space)
        return d

    @classmethod
    def from_components(cls, x: float, y: float, z: float,
                        space: str = GLOBAL_SPACE) -> Optional["Direction3d"]:
        """Normalize ``(x, y, z)``, or return ``None`` if it is exactly zero."""
        _, u = numeric.stable_normalize((x, y, z))
        if u is None:
            logger.debug("zero components have no 3D direction")
            return None
        return cls._unsafe(u[0], u[1], u[2], space)

    @staticmethod
    def orthonormalize(v1, v2, v3) -> Optional[Tuple["Direction3d", "Direction3d", "Direction3d"]]:
        """Gram-Schmidt three 3D vectors into an orthonormal triple.

        The first direction is parallel to ``v1``, the second lies in the
        plane of ``v1`` and ``v2``, and the third is whatever is left of
        ``v3``, so the handedness of the result follows the input.
        Returns ``None`` if the vectors are linearly dependent.
        """
        require_same_space(v1.space, v2.space, "orthonormalize")
        require_same_space(v1.space, v3.space, "orthonormalize")
        _, xd = numeric.stable_normalize(v1.components_tuple())
        if xd is None:
            logger.debug("orthonormalize: zero first vector")
            return None
        c2 = v2.components_tuple()
        c2 = numeric.sub(c2, numeric.scale(xd, numeric.dot(xd, c2)))
        _, yd = numeric.stable_normalize(c2)
        if yd is None:
            logger.debug("orthonormalize: first two vectors are parallel")
            return None
        c3 = v3.components_tuple()
        c3 = numeric.sub(c3, numeric.scale(xd, numeric.dot(xd, c3)))
        c3 = numeric.sub(c3, numeric.scale(yd, numeric.dot(yd, c3)))
        _, zd = numeric.stable_normalize(c3)
        if zd is None:
            logger.debug("orthonormalize: vectors are coplanar")
            return None
        space = v1.space
        return (Direction3d._unsafe(*xd, space=space),
                Direction3d._unsafe(*yd, space=space),
                Direction3d._unsafe(*zd, space=space))

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    components_tuple = components

    def x_component(self) -> float:
        return self.x

    def y_component(self) -> float:
        return self.y

    def z_component(self) -> float:
        return self.z

    def component_in(self, other: "Direction3d") -> float:
        require_same_space(self.space, other.space, "component_in")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle_from(self, other: "Direction3d") -> float:
        """ unsigned angle between the two directions, in [0, pi]"""
        require_same_space(self.space, other.space, "angle_from")
        a = self.components()
        b = other.components()
        return atan2(numeric.stable_length(numeric.cross(a, b)), numeric.dot(a, b))

    def equal_within(self, angle, other: "Direction3d") -> bool:
        return self.angle_from(other) <= to_radians(angle)

    def to_vector(self):
        from yapgeom.vector import Vector3d
        return Vector3d(self.x, self.y, self.z, space=self.space)

    def reverse(self) -> "Direction3d":
        return Direction3d._unsafe(-self.x, -self.y, -self.z, self.space)

    def perpendicular(self) -> "Direction3d":
        """ an arbitrary but deterministic perpendicular direction"""
        _, u = numeric.stable_normalize(numeric.perpendicular3(self.components()))
        return Direction3d._unsafe(u[0], u[1], u[2], self.space)

    def _transformed(self, m) -> "Direction3d":
        x, y, z = m.apply(self.components())
        return Direction3d._unsafe(x, y, z, self.space)

    def rotate_around(self, axis, angle) -> "Direction3d":
        require_same_space(self.space, axis.direction.space, "rotate_around")
        return self._transformed(xform.Rotation(axis.direction.components(), angle))

    def mirror_across(self, plane) -> "Direction3d":
        require_same_space(self.space, plane.normal.space, "mirror_across")
        return self._transformed(xform.Mirror(plane.normal.components()))

    def project_onto(self, plane) -> Optional["Direction3d"]:
        """ in-plane part of this direction, or ``None`` if it is the normal"""
        require_same_space(self.space, plane.normal.space, "project_onto")
        n = plane.normal.components()
        c = self.components()
        p = numeric.sub(c, numeric.scale(n, numeric.dot(n, c)))
        return Direction3d.from_components(p[0], p[1], p[2], self.space)

    def project_into(self, sketch_plane) -> Optional[Direction2d]:
        require_same_space(self.space, sketch_plane.parent_space, "project_into")
        c = self.components()
        return Direction2d.from_components(
            numeric.dot(c, sketch_plane.x_direction.components()),
            numeric.dot(c, sketch_plane.y_direction.components()),
            sketch_plane.local_space)

    def relative_to(self, frame) -> "Direction3d":
        require_same_space(self.space, frame.parent_space, "relative_to")
        c = self.components()
        return Direction3d._unsafe(numeric.dot(c, frame.x_direction.components()),
                                   numeric.dot(c, frame.y_direction.components()),
                                   numeric.dot(c, frame.z_direction.components()),
                                   frame.local_space)

    def place_in(self, frame) -> "Direction3d":
        require_same_space(self.space, frame.local_space, "place_in")
        xd = frame.x_direction
        yd = frame.y_direction
        zd = frame.z_direction
        return Direction3d._unsafe(self.x * xd.x + self.y * yd.x + self.z * zd.x,
                                   self.x * xd.y + self.y * yd.y + self.z * zd.y,
                                   self.x * xd.z + self.y * yd.z + self.z * zd.z,
                                   frame.parent_space)


## global-space cardinal directions
Direction2d.X = Direction2d._unsafe(1.0, 0.0)
Direction2d.Y = Direction2d._unsafe(0.0, 1.0)
Direction2d.NEGATIVE_X = Direction2d._unsafe(-1.0, 0.0)
Direction2d.NEGATIVE_Y = Direction2d._unsafe(0.0, -1.0)

Direction3d.X = Direction3d._unsafe(1.0, 0.0, 0.0)
Direction3d.Y = Direction3d._unsafe(0.0, 1.0, 0.0)
Direction3d.Z = Direction3d._unsafe(0.0, 0.0, 1.0)
Direction3d.NEGATIVE_X = Direction3d._unsafe(-1.0, 0.0, 0.0)
Direction3d.NEGATIVE_Y = Direction3d._unsafe(0.0, -1.0, 0.0)
Direction3d.NEGATIVE_Z = Direction3d._unsafe(0.0, 0.0, -1.0)


__all__ = ["Direction2d", "Direction3d"]
