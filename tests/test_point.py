import math

import pytest

from yapgeom.direction import Direction2d, Direction3d
from yapgeom.errors import SpaceMismatchError, UnitsMismatchError
from yapgeom.frames import Axis2d, Axis3d, Frame2d, Frame3d, Plane3d, SketchPlane3d
from yapgeom.point import Point2d, Point3d
from yapgeom.units import METERS, SQUARE_METERS, UNITLESS, Quantity, meters
from yapgeom.vector import Vector2d, Vector3d


class TestPointArithmetic:
    """points, vectors and the operations between them"""

    def test_translate_literal(self):
        assert(Point2d(3.0, 4.0) + Vector2d(1.0, 2.0) == Point2d(4.0, 6.0))
        assert(Point2d(3.0, 4.0).translate_by(Vector2d(1.0, 2.0)) == Point2d(4.0, 6.0))

    def test_difference_is_a_vector(self):
        v = Point3d(4.0, 6.0, 8.0) - Point3d(1.0, 2.0, 3.0)
        assert(isinstance(v, Vector3d))
        assert(v == Vector3d(3.0, 4.0, 5.0))
        assert(Point3d(4.0, 6.0, 8.0) - Vector3d(1.0, 1.0, 1.0) == Point3d(3.0, 5.0, 7.0))

    def test_vector_plus_point_is_undefined(self):
        with pytest.raises(TypeError):
            Vector2d(1.0, 2.0) + Point2d(3.0, 4.0)
        with pytest.raises(TypeError):
            Point2d(1.0, 2.0) + Point2d(3.0, 4.0)

    def test_vector_from_and_to(self):
        p = Point3d(0.1, 0.2, 0.3)
        q = Point3d(-1.7, 5.5, 1e-3)
        assert(p.vector_from(q) == q - p)
        assert(p.vector_to(q) == p.vector_from(q).reverse())

    def test_vector_from_points_from_first_to_second(self):
        v = Point2d.vector_from(Point2d(0.0, 0.0), Point2d(1.0, 0.0))
        assert(v == Vector2d(1.0, 0.0))
        assert(Point2d(0.0, 0.0).vector_to(Point2d(1.0, 0.0)) == Vector2d(-1.0, 0.0))
        a = Point3d(1.0, 2.0, 3.0)
        b = Point3d(4.0, 6.0, 3.0)
        assert(a.vector_from(b) == Vector3d.from_points(a, b))

    def test_tags_are_checked(self):
        with pytest.raises(UnitsMismatchError):
            Point2d.meters(1.0, 2.0) + Vector2d(1.0, 1.0)
        with pytest.raises(SpaceMismatchError):
            Point3d(1.0, 2.0, 3.0) - Point3d(1.0, 2.0, 3.0, space="local")

    def test_coordinates(self):
        p = Point3d.xyz(meters(1), meters(2), meters(3))
        assert(p.units == METERS)
        assert(p.coordinates() == (meters(1), meters(2), meters(3)))
        assert(p.z_coordinate() == meters(3))
        assert(Point2d.xy(1, 2).coordinates_tuple() == (1.0, 2.0))


class TestPointConstruction:
    """unit tests for point constructors"""

    def test_origin(self):
        assert(Point3d.origin() == Point3d(0.0, 0.0, 0.0))
        assert(Point2d.origin(METERS).units == METERS)

    def test_polar(self):
        p = Point2d.polar(meters(2), math.pi / 2)
        assert(p.units == METERS)
        assert(math.isclose(p.y, 2.0))

    def test_midpoint_and_interpolation(self):
        a = Point3d(1.0, 2.0, 4.0)
        assert(Point3d.midpoint(a, Point3d(3.0, 2.0, 0.0)) == Point3d(2.0, 2.0, 2.0))
        assert(Point3d.interpolate_from(a, Point3d(1.0, 3.0, 8.0), 0.25) == Point3d(1.0, 2.25, 5.0))
        b = Point3d(1.0, 2.0, 8.0)
        assert(Point3d.interpolate_from(a, b, -0.5) == Point3d(1.0, 2.0, 2.0))
        assert(Point3d.interpolate_from(a, b, 1.25) == Point3d(1.0, 2.0, 9.0))

    def test_along(self):
        axis = Axis3d(Point3d(1.0, 1.0, 1.0), Direction3d.Z)
        assert(Point3d.along(axis, 2.0) == Point3d(1.0, 1.0, 3.0))
        assert(Point2d.along(Axis2d.x(), -3.0) == Point2d(-3.0, 0.0))

    def test_on_sketch_plane(self):
        plane = SketchPlane3d.zx(local_space="sketch").translate_by(Vector3d(0.0, 5.0, 0.0))
        p = Point3d.xy_on(plane, 2.0, 3.0)
        assert(p == Point3d(3.0, 5.0, 2.0))
        assert(Point2d(2.0, 3.0, space="sketch").place_onto(plane) == p)
        assert(p.project_into(plane) == Point2d(2.0, 3.0, space="sketch"))

    def test_circumcenter(self):
        c = Point2d.circumcenter(Point2d(0.0, 0.0), Point2d(2.0, 0.0), Point2d(0.0, 2.0))
        assert(c.equal_within(1e-12, Point2d(1.0, 1.0)))
        c = Point3d.circumcenter(Point3d(1.0, 0.0, 5.0), Point3d(-1.0, 0.0, 5.0),
                                 Point3d(0.0, 1.0, 5.0))
        assert(c.equal_within(1e-12, Point3d(0.0, 0.0, 5.0)))

    def test_circumcenter_of_collinear_points(self):
        assert(Point2d.circumcenter(Point2d(0.0, 0.0), Point2d(1.0, 1.0),
                                    Point2d(2.0, 2.0)) is None)
        assert(Point3d.circumcenter(Point3d(0.0, 0.0, 0.0), Point3d(0.0, 0.0, 0.0),
                                    Point3d(1.0, 2.0, 3.0)) is None)

    def test_centroid(self):
        pts = [Point2d(0.0, 0.0), Point2d(3.0, 0.0), Point2d(0.0, 3.0)]
        assert(Point2d.centroid(pts).equal_within(1e-12, Point2d(1.0, 1.0)))
        assert(Point3d.centroid([Point3d(1.0, 2.0, 3.0)]) == Point3d(1.0, 2.0, 3.0))
        assert(Point3d.centroid([]) is None)


class TestPointQueries:
    """distances and comparisons"""

    def test_distances(self):
        p = Point3d.meters(1.0, 2.0, 3.0)
        q = Point3d.meters(3.0, 3.0, 5.0)
        assert(p.distance_from(q) == meters(3.0))
        assert(p.squared_distance_from(q) == Quantity(9.0, SQUARE_METERS))

    def test_distance_along_is_signed(self):
        axis = Axis2d(Point2d(1.0, 1.0), Direction2d.X)
        assert(Point2d(4.0, 7.0).distance_along(axis) == 3.0)
        assert(Point2d(-1.0, 7.0).distance_along(axis) == -2.0)

    def test_distance_from_axis(self):
        axis = Axis2d(Point2d(1.0, 1.0), Direction2d.X)
        assert(Point2d(4.0, 7.0).distance_from_axis(axis) == 6.0)
        assert(Point2d(4.0, -5.0).distance_from_axis(axis) == 6.0)
        assert(Point2d(4.0, -5.0).signed_distance_from(axis) == -6.0)
        d = Point3d(3.0, 4.0, 9.0).distance_from_axis(Axis3d.z())
        assert(d == 5.0)

    def test_signed_distance_from_plane(self):
        plane = Plane3d.xy().offset_by(2.0)
        assert(Point3d(5.0, 5.0, 7.0).signed_distance_from(plane) == 5.0)
        assert(Point3d(5.0, 5.0, 0.0).signed_distance_from(plane) == -2.0)
        assert(Point3d(5.0, 5.0, 0.0).signed_distance_from(plane.reverse_normal()) == 2.0)

    def test_equal_within_is_inclusive(self):
        assert(Point2d(0.0, 0.0).equal_within(5.0, Point2d(3.0, 4.0)))
        assert(not Point2d(0.0, 0.0).equal_within(4.5, Point2d(3.0, 4.0)))


class TestPointTransforms:
    """every transform is offset, transform, restore"""

    def test_scale_about(self):
        p = Point2d(3.0, 3.0).scale_about(Point2d(1.0, 1.0), 2.0)
        assert(p == Point2d(5.0, 5.0))
        assert(Point3d(3.0, 3.0, 3.0).scale_about(Point3d.origin(), 0.0) == Point3d.origin())

    def test_translate_in_and_along(self):
        p = Point3d(1.0, 1.0, 1.0)
        assert(p.translate_in(Direction3d.NEGATIVE_X, 2.0) == Point3d(-1.0, 1.0, 1.0))
        axis = Axis3d(Point3d(9.0, 9.0, 9.0), Direction3d.Y)
        assert(p.translate_along(axis, 4.0) == Point3d(1.0, 5.0, 1.0))

    def test_rotate_around_2d(self):
        p = Point2d(2.0, 1.0).rotate_around(Point2d(1.0, 1.0), math.pi / 2)
        assert(p.equal_within(1e-12, Point2d(1.0, 2.0)))

    def test_rotate_around_3d(self):
        axis = Axis3d(Point3d(1.0, 1.0, 0.0), Direction3d.Z)
        p = Point3d(2.0, 1.0, 7.0).rotate_around(axis, math.pi)
        assert(p.equal_within(1e-12, Point3d(0.0, 1.0, 7.0)))
        assert(Point3d(1.0, 1.0, 3.0).rotate_around(axis, 1.0) == Point3d(1.0, 1.0, 3.0))

    def test_mirror_across(self):
        assert(Point3d(1.0, 2.0, 3.0).mirror_across(Plane3d.xy()) == Point3d(1.0, 2.0, -3.0))
        plane = Plane3d.xy().offset_by(1.0)
        assert(Point3d(1.0, 2.0, 3.0).mirror_across(plane) == Point3d(1.0, 2.0, -1.0))
        axis = Axis2d(Point2d(2.0, 0.0), Direction2d.Y)
        assert(Point2d(3.0, 5.0).mirror_across(axis) == Point2d(1.0, 5.0))

    def test_project_onto(self):
        plane = Plane3d.xy().offset_by(1.0)
        assert(Point3d(1.0, 2.0, 3.0).project_onto(plane) == Point3d(1.0, 2.0, 1.0))
        axis = Axis2d(Point2d(0.0, 1.0), Direction2d.X)
        assert(Point2d(3.0, 5.0).project_onto(axis) == Point2d(3.0, 1.0))
        assert(Point3d(3.0, 4.0, 5.0).project_onto_axis(Axis3d.z()) == Point3d(0.0, 0.0, 5.0))

    def test_frame_round_trip_2d(self):
        frame = Frame2d.with_x_direction(Point2d.meters(3.0, -1.0), Direction2d.from_angle(2.1))
        p = Point2d.meters(0.5, 8.0)
        local = p.relative_to(frame)
        assert(local.space == frame.local_space)
        assert(math.isclose(local.distance_from(Point2d.origin(METERS, frame.local_space)),
                            p.distance_from(frame.origin)))
        assert(local.place_in(frame).equal_within(meters(1e-9), p))

    def test_frame_round_trip_3d(self):
        frame = (Frame3d.at_point(Point3d(1.0, -2.0, 3.0), "body")
                 .rotate_around(Axis3d(Point3d(0.0, 0.0, 1.0),
                                       Direction3d.from_components(1.0, 2.0, 2.0)), 0.9))
        p = Point3d(10.0, 20.0, -30.0)
        local = p.relative_to(frame)
        assert(local.space == "body")
        assert(local.place_in(frame).equal_within(1e-9, p))

    def test_relative_to_frame_at_point(self):
        frame = Frame3d.at_point(Point3d(1.0, 2.0, 3.0))
        assert(Point3d(1.0, 2.0, 4.0).relative_to(frame) == Point3d(0.0, 0.0, 1.0, space=frame.local_space))

    def test_frame_space_checks(self):
        frame = Frame2d.at_origin()
        with pytest.raises(SpaceMismatchError):
            Point2d(1.0, 2.0).place_in(frame)
        with pytest.raises(SpaceMismatchError):
            Point2d(1.0, 2.0, space="local").relative_to(frame)
