import dataclasses

import pytest

from raytrace.bodies import Circle, GeometricBody, GeometricBodyType, Square
from raytrace.vector import Vec3

ORIGIN = Vec3(0.0, 0.0, 0.0)


def test_circle_hit_by_ray_through_center():
    circle = Circle(0.1, Vec3(0.0, 0.0, 1.0), Vec3(250, 118, 112))
    assert circle.hit(ORIGIN, Vec3(0.0, 0.0, 1.0)) is True


def test_circle_hit_along_negative_direction():
    circle = Circle(0.1, Vec3(0.0, 0.0, 1.0), Vec3(250, 118, 112))
    assert circle.hit(ORIGIN, Vec3(0.0, 0.0, -1.0)) is True


def test_circle_missed_by_sideways_ray():
    circle = Circle(0.1, Vec3(0.0, 0.0, 1.0), Vec3(250, 118, 112))
    assert circle.hit(ORIGIN, Vec3(1.0, 0.0, 0.0)) is False


def test_circle_tangent_ray_does_not_count():
    circle = Circle(1.0, Vec3(0.0, 0.0, 1.0), Vec3(1, 2, 3))
    assert circle.hit(ORIGIN, Vec3(1.0, 0.0, 0.0)) is False


def test_body_types():
    assert Circle(1.0, ORIGIN, ORIGIN).body_type is GeometricBodyType.CIRCLE
    assert Square(1.0, ORIGIN, ORIGIN).body_type is GeometricBodyType.SQUARE


def test_square_hit_when_offset_matches_center():
    square = Square(0.4, Vec3(-0.5, 0.5, 1.0), Vec3(0, 128, 0))
    assert square.hit(ORIGIN, Vec3(0.5, -0.5, -1.0)) is True


def test_square_missed_when_offset_far():
    square = Square(0.4, Vec3(-0.5, 0.5, 1.0), Vec3(0, 128, 0))
    assert square.hit(ORIGIN, Vec3(-0.5, 0.5, -1.0)) is False


def test_square_grows_with_camera_depth():
    square = Square(0.4, Vec3(0.0, 0.0, 1.0), Vec3(0, 128, 0))
    direction = Vec3(-0.3, 0.0, -1.0)
    assert square.hit(ORIGIN, direction) is False
    assert square.hit(Vec3(0.0, 0.0, 0.2), direction) is True


def test_abstract_body_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GeometricBody()


def test_bodies_are_immutable():
    circle = Circle(0.1, ORIGIN, ORIGIN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        circle.radius = 0.5
    assert circle.radius == 0.1