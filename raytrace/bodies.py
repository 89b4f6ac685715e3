"""Geometric bodies that a ray can hit."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from raytrace.vector import Vec3


class GeometricBodyType(enum.Enum):
    """Kinds of body a scene can hold."""

    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class GeometricBody(ABC):
    """A body with a center and an RGB color (components 0-255)."""

    center: Vec3
    color: Vec3
    body_type: ClassVar[GeometricBodyType]

    @abstractmethod
    def hit(self, camera_origin: Vec3, ray_direction: Vec3) -> bool:
        """Return True if the ray from ``camera_origin`` hits the body."""


@dataclass(frozen=True)
class Circle(GeometricBody):
    """A sphere seen as a disc; hit by any line through the camera."""

    radius: float
    center: Vec3
    color: Vec3

    body_type: ClassVar[GeometricBodyType] = GeometricBodyType.CIRCLE

    def hit(self, camera_origin: Vec3, ray_direction: Vec3) -> bool:
        ac = self.center - camera_origin
        a = ray_direction.dot(ray_direction)
        b = 2 * ac.dot(ray_direction)
        c = ac.dot(ac) - self.radius * self.radius
        return b * b - 4 * a * c > 0


@dataclass(frozen=True)
class Square(GeometricBody):
    """An axis-aligned square whose apparent size grows with camera depth."""

    side: float
    center: Vec3
    color: Vec3

    body_type: ClassVar[GeometricBodyType] = GeometricBodyType.SQUARE

    def hit(self, camera_origin: Vec3, ray_direction: Vec3) -> bool:
        ac = camera_origin - ray_direction
        limit = self.side / 2 + camera_origin.z
        return abs(ac.x - self.center.x) <= limit and abs(ac.y - self.center.y) <= limit