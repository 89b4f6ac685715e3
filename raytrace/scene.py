"""A scene: camera, viewport and the bodies it renders."""

from __future__ import annotations

from typing import Callable, Iterable

from raytrace.bodies import Circle, GeometricBody, Square
from raytrace.vector import Vec3

Color = tuple[int, int, int]

_WHITE = Vec3(1.0, 1.0, 1.0)
_BLUE = Vec3(0.5, 0.7, 1.0)


def default_objects() -> list[GeometricBody]:
    """Return the two circles and one square the scene shows by default."""
    return [
        Circle(0.1, Vec3(0.0, 0.0, 1.0), Vec3(250, 118, 112)),
        Circle(0.2, Vec3(0.5, 0.5, 1.0), Vec3(255, 128, 0)),
        Square(0.4, Vec3(-0.5, 0.5, 1.0), Vec3(0, 128, 0)),
    ]


class Scene:
    """Camera and viewport geometry plus the bodies to draw."""

    def __init__(
        self,
        aspect_ratio: float,
        image_width: int,
        image_height: int,
        viewport_height: float,
        viewport_width: float,
        camera_origin: Vec3,
        focal_length: Vec3,
        objects: Iterable[GeometricBody] | None = None,
    ) -> None:
        if image_width < 2 or image_height < 2:
            raise ValueError("image must be at least 2x2 pixels")
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.image_height = image_height
        self.viewport_height = viewport_height
        self.viewport_width = viewport_width
        self.camera_origin = camera_origin
        self.focal_length = focal_length
        self.horizontal = Vec3(viewport_width, 0.0, 0.0)
        self.vertical = Vec3(0.0, viewport_height, 0.0)
        # Fixed at construction; moving the camera later shifts the rays instead.
        self.lower_left_corner = (
            camera_origin - self.horizontal / 2 - self.vertical / 2 - focal_length
        )
        self.objects = list(default_objects() if objects is None else objects)

    def move_camera_x(self, increment: float) -> None:
        self.camera_origin = self.camera_origin + Vec3(increment, 0.0, 0.0)

    def move_camera_y(self, increment: float) -> None:
        self.camera_origin = self.camera_origin + Vec3(0.0, increment, 0.0)

    def move_camera_z(self, increment: float) -> None:
        self.camera_origin = self.camera_origin + Vec3(0.0, 0.0, increment)

    def background_color(self, ray_direction: Vec3) -> Vec3:
        """Blend white to blue by the height of the ray direction (0-1 per channel)."""
        unit = ray_direction / ray_direction.norm()
        t = 0.5 * (unit.y + 1.0)
        return (1.0 - t) * _WHITE + t * _BLUE

    def ray_direction(self, i: int, j: int) -> Vec3:
        """Return the direction of the ray through pixel (i, j)."""
        u = i / (self.image_width - 1)
        v = j / (self.image_height - 1)
        return (
            self.lower_left_corner
            + u * self.horizontal
            + v * self.vertical
            - self.camera_origin
        )

    def pixel_color(self, i: int, j: int) -> Color:
        """Return the RGB color of pixel (i, j); later bodies paint over earlier."""
        direction = self.ray_direction(i, j)
        background = self.background_color(direction)
        color: Color = tuple(int(c * 255) for c in background)  # type: ignore[assignment]
        for body in self.objects:
            if body.hit(self.camera_origin, direction):
                color = tuple(int(c) for c in body.color)  # type: ignore[assignment]
        return color

    def create(self, plot: Callable[[int, int, Color], object]) -> None:
        """Call ``plot(i, j, color)`` for every pixel, top row first."""
        for j in reversed(range(self.image_height)):
            for i in range(self.image_width):
                plot(i, j, self.pixel_color(i, j))