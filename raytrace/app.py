"""Interactive window that renders the scene and logs frame times."""

from __future__ import annotations

import argparse
import os
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from raytrace.scene import Scene, default_objects  # noqa: E402
from raytrace.timelog import max_fps, write_log  # noqa: E402
from raytrace.vector import Vec3  # noqa: E402

CAMERA_STEP = 0.05
FRAME_RATE = 60
FRAME_TIME_MS = 1000 // FRAME_RATE
WINDOW_TITLE = "Raytracing Project"


def build_scene(image_width: int = 400, aspect_ratio: float = 1.0) -> Scene:
    """Create the default scene for an image of the given width."""
    image_height = int(image_width / aspect_ratio)
    viewport_height = 2.0
    viewport_width = aspect_ratio * viewport_height
    return Scene(
        aspect_ratio,
        image_width,
        image_height,
        viewport_height,
        viewport_width,
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 0.0, 1.0),
        default_objects(),
    )


def handle_event(scene: Scene, event: pygame.event.Event) -> bool:
    """Apply one input event to the scene; return True if it asks to quit."""
    if event.type == pygame.KEYDOWN:
        moves = {
            pygame.K_LEFT: (scene.move_camera_x, -CAMERA_STEP),
            pygame.K_RIGHT: (scene.move_camera_x, CAMERA_STEP),
            pygame.K_UP: (scene.move_camera_y, -CAMERA_STEP),
            pygame.K_DOWN: (scene.move_camera_y, CAMERA_STEP),
        }
        if event.key in moves:
            move, step = moves[event.key]
            move(step)
        return event.key == pygame.K_RETURN
    if event.type == pygame.MOUSEWHEEL:
        scene.move_camera_z(CAMERA_STEP if event.y > 0 else -CAMERA_STEP)
        return False
    return event.type == pygame.QUIT


def _render(scene: Scene, surface: pygame.Surface) -> None:
    surface.fill((0, 0, 0))
    scene.create(lambda i, j, color: surface.set_at((i, j), color))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a simple ray-traced scene.")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument(
        "--log",
        type=Path,
        default=Path.cwd() / ".." / ".." / "time_stamp.log",
        help="where to write the frame time log",
    )
    args = parser.parse_args(argv)

    scene = build_scene(args.width)
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode((scene.image_width, scene.image_height))
        except pygame.error as exc:
            print(f"Could not create window: {exc}")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)

        _render(scene, surface)

        frame_times: list[int] = []
        quit_requested = False
        while not quit_requested:
            start = time.monotonic()
            for event in pygame.event.get():
                if handle_event(scene, event):
                    quit_requested = True
                    print("QUIT!")
                    break
            _render(scene, surface)
            frame_times.append(int((time.monotonic() - start) * 1000))
            pygame.time.delay(FRAME_TIME_MS)

        write_log(frame_times, max_fps(frame_times), args.log)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())