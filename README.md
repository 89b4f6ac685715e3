# raytrace

A small interactive ray tracer. It draws two circles (spheres seen head-on) and
a square against a white-to-blue sky gradient in a pygame window. You can move
the camera while it runs.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Running

```
raytrace
```

This opens a window titled "Raytracing Project". By default the window is
400×400 pixels.

Options:

| Option          | Meaning                                                                 |
|-----------------|-------------------------------------------------------------------------|
| `--width N`     | image width in pixels (default 400). The height is the same, because the aspect ratio is 1. |
| `--log PATH`    | where to write the frame-time log (default `../../time_stamp.log`, relative to the current directory) |

Controls:

| Input                        | Effect                                  |
|------------------------------|-----------------------------------------|
| Left / Right                 | move the camera along x by −0.05 / +0.05 |
| Up / Down                    | move the camera along y by −0.05 / +0.05 |
| Mouse wheel up / down        | move the camera along z by +0.05 / −0.05 |
| Enter, or closing the window | quit (prints `QUIT!`)                   |

Each frame is rendered again in full. After each frame the program waits 16 ms.
When you quit, the log file is overwritten. It holds one line for each frame, in
the form `Frame N:<TAB><ms> ms`, where the time is counted in whole milliseconds.
The last line is `Maximum FPS:<TAB><fps> fps`. That rate is worked out from the
slowest frame. If every frame took 0 ms, the rate is `inf`.

If the window cannot be created, the program prints
`Could not create window: ...` and exits with status 1.

## Using it as a library

```python
from raytrace.app import build_scene

scene = build_scene(image_width=200, aspect_ratio=1.0)
scene.move_camera_x(0.1)

# Colour of one pixel, as an (r, g, b) tuple of ints in 0..255
print(scene.pixel_color(100, 100))

# Render every pixel through a callback, top row first
pixels = {}
scene.create(lambda i, j, color: pixels.__setitem__((i, j), color))
```

The modules:

- `raytrace.vector`: `Vec3`, a small immutable 3-vector. It supports `+`, `-`,
  unary `-`, multiplication and division by a scalar, iteration, `dot` and `norm`.
- `raytrace.bodies`: the `GeometricBodyType` enum (`CIRCLE`, `SQUARE`,
  `TRIANGLE`), the abstract `GeometricBody`, and the concrete `Circle(radius,
  center, color)` and `Square(side, center, color)`. Each of them has a
  `hit(camera_origin, ray_direction)` test.
- `raytrace.scene`:
  - `Scene` holds the camera, the viewport and the bodies. It provides
    `move_camera_x/y/z`, `background_color`, `ray_direction(i, j)`,
    `pixel_color(i, j)` and `create(plot)`.
  - When a ray hits more than one body, the body that comes later in the list
    paints over the earlier ones.
  - The viewport's lower-left corner is fixed when the scene is built. Moving the
    camera later shifts the ray directions.
  - A scene must be at least 2×2 pixels, or `ValueError` is raised.
  - `default_objects()` returns the bodies of the standard scene.
- `raytrace.timelog`:
  - `write_log(durations, max_fps, path)` writes the frame log.
  - `max_fps(frame_times)` returns the rate implied by the slowest time. It
    raises `ValueError` when there are no frame times.
- `raytrace.app`:
  - `build_scene(image_width, aspect_ratio)` builds the standard scene.
  - `handle_event(scene, event)` applies one pygame event and returns `True` when
    the event asks to quit.
  - `main` is the command's entry point.

## Limitations

- There is no lighting, no shading and no depth ordering. A hit body is drawn in
  its flat colour.
- The `TRIANGLE` body type is listed, but no triangle body exists.
- Rendered images are shown only in the window. They are never saved to a file.