import math

import pytest

from raytrace.timelog import max_fps, write_log


def test_write_log_format(tmp_path):
    path = tmp_path / "time_stamp.log"
    write_log([16, 20], 50.0, path)
    assert path.read_text() == "Frame 0:\t16 ms\nFrame 1:\t20 ms\nMaximum FPS:\t50.000000 fps\n"


def test_write_log_truncates(tmp_path):
    path = tmp_path / "time_stamp.log"
    write_log([1, 2, 3], 10.0, path)
    write_log([7], 10.0, path)
    lines = path.read_text().splitlines()
    assert lines[0] == "Frame 0:\t7 ms"
    assert len(lines) == 2


def test_write_log_line_per_frame(tmp_path):
    path = tmp_path / "time_stamp.log"
    durations = [5, 6, 7, 8, 9]
    write_log(durations, 1.0, path)
    frame_lines = [line for line in path.read_text().splitlines() if line.startswith("Frame ")]
    assert len(frame_lines) == len(durations)


def test_max_fps_uses_slowest_frame():
    assert max_fps([10, 20, 5]) == pytest.approx(50.0)


def test_max_fps_order_independent():
    assert max_fps([3, 9, 4]) == max_fps([9, 4, 3])


def test_max_fps_zero_time_is_infinite():
    assert max_fps([0, 0]) == math.inf


def test_max_fps_empty_raises():
    with pytest.raises(ValueError):
        max_fps([])