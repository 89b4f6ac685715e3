"""Frame timing log."""

from __future__ import annotations

import math
import os
from typing import Iterable


def write_log(durations: Iterable[float], max_fps: float, path: str | os.PathLike[str]) -> None:
    """Write per-frame durations (ms) and the maximum FPS to ``path``, replacing it."""
    with open(path, "w", encoding="utf-8") as out:
        for number, duration in enumerate(durations):
            out.write(f"Frame {number}:\t{duration:g} ms\n")
        out.write(f"Maximum FPS:\t{max_fps:f} fps\n")


def max_fps(frame_times: Iterable[float]) -> float:
    """Return the frame rate implied by the slowest frame time in milliseconds."""
    times = list(frame_times)
    if not times:
        raise ValueError("no frame times recorded")
    slowest = max(times)
    if slowest == 0:
        return math.inf
    return 1.0 / (slowest * 0.001)