"""Isometric projection and straight-line rasterisation."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator, Tuple

__all__ = [
    "WIDTH",
    "HEIGHT",
    "SCALE",
    "ANGLE",
    "isometric",
    "line_points",
    "draw_line",
]

WIDTH = 1000
HEIGHT = 800
SCALE = 20
ANGLE = 0.523599  # 30 degrees in radians


def isometric(x: int, y: int, z: int) -> Tuple[int, int]:
    """Project a grid point of height ``z`` onto the screen plane.

    Results are truncated toward zero to whole pixels.
    """
    new_x = int((x - y) * math.cos(ANGLE))
    new_y = int((x + y) * math.sin(ANGLE) - z)
    return new_x, new_y


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """The pixels of the line from ``(x0, y0)`` to ``(x1, y1)``, both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def draw_line(
    put_pixel: Callable[[int, int, Any], Any],
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: Any,
) -> None:
    """Call ``put_pixel(x, y, color)`` for every pixel of the line."""
    for x, y in line_points(x0, y0, x1, y1):
        put_pixel(x, y, color)