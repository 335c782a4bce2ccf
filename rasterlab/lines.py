"""Line rasterisation: the digital differential analyser and Bresenham's algorithm."""

from __future__ import annotations

import math

Point = tuple[int, int]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def dda(x1: int, y1: int, x2: int, y2: int) -> list[Point]:
    """Return the pixels of the line from (x1, y1) to (x2, y2) by incremental DDA."""
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [(x1, y1)]
    x_inc = dx / steps
    y_inc = dy / steps
    x, y = float(x1), float(y1)
    pixels: list[Point] = []
    for _ in range(steps + 1):
        pixels.append((_round_half_away(x), _round_half_away(y)))
        x += x_inc
        y += y_inc
    return pixels


def bresenham(x1: int, y1: int, x2: int, y2: int) -> list[Point]:
    """Return the pixels of the line from (x1, y1) to (x2, y2) by Bresenham's algorithm."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    x, y = x1, y1
    pixels: list[Point] = []
    while True:
        pixels.append((x, y))
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return pixels