"""Two-dimensional polygon transformations: translation, scaling and rotation."""

from __future__ import annotations

import math
from collections.abc import Iterable

Point = tuple[int, int]

_PI = 3.1416


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(value + 0.5)


def translate(points: Iterable[tuple[int, int]], tx: int, ty: int) -> list[Point]:
    """Return the points moved by (tx, ty)."""
    return [(x + tx, y + ty) for x, y in points]


def scale(points: Iterable[tuple[int, int]], sx: float, sy: float) -> list[Point]:
    """Return the points scaled about the origin, rounded to the pixel grid."""
    return [(round_half_up(x * sx), round_half_up(y * sy)) for x, y in points]


def rotate(points: Iterable[tuple[int, int]], degrees: float) -> list[Point]:
    """Return the points rotated anticlockwise about the origin, rounded to the pixel grid."""
    angle = degrees * _PI / 180
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return [
        (round_half_up(x * cos_a - y * sin_a), round_half_up(x * sin_a + y * cos_a))
        for x, y in points
    ]