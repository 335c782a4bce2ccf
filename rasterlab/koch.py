"""Koch curve generation on an integer grid."""

from __future__ import annotations

Point = tuple[int, int]
Segment = tuple[Point, Point]

_SIN60 = 0.86602540


def _div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _divide(p0: Point, p4: Point) -> tuple[Point, Point, Point, Point, Point]:
    x0, y0 = p0
    x4, y4 = p4
    lx = _div_trunc(x4 - x0, 3)
    ly = _div_trunc(y4 - y0, 3)
    x1, y1 = x0 + lx, y0 + ly
    x3, y3 = x0 + 2 * lx, y0 + 2 * ly
    xx = x3 - x1
    yy = y3 - y1
    x2 = int(x1 + (xx * 0.5 + yy * _SIN60))
    y2 = int(y1 + (yy * 0.5 - xx * _SIN60))
    return (p0, (x1, y1), (x2, y2), (x3, y3), p4)


def _segments(p0: Point, p4: Point, level: int):
    points = _divide(p0, p4)
    pairs = zip(points, points[1:])
    if level > 0:
        for a, b in pairs:
            yield from _segments(a, b, level - 1)
    else:
        yield from pairs


def koch_segments(x1: int, y1: int, x2: int, y2: int, level: int) -> list[Segment]:
    """Return the line segments of a Koch curve between two points."""
    return list(_segments((x1, y1), (x2, y2), level))


def koch_points(x1: int, y1: int, x2: int, y2: int, level: int) -> list[Point]:
    """Return the Koch curve between two points as a connected polyline."""
    segments = koch_segments(x1, y1, x2, y2, level)
    return [segments[0][0], *(end for _, end in segments)]