"""Polygon clipping against the edges of a rectangular window, one edge at a time."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

Point = tuple[int, int]


@dataclass(frozen=True)
class Window:
    """An axis-aligned clipping window."""

    xmin: int
    ymin: int
    xmax: int
    ymax: int

    def __post_init__(self) -> None:
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise ValueError(
                f"window corners out of order: ({self.xmin}, {self.ymin}) to ({self.xmax}, {self.ymax})"
            )


def _clip_edge(
    points: Iterable[tuple[int, int]],
    keep: Callable[[Point], bool],
    crosses: Callable[[Point, Point], bool],
    intersect: Callable[[Point, Point], Point],
) -> list[Point]:
    vertices = [(int(x), int(y)) for x, y in points]
    result: list[Point] = []
    for current, following in zip(vertices, vertices[1:] + vertices[:1]):
        if keep(current):
            result.append(current)
        if crosses(current, following):
            result.append(intersect(current, following))
    return result


def _strictly_across(a: int, b: int, limit: int) -> bool:
    return (a > limit and b < limit) or (a < limit and b > limit)


def _at_x(limit: int) -> Callable[[Point, Point], Point]:
    def intersect(p: Point, q: Point) -> Point:
        (x1, y1), (x2, y2) = p, q
        return (limit, int(y1 + (limit - x1) * ((y2 - y1) / (x2 - x1))))

    return intersect


def _at_y(limit: int) -> Callable[[Point, Point], Point]:
    def intersect(p: Point, q: Point) -> Point:
        (x1, y1), (x2, y2) = p, q
        return (int(x1 + (limit - y1) * ((x2 - x1) / (y2 - y1))), limit)

    return intersect


def clip_left(points: Iterable[tuple[int, int]], xmin: int) -> list[Point]:
    """Keep the part of the polygon with x >= xmin."""
    return _clip_edge(
        points,
        lambda p: p[0] >= xmin,
        lambda p, q: _strictly_across(p[0], q[0], xmin),
        _at_x(xmin),
    )


def clip_right(points: Iterable[tuple[int, int]], xmax: int) -> list[Point]:
    """Keep the part of the polygon with x <= xmax."""
    return _clip_edge(
        points,
        lambda p: p[0] <= xmax,
        lambda p, q: _strictly_across(p[0], q[0], xmax),
        _at_x(xmax),
    )


def clip_top(points: Iterable[tuple[int, int]], ymax: int) -> list[Point]:
    """Keep the part of the polygon with y <= ymax."""
    return _clip_edge(
        points,
        lambda p: p[1] <= ymax,
        lambda p, q: _strictly_across(p[1], q[1], ymax),
        _at_y(ymax),
    )


def clip_bottom(points: Iterable[tuple[int, int]], ymin: int) -> list[Point]:
    """Keep the part of the polygon with y >= ymin."""
    return _clip_edge(
        points,
        lambda p: p[1] >= ymin,
        lambda p, q: _strictly_across(p[1], q[1], ymin),
        _at_y(ymin),
    )


def clip_polygon(points: Iterable[tuple[int, int]], window: Window) -> list[Point]:
    """Clip the polygon against the left, right, top and bottom window edges in turn."""
    result = clip_left(points, window.xmin)
    result = clip_right(result, window.xmax)
    result = clip_top(result, window.ymax)
    return clip_bottom(result, window.ymin)