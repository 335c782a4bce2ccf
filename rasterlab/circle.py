"""Circle rasterisation by Bresenham's midpoint algorithm with eight-way symmetry."""

from __future__ import annotations

Point = tuple[int, int]


def octant_points(xc: int, yc: int, x: int, y: int) -> tuple[Point, ...]:
    """Return the eight symmetric pixels of offset (x, y) around centre (xc, yc)."""
    return (
        (xc + x, yc + y),
        (xc + x, yc - y),
        (xc + y, yc + x),
        (xc + y, yc - x),
        (xc - x, yc - y),
        (xc - y, yc - x),
        (xc - x, yc + y),
        (xc - y, yc + x),
    )


def bresenham_circle(radius: int, xc: int = 320, yc: int = 240) -> list[Point]:
    """Return the pixels plotted for a circle of the given radius, in plotting order."""
    if radius < 0:
        raise ValueError(f"radius must not be negative, got {radius}")
    x, y = 0, radius
    d = 3 - 2 * radius
    pixels = list(octant_points(xc, yc, x, y))
    while x < y:
        x += 1
        if d < 0:
            d += 4 * x + 6
        else:
            y -= 1
            d += 4 * (x - y) + 10
        pixels.extend(octant_points(xc, yc, x, y))
    return pixels