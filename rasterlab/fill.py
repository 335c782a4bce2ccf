"""A small raster canvas with boundary-fill and flood-fill region filling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rasterlab.lines import bresenham

Colour = tuple[float, float, float]
Offsets = Sequence[tuple[int, int]]

WHITE: Colour = (1.0, 1.0, 1.0)
BLACK: Colour = (0.0, 0.0, 0.0)
RED: Colour = (1.0, 0.0, 0.0)
BLUE: Colour = (0.0, 0.0, 1.0)

FOUR_CONNECTED: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
SPARSE_BOUNDARY_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (-2, 0), (0, 2), (0, -2))
SPARSE_FLOOD_OFFSETS: tuple[tuple[int, int], ...] = ((-2, 0), (1, 0), (0, 1), (0, -2))


def _colour(value: Iterable[float]) -> Colour:
    r, g, b = (float(channel) for channel in value)
    return (r, g, b)


def _channel_byte(channel: float) -> int:
    return round(min(1.0, max(0.0, channel)) * 255)


class Canvas:
    """A width by height grid of RGB colours with its origin at the bottom left."""

    def __init__(self, width: int, height: int, background: Iterable[float] = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = _colour(background)
        self._rows = [[self.background] * width for _ in range(height)]

    def contains(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies on the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def get(self, x: int, y: int) -> Colour:
        """Return the colour of pixel (x, y)."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, color: Iterable[float]) -> None:
        """Paint pixel (x, y)."""
        self._check(x, y)
        self._rows[y][x] = _colour(color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Iterable[float]) -> None:
        """Draw a line, clipping away the pixels that fall off the canvas."""
        colour = _colour(color)
        for x, y in bresenham(x1, y1, x2, y2):
            if self.contains(x, y):
                self._rows[y][x] = colour

    def draw_polygon(self, points: Iterable[tuple[int, int]], color: Iterable[float]) -> None:
        """Draw the closed outline through the given vertices."""
        vertices = list(points)
        colour = _colour(color)
        for (x1, y1), (x2, y2) in zip(vertices, vertices[1:] + vertices[:1]):
            self.draw_line(x1, y1, x2, y2, colour)

    def to_ppm(self) -> bytes:
        """Return the canvas as a binary PPM image, top row first."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytes(
            _channel_byte(channel)
            for row in reversed(self._rows)
            for pixel in row
            for channel in pixel
        )
        return header + body


def boundary_fill(
    canvas: Canvas,
    x: int,
    y: int,
    fill_color: Iterable[float],
    boundary_color: Iterable[float],
    offsets: Offsets = FOUR_CONNECTED,
) -> int:
    """Fill outward from (x, y) until the boundary colour; return the pixels painted."""
    fill = _colour(fill_color)
    boundary = _colour(boundary_color)
    pending = [(x, y)]
    painted = 0
    while pending:
        px, py = pending.pop()
        if not canvas.contains(px, py):
            continue
        current = canvas.get(px, py)
        if current == boundary or current == fill:
            continue
        canvas.set(px, py, fill)
        painted += 1
        pending.extend((px + dx, py + dy) for dx, dy in reversed(offsets))
    return painted


def flood_fill(
    canvas: Canvas,
    x: int,
    y: int,
    fill_color: Iterable[float],
    offsets: Offsets = FOUR_CONNECTED,
) -> int:
    """Repaint the region of the seed's colour around (x, y); return the pixels painted."""
    if not canvas.contains(x, y):
        return 0
    fill = _colour(fill_color)
    target = canvas.get(x, y)
    if target == fill:
        return 0
    pending = [(x, y)]
    painted = 0
    while pending:
        px, py = pending.pop()
        if not canvas.contains(px, py) or canvas.get(px, py) != target:
            continue
        canvas.set(px, py, fill)
        painted += 1
        pending.extend((px + dx, py + dy) for dx, dy in reversed(offsets))
    return painted