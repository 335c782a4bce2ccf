"""A vehicle drifting sideways across a perspective scene, one frame at a time."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count as _count_up

Vertex = tuple[float, float, float]

BODY_VERTICES: tuple[Vertex, ...] = (
    (-1.0, 1.0, 0.0),
    (0.2, 1.0, 0.0),
    (1.0, 0.4, 0.0),
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
)
WHEEL_OFFSET: Vertex = (-0.5, 0.0, 0.0)
WHEEL_SPACING = 1.5
WHEEL_RADIUS = 0.3
SCENE_DEPTH = -8.0
SPEED = 0.001


@dataclass(frozen=True)
class Frame:
    """The scene geometry at one moment."""

    offset: float
    body: tuple[Vertex, ...]
    wheels: tuple[Vertex, Vertex]


@dataclass
class VehicleScene:
    """The moving vehicle: its sideways offset and how far it moves each frame."""

    offset: float = 0.0
    speed: float = SPEED

    def step(self) -> float:
        """Advance the vehicle by one frame and return its new offset."""
        self.offset += self.speed
        return self.offset

    def body(self) -> tuple[Vertex, ...]:
        """Return the body outline in scene coordinates."""
        return tuple((x + self.offset, y, z + SCENE_DEPTH) for x, y, z in BODY_VERTICES)

    def wheel_centres(self) -> tuple[Vertex, Vertex]:
        """Return the centres of the front and back wheels in scene coordinates."""
        wx, wy, wz = WHEEL_OFFSET
        first = (self.offset + wx, wy, SCENE_DEPTH + wz)
        second = (first[0] + WHEEL_SPACING, first[1], first[2])
        return first, second

    def frames(self, count: int | None = None) -> Iterator[Frame]:
        """Yield frames, advancing after each; without a count, yield forever."""
        if count is not None and count < 0:
            raise ValueError(f"frame count must not be negative, got {count}")
        ticks = range(count) if count is not None else _count_up()
        return self._frames(ticks)

    def _frames(self, ticks: Iterator[int] | range) -> Iterator[Frame]:
        for _ in ticks:
            yield Frame(self.offset, self.body(), self.wheel_centres())
            self.step()