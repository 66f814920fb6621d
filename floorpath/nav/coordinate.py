"""Quantized 2D coordinates and the geometry helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

COORDINATE_PLACES = 1
COORDINATE_QUANTUM = 0.1


def round_to_decimal(value: float, places: int) -> float:
    """Round half away from zero (0.25 -> 0.3, -0.25 -> -0.3)."""
    factor = 10**places
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


@dataclass(frozen=True)
class Coordinate:
    """A point on the floor.

    Raw x, y and heading are quantized to one decimal exactly once, here, so
    that equality, hashing and dict lookups all see the same canonical value.
    Two inputs closer than the quantum collapse onto the same coordinate.
    """

    x: float
    y: float
    heading: float = field(default=0.0, compare=False)
    is_walkable: bool = field(default=True, compare=False)
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        heading = 0.0 if self.heading is None else self.heading
        object.__setattr__(self, "x", round_to_decimal(self.x, COORDINATE_PLACES))
        object.__setattr__(self, "y", round_to_decimal(self.y, COORDINATE_PLACES))
        object.__setattr__(
            self, "heading", round_to_decimal(heading, COORDINATE_PLACES)
        )

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.heading}, name: {self.name})"


def euclidean_distance(start: Coordinate, end: Coordinate) -> float:
    return math.hypot(end.x - start.x, end.y - start.y)


def manhattan_distance(a: Coordinate, b: Coordinate) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def bearing(start: Coordinate, end: Coordinate) -> float:
    """Angle of the segment start->end in radians, within [-pi, pi]."""
    return math.atan2(end.y - start.y, end.x - start.x)


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    normalized = math.fmod(angle, 2 * math.pi)
    if normalized > math.pi:
        normalized -= 2 * math.pi
    elif normalized < -math.pi:
        normalized += 2 * math.pi
    return normalized


def closest_path_point(
    path: Iterable[Coordinate], location: Coordinate
) -> Coordinate | None:
    """Return the waypoint nearest to a live position, or None for no path."""
    return min(
        path, key=lambda point: euclidean_distance(point, location), default=None
    )
