"""Obstacle shapes and the geometric queries the grid and cost model need."""

from __future__ import annotations

import math
from dataclasses import dataclass

from floorpath.nav.coordinate import Coordinate, euclidean_distance, round_to_decimal

SAFE_AREA_MARGIN = 0.35
DEFAULT_AREA_STEP = 0.1


@dataclass(frozen=True)
class Rectangle:
    top_left: Coordinate
    bottom_right: Coordinate

    def __post_init__(self) -> None:
        if (
            self.top_left.x > self.bottom_right.x
            or self.top_left.y > self.bottom_right.y
        ):
            raise ValueError(
                f"Rectangle top_left {self.top_left.as_tuple()} must not lie past "
                f"bottom_right {self.bottom_right.as_tuple()}."
            )

    def contains(self, point: Coordinate, safe_area: bool = False) -> bool:
        return contains(self, point, safe_area=safe_area)

    def contains_rectangle(self, other: Rectangle) -> bool:
        return self.contains(other.top_left) and self.contains(other.bottom_right)

    def closest_edge_point(self, point: Coordinate) -> Coordinate:
        return closest_edge_point(self, point)

    def distance_to(self, point: Coordinate) -> float:
        return distance_to(self, point)

    def area_points(self, step: float = DEFAULT_AREA_STEP) -> list[Coordinate]:
        return area_points(self, step)


@dataclass(frozen=True)
class Circle:
    center: Coordinate
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"Circle radius must be >= 0, got {self.radius}.")

    def contains(self, point: Coordinate, safe_area: bool = False) -> bool:
        return contains(self, point, safe_area=safe_area)

    def closest_edge_point(self, point: Coordinate) -> Coordinate:
        return closest_edge_point(self, point)

    def distance_to(self, point: Coordinate) -> float:
        return distance_to(self, point)

    def area_points(self, step: float = DEFAULT_AREA_STEP) -> list[Coordinate]:
        return area_points(self, step)


Obstacle = Rectangle | Circle


def contains(obstacle: Obstacle, point: Coordinate, *, safe_area: bool = False) -> bool:
    margin = SAFE_AREA_MARGIN if safe_area else 0.0
    match obstacle:
        case Rectangle(top_left=top_left, bottom_right=bottom_right):
            return (
                top_left.x - margin <= point.x <= bottom_right.x + margin
                and top_left.y - margin <= point.y <= bottom_right.y + margin
            )
        case Circle(center=center, radius=radius):
            return euclidean_distance(center, point) <= radius + margin
    raise TypeError(f"Unsupported obstacle type: {type(obstacle).__name__}")


def closest_edge_point(obstacle: Obstacle, point: Coordinate) -> Coordinate:
    """Nearest point on the obstacle's boundary.

    For a rectangle this clamps the point into the box, so a point already
    inside maps to itself.
    """
    match obstacle:
        case Rectangle(top_left=top_left, bottom_right=bottom_right):
            return Coordinate(
                x=max(top_left.x, min(point.x, bottom_right.x)),
                y=max(top_left.y, min(point.y, bottom_right.y)),
            )
        case Circle(center=center, radius=radius):
            dx = point.x - center.x
            dy = point.y - center.y
            length = math.hypot(dx, dy)
            if length == 0:
                # Every boundary point is equidistant from the center.
                return Coordinate(x=center.x + radius, y=center.y)
            return Coordinate(
                x=center.x + dx / length * radius,
                y=center.y + dy / length * radius,
            )
    raise TypeError(f"Unsupported obstacle type: {type(obstacle).__name__}")


def distance_to(obstacle: Obstacle, point: Coordinate) -> float:
    """Shortest distance from the point to the shape, 0 when inside."""
    match obstacle:
        case Rectangle(top_left=top_left, bottom_right=bottom_right):
            dx = max(top_left.x - point.x, 0.0, point.x - bottom_right.x)
            dy = max(top_left.y - point.y, 0.0, point.y - bottom_right.y)
            return math.hypot(dx, dy)
        case Circle(center=center, radius=radius):
            return max(0.0, euclidean_distance(center, point) - radius)
    raise TypeError(f"Unsupported obstacle type: {type(obstacle).__name__}")


def area_points(
    obstacle: Obstacle, step: float = DEFAULT_AREA_STEP
) -> list[Coordinate]:
    """Enumerate the shape's footprint on a lattice of the given step."""
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}.")
    match obstacle:
        case Rectangle(top_left=top_left, bottom_right=bottom_right):
            x0, y0 = top_left.x, top_left.y
            x1, y1 = bottom_right.x, bottom_right.y
        case Circle(center=center, radius=radius):
            x0, y0 = center.x - radius, center.y - radius
            x1, y1 = center.x + radius, center.y + radius
        case _:
            raise TypeError(f"Unsupported obstacle type: {type(obstacle).__name__}")

    points: list[Coordinate] = []
    for j in range(_step_count(y1 - y0, step) + 1):
        y = round_to_decimal(y0 + j * step, 2)
        for i in range(_step_count(x1 - x0, step) + 1):
            x = round_to_decimal(x0 + i * step, 2)
            point = Coordinate(x=x, y=y, is_walkable=False)
            if contains(obstacle, point):
                points.append(point)
    return points


def _step_count(extent: float, step: float) -> int:
    return int(math.floor(extent / step + 1e-9))
