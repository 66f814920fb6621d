"""Edge-cost policies and the search heuristic.

Both policies share one call shape, ``cost(grid_map, current, next, previous)``,
so the search can always hand over the predecessor of ``current`` and each
policy decides whether it cares.

The Euclidean heuristic is admissible for ``TurnPenaltyCost`` and for
``ProximityCost`` with a factor of 1. With a proximity weight above zero it can
overestimate the penalized remaining cost, so A* may settle for a route that
is not the cheapest one. That approximation is accepted.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from floorpath.nav.coordinate import (
    Coordinate,
    bearing,
    euclidean_distance,
    round_to_decimal,
)

if TYPE_CHECKING:
    from floorpath.nav.grid_map import GridMap

MIN_TURN_ANGLE = 0.5
TURN_PENALTY_WEIGHT = 1.0
ANGLE_PENALTY_MULTIPLIER = 0.1
TOUCHING_PENALTY = sys.float_info.max


class CostPolicy(Protocol):
    def cost(
        self,
        grid_map: GridMap,
        current: Coordinate,
        next_point: Coordinate,
        previous: Coordinate | None = None,
    ) -> float:
        """Return the weight of the edge current -> next_point."""


@dataclass(frozen=True)
class ProximityCost(CostPolicy):
    """Trade path length against clearance from obstacles and walls.

    ``shortest_path_factor`` of 1 ignores clearance; 0 only seeks clearance.
    """

    shortest_path_factor: float = 0.8

    def __post_init__(self) -> None:
        if not 0.0 <= self.shortest_path_factor <= 1.0:
            raise ValueError(
                "shortest_path_factor must be within [0, 1], "
                f"got {self.shortest_path_factor}."
            )

    @property
    def proximity_obstacle_factor(self) -> float:
        return 1.0 - self.shortest_path_factor

    def cost(
        self,
        grid_map: GridMap,
        current: Coordinate,
        next_point: Coordinate,
        previous: Coordinate | None = None,
    ) -> float:
        distance = euclidean_distance(current, next_point)
        penalty = self.proximity_penalty(grid_map, next_point)
        return (
            self.shortest_path_factor * distance
            + self.proximity_obstacle_factor * penalty
        )

    @staticmethod
    def proximity_penalty(grid_map: GridMap, point: Coordinate) -> float:
        # An empty floor carries no penalty, walls included.
        if not grid_map.obstacles:
            return 0.0
        closest = min(
            grid_map.nearest_obstacle_distance(point),
            grid_map.closest_boundary_distance(point),
        )
        if closest <= 0.0:
            return TOUCHING_PENALTY
        return 1.0 / closest


@dataclass(frozen=True)
class TurnPenaltyCost(CostPolicy):
    """Distance plus a flat per-step penalty that grows with the turn angle."""

    min_turn_angle: float = MIN_TURN_ANGLE
    turn_penalty_weight: float = TURN_PENALTY_WEIGHT
    angle_multiplier: float = ANGLE_PENALTY_MULTIPLIER

    def cost(
        self,
        grid_map: GridMap,
        current: Coordinate,
        next_point: Coordinate,
        previous: Coordinate | None = None,
    ) -> float:
        return cost_with_turn_penalty(
            current,
            next_point,
            previous,
            min_turn_angle=self.min_turn_angle,
            turn_penalty_weight=self.turn_penalty_weight,
            angle_multiplier=self.angle_multiplier,
        )


def cost_with_turn_penalty(
    current: Coordinate,
    next_point: Coordinate,
    previous: Coordinate | None,
    *,
    min_turn_angle: float = MIN_TURN_ANGLE,
    turn_penalty_weight: float = TURN_PENALTY_WEIGHT,
    angle_multiplier: float = ANGLE_PENALTY_MULTIPLIER,
) -> float:
    base = euclidean_distance(current, next_point)
    if previous is None:
        return round_to_decimal(base, 2)

    angle = turn_angle(previous, current, next_point)
    if angle < min_turn_angle:
        angle = 0.0
    penalty = turn_penalty_weight + angle_multiplier * angle
    return round_to_decimal(base + penalty, 2)


def turn_angle(
    previous: Coordinate, current: Coordinate, next_point: Coordinate
) -> float:
    """Absolute heading change at ``current``, within [0, pi]."""
    difference = abs(bearing(current, next_point) - bearing(previous, current))
    if difference > math.pi:
        difference = 2 * math.pi - difference
    return difference


def euclidean_heuristic(point: Coordinate, goal: Coordinate) -> float:
    return euclidean_distance(point, goal)
