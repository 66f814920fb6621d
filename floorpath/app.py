"""Application entry for planning a route on a loaded floor."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from floorpath.nav.coordinate import Coordinate
from floorpath.nav.costs import CostPolicy, ProximityCost, TurnPenaltyCost
from floorpath.nav.floor_loader import FloorData, load_floor_data
from floorpath.nav.grid_map import DEFAULT_RESOLUTION, GridMap

DEFAULT_FLOORS_FILE = Path("data/floors.json")
DEFAULT_COST_POLICY = "turn"
DEFAULT_SHORTEST_PATH_FACTOR = 0.8
COST_POLICIES = ("turn", "proximity")


@dataclass(frozen=True)
class RouteConfig:
    floors_file: Path = DEFAULT_FLOORS_FILE
    resolution: float = DEFAULT_RESOLUTION
    cost_policy: str = DEFAULT_COST_POLICY
    shortest_path_factor: float = DEFAULT_SHORTEST_PATH_FACTOR
    diagonal: bool = False


@dataclass(frozen=True)
class RouteResult:
    floor: FloorData
    grid_map: GridMap
    start: Coordinate
    goal: Coordinate
    path: list[Coordinate]

    @property
    def found(self) -> bool:
        return bool(self.path)


def resolve_config(
    *,
    floors_file: Path | None = None,
    resolution: float | None = None,
    cost_policy: str | None = None,
    shortest_path_factor: float | None = None,
    diagonal: bool = False,
) -> RouteConfig:
    """Merge explicit arguments over FLOORPATH_* environment variables."""
    policy = (
        cost_policy or os.getenv("FLOORPATH_COST_POLICY") or DEFAULT_COST_POLICY
    ).lower()
    if policy not in COST_POLICIES:
        expected = ", ".join(COST_POLICIES)
        raise ValueError(f"Unknown cost policy {policy!r}; expected one of {expected}.")
    if floors_file is None:
        floors_file = Path(os.getenv("FLOORPATH_FLOORS_FILE") or DEFAULT_FLOORS_FILE)
    if resolution is None:
        resolution = _env_float("FLOORPATH_RESOLUTION", DEFAULT_RESOLUTION)
    if shortest_path_factor is None:
        shortest_path_factor = _env_float(
            "FLOORPATH_SHORTEST_PATH_FACTOR", DEFAULT_SHORTEST_PATH_FACTOR
        )
    return RouteConfig(
        floors_file=floors_file,
        resolution=resolution,
        cost_policy=policy,
        shortest_path_factor=shortest_path_factor,
        diagonal=diagonal,
    )


def build_cost_policy(config: RouteConfig) -> CostPolicy:
    if config.cost_policy == "proximity":
        return ProximityCost(shortest_path_factor=config.shortest_path_factor)
    return TurnPenaltyCost()


def build_grid_map(floor: FloorData, config: RouteConfig) -> GridMap:
    return GridMap(
        floor.width,
        floor.height,
        floor.obstacles,
        resolution=config.resolution,
        cost_policy=build_cost_policy(config),
        diagonal=config.diagonal,
    )


def plan_route(
    floor: FloorData,
    start: Coordinate,
    goal: Coordinate,
    *,
    config: RouteConfig | None = None,
) -> RouteResult:
    config = config or RouteConfig()
    grid_map = build_grid_map(floor, config)
    for label, point in (("start", start), ("goal", goal)):
        if not grid_map.is_clear(point):
            logger.warning(
                f"[route] {label} {point.as_tuple()} lies within the obstacle "
                "safety margin"
            )
    path = grid_map.find_path(start, goal)
    return RouteResult(
        floor=floor, grid_map=grid_map, start=start, goal=goal, path=path
    )


def plan_route_from_file(
    floor_id: str,
    start: Coordinate,
    goal: Coordinate,
    *,
    config: RouteConfig | None = None,
) -> RouteResult:
    config = config or RouteConfig()
    floor = load_floor_data(config.floors_file, floor_id)
    return plan_route(floor, start, goal, config=config)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc
