"""Pathfinding engine: coordinates, obstacles, grid map and A* search."""

from floorpath.nav.contracts import (
    CircleObstacleModel,
    FloorModel,
    FloorsDocument,
    PointModel,
    RectangleObstacleModel,
)
from floorpath.nav.coordinate import (
    Coordinate,
    bearing,
    closest_path_point,
    euclidean_distance,
    manhattan_distance,
    normalize_angle,
    radians_to_degrees,
    round_to_decimal,
)
from floorpath.nav.costs import (
    CostPolicy,
    ProximityCost,
    TurnPenaltyCost,
    cost_with_turn_penalty,
    euclidean_heuristic,
)
from floorpath.nav.floor_loader import (
    FloorData,
    find_destination,
    load_floor_data,
    load_floors,
)
from floorpath.nav.grid_map import DEFAULT_RESOLUTION, GridMap
from floorpath.nav.obstacles import SAFE_AREA_MARGIN, Circle, Obstacle, Rectangle
from floorpath.nav.priority_queue import PriorityQueue
from floorpath.nav.search import (
    SearchResult,
    a_star_search,
    find_path,
    reconstruct_path,
)

__all__ = [
    "Circle",
    "CircleObstacleModel",
    "Coordinate",
    "CostPolicy",
    "DEFAULT_RESOLUTION",
    "FloorData",
    "FloorModel",
    "FloorsDocument",
    "GridMap",
    "Obstacle",
    "PointModel",
    "PriorityQueue",
    "ProximityCost",
    "Rectangle",
    "RectangleObstacleModel",
    "SAFE_AREA_MARGIN",
    "SearchResult",
    "TurnPenaltyCost",
    "a_star_search",
    "bearing",
    "closest_path_point",
    "cost_with_turn_penalty",
    "euclidean_distance",
    "euclidean_heuristic",
    "find_destination",
    "find_path",
    "load_floor_data",
    "load_floors",
    "manhattan_distance",
    "normalize_angle",
    "radians_to_degrees",
    "reconstruct_path",
    "round_to_decimal",
]
