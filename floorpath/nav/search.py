"""Generic A* search over any neighbour/cost provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from loguru import logger

from floorpath.nav.coordinate import Coordinate
from floorpath.nav.priority_queue import PriorityQueue

NeighborsFn = Callable[[Coordinate], Iterable[Coordinate]]
CostFn = Callable[[Coordinate, Coordinate, "Coordinate | None"], float]
HeuristicFn = Callable[[Coordinate, Coordinate], float]


@dataclass(frozen=True)
class SearchResult:
    came_from: dict[Coordinate, Coordinate | None]
    cost_so_far: dict[Coordinate, float]
    explored: int
    goal_node: Coordinate | None = None

    @property
    def reached_goal(self) -> bool:
        return self.goal_node is not None


def a_star_search(
    start: Coordinate,
    goal: Coordinate,
    *,
    neighbors: NeighborsFn,
    cost: CostFn,
    heuristic: HeuristicFn,
) -> SearchResult:
    """Expand from ``start`` until ``goal`` is popped or the frontier drains.

    ``cost`` receives ``(current, next, previous)`` where ``previous`` is the
    recorded predecessor of ``current`` (None for the start), which lets
    turn-aware policies price the heading change.
    """
    frontier: PriorityQueue[Coordinate] = PriorityQueue()
    frontier.put(start, 0.0)
    came_from: dict[Coordinate, Coordinate | None] = {start: None}
    cost_so_far: dict[Coordinate, float] = {start: 0.0}
    explored = 0
    goal_node: Coordinate | None = None

    while not frontier.is_empty:
        current = frontier.get()
        if current is None:
            break
        explored += 1
        if current == goal:
            goal_node = current
            break

        previous = came_from.get(current)
        for next_point in neighbors(current):
            if not next_point.is_walkable:
                continue
            new_cost = cost_so_far[current] + cost(current, next_point, previous)
            if next_point not in cost_so_far or new_cost < cost_so_far[next_point]:
                cost_so_far[next_point] = new_cost
                came_from[next_point] = current
                frontier.put(next_point, new_cost + heuristic(next_point, goal))

    return SearchResult(
        came_from=came_from,
        cost_so_far=cost_so_far,
        explored=explored,
        goal_node=goal_node,
    )


def reconstruct_path(
    came_from: Mapping[Coordinate, Coordinate | None],
    start: Coordinate,
    goal: Coordinate,
) -> list[Coordinate]:
    """Walk predecessors back from ``goal``; [] when the chain never reaches it."""
    if goal not in came_from:
        return []
    path = [goal]
    current = goal
    while current != start:
        previous = came_from.get(current)
        if previous is None:
            logger.warning(f"[A*] predecessor chain broken at {current}")
            return []
        path.append(previous)
        current = previous
    path.reverse()
    return path


def find_path(
    start: Coordinate,
    goal: Coordinate,
    *,
    neighbors: NeighborsFn,
    cost: CostFn,
    heuristic: HeuristicFn,
) -> list[Coordinate]:
    """Route from start to goal, both included. [] signals "no path"."""
    logger.debug(f"[A*] searching start={start.as_tuple()}, goal={goal.as_tuple()}")
    result = a_star_search(
        start, goal, neighbors=neighbors, cost=cost, heuristic=heuristic
    )
    if not result.reached_goal:
        logger.warning(
            f"[A*] no path from {start.as_tuple()} to {goal.as_tuple()}, "
            f"explored={result.explored}"
        )
        return []
    path = reconstruct_path(result.came_from, start, result.goal_node or goal)
    logger.info(
        f"[A*] path found: waypoints={len(path)}, explored={result.explored}, "
        f"cost={result.cost_so_far.get(goal, 0.0):.2f}"
    )
    return path
