"""Discretized floor lattice with obstacle-aware walkability."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from loguru import logger

from floorpath.nav.coordinate import (
    COORDINATE_QUANTUM,
    Coordinate,
    euclidean_distance,
    round_to_decimal,
)
from floorpath.nav.costs import CostPolicy, TurnPenaltyCost, euclidean_heuristic
from floorpath.nav.obstacles import Obstacle, closest_edge_point, contains
from floorpath.nav.search import find_path

DEFAULT_RESOLUTION = 0.1

# (row offset, column offset)
ORTHOGONAL_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))
DIAGONAL_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_STEP_TOLERANCE = 1e-6


class GridMap:
    """A ``width`` x ``height`` floor sampled every ``resolution`` units.

    ``cells[j][i]`` is the coordinate at ``x = i * resolution``,
    ``y = j * resolution``; both bounds are inclusive. A cell is walkable iff
    no obstacle contains it (no safety margin). The grid is built once here
    and never changes, so a map can back any number of concurrent searches.

    Neighbour lookup trusts the precomputed ``is_walkable`` flags. The safety
    margin is only consulted through ``is_clear``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        obstacles: Sequence[Obstacle] = (),
        *,
        resolution: float = DEFAULT_RESOLUTION,
        cost_policy: CostPolicy | None = None,
        diagonal: bool = False,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(
                f"Map size must be non-negative, got width={width}, height={height}."
            )
        if resolution <= 0 or resolution < COORDINATE_QUANTUM - _STEP_TOLERANCE:
            raise ValueError(
                f"resolution must be >= {COORDINATE_QUANTUM} "
                f"(coordinate precision), got {resolution}."
            )
        self._width = float(width)
        self._height = float(height)
        self._obstacles: tuple[Obstacle, ...] = tuple(obstacles)
        self._resolution = float(resolution)
        self._cost_policy: CostPolicy = cost_policy or TurnPenaltyCost()
        self._offsets = (
            ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS if diagonal else ORTHOGONAL_OFFSETS
        )
        self._cells = self._build()

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def resolution(self) -> float:
        return self._resolution

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        return self._obstacles

    @property
    def cost_policy(self) -> CostPolicy:
        return self._cost_policy

    @property
    def diagonal(self) -> bool:
        return len(self._offsets) == 8

    @property
    def cells(self) -> tuple[tuple[Coordinate, ...], ...]:
        return self._cells

    @property
    def columns(self) -> int:
        return len(self._cells[0])

    @property
    def rows(self) -> int:
        return len(self._cells)

    def _build(self) -> tuple[tuple[Coordinate, ...], ...]:
        columns = _step_count(self._width, self._resolution) + 1
        rows = _step_count(self._height, self._resolution) + 1
        blocked = 0
        grid: list[tuple[Coordinate, ...]] = []
        for j in range(rows):
            y = j * self._resolution
            row: list[Coordinate] = []
            for i in range(columns):
                x = i * self._resolution
                probe = Coordinate(x=x, y=y)
                walkable = not any(
                    contains(obstacle, probe) for obstacle in self._obstacles
                )
                blocked += not walkable
                row.append(
                    Coordinate(
                        x=round_to_decimal(x, 2),
                        y=round_to_decimal(y, 2),
                        is_walkable=walkable,
                    )
                )
            grid.append(tuple(row))
        logger.debug(
            f"[grid] built {columns}x{rows} cells at resolution {self._resolution}, "
            f"obstacles={len(self._obstacles)}, blocked={blocked}"
        )
        return tuple(grid)

    def index_of(self, point: Coordinate) -> tuple[int, int]:
        """(row, column) of the lattice node nearest to ``point``."""
        row = int(round_to_decimal(point.y / self._resolution, 0))
        column = int(round_to_decimal(point.x / self._resolution, 0))
        return row, column

    def in_bounds(self, point: Coordinate) -> bool:
        row, column = self.index_of(point)
        return self._index_in_bounds(row, column)

    def on_floor(self, point: Coordinate) -> bool:
        """True for any point in ``[0, width] x [0, height]``, lattice or not."""
        return 0.0 <= point.x <= self._width and 0.0 <= point.y <= self._height

    def cell_at(self, point: Coordinate) -> Coordinate | None:
        row, column = self.index_of(point)
        if not self._index_in_bounds(row, column):
            return None
        return self._cells[row][column]

    def snap(self, point: Coordinate) -> Coordinate:
        """Nearest lattice cell, clamping positions that fall off the floor."""
        row, column = self.index_of(point)
        row = min(max(row, 0), self.rows - 1)
        column = min(max(column, 0), self.columns - 1)
        return self._cells[row][column]

    def is_walkable(self, point: Coordinate) -> bool:
        cell = self.cell_at(point)
        return cell is not None and cell.is_walkable

    def is_clear(self, point: Coordinate) -> bool:
        """True when the point stays outside every obstacle's safety margin."""
        return not any(
            contains(obstacle, point, safe_area=True) for obstacle in self._obstacles
        )

    def neighbors(self, point: Coordinate) -> list[Coordinate]:
        row, column = self.index_of(point)
        result = []
        for row_offset, column_offset in self._offsets:
            next_row = row + row_offset
            next_column = column + column_offset
            if not self._index_in_bounds(next_row, next_column):
                continue
            candidate = self._cells[next_row][next_column]
            if candidate.is_walkable:
                result.append(candidate)
        return result

    def cost(
        self,
        current: Coordinate,
        next_point: Coordinate,
        previous: Coordinate | None = None,
    ) -> float:
        return self._cost_policy.cost(self, current, next_point, previous)

    def closest_boundary_distance(self, point: Coordinate) -> float:
        return min(
            point.x,
            self._width - point.x,
            point.y,
            self._height - point.y,
        )

    def nearest_obstacle_distance(self, point: Coordinate) -> float:
        """Distance to the nearest obstacle edge point, inf on an empty floor."""
        return min(
            (
                euclidean_distance(point, closest_edge_point(obstacle, point))
                for obstacle in self._obstacles
            ),
            default=math.inf,
        )

    def walkable_cells(self) -> list[Coordinate]:
        return [cell for row in self._cells for cell in row if cell.is_walkable]

    def find_path(
        self,
        start: Coordinate,
        goal: Coordinate,
        *,
        heuristic: Callable[[Coordinate, Coordinate], float] = euclidean_heuristic,
    ) -> list[Coordinate]:
        """Route between the lattice cells nearest to ``start`` and ``goal``.

        Points on the floor but past the last lattice line snap to the edge
        cells. Endpoints off the floor or on a blocked cell yield [] like any
        other unreachable goal.
        """
        if not self.on_floor(start) or not self.on_floor(goal):
            logger.warning(
                f"[grid] endpoint off the floor: start={start.as_tuple()}, "
                f"goal={goal.as_tuple()}"
            )
            return []
        start_cell = self.snap(start)
        goal_cell = self.snap(goal)
        if not start_cell.is_walkable or not goal_cell.is_walkable:
            logger.warning(
                f"[grid] endpoint on a blocked cell: start={start_cell.as_tuple()}, "
                f"goal={goal_cell.as_tuple()}"
            )
            return []
        return find_path(
            start_cell,
            goal_cell,
            neighbors=self.neighbors,
            cost=self.cost,
            heuristic=heuristic,
        )

    def _index_in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns


def _step_count(extent: float, step: float) -> int:
    return int(math.floor(extent / step + _STEP_TOLERANCE))
