"""Rich rendering of a floor grid and the route computed on it."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from floorpath.nav.coordinate import Coordinate, euclidean_distance
from floorpath.nav.grid_map import GridMap

FREE_SYMBOL = "."
BLOCKED_SYMBOL = "#"
ROUTE_SYMBOL = "*"
START_SYMBOL = "S"
GOAL_SYMBOL = "G"
DESTINATION_SYMBOL = "D"

CELL_STYLES = {
    FREE_SYMBOL: "grey70",
    BLOCKED_SYMBOL: "bright_magenta",
    ROUTE_SYMBOL: "bright_cyan",
    START_SYMBOL: "bold bright_green",
    GOAL_SYMBOL: "bold bright_red",
    DESTINATION_SYMBOL: "bright_yellow",
}


def visible_range(total: int, size: int, focus: int | None = None) -> range:
    """Up to ``size`` consecutive indices of ``range(total)`` centred on ``focus``."""
    size = max(1, min(total, size))
    first = 0 if focus is None else focus - size // 2
    first = max(0, min(first, total - size))
    return range(first, first + size)


def render_floor_lines(
    grid_map: GridMap,
    *,
    path: list[Coordinate],
    destinations: list[Coordinate] | None = None,
    rows: range | None = None,
    columns: range | None = None,
) -> list[Text]:
    """One Text per grid row; row 0 (y = 0) is printed first."""
    grid = [
        [FREE_SYMBOL if cell.is_walkable else BLOCKED_SYMBOL for cell in row]
        for row in grid_map.cells
    ]

    for point in destinations or []:
        _mark(grid_map, grid, point, DESTINATION_SYMBOL)
    for point in path:
        _mark(grid_map, grid, point, ROUTE_SYMBOL)
    if path:
        _mark(grid_map, grid, path[0], START_SYMBOL)
        _mark(grid_map, grid, path[-1], GOAL_SYMBOL)

    lines: list[Text] = []
    for y in rows if rows is not None else range(grid_map.rows):
        line = Text()
        for x in columns if columns is not None else range(grid_map.columns):
            symbol = grid[y][x]
            line.append(symbol, style=CELL_STYLES.get(symbol, "grey70"))
        lines.append(line)
    return lines


def render_route(
    grid_map: GridMap,
    path: list[Coordinate],
    *,
    destinations: list[Coordinate] | None = None,
    view_width: int = 80,
    view_height: int = 40,
    max_waypoints: int = 12,
    show_map: bool = True,
) -> RenderableType:
    summary = _render_summary(grid_map, path)
    waypoints = _render_waypoints(path, max_waypoints=max_waypoints)
    right = Panel(Group(summary, waypoints), title="Route")
    if not show_map:
        return right

    focus_row, focus_column = grid_map.index_of(path[0]) if path else (None, None)
    lines = render_floor_lines(
        grid_map,
        path=path,
        destinations=destinations,
        rows=visible_range(grid_map.rows, view_height, focus_row),
        columns=visible_range(grid_map.columns, view_width, focus_column),
    )
    return Columns([Panel(Group(*lines), title="Floor"), right])


def route_length(path: list[Coordinate]) -> float:
    return sum(
        euclidean_distance(current, following)
        for current, following in zip(path, path[1:])
    )


def _render_summary(grid_map: GridMap, path: list[Coordinate]) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Floor", f"{grid_map.width} x {grid_map.height}")
    table.add_row("Resolution", str(grid_map.resolution))
    table.add_row("Obstacles", str(len(grid_map.obstacles)))
    if not path:
        table.add_row("Status", Text("No path found", style="bold red"))
        return table
    table.add_row("Status", Text("Path found", style="bold green"))
    table.add_row("Waypoints", str(len(path)))
    table.add_row("Length", f"{route_length(path):.2f}")
    return table


def _render_waypoints(
    path: list[Coordinate], *, max_waypoints: int
) -> RenderableType:
    table = Table(title="Waypoints", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    if not path:
        table.add_row("-", "-", "-")
        return table

    head = max_waypoints // 2
    truncated = len(path) > max_waypoints
    shown = path[:head] + path[-(max_waypoints - head) :] if truncated else path
    skipped = len(path) - len(shown)
    for index, point in enumerate(shown):
        if truncated and index == head:
            table.add_row("...", "...", "...")
        number = index if index < head else index + skipped
        table.add_row(str(number), f"{point.x:.1f}", f"{point.y:.1f}")
    return table


def _mark(
    grid_map: GridMap, grid: list[list[str]], point: Coordinate, symbol: str
) -> None:
    row, column = grid_map.index_of(point)
    if 0 <= row < grid_map.rows and 0 <= column < grid_map.columns:
        grid[row][column] = symbol
